"""Native library search path publication.

The embedded engine locates its client library and plugins through a
process-global environment variable. Writing that variable is the only
process-global side effect of the lifecycle, so it lives here, behind a
single function the configurer receives as a collaborator. Tests pass a
recording callable instead.

The published value is never restored.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from firebird_embedded.infrastructure.config import get_config
from firebird_embedded.infrastructure.logging import get_logger

NativeLibraryPublisher = Callable[[Path], None]

logger = get_logger(__name__)


def publish_native_library_path(path: Path, env_var: str | None = None) -> None:
    """Publish ``path`` as the native library search path.

    Args:
        path: Absolute directory holding the native engine library.
        env_var: Variable to set (default from config).
    """
    env_var = env_var or get_config().native.env_var
    logger.info("native_library_path.publish", env_var=env_var, path=str(path))
    os.environ[env_var] = str(path)


def published_native_library_path(env_var: str | None = None) -> Path | None:
    """Return the currently published search path, if any."""
    value = os.environ.get(env_var or get_config().native.env_var)
    return Path(value) if value else None
