"""Resource Resolver port.

Maps a logical resource name bundled with the package to an absolute
directory on the filesystem.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol


class ResourceResolver(Protocol):
    """Protocol for resolving bundled resources to filesystem paths."""

    @abstractmethod
    def resolve(self, name: str) -> Path:
        """Resolve ``name`` to an absolute filesystem path.

        Raises:
            ConfigurationError: If the resource does not exist or is not
                reachable as a plain filesystem path (e.g. inside a zip).
        """
        ...
