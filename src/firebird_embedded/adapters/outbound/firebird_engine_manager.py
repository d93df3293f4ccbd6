"""Firebird Engine Manager implementation.

This adapter implements the EngineManager protocol on top of the
``firebird-driver`` package (install the ``firebird`` extra). A database
DSN without a host makes the client library attach through its embedded
engine provider, so no server process is involved.

The client library is located, in order, from:
    1. ``engine.client_library`` in the configuration
    2. the published native library search path
    3. the platform default lookup performed by ``firebird-driver``

The driver is imported on ``start()`` so that constructing the manager
stays free of I/O and of the optional dependency.
"""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from types import ModuleType
from typing import Any

from firebird_embedded.infrastructure.config import get_config
from firebird_embedded.infrastructure.logging import get_logger
from firebird_embedded.infrastructure.native_library import published_native_library_path


CLIENT_LIBRARY_NAMES = {
    "win32": "fbclient.dll",
    "darwin": "libfbclient.dylib",
}
DEFAULT_CLIENT_LIBRARY_NAME = "libfbclient.so"

logger = get_logger(__name__)


def client_library_name(platform: str = sys.platform) -> str:
    """Return the client library file name for ``platform``."""
    return CLIENT_LIBRARY_NAMES.get(platform, DEFAULT_CLIENT_LIBRARY_NAME)


class FirebirdEngineManager:
    """EngineManager backed by the Firebird client library in embedded mode."""

    def __init__(self, plugin: str | None = None, client_library: Path | None = None) -> None:
        """Initialize the engine manager. No I/O happens here.

        Args:
            plugin: Engine plugin identifier (default from config).
            client_library: Explicit client library path (default from config).
        """
        config = get_config()
        self._plugin = plugin or config.engine.plugin
        self._client_library = client_library or config.engine.client_library
        self._lock = threading.Lock()
        self._driver: ModuleType | None = None
        self._attachments: list[Any] = []

    @property
    def plugin(self) -> str:
        """Return the engine plugin identifier."""
        return self._plugin

    @property
    def is_running(self) -> bool:
        """Check if the engine is started."""
        return self._driver is not None

    @property
    def open_attachments(self) -> int:
        """Return the number of attachments not yet closed."""
        return len(self._attachments)

    def start(self) -> None:
        """Load the client library.

        Raises:
            RuntimeError: If already started.
            ImportError: If ``firebird-driver`` is not installed.
            OSError: If the client library cannot be loaded.
        """
        with self._lock:
            if self._driver is not None:
                raise RuntimeError("Engine manager already started")

            from firebird import driver
            from firebird.driver import fbapi

            library = self._locate_client_library()
            logger.debug("client_library.load", library=str(library) if library else None)
            fbapi.load_api(library)
            self._driver = driver

    def stop(self) -> None:
        """Stop the engine.

        The embedded provider lives inside this process; stopping closes any
        attachment still tracked and releases the manager so that no further
        databases are created or dropped.

        Raises:
            RuntimeError: If not started.
            firebird.driver.DatabaseError: If a tracked attachment fails to
                close; the engine stays started.
        """
        with self._lock:
            if self._driver is None:
                raise RuntimeError("Engine manager not started")
            while self._attachments:
                con = self._attachments[-1]
                con.close()
                self._attachments.pop()
            self._driver = None

    def create_database(self, path: Path, user: str, password: str) -> None:
        """Create the database unless it already exists and accepts the user.

        Raises:
            RuntimeError: If the engine is not started.
            firebird.driver.DatabaseError: If the engine refuses to create it.
        """
        driver = self._require_driver()
        dsn = str(path)

        if Path(path).exists():
            # Existing database: keep it if the credentials attach.
            with driver.connect(dsn, user=user, password=password):
                logger.debug("database.exists", path=dsn)
            return

        with driver.create_database(dsn, user=user, password=password):
            pass

    def drop_database(self, path: Path, user: str, password: str) -> None:
        """Attach to the database and drop it.

        Raises:
            RuntimeError: If the engine is not started.
            firebird.driver.DatabaseError: If attach or drop fails.
        """
        driver = self._require_driver()
        con = driver.connect(str(path), user=user, password=password)
        self._attachments.append(con)
        try:
            con.drop_database()
        except Exception:
            self._close_attachment(con)
            raise
        # A dropped database detaches the connection.
        self._attachments.remove(con)

    def _close_attachment(self, con: Any) -> None:
        try:
            con.close()
        except Exception as e:
            # Left tracked; stop() retries the close.
            logger.warning("attachment.close_failed", error=str(e))
        else:
            self._attachments.remove(con)

    def _require_driver(self) -> ModuleType:
        if self._driver is None:
            raise RuntimeError("Engine manager not started")
        return self._driver

    def _locate_client_library(self) -> Path | None:
        if self._client_library is not None:
            return Path(self._client_library)

        native_dir = published_native_library_path()
        if native_dir is not None:
            candidate = native_dir / client_library_name()
            if candidate.is_file():
                return candidate

        return None
