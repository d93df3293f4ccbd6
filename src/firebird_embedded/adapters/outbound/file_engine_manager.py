"""File-based Engine Manager implementation.

This adapter implements the EngineManager protocol without a native
engine. A database is a single header page on disk recording the owner,
which is enough for lifecycle checks when the Firebird client library is
not installed.

File Format:
    - Header page (page 0): magic, version, page size, owner
    - No data pages

Like the native engine, creating an existing database owned by the same
user is a no-op, and a file with a foreign or damaged header is refused.
"""

from __future__ import annotations

import os
import struct
import threading
from pathlib import Path

from firebird_embedded.infrastructure.config import get_config
from firebird_embedded.infrastructure.logging import get_logger


# Header page format (page 0)
# Magic (8 bytes) + Version (4 bytes) + Page Size (4 bytes) + Owner (32 bytes)
HEADER_MAGIC = b"FBEMBED\x00"
HEADER_VERSION = 1
HEADER_FORMAT = ">8sII32s"  # magic, version, page_size, owner
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
MAX_OWNER_LENGTH = 32

logger = get_logger(__name__)


class FileEngineManager:
    """File-based implementation of the EngineManager protocol.

    Attributes:
        plugin: Engine plugin identifier.
        page_size: Size of the header page in bytes.
    """

    def __init__(self, plugin: str | None = None, page_size: int | None = None) -> None:
        """Initialize the engine manager. No I/O happens here.

        Args:
            plugin: Engine plugin identifier (default from config).
            page_size: Header page size (default from config).
        """
        config = get_config()
        self._plugin = plugin or config.engine.plugin
        self._page_size = page_size or config.engine.page_size
        self._lock = threading.Lock()
        self._running = False

    @property
    def plugin(self) -> str:
        """Return the engine plugin identifier."""
        return self._plugin

    @property
    def page_size(self) -> int:
        """Return the header page size in bytes."""
        return self._page_size

    @property
    def is_running(self) -> bool:
        """Check if the engine is started."""
        return self._running

    def start(self) -> None:
        """Start the engine.

        Raises:
            RuntimeError: If already started.
        """
        with self._lock:
            if self._running:
                raise RuntimeError("Engine manager already started")
            self._running = True

    def stop(self) -> None:
        """Stop the engine.

        Raises:
            RuntimeError: If not started.
        """
        with self._lock:
            if not self._running:
                raise RuntimeError("Engine manager not started")
            self._running = False

    def create_database(self, path: Path, user: str, password: str) -> None:
        """Write a header page for a new database.

        Args:
            path: Database file path; the parent must exist.
            user: Database owner, stored in the header.
            password: Ignored by this engine.

        Raises:
            RuntimeError: If the engine is not started.
            ValueError: If the owner name is too long, or an existing file
                has a bad header or belongs to another user.
            OSError: If the file cannot be written.
        """
        self._check_running()
        path = Path(path)
        owner = self._encode_owner(user)

        if path.exists():
            existing_owner = self._read_owner(path)
            if existing_owner != owner:
                raise ValueError(f"Database {path} belongs to another user")
            logger.debug("database.exists", path=str(path))
            return

        header = struct.pack(
            HEADER_FORMAT,
            HEADER_MAGIC,
            HEADER_VERSION,
            self._page_size,
            owner,
        )
        header_page = header + b"\x00" * (self._page_size - len(header))

        # "x" fails if the file appeared since the exists() check.
        with open(path, "xb") as f:
            f.write(header_page)
            f.flush()
            os.fsync(f.fileno())

    def drop_database(self, path: Path, user: str, password: str) -> None:
        """Remove a database file after validating its header.

        Raises:
            RuntimeError: If the engine is not started.
            FileNotFoundError: If the database does not exist.
            ValueError: If the header is invalid or the owner differs.
        """
        self._check_running()
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Database file not found: {path}")

        if self._read_owner(path) != self._encode_owner(user):
            raise ValueError(f"Database {path} belongs to another user")

        path.unlink()

    def _check_running(self) -> None:
        if not self._running:
            raise RuntimeError("Engine manager not started")

    @staticmethod
    def _encode_owner(user: str) -> bytes:
        # Firebird user names are case-insensitive.
        owner = user.upper().encode("utf-8")
        if len(owner) > MAX_OWNER_LENGTH:
            raise ValueError(f"User name too long: {user!r}")
        return owner.ljust(MAX_OWNER_LENGTH, b"\x00")

    def _read_owner(self, path: Path) -> bytes:
        """Read and validate the header page, returning the padded owner."""
        with open(path, "rb") as f:
            header_data = f.read(HEADER_SIZE)

        if len(header_data) < HEADER_SIZE:
            raise ValueError(f"Invalid database file {path}: header too short")

        magic, version, page_size, owner = struct.unpack(HEADER_FORMAT, header_data)

        if magic != HEADER_MAGIC:
            raise ValueError(f"Invalid database file {path}: bad magic {magic!r}")

        if version != HEADER_VERSION:
            raise ValueError(f"Unsupported database version: {version}")

        if page_size != self._page_size:
            raise ValueError(
                f"Page size mismatch: file has {page_size}, expected {self._page_size}"
            )

        return owner
