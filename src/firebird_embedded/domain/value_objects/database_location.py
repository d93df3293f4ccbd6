"""Filesystem location of the embedded database."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from firebird_embedded.domain.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class DatabaseLocation:
    """Path of the database file and the directory that must hold it.

    Attributes:
        path: Database file path, relative paths resolve against the
            working directory.

    Example:
        >>> location = DatabaseLocation(Path("target/embedded-example.fdb"))
        >>> location.parent
        PosixPath('target')
    """

    path: Path

    @property
    def parent(self) -> Path:
        """Directory that must exist before the database is created."""
        return self.path.parent

    def ensure_parent(self) -> Path:
        """Create the parent directory (and missing ancestors) if absent.

        Returns:
            The parent directory.

        Raises:
            ConfigurationError: If the parent exists and is not a directory,
                or cannot be created.
        """
        parent = self.parent
        if not parent.exists():
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigurationError(f"Cannot create directory {parent}") from e
        elif not parent.is_dir():
            raise ConfigurationError(
                f"Cannot create {self.path} file. {parent} is not a directory."
            )
        return parent

    def __str__(self) -> str:
        return self.path.as_posix()
