"""Package resource resolver.

Resolves resources bundled inside a Python package to absolute filesystem
paths with :mod:`importlib.resources`. Resources that only exist inside an
archive (zipimport, some frozen apps) have no filesystem path, which the
native library loader needs, so they are rejected.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path

from firebird_embedded.domain.errors import ConfigurationError


DEFAULT_RESOURCE_PACKAGE = "firebird_embedded.resources"


class PackageResourceResolver:
    """ResourceResolver over resources shipped in a Python package."""

    def __init__(self, package: str = DEFAULT_RESOURCE_PACKAGE) -> None:
        self._package = package

    @property
    def package(self) -> str:
        return self._package

    def resolve(self, name: str) -> Path:
        """Resolve ``name`` inside the package to an absolute directory.

        Raises:
            ConfigurationError: If the package is missing, the resource does
                not exist, or it is not a plain filesystem directory.
        """
        try:
            resource = resources.files(self._package).joinpath(name)
        except ModuleNotFoundError as e:
            raise ConfigurationError(f"Resource package {self._package} not found") from e

        if not isinstance(resource, Path):
            raise ConfigurationError(
                f"Resource {name!r} in {self._package} is not on the filesystem"
            )

        if not resource.is_dir():
            raise ConfigurationError(f"Resource {name!r} not found in {self._package}")

        return resource.resolve()
