"""Resource-read capability used by the bootstrap.

The bootstrap never opens files itself; it asks a reader for the bytes of
a named resource. Readers raise ResourceReadError on any failure.
"""

from __future__ import annotations

import logging
from importlib import resources
from os import PathLike
from pathlib import Path
from typing import Protocol

from xrefstore.errors import ResourceReadError

logger = logging.getLogger("xrefstore.resources")

ICC_PROFILE_NAME = "sRGB.icc"


class ResourceReader(Protocol):
    def read(self, name: str) -> bytes: ...


class PackageResourceReader:
    """Reads files bundled in a package's ``data`` directory."""

    def __init__(self, package: str = "xrefstore", subdir: str = "data") -> None:
        self.package = package
        self.subdir = subdir

    def read(self, name: str) -> bytes:
        try:
            data = (resources.files(self.package) / self.subdir / name).read_bytes()
        except (OSError, ModuleNotFoundError) as err:
            logger.exception("Failed to read bundled resource %s", name)
            raise ResourceReadError(name, str(err)) from err
        logger.debug("read %d bytes from bundled %s", len(data), name)
        return data


class DirectoryResourceReader:
    """Reads resources from a directory on disk."""

    def __init__(self, directory: str | PathLike) -> None:
        self.directory = Path(directory)

    def read(self, name: str) -> bytes:
        path = self.directory / name
        try:
            data = path.read_bytes()
        except OSError as err:
            logger.exception("Failed to read resource %s", path)
            raise ResourceReadError(name, str(err)) from err
        logger.debug("read %d bytes from %s", len(data), path)
        return data
