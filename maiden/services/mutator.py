from __future__ import annotations

import os
import posixpath
import shutil
from pathlib import Path
from typing import BinaryIO

from ..errors import BadRequest, NotFound, ResourceIOError
from ..logs import get_logger
from .device_path import DevicePath
from .resource_path import ResourcePath

logger = get_logger(__name__)

_CHUNK_SIZE = 1024 * 1024


def _io_error(exc: OSError) -> ResourceIOError:
    return ResourceIOError(exc.strerror or exc.__class__.__name__)


class ResourceMutator:
    """Filesystem mutations on already resolved device paths.

    Existence checks and the mutation that follows are separate system calls,
    so concurrent requests on the same resource can still race between them.
    """

    def __init__(self, devices: DevicePath, resources: ResourcePath):
        self.devices = devices
        self.resources = resources

    def create_directory(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise _io_error(exc) from exc
        logger.info('created directory', name=self.devices.name_of(path))

    def store_file(self, path: Path, source: BinaryIO) -> int:
        """Write everything readable from ``source`` to ``path``.

        The parent directory must already exist. Returns the number of bytes written.
        """
        written = 0
        try:
            with path.open('wb') as f:
                while chunk := source.read(_CHUNK_SIZE):
                    f.write(chunk)
                    written += len(chunk)
                f.flush()
                os.fsync(f.fileno())
        except OSError as exc:
            raise _io_error(exc) from exc
        logger.info('stored file', name=self.devices.name_of(path), size=written)
        return written

    def rename(self, path: Path, new_name: str | None) -> str:
        """Rename ``path`` within its parent directory and return the new resource URL."""
        if not os.path.lexists(path):
            raise NotFound('No such file or directory')
        if not new_name:
            raise BadRequest("missing 'name' key in form")
        if new_name in ('.', '..') or '/' in new_name or os.sep in new_name:
            raise BadRequest('New name must be a single path segment')
        if path == self.devices.root:
            raise BadRequest('The data directory cannot be renamed')

        name = self.devices.name_of(path)
        target = self.devices.resolve(posixpath.join(posixpath.dirname(name), new_name))
        try:
            os.rename(path, target)
        except OSError as exc:
            raise _io_error(exc) from exc

        renamed = self.devices.name_of(target)
        logger.info('renamed', name=name, new_name=renamed)
        return self.resources.for_name(renamed)

    def delete(self, path: Path) -> None:
        if not os.path.lexists(path):
            raise NotFound('No such file or directory')
        if path == self.devices.root:
            raise BadRequest('The data directory cannot be deleted')
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as exc:
            raise _io_error(exc) from exc
        logger.info('deleted', name=self.devices.name_of(path))
