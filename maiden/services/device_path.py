from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..errors import InvalidPath
from ..logs import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DevicePath:
    """Resolves resource names to absolute paths that stay inside ``root``."""

    root: Path

    @classmethod
    def at(cls, root: str | Path) -> DevicePath:
        return cls(Path(root).resolve())

    def contains(self, path: Path) -> bool:
        return path == self.root or self.root in path.parents

    def resolve(self, name: str) -> Path:
        """Return the lexically normalized path ``name`` addresses.

        Symlinks are left in the returned path so mutations act on the named
        entry itself. Containment is checked on both the lexical path and the
        fully resolved one.
        """
        if '\x00' in name:
            raise InvalidPath('Resource name contains a NUL byte')
        joined = self.root / name.lstrip('/')
        lexical = Path(os.path.normpath(joined))
        try:
            real = joined.resolve(strict=False)
        except (OSError, RuntimeError) as exc:
            raise InvalidPath('Resource name cannot be resolved') from exc
        if not self.contains(lexical) or not self.contains(real):
            raise InvalidPath('Path traversal detected')
        logger.debug('resolved resource', name=name, device_path=str(lexical))
        return lexical

    def name_of(self, path: Path) -> str:
        if path == self.root:
            return ''
        return path.relative_to(self.root).as_posix()
