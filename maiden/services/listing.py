from __future__ import annotations

import os
from pathlib import Path

from ..errors import from_os_error
from ..schemas import Entry, Listing
from .resource_path import ResourcePath


def list_directory(path: Path, resources: ResourcePath, name: str = '') -> Listing:
    """List the immediate children of ``path`` in scandir order.

    ``resources`` must be rooted at the listed directory: child URLs are
    ``resources(child_name)`` and the listing's own URL is ``resources('')``.
    Sub directories carry an empty ``children`` list, files carry none.
    """
    try:
        with os.scandir(path) as it:
            entries = [
                Entry(name=dirent.name, url=resources(dirent.name), children=[] if dirent.is_dir() else None)
                for dirent in it
            ]
    except OSError as exc:
        raise from_os_error(exc) from exc
    return Listing(path=name, url=resources(''), entries=entries)
