"""Mapping between resource names and the escaped URLs clients address them by.

Every segment is escaped on its own, so a ``/`` inside a single name comes out
as ``%2F`` instead of being read back as a separator. The escape set matches
Go's ``url.PathEscape``: unreserved characters and ``$&+:=@`` pass through,
everything else (spaces, ``%``, non-ASCII as UTF-8) is percent-encoded.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from urllib.parse import quote, unquote

_SEGMENT_SAFE = '$&+:=@'


def split_name(name: str) -> list[str]:
    return [segment for segment in name.split('/') if segment]


def encode(prefix: str, *segments: str) -> str:
    escaped = [quote(segment, safe=_SEGMENT_SAFE) for segment in segments if segment]
    return posixpath.join(prefix.rstrip('/') or '/', *escaped)


def decode(prefix: str, url: str) -> str:
    base = prefix.rstrip('/')
    if url != base and not url.startswith(base + '/'):
        raise ValueError(f'{url!r} is not under {prefix!r}')
    rest = url[len(base):]
    return '/'.join(unquote(segment) for segment in rest.split('/') if segment)


@dataclass(frozen=True)
class ResourcePath:
    prefix: str
    parts: tuple[str, ...] = ()

    def __call__(self, *names: str) -> str:
        return encode(self.prefix, *self.parts, *names)

    def child(self, *names: str) -> ResourcePath:
        return ResourcePath(self.prefix, self.parts + tuple(name for name in names if name))

    def for_name(self, name: str) -> str:
        return self(*split_name(name))
