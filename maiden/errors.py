from __future__ import annotations


class DustError(Exception):
    """Base of every failure a dust request can report to its caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(DustError):
    status_code = 404


class NotADirectory(DustError):
    status_code = 400


class BadRequest(DustError):
    status_code = 400


class InvalidPath(DustError):
    status_code = 403


class ResourceIOError(DustError):
    status_code = 500


def from_os_error(exc: OSError) -> DustError:
    # strerror keeps absolute device paths out of responses
    message = exc.strerror or exc.__class__.__name__
    if isinstance(exc, FileNotFoundError):
        return NotFound(message)
    if isinstance(exc, NotADirectoryError):
        return NotADirectory(message)
    return ResourceIOError(message)
