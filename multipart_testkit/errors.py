from __future__ import annotations


class MultipartError(Exception):
    """Base error for multipart_testkit."""


class InvalidFieldName(MultipartError, ValueError):
    """Raised when a form field name is empty or cannot be quoted."""


class InvalidHeaderValue(MultipartError, ValueError):
    """Raised when a filename or content type would break the part headers."""


class InvalidBoundary(MultipartError, ValueError):
    """Raised when a boundary token is not allowed by RFC 2046."""


class FileReadError(MultipartError, OSError):
    """
    Raised when a file part's bytes cannot be read.

    `kind` is one of "not_found", "permission_denied" or "io_error"; the
    original OSError is kept on `cause` and chained as __cause__.
    """

    def __init__(self, path: str, kind: str, cause: OSError) -> None:
        super().__init__(f"cannot read {path!r} ({kind}): {cause}")
        self.path = path
        self.kind = kind
        self.cause = cause
