from __future__ import annotations

from .boundary import fixed_boundary
from .encoder import MultipartEncoder


def build_multipart(
    data: dict[str, str] | None,
    files: dict[str, bytes | tuple[str, bytes, str | None]],
    boundary: str | None = None,
) -> tuple[str, bytes]:
    """
    Build a multipart/form-data body in one call.
    `files` values can be bytes or (filename, bytes, content_type|None).
    Text fields come first, then files, each in dict order.
    """
    encoder = MultipartEncoder(fixed_boundary(boundary) if boundary is not None else None)
    if data:
        for k, v in data.items():
            encoder.with_text(k, v)
    for field, val in files.items():
        if isinstance(val, bytes):
            encoder.with_file(val, field, None, field)
        else:
            filename, content, ctype = val
            encoder.with_file(content, field, ctype, filename)
    (_, content_type), body = encoder.build()
    return content_type, body
