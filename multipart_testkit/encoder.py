from __future__ import annotations

import logging
import os

from .boundary import (
    BoundaryFactory,
    boundary_param,
    random_boundary,
    validate_boundary,
)
from .errors import FileReadError
from .parts import (
    DEFAULT_FILE_CONTENT_TYPE,
    FilePart,
    Part,
    TextPart,
    check_field_name,
    check_header_value,
    render_body,
)

logger = logging.getLogger("multipart_testkit")

FileSource = bytes | bytearray | memoryview | str | os.PathLike


def _read_file(path: str | os.PathLike[str]) -> bytes:
    fspath = os.fspath(path)
    try:
        with open(fspath, "rb") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise FileReadError(fspath, "not_found", exc) from exc
    except PermissionError as exc:
        raise FileReadError(fspath, "permission_denied", exc) from exc
    except OSError as exc:
        raise FileReadError(fspath, "io_error", exc) from exc


class MultipartEncoder:
    """
    Builder for multipart/form-data request bodies used in endpoint tests.

    Parts are rendered in the order they were added. ``build()`` may be
    called repeatedly; each call asks the boundary factory for a token and
    re-renders the same parts, so a fixed factory gives identical output.

        header, body = (
            MultipartEncoder()
            .with_text("name", "some_name")
            .with_file("tests/sample.png", "sample", "image/png", "sample.png")
            .build()
        )
    """

    def __init__(self, boundary_factory: BoundaryFactory | None = None) -> None:
        self._boundary_factory = boundary_factory or random_boundary
        self._parts: list[Part] = []

    @property
    def parts(self) -> tuple[Part, ...]:
        return tuple(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __repr__(self) -> str:
        return f"<MultipartEncoder [{len(self._parts)} parts]>"

    def with_text(
        self, name: str, value: str, content_type: str | None = None
    ) -> MultipartEncoder:
        check_field_name(name)
        if not isinstance(value, str):
            raise TypeError(
                f"value for field {name!r} must be str, not {type(value).__name__}"
            )
        if content_type is not None:
            check_header_value("content type", content_type)
        self._parts.append(TextPart(name, value, content_type))
        logger.debug("added text field %r (%d chars)", name, len(value))
        return self

    def with_file(
        self,
        source: FileSource,
        field_name: str,
        content_type: str | None,
        file_name: str | None = None,
    ) -> MultipartEncoder:
        """
        Add a file field from in-memory bytes or a path.

        Paths are read immediately; a failed read raises FileReadError and
        leaves the encoder untouched. Without `file_name`, the path's base name
        is used, or the field name for in-memory bytes.
        """
        check_field_name(field_name)
        ctype = content_type if content_type is not None else DEFAULT_FILE_CONTENT_TYPE
        check_header_value("content type", ctype)
        if file_name is not None:
            check_header_value("filename", file_name)

        if isinstance(source, (bytes, bytearray, memoryview)):
            content = bytes(source)
            file_name = file_name if file_name is not None else field_name
        else:
            content = _read_file(source)
            if file_name is None:
                file_name = check_header_value(
                    "filename", os.path.basename(os.fspath(source))
                )

        self._parts.append(FilePart(field_name, content, ctype, file_name))
        logger.debug(
            "added file field %r filename=%r type=%s (%d bytes)",
            field_name,
            file_name,
            ctype,
            len(content),
        )
        return self

    def build(self) -> tuple[tuple[str, str], bytes]:
        """Return (("Content-Type", value), body) for the parts added so far."""
        boundary = validate_boundary(self._boundary_factory())
        body = render_body(self._parts, boundary)
        logger.debug(
            "built multipart body boundary=%s parts=%d size=%d",
            boundary,
            len(self._parts),
            len(body),
        )
        header_value = f"multipart/form-data; boundary={boundary_param(boundary)}"
        return ("Content-Type", header_value), body
