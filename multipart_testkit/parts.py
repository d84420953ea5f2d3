from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidFieldName, InvalidHeaderValue

DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"

_HEADER_BREAKERS = ("\r", "\n", "\x00")


def check_field_name(name: str) -> str:
    """
    Field names go verbatim between double quotes in Content-Disposition, so
    anything that needs more than basic quoting is refused.
    """
    if not isinstance(name, str) or not name:
        raise InvalidFieldName("field name must be a non-empty string")
    if any(ch in name for ch in (*_HEADER_BREAKERS, '"')):
        raise InvalidFieldName(f"field name {name!r} cannot be quoted in a header")
    return name


def check_header_value(label: str, value: str) -> str:
    if label == "content type" and not value:
        raise InvalidHeaderValue("content type must not be empty")
    if any(ch in value for ch in _HEADER_BREAKERS):
        raise InvalidHeaderValue(f"{label} {value!r} contains CR, LF or NUL")
    if label == "filename" and '"' in value:
        raise InvalidHeaderValue(f"filename {value!r} cannot be quoted in a header")
    return value


@dataclass(frozen=True)
class TextPart:
    name: str
    value: str
    content_type: str | None = None

    def render(self) -> bytes:
        head = f'Content-Disposition: form-data; name="{self.name}"\r\n'
        if self.content_type is not None:
            head += f"Content-Type: {self.content_type}\r\n"
        return (head + "\r\n").encode() + self.value.encode("utf-8") + b"\r\n"


@dataclass(frozen=True)
class FilePart:
    field_name: str
    content: bytes
    content_type: str
    file_name: str

    def render(self) -> bytes:
        head = (
            f'Content-Disposition: form-data; name="{self.field_name}"; '
            f'filename="{self.file_name}"\r\n'
            f"Content-Type: {self.content_type}\r\n\r\n"
        ).encode()
        return head + self.content + b"\r\n"


Part = TextPart | FilePart


def render_body(parts: list[Part] | tuple[Part, ...], boundary: str) -> bytes:
    """
    Join rendered parts with `--boundary` delimiters and close the body.

    An empty sequence renders only the closing delimiter.
    """
    delimiter = f"--{boundary}\r\n".encode("ascii")
    chunks: list[bytes] = []
    for part in parts:
        chunks.append(delimiter)
        chunks.append(part.render())
    chunks.append(f"--{boundary}--\r\n".encode("ascii"))
    return b"".join(chunks)
