"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import NamedTuple

import pytest
from python_multipart.multipart import MultipartParser, parse_options_header

from multipart_testkit import fixed_boundary

# 1x1 RGBA PNG; the IDAT chunk happens to contain a CRLF pair.
SAMPLE_PNG_PATH = Path(__file__).parent / "sample.png"

FIXED_TOKEN = "testboundary0123456789"


class DecodedPart(NamedTuple):
    name: str
    filename: str | None
    content_type: str | None
    data: bytes


def decode_multipart(content_type: str, body: bytes) -> list[DecodedPart]:
    """Parse a body with python-multipart and return its parts in order."""
    _, params = parse_options_header(content_type)
    raw_parts: list[dict] = []
    field = bytearray()
    value = bytearray()

    def on_part_begin():
        raw_parts.append({"headers": {}, "data": bytearray()})

    def on_header_field(data, start, end):
        field.extend(data[start:end])

    def on_header_value(data, start, end):
        value.extend(data[start:end])

    def on_header_end():
        raw_parts[-1]["headers"][bytes(field).decode().lower()] = bytes(value)
        field.clear()
        value.clear()

    def on_part_data(data, start, end):
        raw_parts[-1]["data"].extend(data[start:end])

    parser = MultipartParser(
        params[b"boundary"],
        callbacks={
            "on_part_begin": on_part_begin,
            "on_header_field": on_header_field,
            "on_header_value": on_header_value,
            "on_header_end": on_header_end,
            "on_part_data": on_part_data,
        },
    )
    parser.write(body)
    parser.finalize()

    decoded = []
    for raw in raw_parts:
        _, disposition = parse_options_header(raw["headers"]["content-disposition"])
        filename = disposition.get(b"filename")
        ctype = raw["headers"].get("content-type")
        decoded.append(
            DecodedPart(
                name=disposition[b"name"].decode(),
                filename=filename.decode() if filename is not None else None,
                content_type=ctype.decode() if ctype is not None else None,
                data=bytes(raw["data"]),
            )
        )
    return decoded


@pytest.fixture
def sample_png():
    """Path of the shipped PNG fixture."""
    return SAMPLE_PNG_PATH


@pytest.fixture
def fixed_factory():
    """Boundary factory returning FIXED_TOKEN."""
    return fixed_boundary(FIXED_TOKEN)


@pytest.fixture
def png_bytes():
    """Raw bytes of the PNG fixture."""
    return SAMPLE_PNG_PATH.read_bytes()


@pytest.fixture
def decode():
    """Multipart decoder backed by python-multipart."""
    return decode_multipart
