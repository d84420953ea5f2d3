from multipart_testkit.boundary import (
    boundary_param,
    fixed_boundary,
    random_boundary,
    validate_boundary,
)
from multipart_testkit.encoder import MultipartEncoder
from multipart_testkit.errors import (
    FileReadError,
    InvalidBoundary,
    InvalidFieldName,
    InvalidHeaderValue,
    MultipartError,
)
from multipart_testkit.multipart import build_multipart
from multipart_testkit.parts import FilePart, Part, TextPart

__all__ = [
    "MultipartEncoder",
    "TextPart",
    "FilePart",
    "Part",
    "build_multipart",
    "random_boundary",
    "fixed_boundary",
    "validate_boundary",
    "boundary_param",
    "MultipartError",
    "InvalidFieldName",
    "InvalidHeaderValue",
    "InvalidBoundary",
    "FileReadError",
]
