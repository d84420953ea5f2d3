from __future__ import annotations

import string
import uuid
from collections.abc import Callable

from .errors import InvalidBoundary

# RFC 2046 section 5.1.1
MAX_BOUNDARY_LENGTH = 70
_BCHARS = frozenset(string.ascii_letters + string.digits + "'()+_,-./:=? ")
# RFC 2045 tspecials that can also appear in a boundary; these need quoting.
_QUOTED_BCHARS = frozenset("(),/:=? ")

BoundaryFactory = Callable[[], str]


def random_boundary() -> str:
    """
    Return a fresh 32-character hex token.

    Uniqueness against payload bytes is probabilistic only: 128 random bits
    make an accidental match negligible for test fixtures, but nothing checks it.
    """
    return uuid.uuid4().hex


def validate_boundary(token: str) -> str:
    if not token:
        raise InvalidBoundary("boundary must not be empty")
    if len(token) > MAX_BOUNDARY_LENGTH:
        raise InvalidBoundary(
            f"boundary is {len(token)} characters, at most {MAX_BOUNDARY_LENGTH} allowed"
        )
    bad = sorted(set(token) - _BCHARS)
    if bad:
        raise InvalidBoundary(f"boundary contains invalid characters: {bad!r}")
    if token.endswith(" "):
        raise InvalidBoundary("boundary must not end with a space")
    return token


def fixed_boundary(token: str) -> BoundaryFactory:
    """Boundary factory that always yields `token`, for deterministic output."""
    validate_boundary(token)
    return lambda: token


def boundary_param(token: str) -> str:
    """Render `token` as a Content-Type parameter value, quoted when required."""
    if _QUOTED_BCHARS.intersection(token):
        return f'"{token}"'
    return token
