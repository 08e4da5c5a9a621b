"""Typed ``{object-type}--{uuid}`` identifiers.

Identifiers double as unique keys and as typed references: the segment before
the ``--`` separator names the kind of record the identifier belongs to. All
checks here are syntactic; nothing verifies that a referenced record exists.
"""

from __future__ import annotations

import re
from uuid import uuid4

from maec_v5.exceptions import InvalidIdError, InvalidReferenceError

ID_SEPARATOR = "--"

# Hyphenated 8-4-4-4-12 or simple 32-digit hex; any version or variant.
_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}|[0-9a-fA-F]{32}"
)


def generate_maec_id(object_type: str) -> str:
    """Return a fresh identifier for ``object_type`` backed by a random UUID4."""

    return f"{object_type}{ID_SEPARATOR}{uuid4()}"


def _split(value: str) -> tuple[str, str] | None:
    parts = value.split(ID_SEPARATOR)
    if len(parts) != 2:
        return None
    object_type, raw_uuid = parts
    if not object_type:
        return None
    if _UUID_PATTERN.fullmatch(raw_uuid) is None:
        return None
    return object_type, raw_uuid


def is_valid_maec_id(value: str) -> bool:
    """Return ``True`` when ``value`` has exactly one separator and a parseable UUID."""

    return _split(value) is not None


def extract_type_from_id(value: str) -> str | None:
    """Return the object type prefix of a valid identifier, else ``None``."""

    parts = _split(value)
    if parts is None:
        return None
    return parts[0]


def is_valid_ref_for_type(value: str, expected_type: str) -> bool:
    """Return ``True`` when ``value`` is a valid identifier of ``expected_type``."""

    return extract_type_from_id(value) == expected_type


def require_maec_id(value: str) -> str:
    if not is_valid_maec_id(value):
        raise InvalidIdError(value)
    return value


def require_ref_for_type(value: str, expected_type: str) -> str:
    if not is_valid_ref_for_type(value, expected_type):
        raise InvalidReferenceError(value, expected_type)
    return value


__all__ = [
    "ID_SEPARATOR",
    "extract_type_from_id",
    "generate_maec_id",
    "is_valid_maec_id",
    "is_valid_ref_for_type",
    "require_maec_id",
    "require_ref_for_type",
]
