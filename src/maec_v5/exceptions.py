"""Error taxonomy for MAEC construction, validation, and serialization."""

from __future__ import annotations


class MaecError(RuntimeError):
    """Base class for all MAEC failures."""


class MissingFieldError(MaecError):
    """Raised when a builder is missing a required field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing required field: {field}")
        self.field = field


class InvalidIdError(MaecError):
    """Raised when a string is not a valid ``{type}--{uuid}`` identifier."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid MAEC ID: {value}")
        self.value = value


class InvalidReferenceError(MaecError):
    """Raised when a reference does not point at the expected object type."""

    def __init__(self, value: str, expected_type: str | None = None) -> None:
        detail = value if expected_type is None else f"{value} (expected {expected_type})"
        super().__init__(f"invalid reference: {detail}")
        self.value = value
        self.expected_type = expected_type


class MaecValidationError(MaecError):
    """Raised when a record-level invariant does not hold."""


class SerializationError(MaecError):
    """Raised when a record could not be encoded to the wire format."""


class DeserializationError(MaecError):
    """Raised when a wire document could not be mapped onto the record model."""


class MaecIOError(MaecError):
    """Raised when reading or writing a package document fails."""


__all__ = [
    "DeserializationError",
    "InvalidIdError",
    "InvalidReferenceError",
    "MaecError",
    "MaecIOError",
    "MaecValidationError",
    "MissingFieldError",
    "SerializationError",
]
