"""Core base classes for MAEC domain models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.fields import FieldInfo


def _is_absent(field: FieldInfo, value: Any) -> bool:
    if value is None:
        return True
    # Collections defaulting to () are optional on the wire.
    return field.default == () and isinstance(value, list | tuple) and not value


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation.

    Optional fields are left out of the dumped mapping when absent, matching the
    MAEC convention of never emitting explicit nulls.

    Records define ``validate()`` as an instance method that checks their
    invariants; it replaces pydantic's deprecated ``validate`` classmethod.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)

    always_emit: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_sparse(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        declared = type(self).model_fields
        return {
            key: value
            for key, value in data.items()
            if key not in declared
            or key in self.always_emit
            or not _is_absent(declared[key], value)
        }
