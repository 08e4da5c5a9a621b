"""Shared machinery for the immutable record builders."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Generic, Self, TypeVar

from pydantic import ValidationError

from maec_v5.exceptions import MaecValidationError, MissingFieldError
from maec_v5.utils.time import Clock, utc_now

from .common import CommonProperties

RecordT = TypeVar("RecordT", bound=CommonProperties)
ValueT = TypeVar("ValueT")

logger = logging.getLogger(__name__)


def require_field(name: str, value: ValueT | None) -> ValueT:
    """Return ``value`` or raise ``MissingFieldError`` naming the field."""

    if value is None:
        raise MissingFieldError(name)
    return value


@dataclass(frozen=True, slots=True)
class RecordBuilder(Generic[RecordT]):
    """Accumulates header settings; every setter returns a new builder.

    Subclasses gather their body fields the same way and finish with
    ``_assemble`` so construction is all-or-nothing.
    """

    _id: str | None = None
    _created_by_ref: str | None = None
    _custom_properties: tuple[tuple[str, Any], ...] = ()
    _clock: Clock = utc_now

    def id(self, value: str) -> Self:
        return replace(self, _id=value)

    def created_by_ref(self, ref_id: str) -> Self:
        return replace(self, _created_by_ref=ref_id)

    def custom_property(self, key: str, value: Any) -> Self:
        return replace(self, _custom_properties=(*self._custom_properties, (key, value)))

    def clock(self, clock: Clock) -> Self:
        return replace(self, _clock=clock)

    def _assemble(self, model: type[RecordT], body: Mapping[str, Any]) -> RecordT:
        object_type = model.object_type
        if object_type is None:  # pragma: no cover - programming error
            msg = f"{model.__name__} does not declare an object type"
            raise TypeError(msg)

        header = CommonProperties.new(object_type, self._created_by_ref, clock=self._clock)
        fields: dict[str, Any] = {
            name: getattr(header, name) for name in CommonProperties.model_fields
        }
        if self._id is not None:
            fields["id"] = self._id
        for key, value in self._custom_properties:
            if key in model.model_fields:
                msg = f"custom property '{key}' collides with a declared {object_type} field"
                raise MaecValidationError(msg)
            fields[key] = value
        fields.update(body)

        try:
            record = model(**fields)
        except ValidationError as exc:
            logger.debug("Rejected %s during assembly: %s", object_type, exc)
            raise MaecValidationError(str(exc)) from exc
        record.validate()
        return record


__all__ = ["RecordBuilder", "require_field"]
