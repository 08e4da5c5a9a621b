"""Supporting value types embedded in MAEC records."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Self

from pydantic import ValidationError, field_validator, model_validator

from maec_v5.exceptions import MaecValidationError
from maec_v5.utils.time import ensure_utc

from .base import DomainModel
from .common import ExternalReference
from .vocab import AnalysisConclusionType, AnalysisType


class Name(DomainModel):
    """Name of a malware instance, family, or alias.

    A bare string is accepted anywhere a ``Name`` is expected.
    """

    value: str
    source: ExternalReference | None = None
    confidence: str | None = None

    @model_validator(mode="before")
    @classmethod
    def coerce_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data}
        return data

    @classmethod
    def coerce(cls, value: str | Name) -> Name:
        if isinstance(value, Name):
            return value
        return cls(value=value)

    @classmethod
    def with_source(cls, value: str, source: ExternalReference) -> Name:
        return cls(value=value, source=source)

    @classmethod
    def with_confidence(cls, value: str, source: ExternalReference, confidence: str) -> Name:
        return cls(value=value, source=source, confidence=confidence)

    def __str__(self) -> str:
        return self.value


class FieldData(DomainModel):
    """Temporal and delivery information observed in the field.

    At least one of the three fields must be present.
    """

    delivery_vectors: tuple[str, ...] | None = None
    first_seen: datetime | None = None
    last_seen: datetime | None = None

    @field_validator("first_seen", "last_seen")
    @classmethod
    def normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        return ensure_utc(value)

    @model_validator(mode="after")
    def ensure_populated(self) -> Self:
        if self.delivery_vectors is None and self.first_seen is None and self.last_seen is None:
            msg = "FieldData must have at least one of: delivery_vectors, first_seen, or last_seen"
            raise ValueError(msg)
        return self

    @classmethod
    def builder(cls) -> FieldDataBuilder:
        return FieldDataBuilder()

    @classmethod
    def with_delivery_vectors(cls, vectors: tuple[str, ...] | list[str]) -> FieldData:
        return cls(delivery_vectors=tuple(vectors))

    @classmethod
    def with_timestamps(cls, first_seen: datetime, last_seen: datetime | None = None) -> FieldData:
        return cls(first_seen=first_seen, last_seen=last_seen)


@dataclass(frozen=True, slots=True)
class FieldDataBuilder:
    _delivery_vectors: tuple[str, ...] | None = None
    _first_seen: datetime | None = None
    _last_seen: datetime | None = None

    def delivery_vectors(self, vectors: tuple[str, ...] | list[str]) -> FieldDataBuilder:
        return replace(self, _delivery_vectors=tuple(vectors))

    def add_delivery_vector(self, vector: str) -> FieldDataBuilder:
        return replace(self, _delivery_vectors=(*(self._delivery_vectors or ()), vector))

    def first_seen(self, timestamp: datetime) -> FieldDataBuilder:
        return replace(self, _first_seen=timestamp)

    def last_seen(self, timestamp: datetime) -> FieldDataBuilder:
        return replace(self, _last_seen=timestamp)

    def build(self) -> FieldData:
        if self._delivery_vectors is None and self._first_seen is None and self._last_seen is None:
            msg = "FieldData must have at least one of: delivery_vectors, first_seen, or last_seen"
            raise MaecValidationError(msg)
        try:
            return FieldData(
                delivery_vectors=self._delivery_vectors,
                first_seen=self._first_seen,
                last_seen=self._last_seen,
            )
        except ValidationError as exc:
            raise MaecValidationError(str(exc)) from exc


class AnalysisMetadata(DomainModel):
    """Metadata describing one analysis performed on a malware instance."""

    is_automated: bool
    analysis_type: AnalysisType
    description: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    conclusion: AnalysisConclusionType | None = None
    tool_refs: tuple[str, ...] = ()
    references: tuple[ExternalReference, ...] = ()

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        return ensure_utc(value)

    @model_validator(mode="after")
    def check_window(self) -> Self:
        if self.start_time and self.end_time and self.end_time < self.start_time:
            msg = "end_time must not be earlier than start_time"
            raise ValueError(msg)
        return self


__all__ = ["AnalysisMetadata", "FieldData", "FieldDataBuilder", "Name"]
