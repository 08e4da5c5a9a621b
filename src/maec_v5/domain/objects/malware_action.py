"""MAEC Malware Action object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from pydantic import field_validator

from maec_v5.domain.builder import RecordBuilder, require_field
from maec_v5.domain.common import CommonProperties
from maec_v5.domain.vocab import MalwareActionName
from maec_v5.utils.time import ensure_utc


class MalwareAction(CommonProperties):
    """Low-level action performed by a malware instance, such as creating a file.

    Input and output object references point into the package's observable
    objects rather than at other MAEC records.
    """

    object_type: ClassVar[str] = "malware-action"

    name: MalwareActionName
    is_successful: bool | None = None
    description: str | None = None
    timestamp: datetime | None = None
    input_object_refs: tuple[str, ...] = ()
    output_object_refs: tuple[str, ...] = ()
    api_call: dict[str, Any] | None = None

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        return ensure_utc(value)

    @classmethod
    def builder(cls) -> MalwareActionBuilder:
        return MalwareActionBuilder()


@dataclass(frozen=True, slots=True)
class MalwareActionBuilder(RecordBuilder[MalwareAction]):
    _name: MalwareActionName | str | None = None
    _is_successful: bool | None = None
    _description: str | None = None
    _timestamp: datetime | None = None
    _input_object_refs: tuple[str, ...] = ()
    _output_object_refs: tuple[str, ...] = ()
    _api_call: tuple[tuple[str, Any], ...] | None = None

    def name(self, name: MalwareActionName | str) -> MalwareActionBuilder:
        return replace(self, _name=name)

    def is_successful(self, successful: bool) -> MalwareActionBuilder:
        return replace(self, _is_successful=successful)

    def description(self, description: str) -> MalwareActionBuilder:
        return replace(self, _description=description)

    def timestamp(self, timestamp: datetime) -> MalwareActionBuilder:
        return replace(self, _timestamp=timestamp)

    def add_input_object_ref(self, ref: str) -> MalwareActionBuilder:
        return replace(self, _input_object_refs=(*self._input_object_refs, ref))

    def add_output_object_ref(self, ref: str) -> MalwareActionBuilder:
        return replace(self, _output_object_refs=(*self._output_object_refs, ref))

    def api_call(self, **details: Any) -> MalwareActionBuilder:
        return replace(self, _api_call=tuple(details.items()))

    def build(self) -> MalwareAction:
        name = require_field("name", self._name)
        return self._assemble(
            MalwareAction,
            {
                "name": name,
                "is_successful": self._is_successful,
                "description": self._description,
                "timestamp": self._timestamp,
                "input_object_refs": self._input_object_refs,
                "output_object_refs": self._output_object_refs,
                "api_call": None if self._api_call is None else dict(self._api_call),
            },
        )


__all__ = ["MalwareAction", "MalwareActionBuilder"]
