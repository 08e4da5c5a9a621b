"""MAEC Behavior object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from pydantic import field_validator

from maec_v5.domain.builder import RecordBuilder, require_field
from maec_v5.domain.common import CommonProperties, ExternalReference
from maec_v5.domain.identifiers import require_ref_for_type
from maec_v5.domain.vocab import BehaviorName
from maec_v5.utils.time import ensure_utc


class Behavior(CommonProperties):
    """Purpose behind a snippet of code executed by a malware instance.

    Examples include keylogging, detecting a virtual machine, and installing a
    backdoor. ``action_refs`` point at the malware actions implementing it.
    """

    object_type: ClassVar[str] = "behavior"

    name: BehaviorName
    description: str | None = None
    timestamp: datetime | None = None
    attributes: dict[str, Any] | None = None
    action_refs: tuple[str, ...] = ()
    technique_refs: tuple[ExternalReference, ...] = ()

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        return ensure_utc(value)

    @classmethod
    def builder(cls) -> BehaviorBuilder:
        return BehaviorBuilder()

    def check_reference_kinds(self) -> None:
        """Require every ``action_refs`` entry to be a ``malware-action`` identifier."""

        for ref in self.action_refs:
            require_ref_for_type(ref, "malware-action")


@dataclass(frozen=True, slots=True)
class BehaviorBuilder(RecordBuilder[Behavior]):
    _name: BehaviorName | str | None = None
    _description: str | None = None
    _timestamp: datetime | None = None
    _attributes: tuple[tuple[str, Any], ...] | None = None
    _action_refs: tuple[str, ...] = ()
    _technique_refs: tuple[ExternalReference, ...] = ()

    def name(self, name: BehaviorName | str) -> BehaviorBuilder:
        return replace(self, _name=name)

    def description(self, description: str) -> BehaviorBuilder:
        return replace(self, _description=description)

    def timestamp(self, timestamp: datetime) -> BehaviorBuilder:
        return replace(self, _timestamp=timestamp)

    def attribute(self, key: str, value: Any) -> BehaviorBuilder:
        return replace(self, _attributes=(*(self._attributes or ()), (key, value)))

    def add_action_ref(self, ref_id: str) -> BehaviorBuilder:
        return replace(self, _action_refs=(*self._action_refs, ref_id))

    def add_technique_ref(self, reference: ExternalReference) -> BehaviorBuilder:
        return replace(self, _technique_refs=(*self._technique_refs, reference))

    def build(self) -> Behavior:
        name = require_field("name", self._name)
        return self._assemble(
            Behavior,
            {
                "name": name,
                "description": self._description,
                "timestamp": self._timestamp,
                "attributes": None if self._attributes is None else dict(self._attributes),
                "action_refs": self._action_refs,
                "technique_refs": self._technique_refs,
            },
        )


__all__ = ["Behavior", "BehaviorBuilder"]
