"""MAEC Malware Family object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from maec_v5.domain.builder import RecordBuilder, require_field
from maec_v5.domain.common import CommonProperties, ExternalReference
from maec_v5.domain.identifiers import require_ref_for_type
from maec_v5.domain.types import FieldData, Name

from .capability import Capability


class MalwareFamily(CommonProperties):
    """Set of malware instances related by common authorship or lineage."""

    object_type: ClassVar[str] = "malware-family"

    name: Name
    aliases: tuple[Name, ...] = ()
    labels: tuple[str, ...] = ()
    description: str | None = None
    field_data: FieldData | None = None
    common_strings: tuple[str, ...] = ()
    common_capabilities: tuple[Capability, ...] = ()
    common_code_refs: tuple[str, ...] = ()
    common_behavior_refs: tuple[str, ...] = ()
    references: tuple[ExternalReference, ...] = ()

    @classmethod
    def builder(cls) -> MalwareFamilyBuilder:
        return MalwareFamilyBuilder()

    def check_reference_kinds(self) -> None:
        for ref in self.common_behavior_refs:
            require_ref_for_type(ref, "behavior")
        for capability in self.common_capabilities:
            capability.check_reference_kinds()


@dataclass(frozen=True, slots=True)
class MalwareFamilyBuilder(RecordBuilder[MalwareFamily]):
    _name: Name | None = None
    _aliases: tuple[Name, ...] = ()
    _labels: tuple[str, ...] = ()
    _description: str | None = None
    _field_data: FieldData | None = None
    _common_strings: tuple[str, ...] = ()
    _common_capabilities: tuple[Capability, ...] = ()
    _common_code_refs: tuple[str, ...] = ()
    _common_behavior_refs: tuple[str, ...] = ()
    _references: tuple[ExternalReference, ...] = ()

    def name(self, name: Name | str) -> MalwareFamilyBuilder:
        return replace(self, _name=Name.coerce(name))

    def add_alias(self, alias: Name | str) -> MalwareFamilyBuilder:
        return replace(self, _aliases=(*self._aliases, Name.coerce(alias)))

    def add_label(self, label: str) -> MalwareFamilyBuilder:
        return replace(self, _labels=(*self._labels, label))

    def description(self, description: str) -> MalwareFamilyBuilder:
        return replace(self, _description=description)

    def field_data(self, field_data: FieldData) -> MalwareFamilyBuilder:
        return replace(self, _field_data=field_data)

    def add_common_string(self, value: str) -> MalwareFamilyBuilder:
        return replace(self, _common_strings=(*self._common_strings, value))

    def add_common_capability(self, capability: Capability) -> MalwareFamilyBuilder:
        return replace(self, _common_capabilities=(*self._common_capabilities, capability))

    def add_common_code_ref(self, ref: str) -> MalwareFamilyBuilder:
        return replace(self, _common_code_refs=(*self._common_code_refs, ref))

    def add_common_behavior_ref(self, ref_id: str) -> MalwareFamilyBuilder:
        return replace(self, _common_behavior_refs=(*self._common_behavior_refs, ref_id))

    def add_reference(self, reference: ExternalReference) -> MalwareFamilyBuilder:
        return replace(self, _references=(*self._references, reference))

    def build(self) -> MalwareFamily:
        name = require_field("name", self._name)
        return self._assemble(
            MalwareFamily,
            {
                "name": name,
                "aliases": self._aliases,
                "labels": self._labels,
                "description": self._description,
                "field_data": self._field_data,
                "common_strings": self._common_strings,
                "common_capabilities": self._common_capabilities,
                "common_code_refs": self._common_code_refs,
                "common_behavior_refs": self._common_behavior_refs,
                "references": self._references,
            },
        )


__all__ = ["MalwareFamily", "MalwareFamilyBuilder"]
