"""MAEC Capability type.

Capabilities are plain embedded values: they carry no identity header and are
nested inside malware families and instances.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from pydantic import ValidationError

from maec_v5.domain.base import DomainModel
from maec_v5.domain.builder import require_field
from maec_v5.domain.common import ExternalReference
from maec_v5.domain.identifiers import require_ref_for_type
from maec_v5.exceptions import MaecValidationError


class Capability(DomainModel):
    """A capability that may be implemented in a malware instance."""

    name: str
    refined_capabilities: tuple[Capability, ...] = ()
    description: str | None = None
    attributes: dict[str, Any] | None = None
    behavior_refs: tuple[str, ...] = ()
    references: tuple[ExternalReference, ...] = ()

    @classmethod
    def builder(cls) -> CapabilityBuilder:
        return CapabilityBuilder()

    def check_reference_kinds(self) -> None:
        """Require ``behavior_refs`` here and in refined capabilities to name behaviors."""

        for ref in self.behavior_refs:
            require_ref_for_type(ref, "behavior")
        for refined in self.refined_capabilities:
            refined.check_reference_kinds()


@dataclass(frozen=True, slots=True)
class CapabilityBuilder:
    _name: str | None = None
    _refined_capabilities: tuple[Capability, ...] = ()
    _description: str | None = None
    _attributes: tuple[tuple[str, Any], ...] | None = None
    _behavior_refs: tuple[str, ...] = ()
    _references: tuple[ExternalReference, ...] = ()

    def name(self, name: str) -> CapabilityBuilder:
        return replace(self, _name=name)

    def description(self, description: str) -> CapabilityBuilder:
        return replace(self, _description=description)

    def attribute(self, key: str, value: Any) -> CapabilityBuilder:
        return replace(self, _attributes=(*(self._attributes or ()), (key, value)))

    def add_refined_capability(self, capability: Capability) -> CapabilityBuilder:
        return replace(self, _refined_capabilities=(*self._refined_capabilities, capability))

    def add_behavior_ref(self, ref_id: str) -> CapabilityBuilder:
        return replace(self, _behavior_refs=(*self._behavior_refs, ref_id))

    def add_reference(self, reference: ExternalReference) -> CapabilityBuilder:
        return replace(self, _references=(*self._references, reference))

    def build(self) -> Capability:
        name = require_field("name", self._name)
        try:
            capability = Capability(
                name=name,
                refined_capabilities=self._refined_capabilities,
                description=self._description,
                attributes=None if self._attributes is None else dict(self._attributes),
                behavior_refs=self._behavior_refs,
                references=self._references,
            )
        except ValidationError as exc:
            raise MaecValidationError(str(exc)) from exc
        return capability


__all__ = ["Capability", "CapabilityBuilder"]
