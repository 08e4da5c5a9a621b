"""MAEC Relationship object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from maec_v5.domain.builder import RecordBuilder, require_field
from maec_v5.domain.common import CommonProperties
from maec_v5.domain.identifiers import is_valid_maec_id, require_ref_for_type
from maec_v5.exceptions import InvalidReferenceError


class Relationship(CommonProperties):
    """Connects two MAEC objects, e.g. ``derived-from`` or ``variant-of``.

    Only the syntax of ``source_ref`` and ``target_ref`` is checked; the kinds
    they point at are not, unless ``check_reference_kinds`` is called.
    """

    object_type: ClassVar[str] = "relationship"

    source_ref: str
    target_ref: str
    relationship_type: str
    description: str | None = None

    @classmethod
    def builder(cls) -> RelationshipBuilder:
        return RelationshipBuilder()

    @classmethod
    def link(cls, source_ref: str, relationship_type: str, target_ref: str) -> Relationship:
        """Build a relationship from its three required fields."""

        return (
            cls.builder()
            .source_ref(source_ref)
            .relationship_type(relationship_type)
            .target_ref(target_ref)
            .build()
        )

    def validate(self) -> None:  # type: ignore[override]
        self.validate_header()
        for ref in (self.source_ref, self.target_ref):
            if not is_valid_maec_id(ref):
                raise InvalidReferenceError(ref)

    def check_reference_kinds(self, source_type: str, target_type: str) -> None:
        """Require the source and target to be identifiers of the given kinds."""

        require_ref_for_type(self.source_ref, source_type)
        require_ref_for_type(self.target_ref, target_type)


@dataclass(frozen=True, slots=True)
class RelationshipBuilder(RecordBuilder[Relationship]):
    _source_ref: str | None = None
    _target_ref: str | None = None
    _relationship_type: str | None = None
    _description: str | None = None

    def source_ref(self, ref_id: str) -> RelationshipBuilder:
        return replace(self, _source_ref=ref_id)

    def target_ref(self, ref_id: str) -> RelationshipBuilder:
        return replace(self, _target_ref=ref_id)

    def relationship_type(self, relationship_type: str) -> RelationshipBuilder:
        return replace(self, _relationship_type=relationship_type)

    def description(self, description: str) -> RelationshipBuilder:
        return replace(self, _description=description)

    def build(self) -> Relationship:
        source_ref = require_field("source_ref", self._source_ref)
        target_ref = require_field("target_ref", self._target_ref)
        relationship_type = require_field("relationship_type", self._relationship_type)
        return self._assemble(
            Relationship,
            {
                "source_ref": source_ref,
                "target_ref": target_ref,
                "relationship_type": relationship_type,
                "description": self._description,
            },
        )


__all__ = ["Relationship", "RelationshipBuilder"]
