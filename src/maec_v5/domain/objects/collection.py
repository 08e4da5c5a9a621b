"""MAEC Collection object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from maec_v5.domain.builder import RecordBuilder
from maec_v5.domain.common import CommonProperties
from maec_v5.domain.vocab import EntityAssociation


class Collection(CommonProperties):
    """Grouping of related MAEC objects."""

    object_type: ClassVar[str] = "collection"

    name: str | None = None
    description: str | None = None
    association_type: EntityAssociation | None = None
    entity_refs: tuple[str, ...] = ()

    @classmethod
    def builder(cls) -> CollectionBuilder:
        return CollectionBuilder()


@dataclass(frozen=True, slots=True)
class CollectionBuilder(RecordBuilder[Collection]):
    _name: str | None = None
    _description: str | None = None
    _association_type: EntityAssociation | str | None = None
    _entity_refs: tuple[str, ...] = ()

    def name(self, name: str) -> CollectionBuilder:
        return replace(self, _name=name)

    def description(self, description: str) -> CollectionBuilder:
        return replace(self, _description=description)

    def association_type(self, association: EntityAssociation | str) -> CollectionBuilder:
        return replace(self, _association_type=association)

    def add_entity_ref(self, ref_id: str) -> CollectionBuilder:
        return replace(self, _entity_refs=(*self._entity_refs, ref_id))

    def build(self) -> Collection:
        return self._assemble(
            Collection,
            {
                "name": self._name,
                "description": self._description,
                "association_type": self._association_type,
                "entity_refs": self._entity_refs,
            },
        )


__all__ = ["Collection", "CollectionBuilder"]
