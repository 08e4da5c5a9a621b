"""MAEC Package, the top-level container exchanged between producers and consumers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import ValidationInfo, model_validator

from maec_v5.domain.builder import RecordBuilder
from maec_v5.domain.common import SCHEMA_VERSION, CommonProperties
from maec_v5.exceptions import MaecValidationError

from .behavior import Behavior
from .collection import Collection
from .malware_action import MalwareAction
from .malware_family import MalwareFamily
from .malware_instance import MalwareInstance
from .relationship import Relationship
from .resolver import MaecObjectType, policy_from_context, resolve_maec_object

ObjectT = TypeVar("ObjectT", Behavior, Collection, MalwareAction, MalwareFamily, MalwareInstance)


@dataclass(frozen=True, slots=True)
class PackageView(Generic[ObjectT]):
    """Read-only, order-preserving view over one kind of package object.

    Filtering happens on iteration; nothing is copied out of the package.
    """

    _objects: Sequence[MaecObjectType]
    _kind: type[ObjectT]

    def __iter__(self) -> Iterator[ObjectT]:
        return (obj for obj in self._objects if isinstance(obj, self._kind))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def first(self) -> ObjectT | None:
        return next(iter(self), None)


class Package(CommonProperties):
    """Top-level MAEC document holding objects, observables, and relationships."""

    object_type: ClassVar[str] = "package"
    always_emit: ClassVar[frozenset[str]] = frozenset({"maec_objects"})

    maec_objects: tuple[MaecObjectType, ...] = ()
    observable_objects: dict[str, Any] | None = None
    relationships: tuple[Relationship, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def resolve_objects(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, Mapping):
            return data
        objects = data.get("maec_objects")
        if not isinstance(objects, list | tuple):
            return data
        policy = policy_from_context(info.context)
        resolved = tuple(resolve_maec_object(item, policy) for item in objects)
        return {**data, "maec_objects": resolved}

    @classmethod
    def builder(cls) -> PackageBuilder:
        return PackageBuilder()

    def validate(self) -> None:  # type: ignore[override]
        self.validate_header()
        if self.schema_version != SCHEMA_VERSION:
            msg = f"schema_version must be '{SCHEMA_VERSION}', got {self.schema_version!r}"
            raise MaecValidationError(msg)

    def malware_families(self) -> PackageView[MalwareFamily]:
        return PackageView(self.maec_objects, MalwareFamily)

    def malware_instances(self) -> PackageView[MalwareInstance]:
        return PackageView(self.maec_objects, MalwareInstance)

    def behaviors(self) -> PackageView[Behavior]:
        return PackageView(self.maec_objects, Behavior)

    def malware_actions(self) -> PackageView[MalwareAction]:
        return PackageView(self.maec_objects, MalwareAction)

    def collections(self) -> PackageView[Collection]:
        return PackageView(self.maec_objects, Collection)

    def get_object(self, object_id: str) -> MaecObjectType | None:
        """Return the contained object with ``object_id``, if any."""

        for obj in self.maec_objects:
            if obj.id == object_id:
                return obj
        return None


@dataclass(frozen=True, slots=True)
class PackageBuilder(RecordBuilder[Package]):
    _schema_version: str | None = None
    _maec_objects: tuple[MaecObjectType, ...] = ()
    _observable_objects: tuple[tuple[str, Any], ...] | None = None
    _relationships: tuple[Relationship, ...] = ()

    def schema_version(self, version: str) -> PackageBuilder:
        return replace(self, _schema_version=version)

    def add_object(self, obj: MaecObjectType) -> PackageBuilder:
        return replace(self, _maec_objects=(*self._maec_objects, obj))

    def add_malware_family(self, family: MalwareFamily) -> PackageBuilder:
        return self.add_object(family)

    def add_malware_instance(self, instance: MalwareInstance) -> PackageBuilder:
        return self.add_object(instance)

    def add_behavior(self, behavior: Behavior) -> PackageBuilder:
        return self.add_object(behavior)

    def add_malware_action(self, action: MalwareAction) -> PackageBuilder:
        return self.add_object(action)

    def add_collection(self, collection: Collection) -> PackageBuilder:
        return self.add_object(collection)

    def observable_objects(self, observables: Mapping[str, Any]) -> PackageBuilder:
        return replace(self, _observable_objects=tuple(observables.items()))

    def add_observable_object(self, key: str, observable: Any) -> PackageBuilder:
        current = self._observable_objects or ()
        return replace(self, _observable_objects=(*current, (key, observable)))

    def add_relationship(self, relationship: Relationship) -> PackageBuilder:
        return replace(self, _relationships=(*self._relationships, relationship))

    def build(self) -> Package:
        body: dict[str, Any] = {
            "maec_objects": self._maec_objects,
            "observable_objects": (
                None if self._observable_objects is None else dict(self._observable_objects)
            ),
            "relationships": self._relationships,
        }
        if self._schema_version is not None:
            body["schema_version"] = self._schema_version
        return self._assemble(Package, body)


__all__ = ["Package", "PackageBuilder", "PackageView"]
