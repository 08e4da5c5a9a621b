"""MAEC record kinds and the package container."""

from .behavior import Behavior, BehaviorBuilder
from .capability import Capability, CapabilityBuilder
from .collection import Collection, CollectionBuilder
from .malware_action import MalwareAction, MalwareActionBuilder
from .malware_family import MalwareFamily, MalwareFamilyBuilder
from .malware_instance import MalwareInstance, MalwareInstanceBuilder
from .package import Package, PackageBuilder, PackageView
from .relationship import Relationship, RelationshipBuilder
from .resolver import (
    KIND_REGISTRY,
    STRUCTURAL_PRIORITY,
    MaecObjectType,
    ResolverPolicy,
    resolve_maec_object,
)

__all__ = [
    "KIND_REGISTRY",
    "STRUCTURAL_PRIORITY",
    "Behavior",
    "BehaviorBuilder",
    "Capability",
    "CapabilityBuilder",
    "Collection",
    "CollectionBuilder",
    "MaecObjectType",
    "MalwareAction",
    "MalwareActionBuilder",
    "MalwareFamily",
    "MalwareFamilyBuilder",
    "MalwareInstance",
    "MalwareInstanceBuilder",
    "Package",
    "PackageBuilder",
    "PackageView",
    "Relationship",
    "RelationshipBuilder",
    "ResolverPolicy",
    "resolve_maec_object",
]
