"""MAEC domain layer public exports."""

from .base import DomainModel
from .common import SCHEMA_VERSION, CommonProperties, ExternalReference
from .identifiers import (
    extract_type_from_id,
    generate_maec_id,
    is_valid_maec_id,
    is_valid_ref_for_type,
    require_maec_id,
    require_ref_for_type,
)
from .objects import (
    KIND_REGISTRY,
    STRUCTURAL_PRIORITY,
    Behavior,
    BehaviorBuilder,
    Capability,
    CapabilityBuilder,
    Collection,
    CollectionBuilder,
    MaecObjectType,
    MalwareAction,
    MalwareActionBuilder,
    MalwareFamily,
    MalwareFamilyBuilder,
    MalwareInstance,
    MalwareInstanceBuilder,
    Package,
    PackageBuilder,
    PackageView,
    Relationship,
    RelationshipBuilder,
    ResolverPolicy,
    resolve_maec_object,
)
from .types import AnalysisMetadata, FieldData, FieldDataBuilder, Name
from .vocab import (
    AnalysisConclusionType,
    AnalysisEnvironment,
    AnalysisType,
    BehaviorName,
    CapabilityName,
    ConfidenceMeasure,
    DeliveryVector,
    EntityAssociation,
    MalwareActionName,
    MalwareLabel,
    ObfuscationMethod,
    ProcessorArchitecture,
)

__all__ = [
    "KIND_REGISTRY",
    "SCHEMA_VERSION",
    "STRUCTURAL_PRIORITY",
    "AnalysisConclusionType",
    "AnalysisEnvironment",
    "AnalysisMetadata",
    "AnalysisType",
    "Behavior",
    "BehaviorBuilder",
    "BehaviorName",
    "Capability",
    "CapabilityBuilder",
    "CapabilityName",
    "Collection",
    "CollectionBuilder",
    "CommonProperties",
    "ConfidenceMeasure",
    "DeliveryVector",
    "DomainModel",
    "EntityAssociation",
    "ExternalReference",
    "FieldData",
    "FieldDataBuilder",
    "MaecObjectType",
    "MalwareAction",
    "MalwareActionBuilder",
    "MalwareActionName",
    "MalwareFamily",
    "MalwareFamilyBuilder",
    "MalwareInstance",
    "MalwareInstanceBuilder",
    "MalwareLabel",
    "Name",
    "ObfuscationMethod",
    "Package",
    "PackageBuilder",
    "PackageView",
    "ProcessorArchitecture",
    "Relationship",
    "RelationshipBuilder",
    "ResolverPolicy",
    "extract_type_from_id",
    "generate_maec_id",
    "is_valid_maec_id",
    "is_valid_ref_for_type",
    "require_maec_id",
    "require_ref_for_type",
    "resolve_maec_object",
]
