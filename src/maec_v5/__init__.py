"""MAEC 5.0 (Malware Attribute Enumeration and Characterization) for Python.

Build records with their immutable builders, collect them in a ``Package``, and
exchange packages as JSON::

    family = MalwareFamily.builder().name("WannaCry").add_label("ransomware").build()
    package = Package.builder().add_malware_family(family).build()
    document = to_json(package, indent=2)
"""

from .domain import (
    SCHEMA_VERSION,
    Behavior,
    BehaviorName,
    Capability,
    Collection,
    CommonProperties,
    ExternalReference,
    FieldData,
    MaecObjectType,
    MalwareAction,
    MalwareActionName,
    MalwareFamily,
    MalwareInstance,
    Name,
    Package,
    Relationship,
    ResolverPolicy,
    extract_type_from_id,
    generate_maec_id,
    is_valid_maec_id,
    is_valid_ref_for_type,
)
from .exceptions import (
    DeserializationError,
    InvalidIdError,
    InvalidReferenceError,
    MaecError,
    MaecIOError,
    MaecValidationError,
    MissingFieldError,
    SerializationError,
)
from .serialization import (
    MEDIA_TYPE_MAEC,
    MEDIA_TYPE_MAEC_GENERIC,
    PackageCodec,
    from_dict,
    from_json,
    read_package,
    to_dict,
    to_json,
    write_package,
)

__all__ = [
    "MEDIA_TYPE_MAEC",
    "MEDIA_TYPE_MAEC_GENERIC",
    "SCHEMA_VERSION",
    "Behavior",
    "BehaviorName",
    "Capability",
    "Collection",
    "CommonProperties",
    "DeserializationError",
    "ExternalReference",
    "FieldData",
    "InvalidIdError",
    "InvalidReferenceError",
    "MaecError",
    "MaecIOError",
    "MaecObjectType",
    "MaecValidationError",
    "MalwareAction",
    "MalwareActionName",
    "MalwareFamily",
    "MalwareInstance",
    "MissingFieldError",
    "Name",
    "Package",
    "PackageCodec",
    "Relationship",
    "ResolverPolicy",
    "SerializationError",
    "extract_type_from_id",
    "from_dict",
    "from_json",
    "generate_maec_id",
    "is_valid_maec_id",
    "is_valid_ref_for_type",
    "read_package",
    "to_dict",
    "to_json",
    "write_package",
]
