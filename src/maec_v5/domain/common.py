"""Common MAEC properties shared by every top-level record."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, ClassVar, Self

from pydantic import ConfigDict, Field, field_validator, model_validator

from maec_v5.exceptions import MaecValidationError
from maec_v5.utils.time import Clock, ensure_utc, utc_now

from .base import DomainModel
from .identifiers import generate_maec_id, require_maec_id

SCHEMA_VERSION = "5.0"

IdFactory = Callable[[str], str]


class ExternalReference(DomainModel):
    """Link from a MAEC record to an outside resource (ATT&CK, CVE, reports)."""

    source_name: str
    description: str | None = None
    url: str | None = None
    external_id: str | None = None

    @classmethod
    def attack_technique(cls, technique_id: str, name: str) -> ExternalReference:
        """Build a MITRE ATT&CK technique reference such as ``T1055``."""

        return cls(
            source_name="mitre-attack",
            description=name,
            url=f"https://attack.mitre.org/techniques/{technique_id}",
            external_id=technique_id,
        )


class CommonProperties(DomainModel):
    """Identity and versioning header embedded in every top-level record.

    Custom properties are carried as pydantic extra fields, so they share the
    record's namespace on the wire and are exposed through ``custom_properties``.
    Records are frozen; ``new_version`` is the only way to move ``modified``.
    """

    model_config = ConfigDict(frozen=True, extra="allow", validate_assignment=True)

    object_type: ClassVar[str | None] = None

    type: str
    id: str
    schema_version: str | None = SCHEMA_VERSION
    created: datetime = Field(default_factory=utc_now)
    modified: datetime = Field(default_factory=utc_now)
    created_by_ref: str | None = None

    @model_validator(mode="before")
    @classmethod
    def default_created(cls, data: Any) -> Any:
        # A document that only carries ``modified`` was created no later than that.
        if (
            isinstance(data, Mapping)
            and "created" not in data
            and data.get("modified") is not None
        ):
            return {**data, "created": data["modified"]}
        return data

    @field_validator("created", "modified")
    @classmethod
    def normalize_timestamp(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def check_timestamps(self) -> Self:
        if self.modified < self.created:
            msg = "modified must not be earlier than created"
            raise ValueError(msg)
        return self

    @classmethod
    def new(
        cls,
        object_type: str,
        created_by_ref: str | None = None,
        *,
        clock: Clock = utc_now,
        id_factory: IdFactory = generate_maec_id,
    ) -> CommonProperties:
        """Stamp a fresh header: new id, schema 5.0, ``created == modified``."""

        now = ensure_utc(clock())
        return CommonProperties(
            type=object_type,
            id=id_factory(object_type),
            schema_version=SCHEMA_VERSION,
            created=now,
            modified=now,
            created_by_ref=created_by_ref,
        )

    @property
    def custom_properties(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    @property
    def header(self) -> CommonProperties:
        """Return the header fields of this record as a standalone value."""

        fields = {name: getattr(self, name) for name in CommonProperties.model_fields}
        return CommonProperties(**fields, **self.custom_properties)

    def new_version(self, *, clock: Clock = utc_now) -> Self:
        """Return this record with ``modified`` moved to ``clock()``.

        ``id``, ``type`` and ``created`` carry over unchanged and ``modified``
        never moves backwards.
        """

        modified = max(ensure_utc(clock()), self.modified)
        return self.model_copy(update={"modified": modified})

    def validate_header(self) -> None:
        expected = self.object_type
        if expected is not None and self.type != expected:
            msg = f"type must be '{expected}', got '{self.type}'"
            raise MaecValidationError(msg)
        require_maec_id(self.id)
        if self.created_by_ref is not None:
            require_maec_id(self.created_by_ref)

    def validate(self) -> None:  # type: ignore[override]
        """Check the record's invariants, raising a ``MaecError`` on failure."""

        self.validate_header()


__all__ = ["SCHEMA_VERSION", "CommonProperties", "ExternalReference"]
