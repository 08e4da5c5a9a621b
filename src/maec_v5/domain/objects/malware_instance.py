"""MAEC Malware Instance object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar

from pydantic import field_validator

from maec_v5.domain.builder import RecordBuilder
from maec_v5.domain.common import CommonProperties
from maec_v5.domain.types import AnalysisMetadata, FieldData, Name
from maec_v5.domain.vocab import ProcessorArchitecture
from maec_v5.exceptions import MissingFieldError

from .capability import Capability


class MalwareInstance(CommonProperties):
    """A single malware instance (or sample) and what is known about it.

    ``instance_object_refs`` point at the observable objects, typically files,
    that make up the instance.
    """

    object_type: ClassVar[str] = "malware-instance"

    instance_object_refs: tuple[str, ...]
    name: Name | None = None
    aliases: tuple[Name, ...] = ()
    labels: tuple[str, ...] = ()
    description: str | None = None
    field_data: FieldData | None = None
    os_execution_envs: tuple[str, ...] = ()
    architecture_execution_envs: tuple[ProcessorArchitecture, ...] = ()
    capabilities: tuple[Capability, ...] = ()
    os_features: tuple[str, ...] = ()
    analysis_metadata: tuple[AnalysisMetadata, ...] = ()
    triggered_signatures: tuple[dict[str, Any], ...] = ()

    @field_validator("instance_object_refs")
    @classmethod
    def ensure_objects(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            msg = "A malware instance must reference at least one object"
            raise ValueError(msg)
        return value

    @classmethod
    def builder(cls) -> MalwareInstanceBuilder:
        return MalwareInstanceBuilder()

    def check_reference_kinds(self) -> None:
        for capability in self.capabilities:
            capability.check_reference_kinds()


@dataclass(frozen=True, slots=True)
class MalwareInstanceBuilder(RecordBuilder[MalwareInstance]):
    _instance_object_refs: tuple[str, ...] = ()
    _name: Name | None = None
    _aliases: tuple[Name, ...] = ()
    _labels: tuple[str, ...] = ()
    _description: str | None = None
    _field_data: FieldData | None = None
    _os_execution_envs: tuple[str, ...] = ()
    _architecture_execution_envs: tuple[ProcessorArchitecture | str, ...] = ()
    _capabilities: tuple[Capability, ...] = ()
    _os_features: tuple[str, ...] = ()
    _analysis_metadata: tuple[AnalysisMetadata, ...] = ()
    _triggered_signatures: tuple[dict[str, Any], ...] = ()

    def add_instance_object_ref(self, ref: str) -> MalwareInstanceBuilder:
        return replace(self, _instance_object_refs=(*self._instance_object_refs, ref))

    def name(self, name: Name | str) -> MalwareInstanceBuilder:
        return replace(self, _name=Name.coerce(name))

    def add_alias(self, alias: Name | str) -> MalwareInstanceBuilder:
        return replace(self, _aliases=(*self._aliases, Name.coerce(alias)))

    def add_label(self, label: str) -> MalwareInstanceBuilder:
        return replace(self, _labels=(*self._labels, label))

    def description(self, description: str) -> MalwareInstanceBuilder:
        return replace(self, _description=description)

    def field_data(self, field_data: FieldData) -> MalwareInstanceBuilder:
        return replace(self, _field_data=field_data)

    def add_os_execution_env(self, ref: str) -> MalwareInstanceBuilder:
        return replace(self, _os_execution_envs=(*self._os_execution_envs, ref))

    def add_architecture_execution_env(
        self, architecture: ProcessorArchitecture | str
    ) -> MalwareInstanceBuilder:
        return replace(
            self,
            _architecture_execution_envs=(*self._architecture_execution_envs, architecture),
        )

    def add_capability(self, capability: Capability) -> MalwareInstanceBuilder:
        return replace(self, _capabilities=(*self._capabilities, capability))

    def add_os_feature(self, feature: str) -> MalwareInstanceBuilder:
        return replace(self, _os_features=(*self._os_features, feature))

    def add_analysis_metadata(self, metadata: AnalysisMetadata) -> MalwareInstanceBuilder:
        return replace(self, _analysis_metadata=(*self._analysis_metadata, metadata))

    def add_triggered_signature(self, **signature: Any) -> MalwareInstanceBuilder:
        return replace(self, _triggered_signatures=(*self._triggered_signatures, signature))

    def build(self) -> MalwareInstance:
        if not self._instance_object_refs:
            raise MissingFieldError("instance_object_refs")
        return self._assemble(
            MalwareInstance,
            {
                "instance_object_refs": self._instance_object_refs,
                "name": self._name,
                "aliases": self._aliases,
                "labels": self._labels,
                "description": self._description,
                "field_data": self._field_data,
                "os_execution_envs": self._os_execution_envs,
                "architecture_execution_envs": self._architecture_execution_envs,
                "capabilities": self._capabilities,
                "os_features": self._os_features,
                "analysis_metadata": self._analysis_metadata,
                "triggered_signatures": self._triggered_signatures,
            },
        )


__all__ = ["MalwareInstance", "MalwareInstanceBuilder"]
