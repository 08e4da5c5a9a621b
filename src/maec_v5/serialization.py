"""JSON encoding and decoding of MAEC packages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from maec_v5.domain import Package, ResolverPolicy
from maec_v5.domain.objects.resolver import RESOLVER_POLICY_CONTEXT_KEY
from maec_v5.exceptions import DeserializationError, MaecIOError, SerializationError

MEDIA_TYPE_MAEC = "application/maec+json;version=5.0"
MEDIA_TYPE_MAEC_GENERIC = "application/maec+json"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PackageCodec:
    """Encodes packages to JSON and decodes them back with a fixed resolver policy."""

    policy: ResolverPolicy = ResolverPolicy.KIND_FIRST
    indent: int | None = None

    def to_json(self, package: Package) -> str:
        try:
            return package.model_dump_json(indent=self.indent)
        except PydanticSerializationError as exc:
            raise SerializationError(str(exc)) from exc

    def to_dict(self, package: Package) -> dict[str, Any]:
        try:
            return package.model_dump(mode="json")
        except PydanticSerializationError as exc:
            raise SerializationError(str(exc)) from exc

    def from_json(self, payload: str | bytes) -> Package:
        try:
            package = Package.model_validate_json(payload, context=self._context())
        except ValidationError as exc:
            raise DeserializationError(f"invalid MAEC package document: {exc}") from exc
        return self._checked(package)

    def from_dict(self, payload: Any) -> Package:
        try:
            package = Package.model_validate(payload, context=self._context())
        except ValidationError as exc:
            raise DeserializationError(f"invalid MAEC package document: {exc}") from exc
        return self._checked(package)

    def write(self, path: Path, package: Package) -> None:
        payload = self.to_json(package)
        try:
            path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            raise MaecIOError(f"Unable to write {path}: {exc}") from exc
        logger.debug("Wrote package %s to %s", package.id, path)

    def read(self, path: Path) -> Package:
        try:
            payload = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise MaecIOError(f"Unable to read {path}: {exc}") from exc
        return self.from_json(payload)

    def _context(self) -> dict[str, Any]:
        return {RESOLVER_POLICY_CONTEXT_KEY: self.policy}

    def _checked(self, package: Package) -> Package:
        package.validate()
        for relationship in package.relationships:
            relationship.validate()
        logger.debug(
            "Decoded package %s with %d objects (%s policy)",
            package.id,
            len(package.maec_objects),
            self.policy,
        )
        return package


_default_codec = PackageCodec()


def to_json(package: Package, *, indent: int | None = None) -> str:
    """Encode ``package`` as a MAEC JSON document."""

    return PackageCodec(indent=indent).to_json(package)


def from_json(
    payload: str | bytes,
    *,
    policy: ResolverPolicy = ResolverPolicy.KIND_FIRST,
) -> Package:
    """Decode a MAEC JSON document into a validated ``Package``."""

    return PackageCodec(policy=policy).from_json(payload)


def to_dict(package: Package) -> dict[str, Any]:
    return _default_codec.to_dict(package)


def from_dict(
    payload: Any,
    *,
    policy: ResolverPolicy = ResolverPolicy.KIND_FIRST,
) -> Package:
    return PackageCodec(policy=policy).from_dict(payload)


def read_package(path: Path, *, policy: ResolverPolicy = ResolverPolicy.KIND_FIRST) -> Package:
    return PackageCodec(policy=policy).read(path)


def write_package(path: Path, package: Package, *, indent: int | None = 2) -> None:
    PackageCodec(indent=indent).write(path, package)


__all__ = [
    "MEDIA_TYPE_MAEC",
    "MEDIA_TYPE_MAEC_GENERIC",
    "PackageCodec",
    "from_dict",
    "from_json",
    "read_package",
    "to_dict",
    "to_json",
    "write_package",
]
