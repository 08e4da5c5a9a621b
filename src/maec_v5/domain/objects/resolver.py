"""Resolution of untagged ``maec_objects`` entries to concrete record kinds.

Package documents carry their objects as a plain list with no framing, so each
entry must be matched to one of the record kinds on decode. Two policies exist:

``structural``
    Try each kind in ``STRUCTURAL_PRIORITY`` order and keep the first whose
    model accepts the shape. The ``type`` field plays no part in the choice,
    so shapes that several kinds accept (custom fields land in the extension
    map) resolve to the earliest kind in the order. The chosen record is then
    validated like any other, so a mismatched ``type`` or a malformed ``id`` is
    rejected rather than carried into the package.

``kind-first``
    Dispatch on the ``type`` field when it names a known kind, and fall back to
    the structural order only when it is missing or unrecognized.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import ValidationError

from maec_v5.exceptions import DeserializationError

from .behavior import Behavior
from .collection import Collection
from .malware_action import MalwareAction
from .malware_family import MalwareFamily
from .malware_instance import MalwareInstance

logger = logging.getLogger(__name__)

RESOLVER_POLICY_CONTEXT_KEY = "resolver_policy"

MaecObjectType = Behavior | Collection | MalwareAction | MalwareFamily | MalwareInstance

STRUCTURAL_PRIORITY: tuple[type[MaecObjectType], ...] = (
    Behavior,
    Collection,
    MalwareAction,
    MalwareFamily,
    MalwareInstance,
)

KIND_REGISTRY: dict[str, type[MaecObjectType]] = {
    model.object_type: model for model in STRUCTURAL_PRIORITY
}


class ResolverPolicy(StrEnum):
    """How untagged package objects are matched to record kinds."""

    KIND_FIRST = "kind-first"
    STRUCTURAL = "structural"


def policy_from_context(context: Any) -> ResolverPolicy:
    """Read the policy from a pydantic validation context, defaulting to kind-first."""

    if isinstance(context, Mapping):
        raw = context.get(RESOLVER_POLICY_CONTEXT_KEY)
        if raw is not None:
            return ResolverPolicy(raw)
    return ResolverPolicy.KIND_FIRST


def resolve_maec_object(
    value: Any,
    policy: ResolverPolicy = ResolverPolicy.KIND_FIRST,
) -> MaecObjectType:
    """Return ``value`` as a concrete record, decoding mappings per ``policy``."""

    if isinstance(value, STRUCTURAL_PRIORITY):
        return value
    if not isinstance(value, Mapping):
        msg = f"maec_objects entries must be objects, got {type(value).__name__}"
        raise DeserializationError(msg)

    if policy is ResolverPolicy.KIND_FIRST:
        declared = value.get("type")
        model = KIND_REGISTRY.get(declared) if isinstance(declared, str) else None
        if model is not None:
            return _decode_declared(model, value)
        logger.debug("Unrecognized object type %r; resolving structurally", declared)
    return _decode_structural(value)


def _decode_declared(model: type[MaecObjectType], value: Mapping[str, Any]) -> MaecObjectType:
    try:
        record = model.model_validate(value)
    except ValidationError as exc:
        msg = f"invalid {model.object_type} object {value.get('id')!r}: {exc}"
        raise DeserializationError(msg) from exc
    record.validate()
    return record


def _decode_structural(value: Mapping[str, Any]) -> MaecObjectType:
    failures: list[str] = []
    for model in STRUCTURAL_PRIORITY:
        try:
            record = model.model_validate(value)
        except ValidationError as exc:
            failures.append(f"{model.object_type} ({exc.error_count()} errors)")
            continue
        logger.debug("Resolved %r structurally as %s", value.get("id"), model.object_type)
        record.validate()
        return record
    msg = f"no MAEC object kind matched {value.get('id')!r}: " + ", ".join(failures)
    raise DeserializationError(msg)


__all__ = [
    "KIND_REGISTRY",
    "RESOLVER_POLICY_CONTEXT_KEY",
    "STRUCTURAL_PRIORITY",
    "MaecObjectType",
    "ResolverPolicy",
    "policy_from_context",
    "resolve_maec_object",
]
