"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from maec_v5.config import AppSettings
from maec_v5.serialization import PackageCodec

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates configured services with shared settings."""

    settings: AppSettings
    codec: PackageCodec


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    codec = PackageCodec(
        policy=resolved_settings.resolver_policy,
        indent=resolved_settings.json_indent,
    )
    logger.debug(
        "Built container for %s (resolver policy %s)",
        resolved_settings.environment,
        resolved_settings.resolver_policy,
    )
    return ServiceContainer(settings=resolved_settings, codec=codec)


__all__ = ["ServiceContainer", "build_container"]
