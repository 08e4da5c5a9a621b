"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass

from maec_v5.domain import ResolverPolicy


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    if raw.strip().lower() in {"none", "compact"}:
        return None
    return int(raw)


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    resolver_policy: ResolverPolicy = ResolverPolicy.KIND_FIRST
    json_indent: int | None = 2
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("MAEC_ENV", cls.environment),
            resolver_policy=ResolverPolicy(
                os.getenv("MAEC_RESOLVER_POLICY", cls.resolver_policy.value).strip().lower()
            ),
            json_indent=_env_int("MAEC_JSON_INDENT", cls.json_indent),
            log_level=os.getenv("MAEC_LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["AppSettings"]
