from __future__ import annotations

from jsonapi_client import JSONAPIClient

from .config import AppConfig, apply_profile, resolve_password


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    host_override: str | None = None,
    port_override: int | None = None,
) -> JSONAPIClient:
    effective_cfg = apply_profile(cfg, profile)
    return JSONAPIClient(
        host_override or effective_cfg.host,
        port_override or effective_cfg.port,
        effective_cfg.username,
        resolve_password(effective_cfg),
        effective_cfg.salt,
        timeout_s=effective_cfg.timeout_s,
    )
