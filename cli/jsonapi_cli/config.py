from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from jsonapi_client import DEFAULT_PORT

APP_NAME = "jsonapi"
CONFIG_FILENAME = "config.toml"
ENV_PASSWORD = "JSONAPI_PASSWORD"

SETTING_KEYS = ("host", "port", "username", "password", "salt", "timeout_s")


@dataclass
class AppConfig:
    host: str = "localhost"
    port: int = DEFAULT_PORT
    username: str = ""
    password: str = ""
    salt: str = ""
    timeout_s: float = 15.0


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def coerce_setting(key: str, value: Any) -> Any:
    """Convert a raw settings value to the type AppConfig stores for ``key``."""
    if key == "port":
        return int(value)
    if key == "timeout_s":
        return float(value)
    return str(value).strip()


def _merge(cfg: AppConfig, raw: dict[str, Any]) -> AppConfig:
    values = asdict(cfg)
    for key in SETTING_KEYS:
        if key not in raw or raw[key] is None:
            continue
        try:
            values[key] = coerce_setting(key, raw[key])
        except (TypeError, ValueError):
            continue
    return AppConfig(**values)


def to_toml(cfg: AppConfig, profiles: dict[str, Any] | None = None) -> dict[str, Any]:
    data: dict[str, Any] = asdict(cfg)
    if profiles:
        data["profiles"] = profiles
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    return _merge(default_config(), data)


def _read_raw() -> dict[str, Any]:
    try:
        with open(config_path(), "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}


def load_config() -> AppConfig:
    return from_toml(_read_raw())


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    profiles_raw = _read_raw().get("profiles") or {}
    if not isinstance(profiles_raw, dict):
        return cfg
    prof = profiles_raw.get(profile)
    if not isinstance(prof, dict):
        return cfg
    return _merge(cfg, prof)


def resolve_password(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_PASSWORD, "")
    if env_value:
        return env_value
    return cfg.password


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    profiles = _read_raw().get("profiles")
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg, profiles if isinstance(profiles, dict) else None)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
