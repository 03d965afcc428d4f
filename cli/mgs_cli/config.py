from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

APP_NAME = "mgs"
CONFIG_FILENAME = "config.toml"
DEFAULT_TIMEOUT_S = 15.0

ENV_REGION = "MGS_REGION"
ENV_AWS_REGION = "AWS_REGION"
ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_SESSION_TOKEN = "AWS_SESSION_TOKEN"


@dataclass
class ProfileConfig:
    region: str | None = None
    endpoint: str | None = None
    timeout_s: float | None = None


@dataclass
class AppConfig:
    region: str = ""
    endpoint: str | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S
    profiles: dict[str, ProfileConfig] = field(default_factory=dict)


@dataclass(frozen=True)
class Credentials:
    access_key: str
    secret_key: str
    token: str | None = None


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def _as_timeout(value: Any) -> float | None:
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return None
    return timeout if timeout > 0 else None


def _as_str(value: Any) -> str | None:
    text = str(value).strip() if value is not None else ""
    return text or None


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "region": cfg.region or None,
            "endpoint": cfg.endpoint,
            "timeout_s": cfg.timeout_s,
            "profiles": {
                name: {
                    "region": p.region,
                    "endpoint": p.endpoint,
                    "timeout_s": p.timeout_s,
                }
                for name, p in cfg.profiles.items()
            },
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_prune_none(item) for item in value if item is not None]
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    profiles_raw = data.get("profiles") or {}
    profiles: dict[str, ProfileConfig] = {}
    if isinstance(profiles_raw, dict):
        for name, v in profiles_raw.items():
            if not isinstance(v, dict):
                continue
            profiles[str(name)] = ProfileConfig(
                region=_as_str(v.get("region")),
                endpoint=_as_str(v.get("endpoint")),
                timeout_s=_as_timeout(v.get("timeout_s")),
            )
    return AppConfig(
        region=_as_str(data.get("region")) or "",
        endpoint=_as_str(data.get("endpoint")),
        timeout_s=_as_timeout(data.get("timeout_s")) or DEFAULT_TIMEOUT_S,
        profiles=profiles,
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    prof = cfg.profiles.get(profile)
    if prof is None:
        return cfg
    return AppConfig(
        region=prof.region or cfg.region,
        endpoint=prof.endpoint or cfg.endpoint,
        timeout_s=prof.timeout_s or cfg.timeout_s,
        profiles=cfg.profiles,
    )


def resolve_region(cfg: AppConfig, override: str | None = None) -> str:
    """Pick the region: explicit flag, then MGS_REGION/AWS_REGION, then config."""
    for value in (override, os.getenv(ENV_REGION), os.getenv(ENV_AWS_REGION), cfg.region):
        text = (value or "").strip()
        if text:
            return text
    return ""


def load_credentials() -> Credentials | None:
    access_key = os.getenv(ENV_ACCESS_KEY_ID, "").strip()
    secret_key = os.getenv(ENV_SECRET_ACCESS_KEY, "").strip()
    if not access_key or not secret_key:
        return None
    token = os.getenv(ENV_SESSION_TOKEN, "").strip()
    return Credentials(access_key=access_key, secret_key=secret_key, token=token or None)
