from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

import tomli_w
from platformdirs import user_config_dir

from syncano_client import ClientConfig, ConnectionCredentials
from syncano_client.config_types import DEFAULT_API_ROOT, DEFAULT_SERVER

APP_NAME = "syncano"
CONFIG_FILENAME = "config.toml"


@dataclass
class AuthConfig:
    api_key: str = ""
    email: str = ""


@dataclass
class AppConfig:
    api_root: str = DEFAULT_API_ROOT
    server_name: str = DEFAULT_SERVER
    auth: AuthConfig = field(default_factory=AuthConfig)
    skip_tls_verification: bool = False


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_api_root(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"
    return f"{scheme}{value}"


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "api_root": cfg.api_root,
        "server_name": cfg.server_name,
        "skip_tls_verification": cfg.skip_tls_verification,
        "auth": {
            "api_key": cfg.auth.api_key,
            "email": cfg.auth.email,
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    api_root = normalize_api_root(str(data.get("api_root") or ""))
    if api_root:
        cfg.api_root = api_root
    server_name = str(data.get("server_name") or "").strip()
    if server_name:
        cfg.server_name = server_name
    skip = data.get("skip_tls_verification")
    if isinstance(skip, bool):
        cfg.skip_tls_verification = skip
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth = AuthConfig(
            api_key=str(auth_raw.get("api_key") or ""),
            email=str(auth_raw.get("email") or ""),
        )
    return cfg


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
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def client_config(cfg: AppConfig, environ: Mapping[str, str] | None = None) -> ClientConfig:
    """Stored settings, overridden by SYNCANO_API_ROOT / SYNCANO_SERVER_NAME."""
    from_env = ClientConfig.from_env(environ)
    defaults = ClientConfig()
    return replace(
        from_env,
        api_root=from_env.api_root if from_env.api_root != defaults.api_root else cfg.api_root,
        server_name=from_env.server_name if from_env.server_name != defaults.server_name else cfg.server_name,
    )


def resolve_credentials(cfg: AppConfig, environ: Mapping[str, str] | None = None) -> ConnectionCredentials:
    creds = ConnectionCredentials.from_env(environ)
    if not creds.api_key and cfg.auth.api_key:
        creds = replace(creds, api_key=cfg.auth.api_key)
    if cfg.skip_tls_verification and not creds.skip_tls_verification:
        creds = replace(creds, skip_tls_verification=True)
    return creds
