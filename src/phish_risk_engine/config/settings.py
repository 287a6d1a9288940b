"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from phish_risk_engine.core.errors import ConfigError
from phish_risk_engine.core.logging import DEFAULT_FORMAT

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
ENV_PREFIX = "PHISH_RISK_ENGINE_"


class AppConfig(BaseModel):

    log_level: str = Field(default="INFO")
    log_format: str = Field(default=DEFAULT_FORMAT)
    max_input_chars: int = Field(default=100_000, gt=0)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000, gt=0, lt=65536)
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {p}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"config file {p} must contain a mapping")
    return payload


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(ENV_PREFIX + name)
    return value if value not in (None, "") else fallback


def _parse_list(raw: Any) -> list[str]:
    if isinstance(raw, str):
        return list(dict.fromkeys(item.strip() for item in raw.split(",") if item.strip()))
    if isinstance(raw, list):
        return list(dict.fromkeys(str(item).strip() for item in raw if str(item).strip()))
    return []


def _parse_int(raw: Any, fallback: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return fallback
    return value if value > 0 else fallback


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv(ENV_PREFIX + "CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> tuple[AppConfig, dict[str, Any]]:
    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)

    origins = _parse_list(_pick_env("CORS_ALLOW_ORIGINS", merged.get("cors_allow_origins", ["*"])))
    payload = {
        "log_level": _parse_str(_pick_env("LOG_LEVEL", merged.get("log_level")), "INFO").upper(),
        "log_format": _parse_str(_pick_env("LOG_FORMAT", merged.get("log_format")), DEFAULT_FORMAT),
        "max_input_chars": _parse_int(
            _pick_env("MAX_INPUT_CHARS", merged.get("max_input_chars", 100_000)),
            100_000,
        ),
        "cors_allow_origins": origins or ["*"],
        "host": _parse_str(_pick_env("HOST", merged.get("host")), "127.0.0.1"),
        "port": _parse_int(_pick_env("PORT", merged.get("port", 5000)), 5000),
        "default_config_path": str(default_path),
    }

    try:
        cfg = AppConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration in {default_path}: {exc}") from exc
    return cfg, merged
