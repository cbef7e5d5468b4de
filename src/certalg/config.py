"""Settings for algorithm resolution.

Loads optional config/certalg.yml (or the file named by CERTALG_CONFIG) first,
then environment overrides. Settings are built once and shared; call
``reload_settings`` after changing the environment.
"""
from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()

_DEF_PATH = os.path.join("config", "certalg.yml")

_ENV_MAP = {
    "gost3410_enabled": "CERTALG_GOST3410_ENABLED",
    "dstu4145_enabled": "CERTALG_DSTU4145_ENABLED",
    "accept_legacy_digests": "CERTALG_ACCEPT_LEGACY_DIGESTS",
    "log_level": "CERTALG_LOG_LEVEL",
}


class AlgorithmSettings(BaseModel):
    gost3410_enabled: bool = True
    dstu4145_enabled: bool = True
    # MD5 / SHA1 based signature algorithms stay usable unless switched off
    accept_legacy_digests: bool = True
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def known_log_level(cls, v: Any) -> str:
        # unknown level names fall back to INFO
        name = str(v).strip().upper() if v is not None else ""
        if not isinstance(logging.getLevelName(name), int):
            return "INFO"
        return name


_SETTINGS: AlgorithmSettings | None = None
_LOCK = threading.Lock()


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _read_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return data


def load_settings(path: str | None = None) -> AlgorithmSettings:
    """Build settings from file and environment without caching them."""
    data = _read_file(path or os.getenv("CERTALG_CONFIG", _DEF_PATH))
    for field, env in _ENV_MAP.items():
        if env in os.environ:
            raw = os.environ[env]
            data[field] = raw if field == "log_level" else _env_bool(raw)
    return AlgorithmSettings(**data)


def get_settings() -> AlgorithmSettings:
    global _SETTINGS
    if _SETTINGS is None:
        with _LOCK:
            if _SETTINGS is None:
                _SETTINGS = load_settings()
    return _SETTINGS


def reload_settings(path: str | None = None) -> AlgorithmSettings:
    global _SETTINGS
    with _LOCK:
        _SETTINGS = load_settings(path)
    # the certalg logger is configured once; keep its level in step
    logging.getLogger("certalg").setLevel(_SETTINGS.log_level)
    return _SETTINGS
