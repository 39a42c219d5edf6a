from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from dog_license.infra.exceptions import ConfigError

# dog_license/config.py -> dog_license -> root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "app.yaml"
ENV_FILE = CONFIG_DIR / ".env.local"
DATA_DIR = PROJECT_ROOT / "data"

DEFAULT_STORAGE_KEY = "dogLicenseApplications"
DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024

PAGE_TITLE_PREFIX = "PA Dog License - "


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    storage_key: str = DEFAULT_STORAGE_KEY
    storage_quota_bytes: int = DEFAULT_QUOTA_BYTES
    lookup_delay: float = 0.5
    redirect_delay: float = 2.0
    log_level: str = "INFO"
    log_to_file: bool = True

    @property
    def storage_file(self) -> Path:
        return self.data_dir / "local_storage.json"

    @property
    def logs_dir(self) -> Path:
        return self.data_dir / "logs"

    @property
    def log_file(self) -> Path:
        return self.logs_dir / "portal.log"


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", config_key=str(path)) from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping", config_key=str(path))
    return data


def _env(name: str) -> Optional[str]:
    v = os.getenv(name)
    if v is None or not v.strip():
        return None
    return v.strip()


def _as_float(value: Any, key: str) -> float:
    try:
        f = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be a number, got {value!r}", config_key=key) from e
    if f < 0:
        raise ConfigError(f"{key} must not be negative", config_key=key)
    return f


def _as_int(value: Any, key: str) -> int:
    try:
        i = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be an integer, got {value!r}", config_key=key) from e
    if i <= 0:
        raise ConfigError(f"{key} must be positive", config_key=key)
    return i


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Build settings from ``config/app.yaml`` overlaid with the environment.

    Re-read on every call: pages call this once per rerun and tests switch
    the data directory through ``DOG_LICENSE_DATA_DIR``.
    """
    load_dotenv(ENV_FILE)
    cfg = _read_yaml(config_file or CONFIG_FILE)

    storage = cfg.get("storage", {}) or {}
    ui = cfg.get("ui", {}) or {}
    log_cfg = cfg.get("logging", {}) or {}

    data_dir = Path(_env("DOG_LICENSE_DATA_DIR") or DATA_DIR)
    storage_key = _env("DOG_LICENSE_STORAGE_KEY") or storage.get("key") or DEFAULT_STORAGE_KEY

    return Settings(
        data_dir=data_dir,
        storage_key=str(storage_key),
        storage_quota_bytes=_as_int(
            _env("DOG_LICENSE_STORAGE_QUOTA") or storage.get("quota_bytes", DEFAULT_QUOTA_BYTES),
            "storage.quota_bytes",
        ),
        lookup_delay=_as_float(_env("DOG_LICENSE_LOOKUP_DELAY") or ui.get("lookup_delay", 0.5), "ui.lookup_delay"),
        redirect_delay=_as_float(
            _env("DOG_LICENSE_REDIRECT_DELAY") or ui.get("redirect_delay", 2.0), "ui.redirect_delay"
        ),
        log_level=str(_env("DOG_LICENSE_LOG_LEVEL") or log_cfg.get("level", "INFO")).upper(),
        log_to_file=_as_bool(_env("DOG_LICENSE_LOG_TO_FILE") or log_cfg.get("to_file", True)),
    )
