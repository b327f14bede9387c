"""Configuration loading for the Oriento service.

Settings come from an optional ``config.yaml`` at the project root (or the
path in ``ORIENTO_CONFIG``), with environment variables taking precedence
for secrets and the knobs most often changed per deployment.

Example ``config.yaml``::

    openai:
      model: gpt-4o-mini
      temperature: 0.3
    auth:
      algorithms: [HS256]
    server:
      port: 8080
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

# Project root is two levels up from oriento/utils/
_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config.yaml"


def _config_path() -> Path:
    override = os.getenv("ORIENTO_CONFIG")
    return Path(override) if override else _DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read the YAML config file, returning an empty dict when it is absent."""
    path = path or _config_path()
    if path.exists():
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}
    return {}


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    return config.get(name) or {}


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def openai_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    cfg = _section(load_config() if config is None else config, "openai")
    return {
        "model": os.getenv("OPENAI_MODEL") or cfg.get("model", "gpt-4o-mini"),
        "temperature": float(cfg.get("temperature", 0.3)),
        "base_url": os.getenv("OPENAI_BASE_URL") or cfg.get("base_url"),
        "timeout": float(cfg.get("timeout", 60.0)),
        "max_retries": int(cfg.get("max_retries", 2)),
    }


def auth_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    cfg = _section(load_config() if config is None else config, "auth")
    algorithms = cfg.get("algorithms", ["HS256"])
    if isinstance(algorithms, str):
        algorithms = _split(algorithms)
    return {
        "secret": os.getenv("ORIENTO_JWT_SECRET") or cfg.get("secret"),
        "algorithms": list(algorithms),
        "issuer": os.getenv("ORIENTO_JWT_ISSUER") or cfg.get("issuer"),
        "audience": os.getenv("ORIENTO_JWT_AUDIENCE") or cfg.get("audience"),
        "leeway": int(cfg.get("leeway", 0)),
    }


def server_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    cfg = _section(load_config() if config is None else config, "server")
    origins_env = os.getenv("ORIENTO_CORS_ORIGINS")
    origins = _split(origins_env) if origins_env else cfg.get("cors_origins", ["*"])
    return {
        "host": cfg.get("host", "0.0.0.0"),
        "port": int(os.getenv("PORT") or cfg.get("port", 8080)),
        "cors_origins": list(origins),
    }


def log_level(config: Optional[Dict[str, Any]] = None) -> str:
    cfg = _section(load_config() if config is None else config, "logging")
    return (os.getenv("LOG_LEVEL") or cfg.get("level", "INFO")).upper()
