"""TOML config loading and profiles."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

# Default config search path (project root or cwd)
_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent.parent / "config"

DEFAULT_BETTING_ENDPOINT = "https://api.betfair.com/exchange/betting/json-rpc/v1"
DEFAULT_ACCOUNT_ENDPOINT = "https://api.betfair.com/exchange/account/json-rpc/v1"
DEFAULT_IDENTITY_ENDPOINT = "https://identitysso.betfair.com/api"


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Override values take precedence."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _find_config_dir(config_dir: Path | None = None) -> Path:
    if config_dir is not None:
        return Path(config_dir)
    cwd_config = Path.cwd() / "config"
    if cwd_config.exists():
        return cwd_config
    return _CONFIG_DIR


def load_config(profile: str | None = None, config_dir: Path | None = None) -> dict[str, Any]:
    """Load merged config from default.toml and optional profile overlay."""
    config_dir = _find_config_dir(config_dir)
    default_path = config_dir / "default.toml"
    if not default_path.exists():
        return {}
    base = _load_toml(default_path)
    if profile:
        profile_path = config_dir / f"{profile}.toml"
        if profile_path.exists():
            overlay = _load_toml(profile_path)
            base = _deep_merge(base, overlay)
    return base


def get_settings(profile: str | None = None, config_dir: Path | None = None) -> Settings:
    """Return Settings instance from merged config."""
    raw = load_config(profile, config_dir)
    return Settings.from_dict(raw)


class Settings:
    """Application settings from TOML config."""

    def __init__(
        self,
        *,
        betfair: dict[str, Any] | None = None,
        endpoints: dict[str, Any] | None = None,
        logging: dict[str, Any] | None = None,
    ):
        self.betfair = betfair or {}
        self.endpoints = endpoints or {}
        self.logging = logging or {}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Settings:
        return cls(
            betfair=raw.get("betfair"),
            endpoints=raw.get("endpoints"),
            logging=raw.get("logging"),
        )

    # Convenience accessors with defaults
    @property
    def app_key(self) -> str:
        return self.betfair.get("app_key", "")

    @property
    def session_token(self) -> str | None:
        return self.betfair.get("session_token") or None

    @property
    def locale(self) -> str | None:
        return self.betfair.get("locale", "en") or None

    @property
    def timeout_sec(self) -> float:
        return float(self.betfair.get("timeout_sec", 30.0))

    @property
    def betting_endpoint(self) -> str:
        return self.endpoints.get("betting", DEFAULT_BETTING_ENDPOINT)

    @property
    def account_endpoint(self) -> str:
        return self.endpoints.get("account", DEFAULT_ACCOUNT_ENDPOINT)

    @property
    def identity_endpoint(self) -> str:
        return self.endpoints.get("identity", DEFAULT_IDENTITY_ENDPOINT)

    @property
    def logging_level(self) -> str:
        return self.logging.get("level", "INFO").upper()

    @property
    def logging_format(self) -> str:
        return self.logging.get("format", "console")

    @property
    def logging_level_num(self) -> int:
        return getattr(logging, self.logging_level, logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure structlog with settings. Call once at application entry.

    Logs go to stderr so command output on stdout stays clean.
    """
    import sys

    import structlog

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.logging_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.logging_level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )
