"""Config loading, profiles, and session construction from settings."""

import structlog

from betfairng.config import configure_logging, get_settings
from betfairng.session import Session
from betfairng.transport import HttpTransport

DEFAULT = """
[betfair]
app_key = "abc"
locale = "es"
timeout_sec = 12

[endpoints]
betting = "https://api.betfair.es/exchange/betting/json-rpc/v1"

[logging]
level = "debug"
"""

DEV = """
[betfair]
session_token = "dev-token"

[logging]
format = "json"
"""


def test_profile_overlay(tmp_path):
    (tmp_path / "default.toml").write_text(DEFAULT)
    (tmp_path / "dev.toml").write_text(DEV)
    s = get_settings("dev", tmp_path)
    assert s.app_key == "abc"
    assert s.session_token == "dev-token"
    assert s.locale == "es"
    assert s.timeout_sec == 12.0
    assert s.betting_endpoint.startswith("https://api.betfair.es/")
    assert s.account_endpoint == "https://api.betfair.com/exchange/account/json-rpc/v1"
    assert s.logging_level == "DEBUG"
    assert s.logging_format == "json"


def test_missing_config_uses_defaults(tmp_path):
    s = get_settings(None, tmp_path)
    assert s.app_key == ""
    assert s.session_token is None
    assert s.locale == "en"
    assert s.timeout_sec == 30.0
    assert s.logging_format == "console"


def test_session_from_settings(tmp_path):
    (tmp_path / "default.toml").write_text(DEFAULT)
    s = get_settings(None, tmp_path)
    session = Session.from_settings(s)
    assert session.app_key == "abc"
    assert session.locale == "es"
    assert isinstance(session.transport, HttpTransport)
    assert session.transport.endpoints["betting"] == s.betting_endpoint
    assert session.transport.timeout == 12.0


def test_configure_logging(tmp_path):
    (tmp_path / "default.toml").write_text(DEV)
    configure_logging(get_settings(None, tmp_path))
    assert structlog.is_configured()
    structlog.reset_defaults()
