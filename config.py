"""Centralized configuration for environment variables."""

import os

USER_AGENT_ENV = "PITCHERS_USER_AGENT"
TIMEOUT_ENV = "PITCHERS_TIMEOUT"
BASE_URL_ENV = "MLB_API_BASE_URL"

DEFAULT_USER_AGENT = "pitchers-cli/0.1"
DEFAULT_TIMEOUT = 10.0  # seconds
DEFAULT_BASE_URL = "https://statsapi.mlb.com/api"


def get_user_agent() -> str:
    """Return the User-Agent sent with every API request."""
    return os.environ.get(USER_AGENT_ENV, "") or DEFAULT_USER_AGENT


def get_timeout() -> float:
    """Return the request timeout in seconds, or the default if unset or invalid."""
    raw = os.environ.get(TIMEOUT_ENV, "")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def get_base_url() -> str:
    """Return the MLB Stats API base URL without a trailing slash."""
    return (os.environ.get(BASE_URL_ENV, "") or DEFAULT_BASE_URL).rstrip("/")
