# =============================================================================
# core/config.py  -  Settings from the Environment
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the handful of environment variables this server understands and
#   freezes them into a Settings object.  main.py builds ONE Settings at
#   startup and hands it to everything that needs it: nothing else reads
#   os.environ directly.
#
# VARIABLES:
#   HUBSPOT_API_KEY   (required)  Private-app access token
#   HUBSPOT_BASE_URL  (optional)  API root, default https://api.hubapi.com
#   PORT              (optional)  Documented but unused: the server talks
#                                 over stdio, not a listening socket
#   LOG_LEVEL         (optional)  Logging level name, default INFO
#
# A .env file in the working directory is loaded first (python-dotenv), so
# local development needs no exported variables.
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.errors import ConfigurationError


DEFAULT_BASE_URL = "https://api.hubapi.com"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once and passed explicitly."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    port: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_port(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {raw!r}")


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (after loading .env).

    Args:
        environ: Mapping to read instead of os.environ.  When given, the
                 .env file is NOT loaded (keeps tests hermetic).

    Raises:
        ConfigurationError: HUBSPOT_API_KEY is missing, or PORT / LOG_LEVEL
            cannot be parsed.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = environ.get("HUBSPOT_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError(
            "HUBSPOT_API_KEY is not set. Add it to your environment or .env file."
        )

    return Settings(
        api_key=api_key,
        base_url=environ.get("HUBSPOT_BASE_URL") or DEFAULT_BASE_URL,
        port=_parse_port(environ.get("PORT")),
        log_level=_parse_log_level(environ.get("LOG_LEVEL")),
    )
