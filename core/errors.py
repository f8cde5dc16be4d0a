# =============================================================================
# core/errors.py  -  Error Kinds
# =============================================================================
#
# Only two kinds of failure reach a caller:
#
#   ValidationError   →  input is missing or malformed.  Detected BEFORE any
#                        call to HubSpot is attempted.
#   RemoteCallError   →  the HubSpot API call failed for any reason (auth,
#                        network, not-found, rate limit...).  All collapsed
#                        into one kind.
#
# Both are terminal for the current operation.  Nothing is ever retried.
#
# ConfigurationError is a startup-only failure (no access token); it stops
# the process before either transport is opened.
# =============================================================================

from typing import Optional


UNKNOWN_ERROR = "Unknown error"


class HubSpotToolError(Exception):
    """Base class for every error raised by this project."""


class ValidationError(HubSpotToolError):
    """Input failed validation before any remote call was made."""


class ConfigurationError(HubSpotToolError):
    """Required settings are missing from the environment."""


class RemoteCallError(HubSpotToolError):
    """A HubSpot API call failed.

    Args:
        message: Human-readable reason.  May be empty.
        status_code: HTTP status, when the failure came from a response.
    """

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def error_message(exc: BaseException) -> str:
    """Reduce an exception to the text shown to the caller."""
    message = getattr(exc, "message", None) or str(exc)
    return message or UNKNOWN_ERROR
