# =============================================================================
# core/errors.py  —  Failure categories and typed wttr.in errors
# =============================================================================
# The fetch step raises these; the pipeline in core/weather.py catches them
# and turns each one into a single "Error: ..." segment tagged with the
# exception's `kind`.  Tools never let an exception escape to the MCP host.
# =============================================================================

from enum import Enum


# -----------------------------------------------------------------------------
# ErrorKind — machine-readable category for a failed request
# -----------------------------------------------------------------------------
# Callers that need to branch on failure type read this instead of parsing
# the "Error: ..." text.
# -----------------------------------------------------------------------------
class ErrorKind(Enum):
    """Why a weather request did not produce a report."""

    VALIDATION = "validation"            # bad ZIP code or day count
    TRANSPORT = "transport"              # connect / DNS / timeout
    UPSTREAM_STATUS = "upstream_status"  # wttr.in answered with non-2xx
    DECODE = "decode"                    # body was not the JSON we expect
    UNEXPECTED = "unexpected"            # anything else


class WeatherServiceError(Exception):
    """Base error for weather lookups."""

    kind = ErrorKind.UNEXPECTED


class TransportError(WeatherServiceError):
    """The HTTP request never completed (connect, DNS, timeout)."""

    kind = ErrorKind.TRANSPORT


class UpstreamStatusError(WeatherServiceError):
    """wttr.in answered, but not with a 2xx status."""

    kind = ErrorKind.UPSTREAM_STATUS

    def __init__(self, status: int, reason: str = "") -> None:
        super().__init__(f"{status} {reason}".strip())
        self.status = status
        self.reason = reason


class DecodeError(WeatherServiceError):
    """The response body is not the JSON document we expect."""

    kind = ErrorKind.DECODE
