# =============================================================================
# core/validation.py  —  Input checks that run BEFORE any network call
# =============================================================================
# A request that fails here never reaches wttr.in.  Both weather tools use
# these checks, and both stop immediately on failure.
# =============================================================================

ZIP_CODE_LENGTH = 5
MIN_FORECAST_DAYS = 1
MAX_FORECAST_DAYS = 3
DEFAULT_FORECAST_DAYS = 3

INVALID_ZIP_MESSAGE = "Error: Please provide a valid 5-digit US zip code."
INVALID_DAYS_MESSAGE = (
    f"Error: Forecast days must be between {MIN_FORECAST_DAYS} and {MAX_FORECAST_DAYS}."
)

_ASCII_DIGITS = frozenset("0123456789")


def is_valid_zip_code(zip_code) -> bool:
    """True iff `zip_code` is a string of exactly five ASCII digits.

    str.isdigit() is not enough: it accepts things like "١٢٣٤٥" (Arabic-Indic
    digits) and "²", which wttr.in would not resolve to a US ZIP.
    """
    return (
        isinstance(zip_code, str)
        and len(zip_code) == ZIP_CODE_LENGTH
        and all(ch in _ASCII_DIGITS for ch in zip_code)
    )


def is_valid_forecast_days(days) -> bool:
    """True iff `days` is an int in [1, 3].  Booleans are rejected."""
    if isinstance(days, bool) or not isinstance(days, int):
        return False
    return MIN_FORECAST_DAYS <= days <= MAX_FORECAST_DAYS
