# =============================================================================
# core/weather.py  —  ZIP-code Weather Lookup (fetch → parse → format)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Looks up weather for a 5-digit US ZIP code using the free wttr.in service
#   and renders it as human-readable text segments.  Two entry points:
#
#     get_current_weather(zip_code)        → current conditions
#     get_weather_forecast(zip_code, days) → 1-3 day forecast
#
# HOW IT WORKS (the flow):
#   1. VALIDATE: bad input returns an error report; no HTTP call is made
#   2. FETCH   : one GET to https://wttr.in/{zip}?format=j1
#   3. PARSE   : JSON body → WeatherDocument (core/models.py)
#   4. FORMAT  : WeatherDocument → report text + attribution
#   5. RETURN  : a WeatherReport; failures are reports too, never exceptions
#
# WHY WTTR.IN?
#   - Free, no API key required
#   - Accepts US ZIP codes directly as the location
#   - The "j1" format returns current conditions, location, and a 3-day
#     forecast in one JSON document
#
# KEY DESIGN DECISIONS:
#
# 1. ERRORS ARE DATA.
#    Every failure (bad input, network down, 404, garbage JSON, anything
#    else) comes back as a WeatherReport with one "Error: ..." segment and an
#    ErrorKind.  The MCP host always sees a successful tool call; the LLM
#    reads the error text and can explain it to the user.
#
# 2. THE HTTP CLIENT IS INJECTABLE.
#    Pass an httpx.AsyncClient to reuse a connection pool or to plug in a
#    mock transport in tests.  Without one we open a client for the call and
#    close it afterwards.
#
# 3. NO RETRIES, NO CACHE.
#    Every call re-fetches.  The only knob is the request timeout.
# =============================================================================

from datetime import date, datetime
import logging
import os
from typing import Optional

import httpx

from core.errors import (
    DecodeError,
    TransportError,
    UpstreamStatusError,
    WeatherServiceError,
)
from core.models import (
    ATTRIBUTION_PRIORITY,
    USER,
    ErrorKind,
    ForecastDay,
    TextSegment,
    WeatherDocument,
    WeatherReport,
)
from core.validation import (
    DEFAULT_FORECAST_DAYS,
    INVALID_DAYS_MESSAGE,
    INVALID_ZIP_MESSAGE,
    is_valid_forecast_days,
    is_valid_zip_code,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================
# Both values can be overridden from the environment (or a .env file loaded
# by main.py).  The timeout can also be passed per call.
# =============================================================================
DEFAULT_BASE_URL = "https://wttr.in"
DEFAULT_TIMEOUT_SECONDS = 10.0

ATTRIBUTION_TEXT = "Data provided by wttr.in"


def get_base_url() -> str:
    """wttr.in base URL (WTTR_BASE_URL), without a trailing slash."""
    return os.environ.get("WTTR_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def get_timeout_seconds() -> float:
    """Request timeout in seconds (WEATHER_HTTP_TIMEOUT, default 10).

    A value that isn't a positive number is ignored with a warning.
    """
    raw = os.environ.get("WEATHER_HTTP_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring WEATHER_HTTP_TIMEOUT=%r: not a number", raw)
        return DEFAULT_TIMEOUT_SECONDS
    if value <= 0:
        logger.warning("Ignoring WEATHER_HTTP_TIMEOUT=%r: must be positive", raw)
        return DEFAULT_TIMEOUT_SECONDS
    return value


# =============================================================================
# FETCH
# =============================================================================
async def fetch_weather_document(
    zip_code: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> WeatherDocument:
    """GET the wttr.in j1 document for a (validated) ZIP code.

    Args:
        zip_code: A 5-digit ZIP code.  Callers validate it first.
        client: Optional shared httpx.AsyncClient.
        timeout: Seconds before giving up; defaults to get_timeout_seconds().

    Returns:
        The parsed WeatherDocument.

    Raises:
        TransportError: the request never completed.
        UpstreamStatusError: wttr.in returned a non-2xx status.
        DecodeError: the body is not a JSON object.
    """
    if timeout is None:
        timeout = get_timeout_seconds()

    if client is None:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned_client:
            return await _request_document(owned_client, zip_code, timeout)
    return await _request_document(client, zip_code, timeout)


async def _request_document(
    client: httpx.AsyncClient, zip_code: str, timeout: float
) -> WeatherDocument:
    url = f"{get_base_url()}/{zip_code}"
    try:
        # Only the final status counts, whether or not the client was injected.
        response = await client.get(
            url,
            params={"format": "j1"},
            timeout=timeout,
            follow_redirects=True,
        )
    except httpx.RequestError as exc:
        # Some httpx errors (e.g. bare timeouts) carry an empty message.
        raise TransportError(str(exc) or type(exc).__name__) from exc

    if not response.is_success:
        raise UpstreamStatusError(response.status_code, response.reason_phrase)

    try:
        data = response.json()
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc
    return WeatherDocument.from_dict(data)


# =============================================================================
# FORMAT
# =============================================================================
def format_current_report(zip_code: str, document: WeatherDocument) -> str:
    """Render current conditions as the main report text."""
    now = document.current
    where = document.location
    return (
        f"Weather Report for {zip_code} ({where.area_name}, {where.region}):\n\n"
        f"🌡️  Temperature: {now.temp_f}°F ({now.temp_c}°C)\n"
        f"🌡️  Feels Like: {now.feels_like_f}°F ({now.feels_like_c}°C)\n"
        f"☁️  Conditions: {now.description}\n"
        f"💧 Humidity: {now.humidity}%\n"
        f"💨 Wind: {now.wind_speed_mph} mph {now.wind_direction}\n"
    )


def format_day_name(date_str: str, today: Optional[date] = None) -> str:
    """Render a YYYY-MM-DD date as e.g. "Sunday, Jan 5".

    Unparsable dates fall back to today (or `today`, if given).
    """
    try:
        day = datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        day = today or date.today()
    return f"{day:%A}, {day:%b} {day.day}"


def format_forecast_day(day: ForecastDay, today: Optional[date] = None) -> str:
    """One day's block, ending in a blank line."""
    return (
        f"📅 {format_day_name(day.date, today)}:\n"
        f"   🌡️  High: {day.max_temp_f}°F ({day.max_temp_c}°C)\n"
        f"   🌡️  Low: {day.min_temp_f}°F ({day.min_temp_c}°C)\n"
        f"   ☁️  Conditions: {day.midday_description}\n\n"
    )


def format_forecast_report(
    zip_code: str,
    document: WeatherDocument,
    days: int,
    today: Optional[date] = None,
) -> str:
    """Header plus one block per day, for at most `days` days."""
    where = document.location
    report = f"Weather Forecast for {zip_code} ({where.area_name}, {where.region}):\n\n"
    for day in document.days[:days]:
        report += format_forecast_day(day, today)
    return report


def _success(report_text: str) -> WeatherReport:
    """Main report for everyone, attribution for the human only."""
    return WeatherReport(segments=[
        TextSegment(text=report_text),
        TextSegment(
            text=ATTRIBUTION_TEXT,
            audience=(USER,),
            priority=ATTRIBUTION_PRIORITY,
        ),
    ])


def _failure(
    exc: Exception,
    zip_code: str,
    network_subject: str,
    parse_subject: str,
) -> WeatherReport:
    """Map an exception from the fetch/format steps to an error report."""
    kind = exc.kind if isinstance(exc, WeatherServiceError) else ErrorKind.UNEXPECTED

    if kind is ErrorKind.UPSTREAM_STATUS:
        message = (
            f"Error: Unable to fetch weather data for zip code {zip_code}. "
            f"Status: {exc}"
        )
    elif kind is ErrorKind.TRANSPORT:
        message = f"Error: Network error while fetching {network_subject} - {exc}"
    elif kind is ErrorKind.DECODE:
        message = f"Error: Failed to parse {parse_subject} - {exc}"
    else:
        message = f"Error: An unexpected error occurred - {exc}"
    return WeatherReport.error(kind, message)


# =============================================================================
# PUBLIC API
# =============================================================================
async def get_current_weather(
    zip_code: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> WeatherReport:
    """Current conditions for a US ZIP code.

    Args:
        zip_code: 5-digit US ZIP code (e.g., "90210").
        client: Optional shared httpx.AsyncClient.
        timeout: Optional request timeout in seconds.

    Returns:
        A WeatherReport.  On success: the report segment (user + assistant,
        priority 1.0) and the "Data provided by wttr.in" segment (user only,
        priority 0.7).  On failure: a single "Error: ..." segment.
    """
    if not is_valid_zip_code(zip_code):
        return WeatherReport.error(ErrorKind.VALIDATION, INVALID_ZIP_MESSAGE)

    try:
        document = await fetch_weather_document(zip_code, client=client, timeout=timeout)
        return _success(format_current_report(zip_code, document))
    except WeatherServiceError as exc:
        logger.warning("Weather lookup for %s failed (%s): %s", zip_code, exc.kind.value, exc)
        return _failure(exc, zip_code, "weather data", "weather data")
    except Exception as exc:
        logger.exception("Unexpected error looking up weather for %s", zip_code)
        return _failure(exc, zip_code, "weather data", "weather data")


async def get_weather_forecast(
    zip_code: str,
    days: int = DEFAULT_FORECAST_DAYS,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> WeatherReport:
    """A 1-3 day forecast for a US ZIP code.

    Both the ZIP code and the day count are checked before any request is
    made; the ZIP code is checked first.  If wttr.in returns fewer days than
    requested, only the available days are shown.

    Args:
        zip_code: 5-digit US ZIP code.
        days: Number of days, 1-3 (default 3).
        client: Optional shared httpx.AsyncClient.
        timeout: Optional request timeout in seconds.

    Returns:
        A WeatherReport shaped like get_current_weather()'s.
    """
    if not is_valid_zip_code(zip_code):
        return WeatherReport.error(ErrorKind.VALIDATION, INVALID_ZIP_MESSAGE)
    if not is_valid_forecast_days(days):
        return WeatherReport.error(ErrorKind.VALIDATION, INVALID_DAYS_MESSAGE)

    try:
        document = await fetch_weather_document(zip_code, client=client, timeout=timeout)
        return _success(format_forecast_report(zip_code, document, days))
    except WeatherServiceError as exc:
        logger.warning("Forecast lookup for %s failed (%s): %s", zip_code, exc.kind.value, exc)
        return _failure(exc, zip_code, "weather forecast", "weather forecast data")
    except Exception as exc:
        logger.exception("Unexpected error fetching forecast for %s", zip_code)
        return _failure(exc, zip_code, "weather forecast", "weather forecast data")
