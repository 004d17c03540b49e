# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the weather tools.  Two groups live here:
#
#   1. OUTPUT models (TextSegment, WeatherReport)
#      What a tool hands back to the caller: an ordered list of text segments,
#      each tagged with who should see it and how prominently.
#
#   2. INPUT models (WeatherDocument and friends)
#      A PARTIAL schema over the wttr.in "j1" JSON.  We only model the fields
#      we actually read.  Every field defaults to "" so a missing value renders
#      as blank text instead of crashing the formatter.
#
# Nothing here imports FastMCP.  The tools/ layer converts TextSegment into
# MCP TextContent blocks; core/ stays framework-agnostic.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional

# ErrorKind lives with the exceptions that carry it; re-exported here because
# every WeatherReport holds one.
from core.errors import DecodeError, ErrorKind


# Audience roles, matching the MCP "Role" values.
USER = "user"
ASSISTANT = "assistant"

# Display priorities (MCP annotation hint: 1.0 = most important).
PRIMARY_PRIORITY = 1.0
ATTRIBUTION_PRIORITY = 0.7


# -----------------------------------------------------------------------------
# TextSegment — one block of text plus its display hints
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextSegment:
    """A piece of text addressed to one or more audiences."""

    text: str
    audience: tuple[str, ...] = (USER, ASSISTANT)
    priority: float = PRIMARY_PRIORITY


# -----------------------------------------------------------------------------
# WeatherReport — what every weather operation returns
# -----------------------------------------------------------------------------
# Success: a report segment followed by the attribution segment.
# Failure: exactly one error segment, and error_kind says which failure.
# -----------------------------------------------------------------------------
@dataclass
class WeatherReport:
    """An ordered sequence of text segments produced by one tool call."""

    segments: list[TextSegment] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None

    @property
    def is_error(self) -> bool:
        return self.error_kind is not None

    def to_plain_text(self) -> str:
        """Collapse all segments into one string (for plain-text callers)."""
        return "\n\n".join(segment.text.rstrip("\n") for segment in self.segments)

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> "WeatherReport":
        """Build a single-segment error result visible to user and assistant."""
        return cls(segments=[TextSegment(text=message)], error_kind=kind)


# =============================================================================
# wttr.in "j1" schema (partial)
# =============================================================================
# wttr.in wraps most scalar values in a one-element list of {"value": ...}
# dicts, e.g. "areaName": [{"value": "Beverly Hills"}].  The helpers below
# dig through that shape and fall back to "" whenever something is missing,
# null, or the wrong type.
# =============================================================================

def _text(value: Any) -> str:
    """Render a scalar JSON value as text; None becomes ""."""
    if value is None:
        return ""
    return str(value)


def _first(items: Any) -> dict:
    """Return the first element of a JSON array if it is an object, else {}."""
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return {}


def _first_value(items: Any) -> str:
    """Read the `[{"value": ...}]` wrapper wttr.in uses for descriptive fields."""
    return _text(_first(items).get("value"))


def _objects(items: Any) -> list[dict]:
    """Keep only the object entries of a JSON array."""
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


@dataclass
class CurrentConditions:
    """`current_condition[0]`: what it's like outside right now."""

    temp_f: str = ""
    temp_c: str = ""
    feels_like_f: str = ""
    feels_like_c: str = ""
    humidity: str = ""
    description: str = ""
    wind_speed_mph: str = ""
    wind_direction: str = ""            # 16-point compass, e.g. "WSW"

    @classmethod
    def from_dict(cls, data: dict) -> "CurrentConditions":
        return cls(
            temp_f=_text(data.get("temp_F")),
            temp_c=_text(data.get("temp_C")),
            feels_like_f=_text(data.get("FeelsLikeF")),
            feels_like_c=_text(data.get("FeelsLikeC")),
            humidity=_text(data.get("humidity")),
            description=_first_value(data.get("weatherDesc")),
            wind_speed_mph=_text(data.get("windspeedMiles")),
            wind_direction=_text(data.get("winddir16Point")),
        )


@dataclass
class Location:
    """`nearest_area[0]`: the place wttr.in resolved the ZIP code to."""

    area_name: str = ""
    region: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        return cls(
            area_name=_first_value(data.get("areaName")),
            region=_first_value(data.get("region")),
        )


@dataclass
class ForecastDay:
    """One entry of the `weather` array."""

    date: str = ""                      # "2025-01-05"
    max_temp_f: str = ""
    min_temp_f: str = ""
    max_temp_c: str = ""
    min_temp_c: str = ""
    hourly_descriptions: list[str] = field(default_factory=list)

    @property
    def midday_description(self) -> str:
        """Condition at the middle hourly slot.

        wttr.in reports 8 three-hour slots, so len // 2 lands on 12:00.
        It is an index approximation, not solar noon.
        """
        if not self.hourly_descriptions:
            return ""
        return self.hourly_descriptions[len(self.hourly_descriptions) // 2]

    @classmethod
    def from_dict(cls, data: dict) -> "ForecastDay":
        return cls(
            date=_text(data.get("date")),
            max_temp_f=_text(data.get("maxtempF")),
            min_temp_f=_text(data.get("mintempF")),
            max_temp_c=_text(data.get("maxtempC")),
            min_temp_c=_text(data.get("mintempC")),
            hourly_descriptions=[
                _first_value(hour.get("weatherDesc"))
                for hour in _objects(data.get("hourly"))
            ],
        )


@dataclass
class WeatherDocument:
    """The parts of a wttr.in `?format=j1` response the tools read."""

    current: CurrentConditions = field(default_factory=CurrentConditions)
    location: Location = field(default_factory=Location)
    days: list[ForecastDay] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "WeatherDocument":
        """Build from parsed JSON.

        Raises:
            DecodeError: if the root is not a JSON object.
        """
        if not isinstance(data, dict):
            raise DecodeError(
                f"expected a JSON object at the top level, got {type(data).__name__}"
            )
        return cls(
            current=CurrentConditions.from_dict(_first(data.get("current_condition"))),
            location=Location.from_dict(_first(data.get("nearest_area"))),
            days=[ForecastDay.from_dict(day) for day in _objects(data.get("weather"))],
        )
