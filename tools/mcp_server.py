# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines ALL MCP tools that the agent can call.  Each tool is a thin
#   wrapper around a core/ function: it logs the call, delegates, and turns
#   the core result into MCP content blocks.
#
# HOW IT WORKS (the flow):
#   1. The agent decides it needs information (e.g., weather for 90210)
#   2. It calls a tool by name via MCP (e.g., "get_weather_by_zip_code")
#   3. FastMCP routes the call to the decorated function below
#   4. The function calls core/ logic and converts the WeatherReport
#   5. The agent receives annotated text blocks
#
# ANNOTATED CONTENT:
#   Weather tools return a LIST of TextContent blocks, not a single string.
#   Each block carries MCP annotations:
#     - audience: who should see it ("user", "assistant", or both)
#     - priority: display hint, 1.0 = most important
#   The weather report goes to both audiences at priority 1.0.  The
#   "Data provided by wttr.in" credit goes to the user only at 0.7, so the
#   LLM doesn't waste context on it.
#
# ERRORS:
#   Tools never raise.  Bad input, network trouble, a 404 from wttr.in:
#   all come back as a normal result holding one "Error: ..." block.
#
# RUNNING THIS SERVER:
#   This module creates a FastMCP server instance that can be:
#     a) Run standalone:  python -m tools.mcp_server
#     b) Connected to the Google ADK agent via stdio transport
# =============================================================================

import json
import logging
import sys

from fastmcp import FastMCP
from mcp.types import Annotations, TextContent

# --- Import core logic ---
# Notice: we import from core/, never from agent/.
# The tools layer depends on core/ and nothing else.
from core.greeting import say_hello_name as _say_hello_name
from core.models import WeatherReport
from core.validation import DEFAULT_FORECAST_DAYS
from core.weather import get_current_weather, get_weather_forecast as _get_weather_forecast

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server communicates with the agent via
# STDOUT (stdin/stdout is the MCP transport).  If we logged to stdout, our
# log messages would corrupt the MCP JSON protocol and crash the agent.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response content
#     - YELLOW for intermediate status/progress messages
# =============================================================================

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: list[TextContent]) -> list[TextContent]:
    """Log the content blocks as compact JSON in GREEN, then return them."""
    payload = [block.model_dump(exclude_none=True) for block in result]
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(payload, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


def _to_content(report: WeatherReport) -> list[TextContent]:
    """Convert core TextSegments into annotated MCP TextContent blocks."""
    return [
        TextContent(
            type="text",
            text=segment.text,
            annotations=Annotations(
                audience=list(segment.audience),
                priority=segment.priority,
            ),
        )
        for segment in report.segments
    ]


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# The name "zip-weather" becomes the server identity in MCP.
# The agent connects to this server and discovers available tools.
mcp = FastMCP("zip-weather")


# =============================================================================
# TOOL 1: say_hello_name
# =============================================================================
# The smallest possible tool: handy for checking the MCP wiring end to end
# before touching the network.
# =============================================================================
@mcp.tool()
def say_hello_name(name: str) -> str:
    """Returns a string with the name requested when someone asks to say hello world with their name.

    Args:
        name: The name to say hello to.
    """
    _log_request("say_hello_name", name=name)
    greeting = _say_hello_name(name)
    logging.info(f"{_GREEN}  ← say_hello_name response: {greeting!r}{_RESET}")
    return greeting


# =============================================================================
# TOOL 2: get_weather_by_zip_code
# =============================================================================
@mcp.tool()
async def get_weather_by_zip_code(zip_code: str) -> list[TextContent]:
    """Gets current weather information for a specific US zip code.

    WHEN TO CALL THIS: The user asks what the weather is like right now
    somewhere in the US and you know (or can ask for) the ZIP code.

    Args:
        zip_code: 5-digit US zip code (e.g., "90210").

    Returns:
        Text blocks: a weather report (temperature, feels-like, conditions,
        humidity, wind, resolved town and region) and a data-source credit.
        If anything goes wrong, a single block starting with "Error:".
    """
    _log_request("get_weather_by_zip_code", zip_code=zip_code)

    report = await get_current_weather(zip_code)
    if report.is_error:
        _log_status(f"Lookup failed ({report.error_kind.value})")
    return _log_response("get_weather_by_zip_code", _to_content(report))


# =============================================================================
# TOOL 3: get_weather_forecast
# =============================================================================
# wttr.in only returns 3 days of forecast, so that's our cap.
# =============================================================================
@mcp.tool()
async def get_weather_forecast(
    zip_code: str,
    days: int = DEFAULT_FORECAST_DAYS,
) -> list[TextContent]:
    """Gets a simple weather forecast for the next few days for a specific US zip code.

    WHEN TO CALL THIS: The user asks about upcoming weather (today, tomorrow,
    this weekend) for a US location.

    Args:
        zip_code: 5-digit US zip code (e.g., "90210").
        days: Number of days to forecast (1-3 days, default 3).

    Returns:
        Text blocks: one forecast report with a section per day (date,
        high/low in °F and °C, midday conditions) and a data-source credit.
        If anything goes wrong, a single block starting with "Error:".
    """
    _log_request("get_weather_forecast", zip_code=zip_code, days=days)

    report = await _get_weather_forecast(zip_code, days)
    if report.is_error:
        _log_status(f"Forecast failed ({report.error_kind.value})")
    return _log_response("get_weather_forecast", _to_content(report))


# =============================================================================
# Server entry point
# =============================================================================
# When run directly (python -m tools.mcp_server), start the MCP server.
# The agent connects to this server via stdio transport.
# =============================================================================
if __name__ == "__main__":
    mcp.run()
