# =============================================================================
# agent/weather_agent.py  —  Google ADK Agent Configuration (LLM via LiteLlm)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures and creates the Google ADK agent: the coordinator that
#   receives user questions, decides which weather tool to call, and turns
#   the tool output into a conversational answer.
#
# HOW IT WORKS (simplified):
#
#   ┌──────────────────────────────────────────────────────────────────┐
#   │                       Google ADK Agent                           │
#   │                                                                  │
#   │  ┌─────────────┐    ┌──────────────┐    ┌───────────────────┐    │
#   │  │  System     │    │  LLM         │    │  Tool             │    │
#   │  │  Prompt     │───▶│  via LiteLlm │───▶│  Connections      │    │
#   │  └─────────────┘    └──────────────┘    └───────────────────┘    │
#   └──────────────────────────────────────────────────────────────────┘
#                                                      │ stdio
#                                                      ▼
#                                          ┌─────────────────────────┐
#                                          │  FastMCP Server         │
#                                          │  (tools/mcp_server)     │
#                                          │                         │
#                                          │  • say_hello_name       │
#                                          │  • get_weather_by_zip…  │
#                                          │  • get_weather_forecast │
#                                          └─────────────────────────┘
#                                                      │ HTTPS
#                                                      ▼
#                                                   wttr.in
#
# MCP CONNECTION:
#   The agent connects to the FastMCP server using "stdio" transport:
#     - ADK starts the MCP server as a subprocess
#     - They communicate via stdin/stdout
#     - The agent discovers available tools automatically
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_weather_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create and configure the weather assistant agent.

    The model string comes from WEATHER_AGENT_MODEL (default
    "openrouter/openai/gpt-4o").  LiteLlm reads the matching provider key
    (e.g. OPENROUTER_API_KEY) from the environment on its own.

    Returns:
        A configured Google ADK Agent instance.
    """

    # =========================================================================
    # Step 1: Configure the MCP tool connection
    # =========================================================================
    # We launch the server as a module ("-m tools.mcp_server") from the
    # project root so that `core` is importable in the subprocess.
    # sys.executable keeps the subprocess on the same virtual environment.
    # =========================================================================
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    # =========================================================================
    # Step 2: Create the ADK Agent
    # =========================================================================
    model_name = os.environ.get("WEATHER_AGENT_MODEL", DEFAULT_MODEL)

    agent = Agent(
        name="zip_weather_assistant",                  # Used in logs and traces
        model=LiteLlm(model=model_name),
        instruction=get_weather_assistant_prompt(),    # System prompt from prompt.py
        tools=[mcp_tools],                             # Our FastMCP tool server
    )

    return agent
