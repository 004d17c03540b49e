# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP host and the core
#   business logic.  Each tool:
#     1. Calls a function from core/
#     2. Wraps it in a FastMCP tool decorator
#     3. Converts core results (WeatherReport) into MCP TextContent blocks,
#        carrying audience/priority annotations
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain business logic (that's in core/)
#   - They do NOT know about Google ADK (they're framework-agnostic)
#
# TOOL CONTRACT QUALITY:
#   The LLM reads each tool's name, docstring and parameter types to decide
#   WHEN to call it and WHAT to pass, so those are written for the model.
# =============================================================================
