# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the ZIP-code weather tools:
# input validation, the wttr.in fetch, response parsing, and text formatting.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  The only third-party import is httpx, for the one outbound
#   request.  Everything here can be tested without an MCP host.
# =============================================================================
