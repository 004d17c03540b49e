# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is the conversational front end.  It:
#     1. Receives the user's question ("Do I need a jacket in 10001 today?")
#     2. Works out which weather tool answers it and with which arguments
#     3. Calls the tool via MCP
#     4. Explains the result in plain language
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the weather logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
# =============================================================================
