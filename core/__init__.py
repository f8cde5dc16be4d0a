# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything that talks to HubSpot or shapes its data:
# settings, errors, data models, the REST client, the text formatter, and the
# six contact operation handlers.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  The handlers return plain
#   OperationResult values; tools/ decides whether they travel over MCP or
#   get printed by the CLI.
# =============================================================================
