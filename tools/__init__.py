# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the two ways into the contact handlers:
#
#   mcp_server.py  →  FastMCP tools served over stdio (schema-validated)
#   cli.py         →  one-shot command-line invocation (positional args)
#
# Neither file holds business logic.  Both call core/contacts.py with the
# HubSpotClient that main.py created, so an operation behaves the same no
# matter which door the request came through.
# =============================================================================
