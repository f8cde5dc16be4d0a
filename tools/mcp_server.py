# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL contact tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares the six HubSpot contact tools and serves them over MCP.  Each
#   tool is a thin wrapper around a core/contacts.py handler: it owns the
#   input SCHEMA and logging, nothing else.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (Claude Desktop, an agent, ...) calls a tool by name
#   2. FastMCP validates the arguments against the schema built from the
#      type hints below: a malformed email is rejected HERE, before any
#      HubSpot call is attempted
#   3. The tool calls the core handler with the injected HubSpotClient
#   4. The handler's text (success or failure) is returned as a text item
#
# FAILURES:
#   A HubSpot failure is NOT an MCP error.  It comes back as an ordinary
#   text response ("Failed to ...: <reason>") so a bad call never takes the
#   server down.  Only schema violations surface as MCP tool errors.
#
# PARAMETER NAMES:
#   firstName / lastName / contactId are camelCase on purpose: they ARE the
#   public tool schema, and existing clients already send these names.
#
# RUNNING THIS SERVER:
#   python main.py            (stdio transport, no arguments)
# =============================================================================

import logging
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import AfterValidator, EmailStr, Field, TypeAdapter

from core import contacts
from core.hubspot_client import HubSpotClient
from core.models import OperationResult


SERVER_NAME = "hubspot"
SERVER_VERSION = "1.0.0"

# Emails are checked with EmailStr but passed on exactly as the caller typed
# them: EmailStr lowercases the domain, and HubSpot should see the original.
_EMAIL_CHECK = TypeAdapter(EmailStr)


def _checked_email(value: str) -> str:
    try:
        _EMAIL_CHECK.validate_python(value)
    except ValueError:
        raise ValueError("value is not a valid email address")
    return value


Email = Annotated[str, AfterValidator(_checked_email), Field(json_schema_extra={"format": "email"})]

# =============================================================================
# Logging helpers
# =============================================================================
# Everything goes to STDERR (configured in main.py).  STDOUT carries the MCP
# JSON stream; a stray print there would corrupt the protocol.
#
#   CYAN   → incoming tool calls
#   YELLOW → intermediate status
#   GREEN  → responses
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger(__name__)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: OperationResult) -> str:
    """Log the outcome in GREEN, then hand back the text for the client."""
    outcome = "ok" if result.success else "failed"
    logger.info(f"{_GREEN}  ← {tool_name} {outcome}: {result.text!r}{_RESET}")
    return result.text


# =============================================================================
# Server factory
# =============================================================================
# The client is passed in rather than created at import time, so tests can
# build a server around a fake client and main.py controls the lifecycle.
# =============================================================================
def build_server(client: HubSpotClient) -> FastMCP:
    """Create the FastMCP server with every contact tool registered."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    # -------------------------------------------------------------------------
    # TOOL: create-contact
    # -------------------------------------------------------------------------
    @mcp.tool(name="create-contact", description="Create a new contact in HubSpot")
    def create_contact(
        email: Annotated[Email, Field(description="Contact's email address")],
        firstName: Annotated[Optional[str], Field(description="Contact's first name")] = None,
        lastName: Annotated[Optional[str], Field(description="Contact's last name")] = None,
        phone: Annotated[Optional[str], Field(description="Contact's phone number")] = None,
    ) -> str:
        _log_request("create-contact", email=email, firstName=firstName,
                     lastName=lastName, phone=phone)
        result = contacts.create_contact(
            client, email, first_name=firstName, last_name=lastName, phone=phone
        )
        return _log_response("create-contact", result)

    # -------------------------------------------------------------------------
    # TOOL: get-contact
    # -------------------------------------------------------------------------
    @mcp.tool(name="get-contact", description="Get a contact from HubSpot by email")
    def get_contact(
        email: Annotated[Email, Field(description="Contact's email address to search for")],
    ) -> str:
        _log_request("get-contact", email=email)
        return _log_response("get-contact", contacts.get_contact(client, email))

    # -------------------------------------------------------------------------
    # TOOL: search-contacts
    # -------------------------------------------------------------------------
    # `query` is part of the schema but does not filter anything yet: the
    # tool always returns the first page of 10 contacts.
    # -------------------------------------------------------------------------
    @mcp.tool(name="search-contacts", description="Search for contacts in HubSpot")
    def search_contacts(
        query: Annotated[Optional[str], Field(description="Optional search query")] = None,
    ) -> str:
        _log_request("search-contacts", query=query)
        if query:
            _log_status("query is not applied; returning the first page")
        return _log_response("search-contacts", contacts.search_contacts(client, query))

    # -------------------------------------------------------------------------
    # TOOL: update-contact
    # -------------------------------------------------------------------------
    @mcp.tool(name="update-contact", description="Update an existing contact in HubSpot")
    def update_contact(
        contactId: Annotated[str, Field(description="Contact's ID to update")],
        email: Annotated[Optional[Email], Field(description="Updated email address")] = None,
        firstName: Annotated[Optional[str], Field(description="Updated first name")] = None,
        lastName: Annotated[Optional[str], Field(description="Updated last name")] = None,
        phone: Annotated[Optional[str], Field(description="Updated phone number")] = None,
    ) -> str:
        _log_request("update-contact", contactId=contactId, email=email,
                     firstName=firstName, lastName=lastName, phone=phone)
        result = contacts.update_contact(
            client, contactId, email=email, first_name=firstName,
            last_name=lastName, phone=phone,
        )
        return _log_response("update-contact", result)

    # -------------------------------------------------------------------------
    # TOOL: delete-contact
    # -------------------------------------------------------------------------
    @mcp.tool(name="delete-contact", description="Delete/archive a contact from HubSpot")
    def delete_contact(
        contactId: Annotated[str, Field(description="Contact's ID to delete")],
    ) -> str:
        _log_request("delete-contact", contactId=contactId)
        return _log_response("delete-contact", contacts.delete_contact(client, contactId))

    # -------------------------------------------------------------------------
    # TOOL: get-last-contacts
    # -------------------------------------------------------------------------
    @mcp.tool(name="get-last-contacts", description="Get the last 2 contacts from HubSpot")
    def get_last_contacts() -> str:
        _log_request("get-last-contacts")
        return _log_response("get-last-contacts", contacts.get_last_contacts(client))

    return mcp


def run_server(client: HubSpotClient) -> None:
    """Serve every tool over stdio until the client disconnects."""
    mcp = build_server(client)
    logger.info("HubSpot MCP Server running on stdio")
    mcp.run()
