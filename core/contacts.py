# =============================================================================
# core/contacts.py  -  Contact Operation Handlers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   One function per operation.  Both transports (MCP tools and the direct
#   CLI) call these, so behavior is identical no matter how a request
#   arrives.
#
# EVERY HANDLER FOLLOWS THE SAME FOUR STEPS:
#   1. Normalize input into a property mapping / search request
#   2. Make exactly ONE call on the injected HubSpotClient
#   3. Success → format the response text → OperationResult.ok
#   4. RemoteCallError → "Failed to <action>: <message>" → OperationResult.fail
#
#   Handlers never raise for a remote failure.  A failed call is reported
#   once and never retried.
#
# DEPENDENCY INJECTION:
#   The client is the first argument of every handler.  There is no
#   module-level client: main.py builds one and passes it down.
# =============================================================================

import logging
from typing import Optional

from core import formatting
from core.errors import RemoteCallError, error_message
from core.hubspot_client import HubSpotClient
from core.models import (
    CREATEDATE,
    EMAIL,
    LIST_PROPERTIES,
    LOOKUP_PROPERTIES,
    FilterGroup,
    OperationResult,
    SearchFilter,
    SearchRequest,
    SortSpec,
    build_contact_properties,
)


logger = logging.getLogger(__name__)

SEARCH_PAGE_SIZE = 10
LAST_CONTACTS_LIMIT = 2


def _failure(action: str, exc: RemoteCallError) -> OperationResult:
    message = error_message(exc)
    logger.error("Error %s: %s", action, message)
    return OperationResult.fail(f"Failed to {action}: {message}")


def create_contact(
    client: HubSpotClient,
    email: str,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    phone: Optional[str] = None,
) -> OperationResult:
    """Create a contact.  Only the supplied fields are sent."""
    properties = build_contact_properties(
        email=email, first_name=first_name, last_name=last_name, phone=phone
    )
    try:
        record = client.create_contact(properties)
    except RemoteCallError as exc:
        return _failure("create contact", exc)
    return OperationResult.ok(formatting.format_contact_created(record.id, properties))


def email_lookup_request(email: str) -> SearchRequest:
    return SearchRequest(
        filter_groups=[FilterGroup(filters=[SearchFilter(property_name=EMAIL, value=email)])],
        properties=list(LOOKUP_PROPERTIES),
        limit=1,
    )


def get_contact(client: HubSpotClient, email: str) -> OperationResult:
    """Look a contact up by exact email.  Zero matches is NOT an error."""
    try:
        results = client.search_contacts(email_lookup_request(email))
    except RemoteCallError as exc:
        return _failure("get contact", exc)
    if not results:
        return OperationResult.ok(formatting.format_not_found(email))
    return OperationResult.ok(formatting.format_contact_found(results[0]))


def search_contacts(client: HubSpotClient, query: Optional[str] = None) -> OperationResult:
    """Fetch the first page of contacts in HubSpot's default order.

    `query` is accepted for interface compatibility but is not sent to
    HubSpot; results are never filtered by it.
    """
    if query:
        logger.debug("search-contacts query %r is not applied", query)
    try:
        results = client.get_page(
            limit=SEARCH_PAGE_SIZE, properties=list(LIST_PROPERTIES), archived=False
        )
    except RemoteCallError as exc:
        return _failure("search contacts", exc)
    header = f"Last {SEARCH_PAGE_SIZE} contacts:"
    return OperationResult.ok(formatting.format_listing(header, results))


def update_contact(
    client: HubSpotClient,
    contact_id: str,
    email: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    phone: Optional[str] = None,
) -> OperationResult:
    """Partially update a contact.

    Only supplied fields go into the mapping.  With none supplied the
    update is still sent, with an empty mapping (a no-op on HubSpot's side).
    """
    properties = build_contact_properties(
        email=email, first_name=first_name, last_name=last_name, phone=phone
    )
    try:
        client.update_contact(contact_id, properties)
    except RemoteCallError as exc:
        return _failure("update contact", exc)
    return OperationResult.ok(formatting.format_contact_updated(contact_id, properties))


def delete_contact(client: HubSpotClient, contact_id: str) -> OperationResult:
    """Archive a contact (HubSpot's delete)."""
    try:
        client.archive_contact(contact_id)
    except RemoteCallError as exc:
        return _failure("delete contact", exc)
    return OperationResult.ok(formatting.format_contact_deleted(contact_id))


def last_contacts_request() -> SearchRequest:
    return SearchRequest(
        filter_groups=[],
        properties=list(LIST_PROPERTIES),
        limit=LAST_CONTACTS_LIMIT,
        sorts=[SortSpec(property_name=CREATEDATE, direction="ASCENDING")],
    )


def get_last_contacts(client: HubSpotClient) -> OperationResult:
    """Search with no filters, limit 2, sorted by creation date."""
    try:
        results = client.search_contacts(last_contacts_request())
    except RemoteCallError as exc:
        return _failure("get last contacts", exc)
    header = f"Last {LAST_CONTACTS_LIMIT} contacts (sorted by creation date):"
    return OperationResult.ok(formatting.format_listing(header, results))
