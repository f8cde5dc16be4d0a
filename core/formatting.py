# =============================================================================
# core/formatting.py  -  Response Formatter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns contact records into the fixed-layout text every tool returns.
#   The layout is a contract: callers (and LLMs) read these labels, so the
#   strings below must not drift.
#
#   One contact in a list renders as:
#
#     Contact ID: 42
#     Name: A B
#     Email: a@b.com
#     Phone: 555
#     Created: <locale date/time>
#     ---
#
#   Blocks are joined with a blank line.  Missing name parts become "",
#   missing email/phone become "N/A".
#
# THE "Created" FALLBACK:
#   When a record carries no createdate, the CURRENT time is shown.
# =============================================================================

import json
from datetime import datetime, timezone
from typing import Iterable, Optional

from core.models import CREATEDATE, EMAIL, FIRSTNAME, LASTNAME, PHONE, ContactRecord


NOT_AVAILABLE = "N/A"
BLOCK_SEPARATOR = "---"


def _or_empty(value: Optional[str]) -> str:
    return value or ""


def _or_na(value: Optional[str]) -> str:
    return value or NOT_AVAILABLE


def full_name(first: Optional[str], last: Optional[str]) -> str:
    # Always "<first> <last>" with one space, even when one side is empty
    return f"{_or_empty(first)} {_or_empty(last)}"


# -----------------------------------------------------------------------------
# Dates
# -----------------------------------------------------------------------------
def parse_created(value: str) -> datetime:
    """Parse a HubSpot createdate: ISO 8601 (trailing Z allowed) or epoch ms."""
    value = value.strip()
    if value.isdigit():
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def format_created(value: Optional[str], now: Optional[datetime] = None) -> str:
    """Render createdate in local time using the locale's default layout.

    Absent → the current time.  Unparseable → the raw string.
    """
    if not value:
        moment = now or datetime.now()
    else:
        try:
            moment = parse_created(value)
            if moment.tzinfo is not None:
                moment = moment.astimezone()
        except (ValueError, OverflowError, OSError):
            # out-of-range epoch values land here as well as malformed text
            return value
    return moment.strftime("%c")


# -----------------------------------------------------------------------------
# Contact blocks
# -----------------------------------------------------------------------------
def format_contact_block(record: ContactRecord, now: Optional[datetime] = None) -> str:
    return "\n".join([
        f"Contact ID: {record.id}",
        f"Name: {full_name(record.get(FIRSTNAME), record.get(LASTNAME))}",
        f"Email: {_or_na(record.get(EMAIL))}",
        f"Phone: {_or_na(record.get(PHONE))}",
        f"Created: {format_created(record.get(CREATEDATE), now=now)}",
        BLOCK_SEPARATOR,
    ])


def format_contact_list(records: Iterable[ContactRecord], now: Optional[datetime] = None) -> str:
    return "\n\n".join(format_contact_block(r, now=now) for r in records)


def format_listing(header: str, records: Iterable[ContactRecord]) -> str:
    """Header line, blank line, then the contact blocks (possibly none)."""
    return f"{header}\n\n{format_contact_list(records)}"


def parse_contact_block(text: str) -> dict[str, Optional[str]]:
    """Read a block produced by format_contact_block back into fields.

    Returns keys id, name, email, phone, created.  "N/A" comes back as None.
    """
    labels = {
        "Contact ID": "id",
        "Name": "name",
        "Email": "email",
        "Phone": "phone",
        "Created": "created",
    }
    fields: dict[str, Optional[str]] = {}
    for line in text.splitlines():
        if line.strip() == BLOCK_SEPARATOR:
            break
        label, sep, value = line.partition(": ")
        if not sep or label not in labels:
            continue
        fields[labels[label]] = None if value == NOT_AVAILABLE else value
    return fields


# -----------------------------------------------------------------------------
# Fixed-template confirmations
# -----------------------------------------------------------------------------
def format_contact_found(record: ContactRecord) -> str:
    return (
        "Contact found:\n"
        f"ID: {record.id}\n"
        f"Email: {_or_empty(record.get(EMAIL))}\n"
        f"Name: {full_name(record.get(FIRSTNAME), record.get(LASTNAME))}\n"
        f"Phone: {_or_na(record.get(PHONE))}"
    )


def format_not_found(email: str) -> str:
    return f"No contact found with email: {email}"


def format_contact_created(contact_id: str, properties: dict[str, str]) -> str:
    return (
        "Contact created successfully:\n"
        f"ID: {contact_id}\n"
        f"Email: {_or_empty(properties.get(EMAIL))}\n"
        f"Name: {full_name(properties.get(FIRSTNAME), properties.get(LASTNAME))}"
    )


def format_contact_updated(contact_id: str, properties: dict[str, str]) -> str:
    return (
        "Contact updated successfully:\n"
        f"ID: {contact_id}\n"
        f"Updated Properties: {json.dumps(properties, indent=2)}"
    )


def format_contact_deleted(contact_id: str) -> str:
    return f"Contact with ID {contact_id} was successfully deleted."
