# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows between the tools layer and HubSpot.  None of them outlives a single
# request: they are built, serialized, and thrown away inside one handler.
#
# NAMING:
#   Python attributes are snake_case.  HubSpot's wire format is camelCase
#   (filterGroups, propertyName, ...) and its contact property names are
#   lowercase contract strings (firstname, lastname, createdate).  The
#   translation happens in exactly two places: to_payload() going out and
#   from_api() coming back.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


# -----------------------------------------------------------------------------
# Contact property names: fixed HubSpot contract strings, not style choices
# -----------------------------------------------------------------------------
EMAIL = "email"
FIRSTNAME = "firstname"
LASTNAME = "lastname"
PHONE = "phone"
COMPANY = "company"
CREATEDATE = "createdate"

# Properties fetched by get-contact
LOOKUP_PROPERTIES = [EMAIL, FIRSTNAME, LASTNAME, PHONE]

# Properties fetched by the list operations (search-contacts, get-last-contacts)
LIST_PROPERTIES = [FIRSTNAME, LASTNAME, EMAIL, COMPANY, PHONE, CREATEDATE]


def build_contact_properties(
    email: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    phone: Optional[str] = None,
) -> dict[str, str]:
    """Build the property mapping sent to HubSpot.

    Starts empty and inserts only the fields that carry a value.  An absent
    field is OMITTED: never sent as None or "": so a partial update only
    touches what the caller supplied.

    >>> build_contact_properties(email="a@b.com")
    {'email': 'a@b.com'}
    """
    properties: dict[str, str] = {}
    if email:
        properties[EMAIL] = email
    if first_name:
        properties[FIRSTNAME] = first_name
    if last_name:
        properties[LASTNAME] = last_name
    if phone:
        properties[PHONE] = phone
    return properties


# -----------------------------------------------------------------------------
# ContactRecord: one contact as HubSpot returns it
# -----------------------------------------------------------------------------
@dataclass
class ContactRecord:
    """A contact read back from HubSpot.  Read-only from our side."""

    id: str
    properties: dict[str, Optional[str]] = field(default_factory=dict)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    archived: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ContactRecord":
        return cls(
            id=str(data.get("id", "")),
            properties=dict(data.get("properties") or {}),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            archived=bool(data.get("archived", False)),
        )

    def get(self, name: str) -> Optional[str]:
        return self.properties.get(name)


# -----------------------------------------------------------------------------
# Search request: filter groups, properties, limit, sorts
# -----------------------------------------------------------------------------
# Filters inside a group are ANDed; groups are ORed.  get-contact uses one
# group with one EQ filter; get-last-contacts uses no groups at all.
# -----------------------------------------------------------------------------
@dataclass
class SearchFilter:
    property_name: str
    value: str
    operator: str = "EQ"

    def to_payload(self) -> dict[str, str]:
        return {
            "propertyName": self.property_name,
            "operator": self.operator,
            "value": self.value,
        }


@dataclass
class FilterGroup:
    filters: list[SearchFilter] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {"filters": [f.to_payload() for f in self.filters]}


@dataclass
class SortSpec:
    property_name: str
    direction: str = "ASCENDING"

    def to_payload(self) -> dict[str, str]:
        return {"propertyName": self.property_name, "direction": self.direction}


@dataclass
class SearchRequest:
    """Body of POST /crm/v3/objects/contacts/search."""

    filter_groups: list[FilterGroup] = field(default_factory=list)
    properties: list[str] = field(default_factory=list)
    limit: int = 10
    sorts: list[SortSpec] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "filterGroups": [g.to_payload() for g in self.filter_groups],
            "properties": list(self.properties),
            "limit": self.limit,
        }
        if self.sorts:
            payload["sorts"] = [s.to_payload() for s in self.sorts]
        return payload


# -----------------------------------------------------------------------------
# OperationResult: the only thing a handler ever returns
# -----------------------------------------------------------------------------
@dataclass
class OperationResult:
    """Success text or failure text.  No structured error crosses this line."""

    success: bool
    text: str

    @classmethod
    def ok(cls, text: str) -> "OperationResult":
        return cls(success=True, text=text)

    @classmethod
    def fail(cls, text: str) -> "OperationResult":
        return cls(success=False, text=text)
