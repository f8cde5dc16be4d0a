# =============================================================================
# core/hubspot_client.py  -  HubSpot Contacts REST Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the five HubSpot CRM v3 contact endpoints this server needs:
#
#     create   POST   /crm/v3/objects/contacts
#     page     GET    /crm/v3/objects/contacts
#     update   PATCH  /crm/v3/objects/contacts/{id}
#     archive  DELETE /crm/v3/objects/contacts/{id}
#     search   POST   /crm/v3/objects/contacts/search
#
# ERROR CONTRACT:
#   Every method either returns parsed data or raises RemoteCallError.
#   httpx exceptions never leak past this module, so handlers only ever
#   need to catch one exception type.
#
# WHAT THIS CLIENT DOES NOT DO:
#   No retries, no backoff, no pagination beyond the first page, no token
#   refresh.  One method call = one HTTP round trip.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from core.config import DEFAULT_BASE_URL, Settings
from core.errors import RemoteCallError
from core.models import ContactRecord, SearchRequest


logger = logging.getLogger(__name__)

CONTACTS_PATH = "/crm/v3/objects/contacts"


def _describe_http_error(response: httpx.Response) -> str:
    """Pull HubSpot's own error message out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"


class HubSpotClient:
    """Thin synchronous client bound to one access token.

    Args:
        api_key: Private-app access token (sent as a Bearer token).
        base_url: API root.
        transport: Optional httpx transport (tests pass httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._http = httpx.Client(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "HubSpotClient":
        return cls(api_key=settings.api_key, base_url=settings.base_url)

    # -- lifecycle ------------------------------------------------------------

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "HubSpotClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- transport --------------------------------------------------------------

    def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = _describe_http_error(exc.response)
            logger.warning("HubSpot %s %s failed: %s", method, url, message)
            raise RemoteCallError(message, status_code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            logger.warning("HubSpot %s %s failed: %r", method, url, exc)
            raise RemoteCallError(str(exc)) from exc

        # 204 No Content (archive) has no body to decode
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteCallError(f"Invalid JSON from HubSpot: {exc}") from exc

    # -- contact endpoints ------------------------------------------------------

    def create_contact(self, properties: dict[str, str]) -> ContactRecord:
        data = self._request("POST", CONTACTS_PATH, json={"properties": properties})
        return ContactRecord.from_api(data or {})

    def get_page(
        self,
        limit: int,
        properties: list[str],
        archived: bool = False,
    ) -> list[ContactRecord]:
        """Fetch the first page of contacts in HubSpot's default order."""
        params = {
            "limit": limit,
            "properties": ",".join(properties),
            "archived": "true" if archived else "false",
        }
        data = self._request("GET", CONTACTS_PATH, params=params) or {}
        return [ContactRecord.from_api(item) for item in data.get("results", [])]

    def update_contact(self, contact_id: str, properties: dict[str, str]) -> ContactRecord:
        data = self._request(
            "PATCH", f"{CONTACTS_PATH}/{contact_id}", json={"properties": properties}
        )
        return ContactRecord.from_api(data or {"id": contact_id})

    def archive_contact(self, contact_id: str) -> None:
        self._request("DELETE", f"{CONTACTS_PATH}/{contact_id}")

    def search_contacts(self, request: SearchRequest) -> list[ContactRecord]:
        data = self._request(
            "POST", f"{CONTACTS_PATH}/search", json=request.to_payload()
        ) or {}
        return [ContactRecord.from_api(item) for item in data.get("results", [])]
