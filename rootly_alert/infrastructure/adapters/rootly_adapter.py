"""
Rootly REST API Adapter

Architectural Intent:
- Implements EntityDirectoryPort and AlertSinkPort against api.rootly.com
- One table-driven lookup serves all six name-to-id resolvers
- Uses httpx.AsyncClient for the HTTP layer

Design Decisions:
- The API key is bound at construction and sent as a Bearer token
- Lookups and alert creation never raise on remote failures: not-found is
  logged as a warning, transport and HTTP errors as errors, and "" returned
- Names are percent-encoded like JavaScript's encodeURIComponent
- Alert groups are looked up with ?include=<name>, every other kind with a
  filter[...] parameter
- A single attempt per call; no retries
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import httpx

from rootly_alert.domain.services.alert_payload import AlertRequest, build_alert_body
from rootly_alert.domain.value_objects.entity_kind import EntityKind

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.rootly.com"
JSON_API_CONTENT_TYPE = "application/vnd.api+json"

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class LookupRoute:
    """Where and how to search for one kind of entity."""

    path: str
    query_param: str


LOOKUP_ROUTES: dict[EntityKind, LookupRoute] = {
    EntityKind.USER: LookupRoute("/v1/users", "filter%5Bemail%5D"),
    EntityKind.SERVICE: LookupRoute("/v1/services", "filter%5Bname%5D"),
    EntityKind.GROUP: LookupRoute("/v1/alert_groups", "include"),
    EntityKind.ESCALATION_POLICY: LookupRoute(
        "/v1/escalation_policies", "filter%5Bname%5D"
    ),
    EntityKind.ALERT_URGENCY: LookupRoute("/v1/alert_urgencies", "filter%5Bname%5D"),
    EntityKind.ENVIRONMENT: LookupRoute("/v1/environments", "filter%5Bname%5D"),
}


def encode_uri_component(value: str) -> str:
    # Undecodable runner input arrives surrogate-escaped; send its raw bytes.
    return quote(value, safe=_URI_COMPONENT_SAFE, errors="surrogateescape")


class RootlyAdapter:
    """Rootly API client used for entity lookups and alert creation."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_key: Rootly API key, sent as a Bearer token
            base_url: API host, without trailing slash
            timeout: Per-request timeout in seconds
            client: Optional pre-built client (tests inject a MockTransport)
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def lookup_url(self, kind: EntityKind, name: str) -> str:
        route = LOOKUP_ROUTES[kind]
        return (
            f"{self._base_url}{route.path}"
            f"?{route.query_param}={encode_uri_component(name)}"
        )

    async def lookup_id(self, kind: EntityKind, name: str) -> str:
        """Return the id of the first ``kind`` entity matching ``name``.

        Returns "" when nothing matches or the request fails.
        """
        try:
            url = self.lookup_url(kind, name)
            response = await self._client.get(url, headers=self._auth_headers())
            response.raise_for_status()
            data = response.json().get("data")
            if not data:
                logger.warning("%s '%s' not found", kind.value, name)
                return ""
            return data[0]["id"]
        except httpx.HTTPError as e:
            logger.error("%s lookup for '%s' failed: %s", kind.value, name, e)
            return ""
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error(
                "%s lookup for '%s' returned an unexpected response: %s",
                kind.value,
                name,
                e,
            )
            return ""

    async def get_user_id(self, email: str) -> str:
        return await self.lookup_id(EntityKind.USER, email)

    async def get_service_id(self, name: str) -> str:
        return await self.lookup_id(EntityKind.SERVICE, name)

    async def get_group_id(self, name: str) -> str:
        return await self.lookup_id(EntityKind.GROUP, name)

    async def get_escalation_policy_id(self, name: str) -> str:
        return await self.lookup_id(EntityKind.ESCALATION_POLICY, name)

    async def get_alert_urgency_id(self, name: str) -> str:
        return await self.lookup_id(EntityKind.ALERT_URGENCY, name)

    async def get_environment_id(self, name: str) -> str:
        return await self.lookup_id(EntityKind.ENVIRONMENT, name)

    async def create_alert(self, request: AlertRequest) -> str:
        """Create an alert.

        Args:
            request: Fully resolved alert request

        Returns:
            The new alert id, or "" if the API rejected the request, the
            connection failed, or the response had an unexpected shape
        """
        body = json.dumps(build_alert_body(request))
        headers = self._auth_headers()
        headers["Content-Type"] = JSON_API_CONTENT_TYPE

        try:
            response = await self._client.post(
                f"{self._base_url}/v1/alerts", content=body, headers=headers
            )
            response.raise_for_status()
            alert_id = response.json()["data"]["id"]
        except httpx.HTTPError as e:
            logger.error("Alert creation failed: %s", e)
            logger.debug("Alert Body:\n%s", body)
            return ""
        except (ValueError, KeyError, TypeError) as e:
            logger.error("Alert creation returned an unexpected response: %s", e)
            logger.debug("Alert Body:\n%s", body)
            return ""

        logger.info("Created alert %s", alert_id)
        return alert_id

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
