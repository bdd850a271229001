"""
Store Resource API Connector
Issues the dashboard's CRUD requests against /api/{store_id}/{resource}

No retry, no backoff, no cancellation: a failed request raises and the
caller decides what the user sees.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from store_admin.core.config import settings

logger = logging.getLogger(__name__)


class StoreApiError(Exception):
    """Base class for every failed store API call"""


class ApiTransportError(StoreApiError):
    """The request never got an HTTP response (connect error, timeout...)"""


class ApiResponseError(StoreApiError):
    """The store API answered with a non-2xx status"""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class ApiConflictError(ApiResponseError):
    """409: the operation is blocked by dependent records"""


class ResourceApiClient:
    """
    Connector for the store API

    Handles:
    - create (POST), update (PATCH) and delete (DELETE) of one resource
    - list and detail reads used to populate forms and tables
    """

    def __init__(
        self,
        base_url: str = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = None,
    ):
        """
        Initialize the connector

        Args:
            base_url: Store API root (e.g. 'http://localhost:8000')
            client: Shared AsyncClient; a short-lived one per request when omitted
            timeout: Request timeout in seconds
        """
        self.base_url = (base_url or settings.DASHBOARD_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.DASHBOARD_TIMEOUT_SECONDS
        self._client = client

    @staticmethod
    def resource_path(store_id: str, resource: str, entity_id: str = None) -> str:
        path = f"/api/{store_id}/{resource}"
        if entity_id is not None:
            path = f"{path}/{entity_id}"
        return path

    async def _send(self, client: httpx.AsyncClient, method: str, url: str, body: Optional[Dict]) -> httpx.Response:
        return await client.request(method, url, json=body, timeout=self.timeout)

    async def _request(self, method: str, path: str, body: Dict = None) -> Any:
        """Send one request and unwrap the {"status", "data"} envelope"""
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            if self._client is not None:
                response = await self._send(self._client, method, url, body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, method, url, body)
        except httpx.RequestError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiTransportError(f"{method} {url} failed: {e}") from e

        if response.status_code == 409:
            detail = self._error_detail(response)
            logger.warning(f"{method} {url} rejected with conflict: {detail}")
            raise ApiConflictError(response.status_code, detail)

        if not response.is_success:
            detail = self._error_detail(response)
            logger.error(f"{method} {url} returned {response.status_code}: {detail}")
            raise ApiResponseError(response.status_code, detail)

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned a body that is not JSON: {e}")
            raise ApiResponseError(response.status_code, f"Invalid JSON response: {response.text[:200]}") from e
        return payload.get("data") if isinstance(payload, dict) else payload

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return response.text
        if isinstance(payload, dict) and "detail" in payload:
            return str(payload["detail"])
        return str(payload)

    async def create(self, store_id: str, resource: str, body: Dict) -> Dict:
        """POST /api/{store_id}/{resource}; returns the created record"""
        return await self._request("POST", self.resource_path(store_id, resource), body)

    async def update(self, store_id: str, resource: str, entity_id: str, body: Dict) -> Dict:
        """PATCH /api/{store_id}/{resource}/{entity_id}; returns the updated record"""
        return await self._request("PATCH", self.resource_path(store_id, resource, entity_id), body)

    async def delete(self, store_id: str, resource: str, entity_id: str) -> Dict:
        """DELETE /api/{store_id}/{resource}/{entity_id}; 409 raises ApiConflictError"""
        return await self._request("DELETE", self.resource_path(store_id, resource, entity_id))

    async def list(self, store_id: str, resource: str) -> List[Dict]:
        return await self._request("GET", self.resource_path(store_id, resource))

    async def get(self, store_id: str, resource: str, entity_id: str) -> Dict:
        return await self._request("GET", self.resource_path(store_id, resource, entity_id))
