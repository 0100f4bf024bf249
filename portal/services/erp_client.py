"""
ERP record source adapters

Fetch raw product and order records from the external system of record.
Records are returned in the ERP's native shape; turning them into the
portal's canonical records is the job of the normalization layer.
"""
import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential, retry_if_exception_type

from portal.config import settings
from portal.services.erp_mock_data import MOCK_PRODUCTS, MOCK_ORDERS

logger = logging.getLogger(__name__)

SourceRecord = Dict[str, Any]


class RecordSourceError(Exception):
    """Base exception for ERP record source errors"""
    pass


class RecordSourceUnavailableError(RecordSourceError):
    """ERP is unreachable, timed out or answered with a server error"""
    pass


class MalformedRecordError(RecordSourceError):
    """ERP payload does not match the expected record shape"""
    pass


def sku_matches(sku: str, filter_sku: Optional[str]) -> bool:
    """Case-insensitive substring match used for catalog search"""
    if not filter_sku:
        return True
    return filter_sku.lower() in sku.lower()


class RecordSource(ABC):
    """Read-only contract every ERP adapter implements"""

    @abstractmethod
    async def fetch_products(self, filter_sku: Optional[str] = None) -> List[SourceRecord]:
        ...

    @abstractmethod
    async def fetch_product_by_sku(self, sku: str) -> Optional[SourceRecord]:
        ...

    @abstractmethod
    async def fetch_orders_for_account(self, email: str) -> List[SourceRecord]:
        ...

    @abstractmethod
    async def fetch_all_orders(self) -> List[SourceRecord]:
        ...

    async def ping(self) -> str:
        """Return a short status string for health checks"""
        return "healthy"


class MockRecordSource(RecordSource):
    """In-memory ERP used for development and tests"""

    def __init__(self, products: Optional[List[SourceRecord]] = None, orders: Optional[List[SourceRecord]] = None):
        self.products = MOCK_PRODUCTS if products is None else products
        self.orders = MOCK_ORDERS if orders is None else orders

    async def fetch_products(self, filter_sku: Optional[str] = None) -> List[SourceRecord]:
        return [copy.deepcopy(p) for p in self.products if sku_matches(p["sku"], filter_sku)]

    async def fetch_product_by_sku(self, sku: str) -> Optional[SourceRecord]:
        for product in self.products:
            if product["sku"] == sku:
                return copy.deepcopy(product)
        return None

    async def fetch_orders_for_account(self, email: str) -> List[SourceRecord]:
        return [copy.deepcopy(o) for o in self.orders if o["user_email"] == email]

    async def fetch_all_orders(self) -> List[SourceRecord]:
        return copy.deepcopy(list(self.orders))

    async def ping(self) -> str:
        return "healthy (mock)"


class HttpRecordSource(RecordSource):
    """Client for the ERP's HTTP API with retry on transient failures"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.ERP_API_BASE_URL).rstrip("/")
        self.api_key = settings.ERP_API_KEY if api_key is None else api_key
        self.timeout = settings.ERP_TIMEOUT if timeout is None else timeout
        self.max_retries = settings.MAX_RETRIES if max_retries is None else max_retries
        self.retry_delay = settings.RETRY_DELAY if retry_delay is None else retry_delay
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout,
            transport=self.transport
        )

    async def _request(self, path: str, params: Optional[Dict[str, str]] = None) -> httpx.Response:
        async with self._client() as client:
            return await client.get(path, params=params)

    async def _get(
        self,
        path: str,
        params: Optional[Dict[str, str]] = None,
        allow_missing: bool = False
    ) -> Optional[Any]:
        """
        GET a path on the ERP and decode the JSON body

        Args:
            allow_missing: Treat 404 as "no such record" instead of an error

        Returns:
            Decoded payload, or None on 404 when allow_missing is set

        Raises:
            RecordSourceUnavailableError: On timeout, connection failure or 5xx
            MalformedRecordError: If the body is not valid JSON
            RecordSourceError: On 404 for a collection or any other unexpected status code
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=self.retry_delay, min=self.retry_delay, max=10),
                retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
                reraise=True
            ):
                with attempt:
                    response = await self._request(path, params)
        except (httpx.TimeoutException, httpx.ConnectError) as e:
            logger.error("ERP request %s failed after %d attempts: %s", path, self.max_retries, e)
            raise RecordSourceUnavailableError(f"ERP unavailable: {e}") from e
        except httpx.HTTPError as e:
            logger.error("ERP request %s failed: %s", path, e)
            raise RecordSourceUnavailableError(f"ERP request failed: {e}") from e

        if response.status_code == 404:
            if allow_missing:
                return None
            logger.error("ERP endpoint %s not found", path)
            raise RecordSourceError(f"ERP endpoint {path} not found (status 404)")
        if response.status_code >= 500:
            logger.error("ERP request %s answered %d", path, response.status_code)
            raise RecordSourceUnavailableError(f"ERP returned status {response.status_code}")
        if response.status_code != 200:
            raise RecordSourceError(f"Unexpected status code from ERP: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise MalformedRecordError(f"ERP returned invalid JSON for {path}") from e

    @staticmethod
    def _unwrap(payload: Any, key: str) -> List[SourceRecord]:
        """Accept either a bare list or a {key: [...]} envelope"""
        if isinstance(payload, dict):
            payload = payload.get(key)
        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise MalformedRecordError(f"ERP payload for '{key}' is not a list of records")
        return payload

    async def fetch_products(self, filter_sku: Optional[str] = None) -> List[SourceRecord]:
        params = {"sku": filter_sku} if filter_sku else None
        products = self._unwrap(await self._get("/products", params), "products")
        return [p for p in products if sku_matches(str(p.get("sku", "")), filter_sku)]

    async def fetch_product_by_sku(self, sku: str) -> Optional[SourceRecord]:
        payload = await self._get(f"/products/{quote(sku, safe='')}", allow_missing=True)
        if payload is None:
            return None
        if isinstance(payload, dict) and isinstance(payload.get("product"), dict):
            payload = payload["product"]
        if not isinstance(payload, dict):
            raise MalformedRecordError(f"ERP payload for product {sku} is not a record")
        # Exact match only; ignore fuzzy matches the ERP may return
        if payload.get("sku") != sku:
            return None
        return payload

    async def fetch_orders_for_account(self, email: str) -> List[SourceRecord]:
        orders = self._unwrap(await self._get("/orders", {"email": email}), "orders")
        return [o for o in orders if o.get("user_email") == email]

    async def fetch_all_orders(self) -> List[SourceRecord]:
        return self._unwrap(await self._get("/orders"), "orders")

    async def ping(self) -> str:
        try:
            async with self._client() as client:
                response = await client.get("/health", timeout=2.0)
        except httpx.HTTPError as e:
            return f"unhealthy: {str(e)}"
        if response.status_code == 200:
            return "healthy"
        return f"unhealthy: status {response.status_code}"


def get_record_source() -> RecordSource:
    """Build the record source selected by ERP_SOURCE"""
    if settings.ERP_SOURCE == "http":
        return HttpRecordSource()
    return MockRecordSource()
