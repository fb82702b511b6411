"""
Storefront API Client

HTTP client for the storefront backend, used by the checkout flow.
"""

import logging
from typing import Optional, Any

import httpx
from pydantic import ValidationError

from ..core.config import Settings, get_settings
from ..models.order import Order
from ..models.product import Product

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = (
    "Network error or server unavailable. Please ensure the backend is running."
)
ORDER_FAILED_MESSAGE = "Failed to place order. Please try again."


class StorefrontClientError(Exception):
    """Base class for client-side request failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorefrontUnavailableError(StorefrontClientError):
    """The backend could not be reached"""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE):
        super().__init__(message)


class OrderRejectedError(StorefrontClientError):
    """The backend answered with an error status"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class StorefrontClient:
    """Client for the storefront catalog and order APIs"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize storefront client.

        Args:
            base_url: Base URL of the storefront backend
            timeout: Request timeout in seconds
            http_client: Pre-built client, e.g. one bound to an ASGI app
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StorefrontClient":
        """Build a client pointed at the configured backend"""
        settings = settings or get_settings()
        return cls(settings.api_base_url, timeout=settings.request_timeout)

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
        error_message: Optional[str] = None,
    ) -> Any:
        """
        Make an HTTP request and decode the JSON response.

        Error responses without a message of their own are reported with
        error_message, or their status code when that is not given.
        """
        url = f"{self.base_url}{path}"

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                json=body,
                headers={"Accept": "application/json"},
            )
        except httpx.TransportError as e:
            logger.error(f"{method} {url} failed: {e!r}")
            raise StorefrontUnavailableError() from e

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            raise OrderRejectedError(response.status_code, _error_message(response, error_message))

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned a non-JSON body: {response.text[:200]!r}")
            raise StorefrontUnavailableError() from e

    # ==================== Product APIs ====================

    async def get_products(self) -> list[Product]:
        """Fetch the full catalog"""
        data = await self._request("GET", "/api/products")
        try:
            return [Product.model_validate(item) for item in data]
        except (TypeError, ValidationError) as e:
            logger.error(f"Unexpected product listing: {data!r}")
            raise StorefrontUnavailableError() from e

    # ==================== Order APIs ====================

    async def place_order(
        self,
        cart_items: list[dict],
        customer_info: dict,
    ) -> tuple[str, Order]:
        """
        Submit an order.

        Returns:
            Tuple of (confirmation message, order)
        """
        data = await self._request(
            "POST",
            "/api/order",
            body={"cartItems": cart_items, "customerInfo": customer_info},
            error_message=ORDER_FAILED_MESSAGE,
        )

        try:
            return data.get("message", ""), Order.model_validate(data["order"])
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            logger.error(f"Unexpected order response: {data!r}")
            raise StorefrontUnavailableError() from e

    async def get_order(self, order_id: str) -> Order:
        """Get order details"""
        data = await self._request("GET", f"/api/orders/{order_id}")
        return Order.model_validate(data)


def _error_message(response: httpx.Response, fallback: Optional[str] = None) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return data["message"]
    return fallback or f"HTTP error! status: {response.status_code}"
