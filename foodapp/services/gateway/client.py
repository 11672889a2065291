"""
API Gateway

Every backend call goes through ApiGateway.call():

    1. Headers: JSON content type, caller overrides, bearer token
    2. Body: None omitted, str passed through, everything else JSON-encoded
    3. Exchange: METHOD base_url + endpoint via httpx.AsyncClient
    4. Classify: content type, then status (see classify_response)
    5. Return the payload, or log and raise a RequestError

The bearer token is attached on every call when one is stored, public
endpoints included; the backend ignores credentials it does not need.

No timeout is applied unless one is configured: a hung exchange
suspends its caller until the connection fails.

Author: Khalil Bannouri
Version: 1.0.0
"""

import json
import logging
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import BaseModel

from foodapp.core.exceptions import RequestError, SerializationError, TransportError
from foodapp.schemas import HttpMethod
from foodapp.services.gateway.base import (
    JSON_CONTENT_TYPE,
    RequestSpec,
    ResponseOutcome,
    classify_response,
)
from foodapp.services.session.store import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": JSON_CONTENT_TYPE}


def merge_headers(
    defaults: Mapping[str, str],
    overrides: Optional[Mapping[str, str]],
) -> dict[str, str]:
    """Merge header mappings; later names replace earlier ones case-insensitively."""
    merged = dict(defaults)
    for name, value in (overrides or {}).items():
        for existing in [k for k in merged if k.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def serialize_body(body: Any) -> Optional[str]:
    """
    Encode a request body.

    Raises:
        SerializationError: If the value cannot be encoded as JSON
    """
    if body is None:
        return None
    if isinstance(body, str):
        return body
    if isinstance(body, BaseModel):
        return body.model_dump_json(exclude_none=True)
    try:
        return json.dumps(body, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Request body is not JSON serializable: {e}")


class ApiGateway:
    """
    Single entry point for backend requests.

    Attributes:
        base_url: Backend base URL, fixed at construction
        session_store: Source of the bearer token
        timeout: Seconds per request, or None for no timeout

    Example:
        >>> gateway = ApiGateway("http://localhost:5000/api", get_session_store())
        >>> restaurants = await gateway.call("/restaurants")
        >>> await gateway.call("/menu/42", method="DELETE")
    """

    def __init__(
        self,
        base_url: str,
        session_store: SessionStore,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the gateway.

        Args:
            base_url: Backend base URL (e.g., "http://localhost:5000/api")
            session_store: Session whose token is attached to requests
            timeout: Request timeout in seconds; None disables timeouts
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store
        self.timeout = timeout
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

        logger.info(f"API Base: {self.base_url}")

    # ==========================================================================
    # REQUEST CONSTRUCTION
    # ==========================================================================

    def build_headers(self, headers: Optional[Mapping[str, str]] = None) -> dict[str, str]:
        """Default headers, caller overrides, then the bearer token if stored."""
        merged = merge_headers(DEFAULT_HEADERS, headers)

        token = self.session_store.get_token()
        if token:
            merged = merge_headers(merged, {"Authorization": f"Bearer {token}"})

        return merged

    def build_request(
        self,
        endpoint: str,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> RequestSpec:
        """
        Resolve one call into a RequestSpec.

        Raises:
            ValueError: If method is not GET/POST/PUT/DELETE
            SerializationError: If body cannot be encoded
        """
        if not isinstance(method, HttpMethod):
            method = HttpMethod(method.upper())

        return RequestSpec(
            endpoint=endpoint,
            method=method,
            headers=self.build_headers(headers),
            body=serialize_body(body),
        )

    # ==========================================================================
    # EXCHANGE
    # ==========================================================================

    async def send(self, spec: RequestSpec) -> ResponseOutcome:
        """
        Perform the exchange for a RequestSpec and classify the response.

        Raises:
            TransportError: If no response was received
        """
        try:
            response = await self._client.request(
                spec.method.value,
                spec.url(self.base_url),
                headers=spec.headers,
                content=spec.body,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(str(e) or type(e).__name__)

        return classify_response(
            response.status_code,
            response.headers.get("content-type"),
            response.content,
        )

    async def call(
        self,
        endpoint: str,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> Any:
        """
        Issue a request and return its parsed payload.

        Args:
            endpoint: Path below the base URL (e.g., "/orders/my-orders")
            method: GET, POST, PUT or DELETE
            headers: Extra headers; they win over the defaults
            body: dict/list/model (JSON-encoded) or pre-serialized str

        Returns:
            Parsed JSON payload, or None for an empty/non-JSON success

        Raises:
            RequestError: On any failure (transport, status, parsing)
            ValueError: If method is not GET/POST/PUT/DELETE
        """
        if not isinstance(method, HttpMethod):
            try:
                method = HttpMethod(method.upper())
            except ValueError:
                logger.error(f"API ERROR: Unsupported method {method!r}")
                raise

        logger.info(f"{method.value} → {endpoint}")

        try:
            spec = self.build_request(endpoint, method, headers, body)
            outcome = await self.send(spec)
            return outcome.unwrap()
        except RequestError as e:
            logger.error(f"API ERROR: {e.message}")
            raise

    async def health_check(self) -> bool:
        """
        Verify the backend is reachable.

        Calls the backend's /test route.
        """
        try:
            await self.call("/test")
            logger.debug("Gateway: Health check passed")
            return True
        except RequestError as e:
            logger.error(f"Gateway: Health check failed - {e}")
            return False

    # ==========================================================================
    # LIFECYCLE
    # ==========================================================================

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
