"""Shared HTTP client for the gateway's upstream services.

Each upstream (customers, visits) gets one long-lived ``httpx.AsyncClient``
so its connection pool is shared by all concurrent requests. Every failure
is surfaced as an ``UpstreamError`` whose kind drives the gateway's HTTP
status mapping; retrying is left to the circuit breaker layer.
"""

import asyncio
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from petclinic.domain.exceptions import UpstreamError, UpstreamErrorKind
from petclinic.infrastructure.logging.config import get_logger


T = TypeVar("T", bound=BaseModel)


logger = get_logger(__name__)


class UpstreamClient:
    """Issues GET requests to one upstream service and decodes JSON documents.

    Attributes:
        service: Upstream name used in errors and logs
    """

    service: str = "upstream"

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Upstream base URL (scheme, host, optional path prefix)
            timeout: Total deadline in seconds for one call, connection included
            transport: Optional httpx transport (tests plug in a MockTransport)
        """
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Raises:
            UpstreamError: TRANSPORT on I/O errors or deadline, NOT_FOUND on 404,
                PROTOCOL on any other non-2xx status or a body that is not JSON
        """
        logger.debug("upstream_request", service=self.service, path=path, params=params)
        try:
            async with asyncio.timeout(self._timeout):
                response = await self._client.get(path, params=params)
        except TimeoutError as e:
            raise UpstreamError(
                UpstreamErrorKind.TRANSPORT,
                self.service,
                f"{self.service} service did not answer within {self._timeout}s",
            ) from e
        except httpx.TransportError as e:
            raise UpstreamError(
                UpstreamErrorKind.TRANSPORT,
                self.service,
                f"{self.service} service unreachable: {type(e).__name__}",
            ) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise UpstreamError(
                UpstreamErrorKind.NOT_FOUND,
                self.service,
                f"{self.service} service has no resource at {path}",
                status_code=response.status_code,
            )
        if not response.is_success:
            raise UpstreamError(
                UpstreamErrorKind.PROTOCOL,
                self.service,
                f"{self.service} service answered {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                UpstreamErrorKind.PROTOCOL,
                self.service,
                f"{self.service} service returned a body that is not JSON",
                status_code=response.status_code,
            ) from e

    def _parse(self, model: type[T], payload: Any) -> T:
        """Validate a decoded body against ``model``.

        Raises:
            UpstreamError: PROTOCOL if the body does not match the model
        """
        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            raise UpstreamError(
                UpstreamErrorKind.PROTOCOL,
                self.service,
                f"{self.service} service returned an invalid {model.__name__} document",
            ) from e

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()
