from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Generic, Optional, TypeVar

import httpx
from pydantic import TypeAdapter

from ..errors import BodyReadError, RequestConstructionError, TransportError
from ..schemas import (
    CallerConfiguration,
    CallerOptions,
    CallOptions,
    RawResponse,
    ResolvedRequest,
)
from ..services.request_builder import resolve_request
from ..services.validator import validate_response

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")


class BaseCaller(Generic[ResponseT]):
    """Shared build, dispatch and validate pipeline for one endpoint.

    The caller never mutates its configuration and does not own
    ``http_client``; closing it is left to whoever created it.
    """

    method: str = "GET"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        endpoint: str,
        response_type: Any = Dict[str, Any],
        options: Optional[CallerOptions] = None,
    ) -> None:
        options = options or CallerOptions()
        self.http_client = http_client
        self.configuration = CallerConfiguration(
            base_url=base_url,
            endpoint=endpoint,
            default_headers=dict(options.default_headers or {}),
            base_success_response=dict(options.base_success_response or {}),
        )
        self._response_adapter: TypeAdapter[ResponseT] = TypeAdapter(response_type)

    def resolve(self, options: Optional[CallOptions] = None) -> ResolvedRequest:
        return resolve_request(self.configuration, options)

    async def _call(
        self,
        options: Optional[CallOptions] = None,
        content: Optional[bytes] = None,
    ) -> ResponseT:
        options = options or CallOptions()
        request = self._build_request(self.resolve(options), content)
        raw = await self._dispatch(request, options.timeout)
        return validate_response(
            raw.content,
            self._response_adapter,
            self.configuration.base_success_response,
        )

    def _build_request(
        self, resolved: ResolvedRequest, content: Optional[bytes]
    ) -> httpx.Request:
        try:
            headers = httpx.Headers(resolved.headers)
            if content is not None:
                # Applied after the merged headers so callers cannot replace it.
                headers["Content-Type"] = "application/json"
            request = self.http_client.build_request(
                self.method,
                resolved.url,
                headers=headers,
                content=content,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise RequestConstructionError(f"create request error: {exc}") from exc

        if request.url.scheme not in ("http", "https") or not request.url.host:
            raise RequestConstructionError(
                f"create request error: unsupported URL {resolved.url!r}"
            )
        return request

    async def _dispatch(
        self, request: httpx.Request, timeout: Optional[float]
    ) -> RawResponse:
        logger.debug("Dispatching %s %s", request.method, request.url)
        if timeout is None:
            return await self._exchange(request)
        try:
            return await asyncio.wait_for(self._exchange(request), timeout)
        except asyncio.TimeoutError as exc:
            raise TransportError(
                f"{self.method.lower()} request error: "
                f"deadline of {timeout}s exceeded",
                method=self.method,
            ) from exc

    async def _exchange(self, request: httpx.Request) -> RawResponse:
        try:
            response = await self.http_client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{self.method.lower()} request error: {exc}", method=self.method
            ) from exc

        try:
            content = await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise BodyReadError(f"read response error: {exc}") from exc
        finally:
            await response.aclose()

        logger.debug(
            "%s %s returned %s (%d bytes)",
            request.method,
            request.url,
            response.status_code,
            len(content),
        )
        return RawResponse(status_code=response.status_code, content=content)
