from __future__ import annotations

import math
from typing import Any, Dict, Generic, Optional, TypeVar

import httpx
from pydantic import TypeAdapter

from ..errors import SerializationError
from ..schemas import CallerOptions, CallOptions
from .base import BaseCaller, ResponseT

RequestT = TypeVar("RequestT")


class PostCaller(BaseCaller[ResponseT], Generic[RequestT, ResponseT]):
    """POST a JSON payload and decode the reply.

    The payload is encoded before anything else happens, so a payload that
    cannot be represented as JSON never reaches the transport.
    """

    method = "POST"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        endpoint: str,
        response_type: Any = Dict[str, Any],
        request_type: Any = Any,
        options: Optional[CallerOptions] = None,
    ) -> None:
        super().__init__(http_client, base_url, endpoint, response_type, options)
        self._request_adapter: TypeAdapter[RequestT] = TypeAdapter(request_type)

    async def post(
        self, payload: RequestT, options: Optional[CallOptions] = None
    ) -> ResponseT:
        content = self._serialize(payload)
        return await self._call(options, content)

    def _serialize(self, payload: RequestT) -> bytes:
        try:
            content = self._request_adapter.dump_json(payload, by_alias=True)
            _reject_non_finite(self._request_adapter.dump_python(payload, by_alias=True))
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"marshal request error: {exc}") from exc
        return content


def _reject_non_finite(value: Any) -> None:
    # pydantic writes NaN and Infinity as null; JSON has no such numbers.
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"unsupported value: {value!r}")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _reject_non_finite(item)
