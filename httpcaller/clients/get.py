from __future__ import annotations

from typing import Optional

from ..schemas import CallOptions
from .base import BaseCaller, ResponseT


class GetCaller(BaseCaller[ResponseT]):
    method = "GET"

    async def get(self, options: Optional[CallOptions] = None) -> ResponseT:
        return await self._call(options)
