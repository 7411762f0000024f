from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CallerOptions(BaseModel):
    default_headers: Optional[Dict[str, str]] = None
    base_success_response: Optional[Dict[str, Any]] = None


class CallOptions(BaseModel):
    headers: Optional[Dict[str, str]] = None
    path_params: Optional[Dict[str, str]] = None
    timeout: Optional[float] = Field(default=None, gt=0)


class CallerConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str
    endpoint: str
    default_headers: Dict[str, str] = Field(default_factory=dict)
    base_success_response: Dict[str, Any] = Field(default_factory=dict)


class ResolvedRequest(BaseModel):
    url: str
    headers: Dict[str, str]


class RawResponse(BaseModel):
    status_code: int
    content: bytes
