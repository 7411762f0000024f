"""Typed GET/POST callers with header merging and response expectations."""

from .clients import GetCaller, PostCaller
from .errors import (
    BodyReadError,
    DecodeError,
    HTTPCallerError,
    RequestConstructionError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .schemas import CallerOptions, CallOptions, ResolvedRequest

__all__ = [
    "BodyReadError",
    "CallOptions",
    "CallerOptions",
    "DecodeError",
    "GetCaller",
    "HTTPCallerError",
    "PostCaller",
    "RequestConstructionError",
    "ResolvedRequest",
    "SerializationError",
    "TransportError",
    "ValidationError",
]
