"""Decode response bodies and check them against a base success response."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, TypeVar

from pydantic import TypeAdapter

from ..errors import DecodeError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FIELD_MAP = TypeAdapter(Optional[Dict[str, Any]])


def stringify(value: Any) -> str:
    """Render a JSON value as the text used for expectation matching.

    Numbers and strings that print the same compare equal, so an expected
    ``1`` matches both ``1`` and ``"1"`` in the response. This is intentional.
    Integral floats print as integers below 1e21 and in exponent form
    (``1e+21``) from there on.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    try:
        return json.dumps(value, separators=(",", ":"), sort_keys=True, default=str)
    except (TypeError, ValueError):
        return str(value)


def decode_response(content: bytes, adapter: TypeAdapter[T]) -> T:
    try:
        return adapter.validate_json(content, strict=True)
    except ValueError as exc:
        raise DecodeError(f"unmarshal response error: {exc}") from exc


def decode_field_map(content: bytes) -> Dict[str, Any]:
    """Decode ``content`` into a field map; a ``null`` body has no fields."""

    try:
        fields = _FIELD_MAP.validate_json(content)
    except ValueError as exc:
        raise DecodeError(f"unmarshal response map error: {exc}") from exc
    return fields or {}


def check_base_success_response(
    fields: Mapping[str, Any],
    expected: Mapping[str, Any],
) -> None:
    for key, expected_value in expected.items():
        if key not in fields:
            logger.debug("Base success response key %s missing", key)
            raise ValidationError(
                f"unsuccessful response for key {key}: "
                f"expected {stringify(expected_value)}, got missing",
                key=key,
                expected=expected_value,
                missing=True,
            )
        actual_value = fields[key]
        if stringify(actual_value) != stringify(expected_value):
            logger.debug(
                "Base success response mismatch for %s: %r != %r",
                key,
                actual_value,
                expected_value,
            )
            raise ValidationError(
                f"unsuccessful response for key {key}: "
                f"expected {stringify(expected_value)}, got {stringify(actual_value)}",
                key=key,
                expected=expected_value,
                actual=actual_value,
            )


def validate_response(
    content: bytes,
    adapter: TypeAdapter[T],
    base_success_response: Mapping[str, Any],
) -> T:
    """Decode ``content`` into the declared type, then check expectations.

    The typed decode always runs first, so a malformed body surfaces as
    :class:`DecodeError` even when expectations are configured.
    """

    result = decode_response(content, adapter)
    if base_success_response:
        fields = decode_field_map(content)
        check_base_success_response(fields, base_success_response)
    return result
