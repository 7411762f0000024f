"""Compose the URL and header set for a single call."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from ..schemas import CallerConfiguration, CallOptions, ResolvedRequest


def merge_headers(
    defaults: Mapping[str, str],
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Return ``defaults`` overlaid with ``overrides``; neither input is mutated."""

    headers = dict(defaults)
    for key, value in (overrides or {}).items():
        headers[key] = value
    return headers


def substitute_path_params(
    template: str,
    path_params: Optional[Mapping[str, str]] = None,
) -> str:
    """Replace every ``:key`` in ``template`` with its value.

    This is plain text replacement applied in the mapping's order, so a key
    that prefixes another placeholder (``:id`` inside ``:identity``) will
    replace part of it. Values are inserted unescaped.
    """

    endpoint = template
    for key, value in (path_params or {}).items():
        endpoint = endpoint.replace(f":{key}", value)
    return endpoint


def build_url(base_url: str, endpoint: str) -> str:
    return base_url + "/" + endpoint


def resolve_request(
    configuration: CallerConfiguration,
    options: Optional[CallOptions] = None,
) -> ResolvedRequest:
    options = options or CallOptions()
    endpoint = substitute_path_params(configuration.endpoint, options.path_params)
    return ResolvedRequest(
        url=build_url(configuration.base_url, endpoint),
        headers=merge_headers(configuration.default_headers, options.headers),
    )
