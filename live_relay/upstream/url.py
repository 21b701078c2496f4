"""Upstream URL construction from client query parameters."""

from __future__ import annotations

from collections.abc import Mapping, Iterable
from urllib.parse import urlsplit, parse_qsl, urlencode, urlunsplit

from live_relay.config.upstream import UPSTREAM_PARAM_DEFAULTS

QueryInput = Mapping[str, str] | Iterable[tuple[str, str]]


def _query_pairs(query_params: QueryInput) -> list[tuple[str, str]]:
    # Starlette's QueryParams keeps repeated keys only in multi_items().
    multi_items = getattr(query_params, "multi_items", None)
    if callable(multi_items):
        return list(multi_items())
    if isinstance(query_params, Mapping):
        return list(query_params.items())
    return list(query_params)


def resolve_params(query_params: QueryInput) -> dict[str, str]:
    """Resolve every recognized parameter to the client's first value, or its default when absent or empty."""
    first: dict[str, str] = {}
    for name, value in _query_pairs(query_params):
        first.setdefault(name, value)

    return {name: first.get(name) or default for name, default in UPSTREAM_PARAM_DEFAULTS.items()}


def build_url(base_url: str, query_params: QueryInput) -> str:
    """Return `base_url` with all recognized parameters set.

    Recognized parameters overwrite same-named ones already on `base_url`.
    Other client parameters replace base parameters of the same name; every
    other base parameter is kept. Repeated keys keep all of their values.
    """
    parts = urlsplit(base_url)
    client_pairs = [(k, v) for k, v in _query_pairs(query_params) if k not in UPSTREAM_PARAM_DEFAULTS]
    client_names = {k for k, _ in client_pairs}

    pairs = [
        (k, v)
        for k, v in parse_qsl(parts.query, keep_blank_values=True)
        if k not in UPSTREAM_PARAM_DEFAULTS and k not in client_names
    ]
    pairs.extend(client_pairs)
    pairs.extend(resolve_params(query_params).items())

    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(pairs), parts.fragment))


__all__ = ["build_url", "resolve_params"]
