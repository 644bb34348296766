"""Canonical URLs — absolute links to named routes, for Location headers."""

from fastapi import Request


def canonical_url(request: Request, route_name: str, **params) -> str:
    """Absolute URL a client can GET to re-fetch the resource."""
    return str(request.url_for(route_name, **params))
