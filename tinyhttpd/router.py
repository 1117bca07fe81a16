"""Mapping of request methods and URIs to endpoint functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .errors import EndpointNotFoundError
from .methods import Method, method_to_string
from .request import Request
from .response import Response

Endpoint = Callable[[Request], Response]


@dataclass(frozen=True)
class Route:
    """An endpoint registered for one URI."""

    uri: str
    endpoint: Endpoint


def _unsupported(method: Method) -> ValueError:
    return ValueError(f"Method {method_to_string(method)} is not supported yet.")


class HttpRouter:
    """Holds the GET and POST routes of a server."""

    def __init__(self) -> None:
        self._routes: dict[Method, list[Route]] = {Method.GET: [], Method.POST: []}

    def get(self, uri: str, endpoint: Endpoint) -> None:
        self._routes[Method.GET].append(Route(uri, endpoint))

    def post(self, uri: str, endpoint: Endpoint) -> None:
        self._routes[Method.POST].append(Route(uri, endpoint))

    def add_route(self, method: Method, uri: str, endpoint: Endpoint) -> None:
        """Register an endpoint; only GET and POST are supported."""
        if method not in self._routes:
            raise _unsupported(method)
        self._routes[method].append(Route(uri, endpoint))

    def resolve(self, method: Method, uri: str) -> Endpoint:
        """Return the first endpoint registered for ``method`` and ``uri``.

        Raises ValueError for an unsupported method and
        EndpointNotFoundError when nothing matches.
        """
        try:
            routes = self._routes[method]
        except KeyError:
            raise _unsupported(method) from None
        for route in routes:
            if route.uri == uri:
                return route.endpoint
        raise EndpointNotFoundError(
            f"No endpoint found for URI {uri} and method {method_to_string(method)}"
        )