import pytest

from tinyhttpd.errors import EndpointNotFoundError
from tinyhttpd.methods import Method
from tinyhttpd.response import Response
from tinyhttpd.router import HttpRouter, Route


def first(request):
    return Response("first")


def second(request):
    return Response("second")


def test_get_and_post_are_separate():
    router = HttpRouter()
    router.get("/a", first)
    router.post("/a", second)
    assert router.resolve(Method.GET, "/a") is first
    assert router.resolve(Method.POST, "/a") is second


def test_first_registered_wins():
    router = HttpRouter()
    router.get("/a", first)
    router.get("/a", second)
    assert router.resolve(Method.GET, "/a") is first


def test_add_route_supported_methods():
    router = HttpRouter()
    router.add_route(Method.GET, "/g", first)
    router.add_route(Method.POST, "/p", second)
    assert router.resolve(Method.GET, "/g") is first
    assert router.resolve(Method.POST, "/p") is second


def test_add_route_unsupported_method():
    router = HttpRouter()
    with pytest.raises(ValueError, match="PUT"):
        router.add_route(Method.PUT, "/x", first)


def test_resolve_unsupported_method():
    router = HttpRouter()
    with pytest.raises(ValueError, match="DELETE"):
        router.resolve(Method.DELETE, "/x")


def test_resolve_missing_uri():
    router = HttpRouter()
    router.get("/a", first)
    with pytest.raises(EndpointNotFoundError) as info:
        router.resolve(Method.GET, "/b")
    assert "/b" in str(info.value)
    assert "GET" in str(info.value)


def test_method_mismatch_is_not_found():
    router = HttpRouter()
    router.get("/a", first)
    with pytest.raises(EndpointNotFoundError):
        router.resolve(Method.POST, "/a")


def test_route_holds_values():
    route = Route("/a", first)
    assert route.uri == "/a"
    assert route.endpoint is first