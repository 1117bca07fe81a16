import pytest

from tinyhttpd.methods import Method, method_from_string, method_to_string


@pytest.mark.parametrize("method", list(Method))
def test_round_trip(method):
    assert method_from_string(method_to_string(method)) is method


def test_known_names():
    assert method_from_string("GET") is Method.GET
    assert method_from_string("POST") is Method.POST
    assert method_to_string(Method.DELETE) == "DELETE"


def test_invalid_name_string():
    assert method_to_string(Method.INVALID_METHOD) == "INVALID_METHOD"


@pytest.mark.parametrize("text", ["get", "Post", "", "FETCH", " GET"])
def test_unknown_names_give_invalid(text):
    assert method_from_string(text) is Method.INVALID_METHOD