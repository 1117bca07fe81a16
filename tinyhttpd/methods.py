"""HTTP request methods."""

from enum import Enum


class Method(Enum):
    """HTTP request methods, with a member for anything unrecognised."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"
    INVALID_METHOD = "INVALID_METHOD"


def method_to_string(method: Method) -> str:
    """Return the name of a method as it appears on the wire."""
    return method.value


def method_from_string(text: str) -> Method:
    """Return the method named by ``text``; unknown names give INVALID_METHOD.

    Matching is case-sensitive.
    """
    try:
        return Method(text)
    except ValueError:
        return Method.INVALID_METHOD