import socket

import pytest

from tinyhttpd.errors import BadRequestError
from tinyhttpd.methods import Method
from tinyhttpd.request import (
    Request,
    parse_headers,
    parse_query_string,
    parse_request_line,
)


def test_parse_query_string_pairs():
    assert parse_query_string("a=1&b=2") == [("a", "1"), ("b", "2")]


def test_parse_query_string_keeps_duplicates():
    assert parse_query_string("a=1&a=2") == [("a", "1"), ("a", "2")]


def test_parse_query_string_without_equals():
    assert parse_query_string("flag") == [("flag", "flag")]


def test_parse_request_line_with_query():
    assert parse_request_line("GET /items?x=y HTTP/1.1") == (
        Method.GET,
        "/items",
        [("x", "y")],
    )


def test_parse_request_line_without_query():
    assert parse_request_line("POST /json HTTP/1.1") == (Method.POST, "/json", [])


def test_parse_request_line_unknown_method():
    method, uri, _ = parse_request_line("BREW /pot HTTP/1.1")
    assert method is Method.INVALID_METHOD
    assert uri == "/pot"


def test_parse_headers_lowercases_and_trims():
    block = "Host: localhost\r\nContent-Type:\ttext/plain \r\nX-A:b"
    assert parse_headers(block) == [
        ("host", "localhost"),
        ("content-type", "text/plain"),
        ("x-a", "b"),
    ]


def test_parse_headers_empty_block():
    assert parse_headers("") == []


def test_parse_get_request():
    request = Request.parse(b"GET /html?a=b HTTP/1.1\r\nHost: localhost\r\n\r\n")
    assert request.method is Method.GET
    assert request.uri == "/html"
    assert request.query_params == [("a", "b")]
    assert request.headers == [("host", "localhost")]
    assert request.body == ""
    assert request.content_length() is None


def test_parse_request_without_headers():
    request = Request.parse("GET / HTTP/1.1\r\n\r\n")
    assert request.uri == "/"
    assert request.headers == []


def test_parse_post_body_cut_to_content_length():
    request = Request.parse(b"POST /json HTTP/1.1\r\nContent-Length: 3\r\n\r\nabcdef")
    assert request.body == "abc"
    assert request.content_length() == 3


def test_get_ignores_body():
    request = Request.parse(b"GET /x HTTP/1.1\r\nContent-Length: 3\r\n\r\nabc")
    assert request.body == ""
    assert not request.accepts_body()


def test_post_without_content_length_has_no_body():
    request = Request.parse(b"POST /x HTTP/1.1\r\nHost: h\r\n\r\nabc")
    assert request.body == ""


@pytest.mark.parametrize(
    "method, expected",
    [(Method.POST, True), (Method.PUT, True), (Method.PATCH, True),
     (Method.GET, False), (Method.DELETE, False)],
)
def test_accepts_body(method, expected):
    assert Request(method, "/").accepts_body() is expected


def test_incomplete_request_is_bad():
    with pytest.raises(BadRequestError):
        Request.parse(b"GET / HTTP/1.1\r\nHost: h\r\n")


def test_short_body_is_bad():
    with pytest.raises(BadRequestError):
        Request.parse(b"POST / HTTP/1.1\r\nContent-Length: 10\r\n\r\nabc")


def test_invalid_content_length():
    request = Request(Method.POST, "/", headers=[("content-length", "abc")])
    with pytest.raises(ValueError):
        request.content_length()


def test_receive_in_small_chunks():
    client, server_side = socket.socketpair()
    with client, server_side:
        payload = b'POST /json?k=v HTTP/1.1\r\nContent-Length: 7\r\n\r\n{"a":1}'
        client.sendall(payload)
        request = Request.receive(server_side, buffer_size=4)
    assert request.method is Method.POST
    assert request.uri == "/json"
    assert request.query_params == [("k", "v")]
    assert request.body == '{"a":1}'


def test_receive_peer_closes_early():
    client, server_side = socket.socketpair()
    with client, server_side:
        client.sendall(b"GET / HTTP/1.1\r\n")
        client.shutdown(socket.SHUT_WR)
        with pytest.raises(ConnectionError):
            Request.receive(server_side, buffer_size=64)


def test_receive_timeout_is_bad_request():
    client, server_side = socket.socketpair()
    with client, server_side:
        server_side.settimeout(0.05)
        client.sendall(b"GET / HTTP/1.1\r\n")
        with pytest.raises(BadRequestError) as info:
            Request.receive(server_side, buffer_size=64)
    assert str(info.value) == "Malformed request message"


def test_describe_lists_everything():
    request = Request(
        Method.POST, "/json", [("q", "1")], [("host", "localhost")], "body text"
    )
    lines = request.describe().splitlines()
    assert lines[0] == "Method: POST"
    assert lines[1] == "URI: /json"
    assert "q = 1" in lines
    assert "host = localhost" in lines
    assert lines[-1] == "Body: body text"