"""Parsing of HTTP request messages."""

from __future__ import annotations

import io
import socket
from dataclasses import dataclass, field

from .errors import BadRequestError
from .methods import Method, method_from_string, method_to_string
from .text import CRLF, to_lower, trim

_HEAD_END = (CRLF + CRLF).encode("ascii")
_BODY_METHODS = frozenset({Method.POST, Method.PUT, Method.PATCH})
_MALFORMED = "Malformed request message"

Pairs = list[tuple[str, str]]


def parse_query_string(query: str) -> Pairs:
    """Split ``a=1&b=2`` into ordered key/value pairs, keeping duplicates.

    A parameter without ``=`` uses its whole text as both key and value.
    """
    params: Pairs = []
    for part in query.split("&"):
        key, sep, value = part.partition("=")
        params.append((key, value) if sep else (part, part))
    return params


def parse_request_line(line: str) -> tuple[Method, str, Pairs]:
    """Return the method, the path and the query parameters of a request line."""
    method_text, sep, rest = line.partition(" ")
    if not sep:
        rest = line
    target = rest.split(" ", 1)[0]
    uri, has_query, query = target.partition("?")
    params = parse_query_string(query) if has_query else []
    return method_from_string(method_text), uri, params


def parse_headers(block: str) -> Pairs:
    """Parse header lines into (lower-cased name, trimmed value) pairs."""
    headers: Pairs = []
    for raw_line in io.StringIO(block):
        line = raw_line.rstrip("\n").removesuffix("\r")
        name, sep, value = line.partition(":")
        headers.append((to_lower(name), trim(value if sep else line)))
    return headers


@dataclass
class Request:
    """A parsed HTTP request."""

    method: Method
    uri: str
    query_params: Pairs = field(default_factory=list)
    headers: Pairs = field(default_factory=list)
    body: str = ""

    @classmethod
    def _from_bytes(cls, data: bytes) -> Request | None:
        """Build a request from ``data``, or return None if more is needed."""
        head, sep, rest = data.partition(_HEAD_END)
        if not sep:
            return None
        request_line, _, header_block = head.decode("latin-1").partition(CRLF)
        method, uri, params = parse_request_line(request_line)
        request = cls(method, uri, params, parse_headers(header_block))
        length = request.content_length()
        if length is None or not request.accepts_body():
            return request
        if len(rest) < length:
            return None
        request.body = rest[:length].decode("utf-8", errors="replace")
        return request

    @classmethod
    def receive(cls, sock: socket.socket, buffer_size: int = 1024) -> Request:
        """Read one request from a connected socket.

        Raises BadRequestError when the socket times out before the request
        is complete, and ConnectionError when the peer closes it early.
        """
        chunk_size = max(1, buffer_size - 1)
        data = b""
        while True:
            try:
                chunk = sock.recv(chunk_size)
            except TimeoutError as exc:
                raise BadRequestError(_MALFORMED) from exc
            if not chunk:
                raise ConnectionError(
                    "Error accepting message: connection closed by peer"
                )
            data += chunk
            request = cls._from_bytes(data)
            if request is not None:
                return request

    @classmethod
    def parse(cls, data: bytes | str) -> Request:
        """Parse a complete request message; raises BadRequestError if cut short."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        request = cls._from_bytes(data)
        if request is None:
            raise BadRequestError(_MALFORMED)
        return request

    def accepts_body(self) -> bool:
        return self.method in _BODY_METHODS

    def content_length(self) -> int | None:
        """Return the Content-Length header as an int, or None if absent."""
        for name, value in self.headers:
            if name == "content-length":
                return int(value)
        return None

    def describe(self) -> str:
        """Return a readable summary of the request."""
        lines = [f"Method: {method_to_string(self.method)}", f"URI: {self.uri}"]
        if self.query_params:
            lines.append("Query params: ")
            lines.extend(f"{key} = {value}" for key, value in self.query_params)
        lines.append("Headers:")
        lines.extend(f"{name} = {value}" for name, value in self.headers)
        lines.append(f"Body: {self.body}")
        return "\n".join(lines)