"""HTTP responses and their wire form."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .status import HttpStatusCode, get_status_line
from .text import CRLF


def _dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


@dataclass
class Response:
    """A response with a text body."""

    content: str = ""
    status_code: HttpStatusCode = HttpStatusCode.HTTP_200_OK
    content_type: str = ""

    def content_to_string(self) -> str:
        return self.content

    def set_content_from_string(self, content: str) -> None:
        self.content = content

    def to_bytes(self) -> bytes:
        """Return the full response message as sent to the client."""
        body = self.content_to_string().encode("utf-8")
        head = (
            f"HTTP/1.1 {get_status_line(self.status_code)}{CRLF}"
            f"Content-Type: {self.content_type}{CRLF}"
            f"Content-Length: {len(body)}{CRLF}"
            f"{CRLF}"
        )
        return head.encode("utf-8") + body


class JsonResponse(Response):
    """A response whose body is a JSON value."""

    def __init__(
        self,
        json_content: Any,
        status_code: HttpStatusCode = HttpStatusCode.HTTP_200_OK,
    ) -> None:
        super().__init__(_dump(json_content), status_code, "application/json")
        self.json_content = json_content

    def content_to_string(self) -> str:
        return _dump(self.json_content)

    def set_content_from_string(self, content: str) -> None:
        """Replace the JSON value; raises ValueError if ``content`` is not JSON."""
        self.json_content = json.loads(content)
        self.content = _dump(self.json_content)