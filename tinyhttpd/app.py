"""Demo application serving an HTML page and a JSON endpoint."""

from __future__ import annotations

import argparse
import json

from .html import HtmlDocument, HtmlElement
from .request import Request
from .response import JsonResponse, Response
from .router import HttpRouter
from .server import HttpServer
from .status import HttpStatusCode

PORT = 5000
CONNECTION_QUEUE_SIZE = 2
BUFFER_SIZE = 1024


def get_html(request: Request) -> Response:
    """Render a page listing the query parameters as headings."""
    doc = HtmlDocument()
    doc.head.add_child(HtmlElement("title", "Title 123"))
    doc.body.add_child(HtmlElement("h1", "Header 345", {"class": "test"}))

    container = HtmlElement("div")
    container.text = "One more test"
    for key, value in request.query_params:
        header_1 = HtmlElement("h1", key, {"class": "header_1"})
        header_2 = HtmlElement("h2", value, {"class": "header_2"})
        header_2.tail = "Text after header"
        header_2.set_attribute("new_attr", "abc")
        container.add_child(header_1)
        container.add_child(header_2)
    doc.body.add_child(container)

    return Response(doc.render(), HttpStatusCode.HTTP_202_ACCEPTED, "text/html")


def post_json(request: Request) -> JsonResponse:
    """Echo the JSON body, or return a sample object when the body is empty."""
    if request.body:
        body = json.loads(request.body)
    else:
        body = {
            "numeric_field": 123,
            "text_field": 123,
            "object_field": {"field_a": 1, "field_b": "B"},
            "array_field": [1, 2, 3, 4],
        }
    return JsonResponse(body, HttpStatusCode.HTTP_200_OK)


def build_router() -> HttpRouter:
    router = HttpRouter()
    router.get("/html", get_html)
    router.post("/json", post_json)
    return router


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tinyhttpd", description="Serve the demo endpoints.")
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--queue-size", type=int, default=CONNECTION_QUEUE_SIZE)
    parser.add_argument("--buffer-size", type=int, default=BUFFER_SIZE)
    args = parser.parse_args(argv)

    print("Create HTTP router")
    router = build_router()

    print("Create HTTP server instance")
    with HttpServer(
        args.port, args.queue_size, args.buffer_size, router=router, host=args.host
    ) as server:
        print("Start listening")
        try:
            server.start()
        except KeyboardInterrupt:
            pass
    return 0