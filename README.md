# tinyhttpd

tinyhttpd is a small, blocking HTTP/1.1 server. It serves one connection at a
time and closes each connection after one request. It includes a router for
`GET` and `POST`, a minimal HTML element builder and JSON responses. It uses
only the standard library.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## The demo server

```
tinyhttpd [--host HOST] [--port PORT] [--queue-size N] [--buffer-size N]
```

By default it binds all addresses on port 5000, with a listen backlog of 2 and
a receive buffer of 1024 bytes. It serves until you press Ctrl+C. It has two
endpoints:

- `GET /html` returns a `text/html` page with status `202 Accepted`. Each
  query parameter adds an `h1` with the key and an `h2` with the value.
- `POST /json` parses the request body as JSON and sends it back. When the body
  is empty, it sends a built-in sample object instead.

The server handles errors as follows:

- A request for a route that is not registered gets `404 Not Found` with an
  empty body.
- A request that is not complete before the receive timeout (5 seconds) gets
  `400 Bad Request` with the JSON body `{"detail":"Malformed request message"}`.
- Any other exception raised while the server handles a request gets
  `500 Internal Server Error`.

## Using it as a library

```python
from tinyhttpd.html import HtmlDocument, HtmlElement
from tinyhttpd.response import JsonResponse, Response
from tinyhttpd.router import HttpRouter
from tinyhttpd.server import HttpServer
from tinyhttpd.status import HttpStatusCode


def hello(request):
    doc = HtmlDocument()
    doc.head.add_child(HtmlElement("title", "Hello"))
    doc.body.add_child(HtmlElement("h1", "Hello, world"))
    return Response(doc.render(), HttpStatusCode.HTTP_200_OK, "text/html")


def echo(request):
    return JsonResponse({"uri": request.uri}, HttpStatusCode.HTTP_200_OK)


router = HttpRouter()
router.get("/hello", hello)
router.post("/echo", echo)

with HttpServer(port=8080, router=router) as server:
    server.start()
```

### Modules

- `tinyhttpd.server`: `HttpServer(port=5000, connection_queue_size=2,
  buffer_size=200, router=None, host="", accept_timeout=5.0,
  receive_timeout=5.0)`. The socket is bound in the constructor.
  - `start()` listens and serves until `close()` is called.
  - `handle_connection(conn)` serves one request on a connected socket and
    returns the `Response` it sent.
  - `port` gives the bound port. Pass `port=0` to get a free port.
  - The server can be used as a context manager.
- `tinyhttpd.router`: `HttpRouter` with `get(uri, endpoint)`,
  `post(uri, endpoint)`, `add_route(method, uri, endpoint)` and
  `resolve(method, uri)`.
  - Routes match the exact path, without the query string. The first route
    registered for a path wins.
  - A method other than `GET` or `POST` raises `ValueError`.
  - A path with no route raises `EndpointNotFoundError`.
- `tinyhttpd.request`: `Request` with these fields:
  - `method`
  - `uri`
  - `query_params`: a list of `(key, value)` pairs, duplicates kept
  - `headers`: a list of `(name, value)` pairs with lower-cased names
  - `body`

  `Request.parse(data)` parses a complete message from bytes or text.
  `Request.receive(sock, buffer_size)` reads one from a socket. The helpers
  `parse_request_line`, `parse_query_string` and `parse_headers` are also
  available. A body is read only for `POST`, `PUT` and `PATCH` requests that
  carry `Content-Length`.
- `tinyhttpd.response`: `Response(content="", status_code=200 OK,
  content_type="")` and `JsonResponse(json_content, status_code)`.
  `to_bytes()` gives the full message with `Content-Type` and `Content-Length`
  headers. JSON is written compactly with sorted keys.
- `tinyhttpd.html`: `HtmlElement(tag, text="", attributes=None)` with
  `add_child`, `remove_child`, `set_attribute`, `render`, and `text`/`tail`
  properties. `HtmlDocument` has a `head` and a `body`.
  - Void elements such as `br` or `img` refuse text and children.
  - `head` and `body` cannot be added as children.
  - An element with neither text nor children renders as `<tag/>`.
- `tinyhttpd.status`: the `HttpStatusCode` enum, `get_message(code)` and
  `get_status_line(code)`.
- `tinyhttpd.methods`: the `Method` enum, `method_from_string` and
  `method_to_string`.
- `tinyhttpd.errors`: `ServerError`, `BadRequestError` and
  `EndpointNotFoundError`.

## What it does not do

- It does not serve requests concurrently. Each connection is handled in turn.
- It has no keep-alive, TLS, chunked transfer encoding or static file serving.
- Only `GET` and `POST` routes can be registered.
- The HTML builder does not escape text.
- The HTML builder does not quote attribute values. It writes them as `name=value`.