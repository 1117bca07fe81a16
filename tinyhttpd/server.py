"""A blocking HTTP server that handles one connection at a time."""

from __future__ import annotations

import socket

from .errors import BadRequestError, EndpointNotFoundError
from .request import Request
from .response import JsonResponse, Response
from .router import HttpRouter
from .status import HttpStatusCode


class HttpServer:
    """Accepts connections, routes each request and writes the response."""

    def __init__(
        self,
        port: int = 5000,
        connection_queue_size: int = 2,
        buffer_size: int = 200,
        router: HttpRouter | None = None,
        host: str = "",
        accept_timeout: float = 5.0,
        receive_timeout: float = 5.0,
    ) -> None:
        self.connection_queue_size = connection_queue_size
        self.buffer_size = buffer_size
        self.router = router if router is not None else HttpRouter()
        self._accept_timeout = accept_timeout
        self._receive_timeout = receive_timeout
        self._closed = False
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._socket.bind((host, port))
        except OSError as exc:
            self._socket.close()
            raise OSError(exc.errno, f"Socket binding failed: {exc.strerror}") from exc
        print(f"Socket successfully bound to port {self.port}")

    @property
    def port(self) -> int:
        """The port the server socket is bound to."""
        return self._socket.getsockname()[1]

    def _respond(self, conn: socket.socket) -> Response:
        try:
            request = Request.receive(conn, self.buffer_size)
            endpoint = self.router.resolve(request.method, request.uri)
            return endpoint(request)
        except BadRequestError as exc:
            return JsonResponse({"detail": str(exc)}, HttpStatusCode.HTTP_400_BAD_REQUEST)
        except EndpointNotFoundError:
            return Response(status_code=HttpStatusCode.HTTP_404_NOT_FOUND)
        except Exception as exc:
            print(f"Exception caught: {exc}")
            return Response(status_code=HttpStatusCode.HTTP_500_INTERNAL_SERVER_ERROR)

    def handle_connection(self, conn: socket.socket) -> Response:
        """Serve one request on ``conn``, close it and return the response sent."""
        with conn:
            conn.settimeout(self._receive_timeout)
            response = self._respond(conn)
            conn.sendall(response.to_bytes())
        return response

    def start(self) -> None:
        """Listen and serve connections until the server is closed."""
        try:
            self._socket.listen(self.connection_queue_size)
        except OSError as exc:
            raise OSError(exc.errno, f"Socket listening failed: {exc.strerror}") from exc
        print(f"Socket successfully listening at port {self.port}")
        self._socket.settimeout(self._accept_timeout)
        while not self._closed:
            try:
                conn, _ = self._socket.accept()
            except TimeoutError:
                continue
            except OSError:
                if self._closed:
                    break
                raise
            try:
                self.handle_connection(conn)
            except OSError as exc:
                print(f"Error while responding: {exc}")

    def close(self) -> None:
        """Stop serving and release the server socket."""
        self._closed = True
        self._socket.close()

    def __enter__(self) -> HttpServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()