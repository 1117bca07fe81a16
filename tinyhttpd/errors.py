"""Exceptions raised while handling HTTP requests."""


class ServerError(Exception):
    """Base class for errors that carry a message meant for the client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class BadRequestError(ServerError):
    """The request message could not be read or understood."""


class EndpointNotFoundError(ServerError):
    """No endpoint is registered for the requested method and URI."""