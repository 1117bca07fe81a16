"""A small blocking HTTP/1.1 server with routing, an HTML builder and JSON responses."""

__version__ = "0.1.0"