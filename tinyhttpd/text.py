"""Small string helpers used when parsing requests."""

import string

CRLF = "\r\n"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters, leaving every other character alone."""
    return text.translate(_ASCII_LOWER)


def trim(text: str, whitespace: str = " \t") -> str:
    """Strip the characters in ``whitespace`` from both ends of ``text``."""
    if not whitespace:
        return text
    return text.strip(whitespace)