"""Small string helpers: case conversion, padding and trimming."""

import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_WHITESPACE = " \t\r\n"
_QUOTES = " '\""


def to_lower(text):
    """Return *text* with ASCII letters converted to lower case."""
    return text.translate(_TO_LOWER)


def to_upper(text):
    """Return *text* with ASCII letters converted to upper case."""
    return text.translate(_TO_UPPER)


def prepad(text, width, fill=" "):
    """Pad *text* on the left with *fill* until it is at least *width* long.

    Text that is already long enough is returned unchanged.
    """
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return text.rjust(width, fill)


def trim(text):
    """Strip spaces, tabs, carriage returns and line feeds from both ends."""
    return text.strip(_WHITESPACE)


def trim_quotes(text):
    """Strip spaces, single quotes and double quotes from both ends."""
    return text.strip(_QUOTES)