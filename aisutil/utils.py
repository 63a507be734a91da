"""Miscellaneous helpers: UTF-8 validation, boolean words and base conversion."""

import re
import socket

from aisutil.text import to_lower

_BOOL_WORDS = {
    "yes": True,
    "no": False,
    "true": True,
    "false": False,
    "on": True,
    "off": False,
}

_INTEGER = re.compile(
    r"[ \t\n\v\f\r]*(?P<sign>[+-]?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))"
)

_DIGITS = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "!?$#%&*+-/:<=>@:[]^{|}~"
)
MAX_BASE = len(_DIGITS)


def _sequence_width(lead):
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return None


def validate_utf8(data):
    """Return whether the bytes in *data* form valid UTF-8 (up to four octets)."""
    octets = memoryview(data).tobytes()
    pos = 0
    while pos < len(octets):
        width = _sequence_width(octets[pos])
        if width is None:
            return False
        tail = octets[pos + 1:pos + width]
        if len(tail) != width - 1 or any(not 0x80 <= octet <= 0xBF for octet in tail):
            return False
        pos += width
    return True


def _parse_integer(word):
    match = _INTEGER.fullmatch(word)
    if match is None:
        return None
    if match["hex"] is not None:
        value = int(match["hex"], 16)
    elif match["oct"] is not None:
        value = int(match["oct"], 8)
    else:
        value = int(match["dec"])
    return -value if match["sign"] == "-" else value


def to_bool(word):
    """Interpret *word* as a boolean.

    Recognises yes/no, true/false and on/off in any case, and integers in
    decimal, octal (leading 0) or hexadecimal (0x) form, where a positive
    number is true. Returns None when the word cannot be interpreted.
    """
    known = _BOOL_WORDS.get(to_lower(word))
    if known is not None:
        return known
    number = _parse_integer(word)
    if number is None:
        return None
    return number > 0


def base_x_str(number, base, network_byte_order=False):
    """Write the non-negative *number* in *base* (2 to 85), without padding.

    With *network_byte_order* the low 32 bits of the number are first put
    into network byte order. Zero gives an empty string.
    """
    if not 1 < base <= MAX_BASE:
        raise ValueError(f"base must be between 2 and {MAX_BASE}")
    if number < 0:
        raise ValueError("number must not be negative")
    if network_byte_order:
        number = socket.htonl(number & 0xFFFFFFFF)
    digits = []
    while number > 0:
        number, digit = divmod(number, base)
        digits.append(_DIGITS[digit])
    return "".join(reversed(digits))