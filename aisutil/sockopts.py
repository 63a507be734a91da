"""Helpers for reading and changing socket options."""

import socket
import struct
import sys

_LINGER = struct.Struct("HH" if sys.platform == "win32" else "ii")


class SocketError(OSError):
    """Raised when a socket operation or option change fails."""


def get_protocol(name):
    """Return the number of the IP protocol called *name*, such as "tcp".

    The system protocols database is consulted first; the standard
    IPPROTO_* constants are used when the database has no entry.
    """
    try:
        return socket.getprotobyname(name)
    except OSError as exc:
        number = getattr(socket, "IPPROTO_" + name.upper(), None)
        if isinstance(number, int):
            return number
        raise SocketError(f"unknown protocol {name!r}") from exc


def set_option_int(sock, option, value, level=socket.SOL_SOCKET):
    """Set the integer socket option *option* at *level* to *value*."""
    try:
        sock.setsockopt(level, option, value)
    except OSError as exc:
        raise SocketError(f"cannot set socket option {option}: {exc}") from exc


def get_option_int(sock, option, level=socket.SOL_SOCKET):
    """Return the integer value of the socket option *option* at *level*."""
    try:
        return sock.getsockopt(level, option)
    except OSError as exc:
        raise SocketError(f"cannot read socket option {option}: {exc}") from exc


def set_option_flag(sock, option, toggle, level=socket.SOL_SOCKET):
    """Turn the boolean socket option *option* on or off."""
    set_option_int(sock, option, 1 if toggle else 0, level)


def get_option_flag(sock, option, level=socket.SOL_SOCKET):
    """Return whether the boolean socket option *option* is set."""
    return get_option_int(sock, option, level) > 0


def set_linger(sock, seconds=0):
    """Linger for up to *seconds* on close; zero turns lingering off."""
    if seconds < 0:
        raise ValueError("linger time must not be negative")
    packed = _LINGER.pack(1 if seconds > 0 else 0, seconds)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_LINGER, packed)
    except OSError as exc:
        raise SocketError(f"cannot set linger time: {exc}") from exc


def get_linger(sock):
    """Return the linger time in seconds, or 0 when lingering is off."""
    try:
        raw = sock.getsockopt(socket.SOL_SOCKET, socket.SO_LINGER, _LINGER.size)
    except OSError as exc:
        raise SocketError(f"cannot read linger time: {exc}") from exc
    enabled, seconds = _LINGER.unpack(raw[:_LINGER.size])
    return seconds if enabled else 0