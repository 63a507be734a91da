"""Object wrappers around system sockets with friendly option access."""

import socket

from aisutil.sockopts import (
    SocketError,
    get_linger,
    get_option_flag,
    get_option_int,
    set_linger,
    set_option_flag,
    set_option_int,
)


class Socket:
    """A system socket with its common options exposed as properties.

    The wrapped socket is switched to non-blocking mode on construction.
    Ports have no meaning at this level, so local_port and remote_port are
    None and setting them fails; domain classes give them meaning.
    """

    def __init__(self, sock):
        self._sock = sock
        try:
            sock.setblocking(False)
        except OSError:
            pass

    def __repr__(self):
        return f"{type(self).__name__}(fd={self.fileno()})"

    @property
    def sock(self):
        """The wrapped system socket."""
        return self._sock

    def fileno(self):
        """Return the file descriptor, or -1 once the socket is closed."""
        return self._sock.fileno()

    def is_okay(self):
        """Return whether the socket still has a valid file descriptor."""
        return self.fileno() >= 0

    @property
    def non_blocking(self):
        """Whether operations on the socket return instead of waiting."""
        try:
            return not self._sock.getblocking()
        except OSError as exc:
            raise SocketError(f"cannot read blocking mode: {exc}") from exc

    @non_blocking.setter
    def non_blocking(self, toggle):
        try:
            self._sock.setblocking(not toggle)
        except OSError as exc:
            raise SocketError(f"cannot change blocking mode: {exc}") from exc

    @property
    def reuse_address(self):
        """Whether bind() may reuse a local address not being listened on."""
        return get_option_flag(self._sock, socket.SO_REUSEADDR)

    @reuse_address.setter
    def reuse_address(self, toggle):
        set_option_flag(self._sock, socket.SO_REUSEADDR, toggle)

    @staticmethod
    def _priority_option():
        option = getattr(socket, "SO_PRIORITY", None)
        if option is None:
            raise SocketError("the priority flag is not supported on this system")
        return option

    @property
    def priority(self):
        """Whether packets sent are queued ahead of ordinary ones."""
        return get_option_flag(self._sock, self._priority_option())

    @priority.setter
    def priority(self, toggle):
        set_option_flag(self._sock, self._priority_option(), toggle)

    @property
    def single_hop(self):
        """Whether packets may only reach directly connected hosts."""
        return get_option_flag(self._sock, socket.SO_DONTROUTE)

    @single_hop.setter
    def single_hop(self, toggle):
        set_option_flag(self._sock, socket.SO_DONTROUTE, toggle)

    @property
    def linger(self):
        """Seconds to linger on close while sending pending data; 0 is off."""
        return get_linger(self._sock)

    @linger.setter
    def linger(self, seconds):
        set_linger(self._sock, seconds)

    def close(self):
        """Close the socket, invalidating its file descriptor."""
        try:
            self._sock.close()
        except OSError as exc:
            raise SocketError(f"cannot close socket: {exc}") from exc

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    @property
    def local_port(self):
        """The local port, or None where ports have no meaning."""
        return None

    @property
    def remote_port(self):
        """The remote port, or None where ports have no meaning."""
        return None

    def set_local_port(self, port):
        """Set the local port; this socket type has none."""
        raise SocketError("ports have no meaning for this socket type")

    def set_remote_port(self, port):
        """Set the remote port; this socket type has none."""
        raise SocketError("ports have no meaning for this socket type")


class DomainIP(Socket):
    """A socket of the Internet Protocol family (IPv4 or IPv6)."""

    def __init__(self, sock):
        if sock.family not in (socket.AF_INET, socket.AF_INET6):
            raise ValueError("DomainIP needs an IPv4 or IPv6 socket")
        super().__init__(sock)
        self._local_port = None
        self._remote_port = None

    def _hop_option(self):
        if self._sock.family == socket.AF_INET6:
            return socket.IPPROTO_IPV6, socket.IPV6_UNICAST_HOPS
        return socket.IPPROTO_IP, socket.IP_TTL

    @property
    def maximum_hop_count(self):
        """The time-to-live put on sent packets; -1 may restore the default."""
        level, option = self._hop_option()
        return get_option_int(self._sock, option, level)

    @maximum_hop_count.setter
    def maximum_hop_count(self, hops):
        level, option = self._hop_option()
        set_option_int(self._sock, option, hops, level)

    @staticmethod
    def _check_port(port):
        if not 0 <= port <= 0xFFFF:
            raise SocketError(f"port {port} is out of range")
        return port

    @property
    def local_port(self):
        """The bound local port, or the port set for binding."""
        try:
            port = self._sock.getsockname()[1]
        except OSError:
            port = 0
        return port if port else self._local_port

    @property
    def remote_port(self):
        """The connected peer's port, or the port set for connecting."""
        try:
            return self._sock.getpeername()[1]
        except OSError:
            return self._remote_port

    def set_local_port(self, port):
        """Remember *port* as the local port to bind to."""
        self._local_port = self._check_port(port)

    def set_remote_port(self, port):
        """Remember *port* as the remote port to connect to."""
        self._remote_port = self._check_port(port)