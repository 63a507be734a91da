import socket

import pytest

from aisutil.sockopts import (
    SocketError,
    get_linger,
    get_option_flag,
    get_option_int,
    get_protocol,
    set_linger,
    set_option_flag,
    set_option_int,
)


@pytest.fixture
def tcp_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    yield sock
    sock.close()


@pytest.fixture
def closed_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.close()
    return sock


def test_get_protocol_tcp():
    assert get_protocol("tcp") == socket.IPPROTO_TCP


def test_get_protocol_udp():
    assert get_protocol("udp") == socket.IPPROTO_UDP


def test_get_protocol_unknown():
    with pytest.raises(SocketError):
        get_protocol("no-such-protocol")


def test_socket_error_is_os_error():
    with pytest.raises(OSError):
        get_protocol("no-such-protocol")


def test_flag_round_trip_on(tcp_socket):
    set_option_flag(tcp_socket, socket.SO_REUSEADDR, True)
    assert get_option_flag(tcp_socket, socket.SO_REUSEADDR) is True


def test_flag_round_trip_off(tcp_socket):
    set_option_flag(tcp_socket, socket.SO_REUSEADDR, True)
    set_option_flag(tcp_socket, socket.SO_REUSEADDR, False)
    assert get_option_flag(tcp_socket, socket.SO_REUSEADDR) is False


def test_int_option_off_reads_zero(tcp_socket):
    set_option_int(tcp_socket, socket.SO_KEEPALIVE, 0)
    assert get_option_int(tcp_socket, socket.SO_KEEPALIVE) == 0


def test_int_option_on_reads_positive(tcp_socket):
    set_option_int(tcp_socket, socket.SO_KEEPALIVE, 1)
    assert get_option_int(tcp_socket, socket.SO_KEEPALIVE) > 0


def test_option_at_tcp_level(tcp_socket):
    set_option_flag(tcp_socket, socket.TCP_NODELAY, True, socket.IPPROTO_TCP)
    assert get_option_flag(tcp_socket, socket.TCP_NODELAY, socket.IPPROTO_TCP) is True


def test_linger_round_trip(tcp_socket):
    set_linger(tcp_socket, 5)
    assert get_linger(tcp_socket) == 5


def test_linger_off(tcp_socket):
    set_linger(tcp_socket, 5)
    set_linger(tcp_socket, 0)
    assert get_linger(tcp_socket) == 0


def test_linger_default_is_off(tcp_socket):
    assert get_linger(tcp_socket) == 0


def test_linger_negative_rejected(tcp_socket):
    with pytest.raises(ValueError):
        set_linger(tcp_socket, -1)


def test_set_option_on_closed_socket(closed_socket):
    with pytest.raises(SocketError):
        set_option_int(closed_socket, socket.SO_REUSEADDR, 1)


def test_get_option_on_closed_socket(closed_socket):
    with pytest.raises(SocketError):
        get_option_int(closed_socket, socket.SO_REUSEADDR)


def test_get_flag_on_closed_socket(closed_socket):
    with pytest.raises(SocketError):
        get_option_flag(closed_socket, socket.SO_REUSEADDR)


def test_set_linger_on_closed_socket(closed_socket):
    with pytest.raises(SocketError):
        set_linger(closed_socket, 3)


def test_get_linger_on_closed_socket(closed_socket):
    with pytest.raises(SocketError):
        get_linger(closed_socket)