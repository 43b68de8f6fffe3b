import ipaddress

import pytest

from paxcore.network import AddrKind, NetworkError, SocketTCP, SocketUDP

LOCALHOST = ipaddress.IPv4Address("127.0.0.1")
CLIENT_MSG = b"Hello server!"
SERVER_MSG = b"Hello client!"


@pytest.fixture
def tcp_server():
    with SocketTCP(AddrKind.IP4) as server:
        server.bind(LOCALHOST, 0)
        server.listen()
        yield server


def test_tcp_socket_starts_with_any_address():
    with SocketTCP(AddrKind.IP4) as sock:
        assert sock.addr() == ipaddress.IPv4Address("0.0.0.0")
        assert sock.port() == 0


def test_tcp_bind_records_address_and_port():
    with SocketTCP(AddrKind.IP4) as sock:
        sock.bind("127.0.0.1", 0)
        assert sock.addr() == LOCALHOST
        assert 0 < sock.port() <= 0xFFFF


def test_tcp_exchange(tcp_server):
    with SocketTCP(AddrKind.IP4) as client:
        client.connect(LOCALHOST, tcp_server.port())
        assert client.write(CLIENT_MSG) == len(CLIENT_MSG)
        with tcp_server.accept() as session:
            assert session.addr() == LOCALHOST
            assert session.read(1024) == CLIENT_MSG
            assert session.write(SERVER_MSG) == len(SERVER_MSG)
        assert client.read(1024) == SERVER_MSG


def test_tcp_read_after_peer_closes_is_empty(tcp_server):
    with SocketTCP(AddrKind.IP4) as client:
        client.connect(LOCALHOST, tcp_server.port())
        session = tcp_server.accept()
        session.close()
        assert client.read(16) == b""


def test_close_forgets_address_and_is_idempotent():
    sock = SocketTCP(AddrKind.IP4)
    sock.bind(LOCALHOST, 0)
    sock.close()
    sock.close()
    assert sock.addr() is None
    assert sock.port() == 0


def test_operations_on_closed_socket_raise():
    sock = SocketTCP(AddrKind.IP4)
    sock.close()
    with pytest.raises(NetworkError):
        sock.write(b"x")


def test_kind_none_cannot_be_created():
    with pytest.raises(NetworkError):
        SocketTCP(AddrKind.NONE)
    with pytest.raises(NetworkError):
        SocketUDP(AddrKind.NONE)


def test_bind_with_mismatched_family_raises():
    with SocketTCP(AddrKind.IP4) as sock:
        with pytest.raises(NetworkError):
            sock.bind(ipaddress.IPv6Address("::1"), 0)


def test_invalid_address_string_raises():
    with SocketUDP(AddrKind.IP4) as sock:
        with pytest.raises(NetworkError):
            sock.bind("localhost", 0)


def test_port_out_of_range_raises():
    with SocketTCP(AddrKind.IP4) as sock:
        with pytest.raises(ValueError):
            sock.bind(LOCALHOST, 0x10000)


def test_connect_refused_raises():
    with SocketTCP(AddrKind.IP4) as idle:
        idle.bind(LOCALHOST, 0)
        with SocketTCP(AddrKind.IP4) as client:
            with pytest.raises(NetworkError):
                client.connect(LOCALHOST, idle.port())


def test_negative_read_length_raises():
    with SocketUDP(AddrKind.IP4) as sock:
        with pytest.raises(ValueError):
            sock.read(-1)


def test_udp_exchange_with_hosts():
    with SocketUDP(AddrKind.IP4) as server, SocketUDP(AddrKind.IP4) as client:
        server.bind(LOCALHOST, 0)
        assert client.write_host(CLIENT_MSG, LOCALHOST, server.port()) == len(CLIENT_MSG)

        data, addr, port = server.read_host(1024)
        assert data == CLIENT_MSG
        assert addr == LOCALHOST

        assert server.write_host(SERVER_MSG, addr, port) == len(SERVER_MSG)
        data, addr, port = client.read_host(1024)
        assert data == SERVER_MSG
        assert addr == LOCALHOST
        assert port == server.port()


def test_udp_connected_write_and_read():
    with SocketUDP(AddrKind.IP4) as server, SocketUDP(AddrKind.IP4) as client:
        server.bind(LOCALHOST, 0)
        client.connect(LOCALHOST, server.port())
        assert client.write(CLIENT_MSG) == len(CLIENT_MSG)
        assert server.read(1024) == CLIENT_MSG


def test_udp_read_truncates_to_length():
    with SocketUDP(AddrKind.IP4) as server, SocketUDP(AddrKind.IP4) as client:
        server.bind(LOCALHOST, 0)
        client.write_host(CLIENT_MSG, "127.0.0.1", server.port())
        data, _, _ = server.read_host(5)
        assert data == CLIENT_MSG[:5]