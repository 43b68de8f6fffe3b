"""TCP and UDP sockets addressed by IPv4 or IPv6 address and port."""

from __future__ import annotations

import enum
import ipaddress
import socket
from typing import Union

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
BytesLike = Union[bytes, bytearray, memoryview]

_PORT_MAX = 0xFFFF


class AddrKind(enum.Enum):
    NONE = "none"
    IP4 = "ip4"
    IP6 = "ip6"


_FAMILIES = {
    AddrKind.IP4: socket.AF_INET,
    AddrKind.IP6: socket.AF_INET6,
}

_ANY = {
    AddrKind.IP4: ipaddress.IPv4Address(0),
    AddrKind.IP6: ipaddress.IPv6Address(0),
}


class NetworkError(OSError):
    """Raised when a socket operation fails."""


def _to_address(addr: Address | str) -> Address:
    if isinstance(addr, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return addr
    try:
        return ipaddress.ip_address(addr)
    except ValueError as exc:
        raise NetworkError(f"invalid address: {addr!r}") from exc


def _kind_of(address: Address) -> AddrKind:
    return AddrKind.IP4 if address.version == 4 else AddrKind.IP6


def _check_port(port: int) -> int:
    if not 0 <= port <= _PORT_MAX:
        raise ValueError(f"port must be between 0 and {_PORT_MAX}, got {port}")
    return port


def _sockaddr(address: Address, port: int) -> tuple:
    if address.version == 4:
        return (str(address), port)
    return (str(address), port, 0, 0)


def _from_sockaddr(sockaddr: tuple) -> tuple[Address, int]:
    host = sockaddr[0].split("%", 1)[0]
    return ipaddress.ip_address(host), sockaddr[1]


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")


class _Socket:
    _type: int = socket.SOCK_STREAM

    def __init__(self, kind: AddrKind) -> None:
        family = _FAMILIES.get(kind)
        if family is None:
            raise NetworkError(f"cannot create a socket of kind {kind!r}")
        try:
            self._sock: socket.socket | None = socket.socket(family, self._type)
        except OSError as exc:
            raise NetworkError(f"cannot create a socket of kind {kind.name}") from exc
        self._kind = kind
        self._addr: Address | None = _ANY[kind]
        self._port = 0

    def _handle(self) -> socket.socket:
        if self._sock is None:
            raise NetworkError("socket is closed")
        return self._sock

    def addr(self) -> Address | None:
        """Return the address the socket is bound or connected to, None once closed."""
        return self._addr

    def port(self) -> int:
        """Return the port the socket is bound or connected to, 0 when unknown."""
        return self._port

    def _target(self, addr: Address | str, port: int) -> tuple[Address, tuple]:
        address = _to_address(addr)
        _check_port(port)
        if _kind_of(address) is not self._kind:
            raise NetworkError(
                f"address {address} does not match a socket of kind {self._kind.name}"
            )
        return address, _sockaddr(address, port)

    def bind(self, addr: Address | str, port: int) -> None:
        """Bind the socket to a local address and port."""
        handle = self._handle()
        address, target = self._target(addr, port)
        try:
            handle.bind(target)
            bound = handle.getsockname()
        except OSError as exc:
            raise NetworkError(f"cannot bind to {address} port {port}") from exc
        self._addr, self._port = _from_sockaddr(bound)

    def connect(self, addr: Address | str, port: int) -> None:
        """Connect the socket to a remote address and port."""
        handle = self._handle()
        address, target = self._target(addr, port)
        try:
            handle.connect(target)
        except OSError as exc:
            raise NetworkError(f"cannot connect to {address} port {port}") from exc

    def write(self, data: BytesLike) -> int:
        """Send all of data; return the number of bytes sent."""
        handle = self._handle()
        view = memoryview(bytes(data))
        written = 0
        while written < len(view):
            try:
                count = handle.send(view[written:])
            except OSError as exc:
                if written == 0:
                    raise NetworkError("cannot send data") from exc
                break
            if count <= 0:
                break
            written += count
        return written

    def read(self, length: int) -> bytes:
        """Receive up to length bytes; empty when the peer has closed."""
        _check_length(length)
        handle = self._handle()
        try:
            return handle.recv(length)
        except OSError as exc:
            raise NetworkError("cannot receive data") from exc

    def close(self) -> None:
        """Close the socket; closing twice does nothing."""
        if self._sock is None:
            return
        self._sock.close()
        self._sock = None
        self._addr = None
        self._port = 0

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()


class SocketTCP(_Socket):
    """A stream socket."""

    _type = socket.SOCK_STREAM

    def __init__(self, kind: AddrKind) -> None:
        super().__init__(kind)

    def addr(self) -> Address | None:
        return super().addr()

    def port(self) -> int:
        return super().port()

    def bind(self, addr: Address | str, port: int) -> None:
        super().bind(addr, port)

    def listen(self) -> None:
        """Start accepting connections."""
        handle = self._handle()
        try:
            handle.listen(socket.SOMAXCONN)
        except OSError as exc:
            raise NetworkError("cannot listen on the socket") from exc

    def connect(self, addr: Address | str, port: int) -> None:
        super().connect(addr, port)

    def accept(self) -> SocketTCP:
        """Wait for a connection; return a socket whose addr and port are the peer's."""
        handle = self._handle()
        try:
            conn, peer = handle.accept()
        except OSError as exc:
            raise NetworkError("cannot accept a connection") from exc
        result = SocketTCP.__new__(SocketTCP)
        result._sock = conn
        result._kind = self._kind
        result._addr, result._port = _from_sockaddr(peer)
        return result

    def write(self, data: BytesLike) -> int:
        return super().write(data)

    def read(self, length: int) -> bytes:
        return super().read(length)

    def close(self) -> None:
        super().close()

    def __enter__(self) -> SocketTCP:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class SocketUDP(_Socket):
    """A datagram socket."""

    _type = socket.SOCK_DGRAM

    def __init__(self, kind: AddrKind) -> None:
        super().__init__(kind)

    def addr(self) -> Address | None:
        return super().addr()

    def port(self) -> int:
        return super().port()

    def bind(self, addr: Address | str, port: int) -> None:
        super().bind(addr, port)

    def connect(self, addr: Address | str, port: int) -> None:
        super().connect(addr, port)

    def write(self, data: BytesLike) -> int:
        return super().write(data)

    def write_host(self, data: BytesLike, addr: Address | str, port: int) -> int:
        """Send all of data to addr and port; return the number of bytes sent."""
        handle = self._handle()
        address, target = self._target(addr, port)
        view = memoryview(bytes(data))
        written = 0
        while written < len(view):
            try:
                count = handle.sendto(view[written:], target)
            except OSError as exc:
                if written == 0:
                    raise NetworkError(f"cannot send data to {address} port {port}") from exc
                break
            if count <= 0:
                break
            written += count
        return written

    def read(self, length: int) -> bytes:
        return super().read(length)

    def read_host(self, length: int) -> tuple[bytes, Address, int]:
        """Receive one datagram of up to length bytes; return (data, addr, port) of the sender."""
        _check_length(length)
        handle = self._handle()
        try:
            data, sender = handle.recvfrom(length)
        except OSError as exc:
            raise NetworkError("cannot receive data") from exc
        address, port = _from_sockaddr(sender)
        return data, address, port

    def close(self) -> None:
        super().close()

    def __enter__(self) -> SocketUDP:
        return self

    def __exit__(self, *args) -> None:
        self.close()