"""Server and client channels over TCP or multicast UDP."""

from __future__ import annotations

import abc
import contextlib
import enum
import socket
import struct
from collections.abc import Iterator

from netchannel.channel_socket import (
    ChannelSocket,
    ChannelSocketError,
    TCPSocket,
    UDPSocket,
)

DEFAULT_MULTICAST_GROUP = "239.255.255.250"
DEFAULT_SERVER_HOST = "192.168.64.8"
LISTEN_BACKLOG = 3


class Transport(enum.IntEnum):
    """Transport selector; truthy for TCP."""

    UDP = 0
    TCP = 1


@contextlib.contextmanager
def _failing_as(what: str) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        raise ChannelSocketError(f"{what}: {exc}") from exc


class Channel(abc.ABC):
    """A message channel bound to a port, using TCP or UDP."""

    def __init__(self, is_tcp: bool, port: int) -> None:
        self.is_tcp = bool(is_tcp)
        self.port = port
        self.channel_socket: ChannelSocket = TCPSocket() if self.is_tcp else UDPSocket()

    @property
    def received_message(self) -> str:
        """The last message received on this channel."""
        return self.channel_socket.received_message

    @abc.abstractmethod
    def start(self) -> None:
        """Open the channel."""

    @abc.abstractmethod
    def stop(self) -> None:
        """Close the channel."""

    @abc.abstractmethod
    def send(self, message: str | bytes) -> None:
        """Send one message."""

    @abc.abstractmethod
    def receive(self) -> None:
        """Receive one message."""

    def __enter__(self) -> Channel:
        try:
            self.start()
        except BaseException:
            self.stop()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


class ServerChannel(Channel):
    """TCP: accepts one client. UDP: sends to a multicast group."""

    def __init__(
        self,
        is_tcp: bool,
        port: int,
        multicast_group: str = DEFAULT_MULTICAST_GROUP,
    ) -> None:
        super().__init__(is_tcp, port)
        self.multicast_group = multicast_group
        self.peer_address: tuple[str, int] | None = None

    def start(self) -> None:
        channel_socket = self.channel_socket
        channel_socket.connect()
        if self.is_tcp:
            listener = channel_socket.sock
            with _failing_as("couldn't set options"):
                listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            with _failing_as("bind failed"):
                listener.bind(("", self.port))
            with _failing_as("listen failed"):
                listener.listen(LISTEN_BACKLOG)
            with _failing_as("accept failed"):
                connection, self.peer_address = listener.accept()
            channel_socket.message_sock = connection
        else:
            channel_socket.udp_dest = (self.multicast_group, self.port)

    def stop(self) -> None:
        self.channel_socket.shutdown()
        if self.is_tcp and self.channel_socket.message_sock is not None:
            self.channel_socket.message_sock.close()
            self.channel_socket.message_sock = None

    def receive(self) -> None:
        self.channel_socket.receive()

    def send(self, message: str | bytes) -> None:
        self.channel_socket.send(message)


class ClientChannel(Channel):
    """TCP: connects to a server. UDP: joins a multicast group."""

    def __init__(
        self,
        is_tcp: bool,
        port: int,
        host: str = DEFAULT_SERVER_HOST,
        multicast_group: str = DEFAULT_MULTICAST_GROUP,
    ) -> None:
        super().__init__(is_tcp, port)
        self.host = host
        self.multicast_group = multicast_group
        self._membership: bytes | None = None

    def start(self) -> None:
        channel_socket = self.channel_socket
        channel_socket.connect()
        sock = channel_socket.sock
        if self.is_tcp:
            channel_socket.message_sock = sock
            with _failing_as("invalid address / address not supported"):
                socket.inet_pton(socket.AF_INET, self.host)
            with _failing_as("connection failed"):
                sock.connect((self.host, self.port))
        else:
            with _failing_as("setting SO_REUSEADDR error"):
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            with _failing_as("bind failed"):
                sock.bind(("", self.port))
            with _failing_as("multicast join failed"):
                membership = struct.pack(
                    "4s4s",
                    socket.inet_aton(self.multicast_group),
                    socket.inet_aton("0.0.0.0"),
                )
                sock.setsockopt(socket.IPPROTO_IP, socket.IP_ADD_MEMBERSHIP, membership)
            self._membership = membership

    def stop(self) -> None:
        sock = self.channel_socket.sock
        if not self.is_tcp and sock is not None and self._membership is not None:
            with contextlib.suppress(OSError):
                sock.setsockopt(socket.IPPROTO_IP, socket.IP_DROP_MEMBERSHIP, self._membership)
        self._membership = None
        self.channel_socket.shutdown()
        if self.is_tcp:
            self.channel_socket.message_sock = None

    def receive(self) -> None:
        self.channel_socket.receive()

    def send(self, message: str | bytes) -> None:
        self.channel_socket.send(message)