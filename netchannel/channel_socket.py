"""Transport sockets that carry channel messages over TCP or UDP."""

from __future__ import annotations

import abc
import socket

BUFFER_SIZE = 1024


class ChannelSocketError(Exception):
    """Raised when a channel socket operation fails."""


def _encode(message: str | bytes) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class ChannelSocket(abc.ABC):
    """Holds the listening/data sockets and the last message received."""

    def __init__(self) -> None:
        self.sock: socket.socket | None = None
        self.message_sock: socket.socket | None = None
        self.received_message: str = ""
        self.udp_dest: tuple[str, int] | None = None

    @staticmethod
    def _require(sock: socket.socket | None, what: str) -> socket.socket:
        if sock is None:
            raise ChannelSocketError(f"{what} is not open")
        return sock

    def _open(self, kind: int) -> None:
        try:
            self.sock = socket.socket(socket.AF_INET, kind)
        except OSError as exc:
            raise ChannelSocketError(f"socket failed: {exc}") from exc

    def _close(self) -> None:
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    @abc.abstractmethod
    def connect(self) -> None:
        """Create the underlying socket."""

    @abc.abstractmethod
    def send(self, message: str | bytes) -> None:
        """Send one message."""

    @abc.abstractmethod
    def receive(self) -> None:
        """Receive one message into ``received_message``."""

    @abc.abstractmethod
    def shutdown(self) -> None:
        """Close the underlying socket."""


class TCPSocket(ChannelSocket):
    """Stream socket; data flows over ``message_sock``."""

    def connect(self) -> None:
        self._open(socket.SOCK_STREAM)

    def shutdown(self) -> None:
        self._close()

    def send(self, message: str | bytes) -> None:
        sock = self._require(self.message_sock, "message socket")
        try:
            sock.sendall(_encode(message))
        except OSError as exc:
            raise ChannelSocketError(f"send failed: {exc}") from exc

    def receive(self) -> None:
        sock = self._require(self.message_sock, "message socket")
        try:
            data = sock.recv(BUFFER_SIZE)
        except OSError as exc:
            raise ChannelSocketError(f"recv failed: {exc}") from exc
        if not data:
            raise ChannelSocketError("recv failed: connection closed by peer")
        self.received_message = _decode(data)


class UDPSocket(ChannelSocket):
    """Datagram socket; sends go to ``udp_dest``."""

    def connect(self) -> None:
        self._open(socket.SOCK_DGRAM)

    def shutdown(self) -> None:
        self._close()

    def send(self, message: str | bytes) -> None:
        sock = self._require(self.sock, "socket")
        if self.udp_dest is None:
            raise ChannelSocketError("sendto failed: no destination set")
        try:
            sock.sendto(_encode(message), self.udp_dest)
        except OSError as exc:
            raise ChannelSocketError(f"sendto failed: {exc}") from exc

    def receive(self) -> None:
        sock = self._require(self.sock, "socket")
        try:
            data, _ = sock.recvfrom(BUFFER_SIZE)
        except OSError as exc:
            raise ChannelSocketError(f"recvfrom failed: {exc}") from exc
        self.received_message = _decode(data)