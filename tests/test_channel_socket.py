import socket

import pytest

from netchannel.channel_socket import (
    BUFFER_SIZE,
    ChannelSocketError,
    TCPSocket,
    UDPSocket,
)


@pytest.fixture
def tcp_pair():
    left, right = socket.socketpair()
    sender, receiver = TCPSocket(), TCPSocket()
    sender.message_sock = left
    receiver.message_sock = right
    yield sender, receiver
    left.close()
    right.close()


def test_tcp_roundtrip_text(tcp_pair):
    sender, receiver = tcp_pair
    sender.send("hello")
    receiver.receive()
    assert receiver.received_message == "hello"


def test_tcp_roundtrip_bytes(tcp_pair):
    sender, receiver = tcp_pair
    sender.send(b"raw data")
    receiver.receive()
    assert receiver.received_message == "raw data"


def test_tcp_receive_is_bounded_by_buffer(tcp_pair):
    sender, receiver = tcp_pair
    sender.send("x" * (BUFFER_SIZE * 2))
    receiver.receive()
    assert 0 < len(receiver.received_message) <= BUFFER_SIZE
    assert set(receiver.received_message) == {"x"}


def test_tcp_receive_after_peer_closed_raises(tcp_pair):
    sender, receiver = tcp_pair
    sender.message_sock.close()
    with pytest.raises(ChannelSocketError):
        receiver.receive()


def test_tcp_send_without_message_socket_raises():
    with pytest.raises(ChannelSocketError):
        TCPSocket().send("hello")


def test_initial_received_message_is_empty():
    assert TCPSocket().received_message == ""
    assert UDPSocket().received_message == ""


def test_tcp_connect_and_shutdown():
    tcp = TCPSocket()
    tcp.connect()
    assert tcp.sock.type == socket.SOCK_STREAM
    tcp.shutdown()
    assert tcp.sock is None


def test_udp_roundtrip_to_self():
    udp = UDPSocket()
    udp.connect()
    try:
        assert udp.sock.type == socket.SOCK_DGRAM
        udp.sock.bind(("127.0.0.1", 0))
        udp.sock.settimeout(5)
        udp.udp_dest = udp.sock.getsockname()
        udp.send("ping")
        udp.receive()
        assert udp.received_message == "ping"
    finally:
        udp.shutdown()
    assert udp.sock is None


def test_udp_send_without_destination_raises():
    udp = UDPSocket()
    udp.connect()
    try:
        with pytest.raises(ChannelSocketError, match="destination"):
            udp.send("ping")
    finally:
        udp.shutdown()


def test_udp_send_before_connect_raises():
    udp = UDPSocket()
    udp.udp_dest = ("127.0.0.1", 9)
    with pytest.raises(ChannelSocketError):
        udp.send("ping")