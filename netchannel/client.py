"""Command that opens a client channel and prints what it receives."""

from __future__ import annotations

import argparse
import sys

from netchannel.channel import (
    DEFAULT_MULTICAST_GROUP,
    DEFAULT_SERVER_HOST,
    ClientChannel,
)
from netchannel.channel_socket import ChannelSocketError

TCP_PORT = 3500
UDP_PORT = 12345
CLIENT_MESSAGE = "hello from client"


def _parse(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="netchannel-client",
        description="Receive a message over multicast UDP, or exchange one over TCP.",
    )
    parser.add_argument("--tcp", action="store_true", help="use TCP instead of UDP")
    parser.add_argument("--port", type=int, help="port to use")
    parser.add_argument("--host", default=DEFAULT_SERVER_HOST, help="TCP server address")
    parser.add_argument("--group", default=DEFAULT_MULTICAST_GROUP, help="multicast group")
    parser.add_argument("--message", default=CLIENT_MESSAGE, help="message sent over TCP")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse(argv)
    port = args.port if args.port is not None else (TCP_PORT if args.tcp else UDP_PORT)
    client = ClientChannel(args.tcp, port, host=args.host, multicast_group=args.group)
    try:
        with client:
            if args.tcp:
                client.send(args.message)
            client.receive()
            print(client.received_message)
    except ChannelSocketError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())