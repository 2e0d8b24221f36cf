"""Command that opens a server channel and sends a greeting."""

from __future__ import annotations

import argparse
import sys

from netchannel.channel import DEFAULT_MULTICAST_GROUP, ServerChannel
from netchannel.channel_socket import ChannelSocketError

TCP_PORT = 3500
UDP_PORT = 12345
SERVER_MESSAGE = "hello from server"


def _parse(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="netchannel-server",
        description="Send a message over multicast UDP, or exchange one over TCP.",
    )
    parser.add_argument("--tcp", action="store_true", help="use TCP instead of UDP")
    parser.add_argument("--port", type=int, help="port to use")
    parser.add_argument("--group", default=DEFAULT_MULTICAST_GROUP, help="multicast group")
    parser.add_argument("--message", default=SERVER_MESSAGE, help="message to send")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse(argv)
    port = args.port if args.port is not None else (TCP_PORT if args.tcp else UDP_PORT)
    server = ServerChannel(args.tcp, port, multicast_group=args.group)
    try:
        with server:
            if args.tcp:
                server.receive()
                print(server.received_message)
            server.send(args.message)
    except ChannelSocketError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())