"""TCP and UDP multicast channels with a uniform start/send/receive/stop interface."""

__version__ = "0.1.0"

__all__ = ["channel", "channel_socket", "client", "server"]