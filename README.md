# netchannel

`netchannel` wraps plain sockets in two kinds of channel that share one
interface: `start()`, `send(message)`, `receive()` and `stop()`.

- **TCP**: a `ServerChannel` binds to a port on all interfaces, listens and
  accepts one client. A `ClientChannel` connects to it. Both sides can then
  send and receive messages.
- **UDP multicast**: a `ServerChannel` sends datagrams to a multicast group
  (`239.255.255.250` by default). Each `ClientChannel` binds to the port,
  joins the group and receives them.

A single `receive()` reads at most 1024 bytes and decodes them as UTF-8.
The result is kept on the channel in its `received_message` property.
Messages passed to `send()` may be `str`, which is encoded as UTF-8, or
`bytes`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line use

There are two commands, `netchannel-client` and `netchannel-server`. By
default they use UDP multicast on port 12345. Start the receiver first:

```
netchannel-client
```

Then run the sender from another terminal:

```
netchannel-server
```

The client joins the multicast group, waits for one datagram, prints it
and exits. The server sends one message (`hello from server` by default)
to the group and exits.

With `--tcp` the commands use TCP on port 3500 instead. The server waits
for one client, prints the message it receives and replies. The client
connects, sends its message (`hello from client` by default), then prints
the reply:

```
netchannel-server --tcp
netchannel-client --tcp --host 127.0.0.1
```

Options:

| Option | Commands | Meaning |
| --- | --- | --- |
| `--tcp` | both | use TCP instead of UDP multicast |
| `--port PORT` | both | port to use (default 3500 for TCP, 12345 for UDP) |
| `--group GROUP` | both | multicast group (default `239.255.255.250`) |
| `--message TEXT` | both | message to send |
| `--host HOST` | client | TCP server address (default `192.168.64.8`) |

If a socket operation fails, the command prints `error: ...` to standard
error and exits with status 1.

## Library use

Channels are context managers. `start()` runs on entry and `stop()` runs
on exit. If `start()` fails on entry, `stop()` is still called before the
error propagates.

UDP multicast receiver:

```python
from netchannel.channel import ClientChannel

with ClientChannel(is_tcp=False, port=12345) as client:
    client.receive()
    print(client.received_message)
```

UDP multicast sender:

```python
from netchannel.channel import ServerChannel

with ServerChannel(is_tcp=False, port=12345) as server:
    server.send("hello from server")
```

TCP server that waits for one client, reads its message and replies:

```python
from netchannel.channel import ServerChannel

with ServerChannel(is_tcp=True, port=3500) as server:
    server.receive()
    print(server.received_message)
    server.send("hello from server")
```

After `start()`, the TCP server's `peer_address` holds the address of the
client it accepted.

TCP client:

```python
from netchannel.channel import ClientChannel

with ClientChannel(is_tcp=True, port=3500, host="127.0.0.1") as client:
    client.send("hello from client")
    client.receive()
    print(client.received_message)
```

`is_tcp` accepts any truthy value. `Transport.TCP` and `Transport.UDP`
from `netchannel.channel` can be used instead. `ClientChannel` takes
`host` and `multicast_group` keyword arguments. `ServerChannel` takes
`multicast_group`.

Socket failures raise `ChannelSocketError` from `netchannel.channel_socket`.
This includes a TCP peer that closes the connection before a message
arrives. The lower-level `TCPSocket` and `UDPSocket` classes in that
module are what the channels are built on. Each has `connect()`,
`send(message)`, `receive()` and `shutdown()`, and can be used directly
when finer control is needed.

## Limitations

- A TCP server accepts exactly one client and exchanges messages only with
  that client.
- In UDP mode the server only sends and the client only receives. Calling
  `receive()` on a UDP server fails because its socket is never bound to a
  port. Calling `send()` on a UDP client raises `ChannelSocketError`
  because it has no destination.
- There is no message framing. Each `receive()` returns whatever one read
  of up to 1024 bytes produced.