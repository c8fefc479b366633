"""Send lines typed on standard input as UDP datagrams."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Iterable, Protocol, TextIO

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 42069


class _Sender(Protocol):
    def send(self, data: bytes, /) -> int: ...


def send_lines(lines: Iterable[str], sock: _Sender, output: TextIO) -> int:
    """Prompt on *output*, send each line from *lines* over *sock*.

    Returns the number of messages sent once *lines* is exhausted.
    """
    pending = iter(lines)
    sent = 0
    while True:
        output.write(">")
        output.flush()
        try:
            message = next(pending)
        except StopIteration:
            return sent
        sock.send(message.encode("utf-8"))
        sent += 1
        output.write(f"Message sent: {message}")


def main(argv: list[str] | None = None) -> int:
    """Send standard input line by line to a UDP address; returns the exit status."""
    parser = argparse.ArgumentParser(description="Send lines of input as UDP datagrams.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="destination host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="destination port")
    args = parser.parse_args(argv)
    address = f"{args.host}:{args.port}"

    try:
        family, sock_type, proto, _, sockaddr = socket.getaddrinfo(
            args.host, args.port, type=socket.SOCK_DGRAM
        )[0]
    except OSError as exc:
        print(f"Error resolving UDP address: {exc}", file=sys.stderr)
        return 1

    try:
        sock = socket.socket(family, sock_type, proto)
    except OSError as exc:
        print(f"Error dialing UDP: {exc}", file=sys.stderr)
        return 1

    with sock:
        try:
            sock.connect(sockaddr)
        except OSError as exc:
            print(f"Error dialing UDP: {exc}", file=sys.stderr)
            return 1

        print(
            f"Sending to {address}. Type your message and press Enter to send. "
            "Press Ctrl+C to exit."
        )
        try:
            send_lines(sys.stdin, sock, sys.stdout)
        except OSError as exc:
            print(f"Error sending message: {exc}", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            return 130

    print("Error reading input: EOF", file=sys.stderr)
    return 1