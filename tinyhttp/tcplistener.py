"""A TCP listener that parses each incoming request and prints it."""

from __future__ import annotations

import argparse
import socket

from tinyhttp.request import Request, RequestError, request_from_reader

DEFAULT_PORT = 42069


def describe_request(request: Request) -> str:
    """Render the request line, headers and body as readable text."""
    line = request.request_line
    parts = [
        "Request line:\n",
        f"- Method: {line.method}\n",
        f"- Target: {line.request_target}\n",
        f"- Version: {line.http_version}\n",
        "Headers:\n",
    ]
    parts.extend(f"- {key}: {value}\n" for key, value in request.headers.items())
    parts.append(f"Body:\n{request.body.decode('utf-8', errors='replace')}\n")
    return "".join(parts)


def _format_address(address: tuple) -> str:
    host, port = address[:2]
    return f"{host}:{port}"


def main(argv: list[str] | None = None) -> None:
    """Listen for TCP connections and print every request received."""
    parser = argparse.ArgumentParser(description="Print HTTP requests received over TCP.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    try:
        listener = socket.create_server(("", args.port))
    except OSError as exc:
        raise SystemExit(f"error listening for TCP traffic: {exc}") from exc

    with listener:
        print(f"Listening for TCP traffic on :{args.port}")
        while True:
            try:
                conn, address = listener.accept()
            except OSError as exc:
                raise SystemExit(f"error: {exc}") from exc
            remote = _format_address(address)
            with conn, conn.makefile("rb", buffering=0) as stream:
                print("Accepted connection from", remote)
                try:
                    request = request_from_reader(stream)
                except RequestError as exc:
                    raise SystemExit(f"error reading request: {exc}") from exc
                print(describe_request(request), end="")
            print("Connection to ", remote, "closed")