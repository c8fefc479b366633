"""Writing HTTP/1.1 responses in order: status line, headers, body, trailers."""

from __future__ import annotations

import enum
from typing import Mapping, Protocol

from tinyhttp.headers import CRLF, Headers


class StatusCode(enum.IntEnum):
    """Status codes the server knows a reason phrase for."""

    SUCCESS = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500


_REASON_PHRASES = {
    StatusCode.SUCCESS: "OK",
    StatusCode.BAD_REQUEST: "Bad Request",
    StatusCode.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


class WriterState(enum.Enum):
    """How far a response has been written."""

    INITIALIZE = enum.auto()
    STATUS_LINE_WRITTEN = enum.auto()
    HEADERS_WRITTEN = enum.auto()
    BODY_WRITTEN = enum.auto()
    TRAILERS_WRITTEN = enum.auto()


class WriterStateError(RuntimeError):
    """Raised when a part of a response is written out of order."""


class _Stream(Protocol):
    def write(self, data: bytes, /) -> object: ...


def status_line(status_code: int) -> bytes:
    """Return the status line for *status_code*, CRLF included.

    Codes without a known reason phrase get an empty one.
    """
    code = int(status_code)
    reason = _REASON_PHRASES.get(code, "")
    return f"HTTP/1.1 {code} {reason}\r\n".encode("ascii")


def default_headers(content_length: int) -> Headers:
    """Return the headers every response starts from."""
    headers = Headers()
    headers.set("Content-Length", str(content_length))
    headers.set("Connection", "close")
    headers.set("Content-Type", "text/plain")
    return headers


class ResponseWriter:
    """Writes the parts of one response to a binary stream, enforcing order."""

    def __init__(self, stream: _Stream) -> None:
        self.stream = stream
        self.state = WriterState.INITIALIZE

    def _require(self, expected: WriterState) -> None:
        if self.state is not expected:
            raise WriterStateError(f"writer in an incorrect state: {self.state.name}")

    def _write_fields(self, headers: Mapping[str, str]) -> None:
        for key, value in headers.items():
            self.stream.write(f"{key}: {value}\r\n".encode("utf-8", "surrogateescape"))
        self.stream.write(CRLF)

    def write_status_line(self, status_code: int) -> None:
        """Write the status line; must come first."""
        self._require(WriterState.INITIALIZE)
        self.stream.write(status_line(status_code))
        self.state = WriterState.STATUS_LINE_WRITTEN

    def write_headers(self, headers: Mapping[str, str]) -> None:
        """Write the header section, ended by a blank line."""
        self._require(WriterState.STATUS_LINE_WRITTEN)
        self._write_fields(headers)
        self.state = WriterState.HEADERS_WRITTEN

    def write_body(self, data: bytes) -> int:
        """Write the whole body and return its length."""
        self._require(WriterState.HEADERS_WRITTEN)
        self.stream.write(data)
        self.state = WriterState.BODY_WRITTEN
        return len(data)

    def write_chunked_body(self, data: bytes) -> int:
        """Write *data* as one chunk of a chunked body and return its length."""
        self.stream.write(f"{len(data):x}".encode("ascii") + CRLF)
        self.stream.write(data)
        self.stream.write(CRLF)
        return len(data)

    def write_chunked_body_done(self) -> int:
        """Write the final zero-length chunk and return the bytes written."""
        self.state = WriterState.BODY_WRITTEN
        terminator = b"0" + CRLF
        self.stream.write(terminator)
        return len(terminator)

    def write_trailers(self, headers: Mapping[str, str]) -> None:
        """Write the trailer fields that follow a chunked body."""
        if self.state is not WriterState.BODY_WRITTEN:
            raise WriterStateError(f"cannot write trailers in state {self.state.name}")
        try:
            self._write_fields(headers)
        finally:
            self.state = WriterState.TRAILERS_WRITTEN