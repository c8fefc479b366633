"""Incremental parsing of HTTP/1.1 requests from a byte stream."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Protocol

from tinyhttp.headers import CRLF, HeaderError, Headers

_BUFFER_SIZE = 8
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class RequestError(ValueError):
    """Raised when a request cannot be parsed."""


class _Reader(Protocol):
    def read(self, size: int = ..., /) -> bytes: ...


class _State(enum.Enum):
    INITIALIZED = 0
    DONE = 1
    PARSING_HEADERS = 2
    PARSING_BODY = 3


@dataclass
class RequestLine:
    """The method, target and version from the first line of a request."""

    method: str = ""
    request_target: str = ""
    http_version: str = ""


@dataclass
class Request:
    """A parsed HTTP request."""

    request_line: RequestLine = field(default_factory=RequestLine)
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""
    _state: _State = field(default=_State.INITIALIZED, init=False, repr=False, compare=False)

    def _parse(self, data: bytes) -> int:
        total = 0
        while self._state is not _State.DONE:
            consumed = self._parse_single(data[total:])
            total += consumed
            if consumed == 0:
                break
        return total

    def _parse_single(self, data: bytes) -> int:
        if self._state is _State.INITIALIZED:
            request_line, consumed = parse_request_line(data)
            if request_line is None:
                return 0
            self.request_line = request_line
            self._state = _State.PARSING_HEADERS
            return consumed

        if self._state is _State.PARSING_HEADERS:
            try:
                consumed, done = self.headers.parse(data)
            except HeaderError as exc:
                raise RequestError(str(exc)) from exc
            if done:
                self._state = _State.PARSING_BODY
            return consumed

        if self._state is _State.PARSING_BODY:
            raw_length = self.headers.get("Content-Length")
            if raw_length is None:
                self._state = _State.DONE
                return len(data)
            if _INTEGER_RE.fullmatch(raw_length) is None:
                raise RequestError(f"invalid Content-Length: {raw_length}")
            content_length = int(raw_length)

            self.body += data
            if len(self.body) > content_length:
                raise RequestError("Content-Length too large")
            if len(self.body) == content_length:
                self._state = _State.DONE
            return len(data)

        raise RequestError("trying to read data in a done state")


def request_from_reader(reader: _Reader) -> Request:
    """Read and parse one request from *reader*, an object with ``read(size)``.

    Raises RequestError if the request is malformed or the stream ends early.
    """
    request = Request()
    buffer = bytearray()
    capacity = _BUFFER_SIZE
    while request._state is not _State.DONE:
        if len(buffer) >= capacity:
            capacity *= 2
        chunk = reader.read(capacity - len(buffer))
        if not chunk:
            raise RequestError(
                f"incomplete request, in state: {request._state.name.lower()}, "
                f"{len(buffer)} unparsed bytes on EOF"
            )
        buffer += chunk
        consumed = request._parse(bytes(buffer))
        del buffer[:consumed]
    return request


def parse_request_line(data: bytes) -> tuple[RequestLine | None, int]:
    """Parse the request line at the start of *data*.

    Returns the line and the number of bytes consumed, or ``(None, 0)`` when
    *data* does not yet hold a complete line.
    """
    idx = data.find(CRLF)
    if idx == -1:
        return None, 0
    text = data[:idx].decode("utf-8", errors="surrogateescape")
    return request_line_from_string(text), idx + len(CRLF)


def request_line_from_string(text: str) -> RequestLine:
    """Validate and split a request line such as ``GET / HTTP/1.1``."""
    parts = text.split(" ")
    if len(parts) != 3:
        raise RequestError(f"poorly formatted request-line: {text}")
    method, request_target, version_text = parts

    if not all("A" <= c <= "Z" for c in method):
        raise RequestError(f"invalid method: {method}")

    version_parts = version_text.split("/")
    if len(version_parts) != 2:
        raise RequestError(f"malformed start-line: {text}")
    protocol, version = version_parts
    if protocol != "HTTP":
        raise RequestError(f"unrecognized HTTP-version: {protocol}")
    if version != "1.1":
        raise RequestError(f"unrecognized HTTP-version: {version}")

    return RequestLine(method=method, request_target=request_target, http_version=version)