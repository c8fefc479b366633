import io

import pytest

from tinyhttp.headers import Headers
from tinyhttp.response import (
    ResponseWriter,
    StatusCode,
    WriterState,
    WriterStateError,
    default_headers,
    status_line,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        (StatusCode.SUCCESS, b"HTTP/1.1 200 OK\r\n"),
        (StatusCode.BAD_REQUEST, b"HTTP/1.1 400 Bad Request\r\n"),
        (StatusCode.INTERNAL_SERVER_ERROR, b"HTTP/1.1 500 Internal Server Error\r\n"),
    ],
)
def test_status_line_known_codes(code, expected):
    assert status_line(code) == expected


def test_status_line_unknown_code_has_empty_reason():
    assert status_line(404) == b"HTTP/1.1 404 \r\n"


def test_default_headers():
    assert default_headers(7) == {
        "content-length": "7",
        "connection": "close",
        "content-type": "text/plain",
    }


def test_full_response_wire_bytes():
    stream = io.BytesIO()
    writer = ResponseWriter(stream)
    writer.write_status_line(StatusCode.SUCCESS)
    writer.write_headers(default_headers(2))
    assert writer.write_body(b"hi") == 2
    assert stream.getvalue() == (
        b"HTTP/1.1 200 OK\r\n"
        b"content-length: 2\r\n"
        b"connection: close\r\n"
        b"content-type: text/plain\r\n"
        b"\r\n"
        b"hi"
    )
    assert writer.state is WriterState.BODY_WRITTEN


def test_headers_before_status_line_rejected():
    writer = ResponseWriter(io.BytesIO())
    with pytest.raises(WriterStateError):
        writer.write_headers(default_headers(0))
    assert writer.state is WriterState.INITIALIZE


def test_status_line_twice_rejected():
    writer = ResponseWriter(io.BytesIO())
    writer.write_status_line(StatusCode.SUCCESS)
    with pytest.raises(WriterStateError):
        writer.write_status_line(StatusCode.SUCCESS)


def test_body_twice_rejected():
    stream = io.BytesIO()
    writer = ResponseWriter(stream)
    writer.write_status_line(StatusCode.SUCCESS)
    writer.write_headers(Headers())
    writer.write_body(b"a")
    before = stream.getvalue()
    with pytest.raises(WriterStateError):
        writer.write_body(b"b")
    assert stream.getvalue() == before


def test_chunk_wire_bytes():
    stream = io.BytesIO()
    writer = ResponseWriter(stream)
    assert writer.write_chunked_body(b"hello") == 5
    assert stream.getvalue() == b"5\r\nhello\r\n"


def test_chunk_size_is_hex_length():
    stream = io.BytesIO()
    data = b"a" * 300
    ResponseWriter(stream).write_chunked_body(data)
    size_line, rest = stream.getvalue().split(b"\r\n", 1)
    assert int(size_line, 16) == len(data)
    assert rest == data + b"\r\n"


def test_chunked_done_and_trailers():
    stream = io.BytesIO()
    writer = ResponseWriter(stream)
    assert writer.write_chunked_body_done() == 3
    assert writer.state is WriterState.BODY_WRITTEN
    writer.write_trailers(Headers({"X-Content-Length": "5"}))
    assert stream.getvalue() == b"0\r\nx-content-length: 5\r\n\r\n"
    assert writer.state is WriterState.TRAILERS_WRITTEN


def test_trailers_before_body_rejected():
    writer = ResponseWriter(io.BytesIO())
    writer.write_status_line(StatusCode.SUCCESS)
    with pytest.raises(WriterStateError):
        writer.write_trailers(Headers())
    assert writer.state is WriterState.STATUS_LINE_WRITTEN


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def write(self, data):
        self.calls += 1
        if self.calls > 1:
            raise OSError("broken pipe")
        return len(data)


def test_trailers_state_advances_even_on_write_error():
    writer = ResponseWriter(_FailingStream())
    writer.write_chunked_body_done()
    with pytest.raises(OSError):
        writer.write_trailers(Headers({"a": "b"}))
    assert writer.state is WriterState.TRAILERS_WRITTEN