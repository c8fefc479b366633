# tinyhttp

Building blocks for HTTP/1.1 over plain sockets:

- `tinyhttp.request` — an incremental request parser that reads from any
  object with a `read(size)` method, in small pieces, and handles the request
  line, the headers and a `Content-Length` body
- `tinyhttp.headers` — `Headers`, a case-insensitive header map that joins
  repeated headers with `, `
- `tinyhttp.response` — `ResponseWriter`, which writes a response to a binary
  stream and enforces the order status line → headers → body → trailers, with
  support for chunked bodies followed by trailers
- two small commands for watching traffic: a TCP listener that prints parsed
  requests, and a UDP sender that sends lines from standard input

## Installation

```
pip install .
```

## Commands

```
tinyhttp-tcplistener [--port PORT]
```

Listens on TCP port 42069 (or `PORT`) and, for each connection, parses one
request and prints its method, target, version, headers and body. It stops
with an error message if a request cannot be parsed.

```
tinyhttp-udpsender [--host HOST] [--port PORT]
```

Reads lines from standard input and sends each one as a UDP datagram to
`localhost:42069` (or `HOST:PORT`), printing `Message sent: ...` after each.
It exits with status 1 when input ends.

## Parsing requests

```python
import io
from tinyhttp.request import request_from_reader

raw = b"GET /coffee HTTP/1.1\r\nHost: localhost:42069\r\n\r\n"
req = request_from_reader(io.BytesIO(raw))
print(req.request_line.method, req.request_line.request_target)  # GET /coffee
print(req.request_line.http_version)                             # 1.1
print(req.headers.get("host"))                                   # localhost:42069
```

Only `HTTP/1.1` is accepted, and the method must be upper-case letters. A body
is read only when `Content-Length` is present; without it, anything after the
headers is ignored. Malformed input, a body longer than `Content-Length`, or a
stream that ends before the request is complete raises `RequestError`.

`parse_request_line(data)` and `request_line_from_string(text)` expose the
request-line step on its own.

## Headers

```python
from tinyhttp.headers import Headers

h = Headers()
consumed, done = h.parse(b"Set-Person: Person1\r\n\r\n")  # (21, False)
h.set("set-person", "Person2")
print(h["set-person"])        # Person1, Person2
h.override("Set-Person", "Person3")
print(h.get("SET-PERSON"))    # Person3
```

Names are stored lower-cased. `parse` consumes one line per call and returns
`(2, True)` on the blank line that ends the header section. A bad name raises
`HeaderError`; `is_valid_token(name)` tells whether a name holds only letters,
digits and hyphens.

## Writing responses

```python
import io
from tinyhttp.response import ResponseWriter, StatusCode, default_headers

out = io.BytesIO()
body = b"hello\n"
writer = ResponseWriter(out)
writer.write_status_line(StatusCode.SUCCESS)
writer.write_headers(default_headers(len(body)))
writer.write_body(body)
```

`default_headers(n)` gives `content-length`, `connection: close` and
`content-type: text/plain`. For a chunked body, write the headers, then call
`write_chunked_body(data)` for each chunk, `write_chunked_body_done()` for the
final zero-length chunk, and `write_trailers(headers)`. Writing parts out of
order raises `WriterStateError`.

## What this package does not do

There is no HTTP server here: nothing accepts connections, passes parsed
requests to a handler and sends responses back. `tinyhttp-tcplistener` only
prints the requests it receives and never answers them. To serve HTTP, combine
`request_from_reader` and `ResponseWriter` on your own sockets.

## Tests

```
pip install .[test]
pytest
```