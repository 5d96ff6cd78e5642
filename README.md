# calcserve

A small multi-threaded HTTP/1.1 server. It answers `GET` requests on a
handful of routes and keeps each connection open for as many requests as the
client sends.

## Installing

```
pip install .
```

## Running

```
calcserve -p 8080
```

The port is given with `-p`. It must be between 1 and 65535 and defaults to 80.
An invalid port or an unknown option prints a message to standard error and
exits with status 1. The server listens on every interface, prints
`Server listening on port <port>...` and handles each connection in its own
thread until interrupted.

## Routes

| Request                  | Response                                                   |
|--------------------------|------------------------------------------------------------|
| `GET /stats`             | `200` with the body `Stats go here`                        |
| `GET /static/<path>`     | the file `static/<path>`, relative to the working directory |
| `GET /calc/<op>/<a>/<b>` | `200` with `Result: <n>` for `add`, `subtract`, `multiply` and `divide` |
| any other `GET`          | `404` with `Resource not found: <path>`                    |

### Calculator

Operands must be whole numbers that fit in a signed 32-bit integer; results
wrap around as 32-bit integers do, and division truncates toward zero.
A missing segment, a bad operand, an unknown operation or a division by zero
gives `400 Bad Request` with a one-line message saying which.

### Static files

Files are served with `Content-Length` and `Content-Type` headers. The type
comes from the extension: `.html`, `.css`, `.js`, `.jpg`, `.png`, `.gif` and
`.md` are recognised, anything else is `text/plain`. Images, Markdown and
plain-text files are also sent with
`Content-Disposition: inline; filename="..."`. A path containing `../` or
`/..` is refused with `400`, as is anything that is not a regular file; a
missing file gives `404`.

## Using it from Python

```python
import io
from calcserve.request import read_request
from calcserve.router import route_request

stream = io.BytesIO(b"GET /calc/add/2/3 HTTP/1.1\r\nHost: localhost\r\n\r\n")
request = read_request(stream)
response = route_request(request)
print(response.status_code, response.body)   # 200 b'Result: 5\n'
print(response.to_bytes())
```

- `calcserve.line.read_http_line(stream)` reads one protocol line.
- `calcserve.request.read_request(stream)` returns a `Request`, `None` at end
  of stream, or raises `RequestError` for a malformed or truncated request.
- `calcserve.router.route_request(request)` returns a `Response`, or `None`
  when no route matches.
- `calcserve.calc.calc_handler(request)` evaluates a `/calc/...` path.
- `calcserve.server.serve(port)` runs the server loop in the current process,
  and `calcserve.server.handle_connection(sock)` serves one accepted socket.

## What it does not do

- Only `GET` requests get an answer. A `POST` is read, body included, but no
  route matches it and the connection is closed without a response; any
  other method, or a malformed request, also closes the connection.
- Only static-file responses carry a `Content-Length` header. Other responses
  have none while the connection stays open, so a client that waits for the
  end of the body will wait until it closes the connection itself.
- The stats page is a placeholder; no statistics are collected.
- There is no TLS and no configuration beyond the port.

## Tests

```
pip install .[test]
pytest
```