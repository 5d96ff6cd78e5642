import io

import pytest

from calcserve.request import Request, RequestError, read_headers, read_request


def _stream(data: bytes) -> io.BytesIO:
    return io.BytesIO(data)


def test_simple_get():
    request = read_request(
        _stream(b"GET /calc/add/1/2 HTTP/1.1\r\nHost: localhost\r\n\r\n")
    )
    assert request.method == "GET"
    assert request.path == "/calc/add/1/2"
    assert request.version == "HTTP/1.1"
    assert request.headers == [("Host", "localhost")]
    assert request.body == b""


def test_post_with_body():
    request = read_request(
        _stream(b"POST /stats HTTP/1.1\r\nContent-Length: 5\r\n\r\nhello")
    )
    assert request.method == "POST"
    assert request.body == b"hello"


def test_content_length_zero_gives_empty_body():
    stream = _stream(b"GET /stats HTTP/1.1\r\nContent-Length: 0\r\n\r\nextra")
    request = read_request(stream)
    assert request.body == b""
    assert stream.read() == b"extra"


def test_content_length_with_trailing_text_uses_leading_number():
    request = read_request(
        _stream(b"POST / HTTP/1.1\r\nContent-Length: 3xyz\r\n\r\nabcdef")
    )
    assert request.body == b"abc"


def test_empty_stream_returns_none():
    assert read_request(_stream(b"")) is None


def test_only_blank_lines_returns_none():
    assert read_request(_stream(b"\r\n\r\n")) is None


def test_leading_blank_lines_skipped():
    request = read_request(_stream(b"\r\n\nGET /stats HTTP/1.1\r\n\r\n"))
    assert request.path == "/stats"


def test_two_requests_on_one_stream():
    stream = _stream(
        b"GET /a HTTP/1.1\r\n\r\n"
        b"POST /b HTTP/1.1\r\nContent-Length: 2\r\n\r\nok"
    )
    first = read_request(stream)
    second = read_request(stream)
    assert (first.method, first.path) == ("GET", "/a")
    assert (second.method, second.path, second.body) == ("POST", "/b", b"ok")
    assert read_request(stream) is None


@pytest.mark.parametrize(
    "data",
    [
        b"PUT /x HTTP/1.1\r\n\r\n",
        b"GET /x\r\n\r\n",
        b"GET /x HTTP/1.1 extra\r\n\r\n",
        b"GET /x HTTP/1.1\t\r\n\r\n",
    ],
)
def test_bad_request_line_raises(data):
    with pytest.raises(RequestError):
        read_request(_stream(data))


def test_missing_header_terminator_raises():
    with pytest.raises(RequestError):
        read_request(_stream(b"GET /x HTTP/1.1\r\nHost: localhost\r\n"))


def test_unparsable_content_length_raises():
    with pytest.raises(RequestError):
        read_request(_stream(b"POST /x HTTP/1.1\r\nContent-Length: abc\r\n\r\n"))


def test_short_body_raises():
    with pytest.raises(RequestError):
        read_request(
            _stream(b"POST /x HTTP/1.1\r\nContent-Length: 10\r\n\r\nshort")
        )


def test_read_headers_stops_at_blank_line():
    stream = _stream(b"A: 1\r\nB:  two words \r\n\r\nbody")
    assert read_headers(stream) == [("A", "1"), ("B", "two words")]
    assert stream.read() == b"body"


def test_read_headers_rejects_line_without_colon():
    with pytest.raises(RequestError):
        read_headers(_stream(b"not a header\r\n\r\n"))


def test_header_lookup_is_case_insensitive():
    request = Request("GET", "/", "HTTP/1.1", [("Content-Length", "4")])
    assert request.header("content-length") == "4"
    assert request.header("Host") is None


def test_describe_contains_fields():
    request = Request("GET", "/stats", "HTTP/1.1", [("Host", "localhost")])
    lines = request.describe().splitlines()
    assert lines[0] == "vvv Request vvv"
    assert "Method: GET" in lines
    assert "Path: /stats" in lines
    assert "Version: HTTP/1.1" in lines
    assert "Host: localhost" in lines
    assert lines[-1] == "^^^ Request ^^^"