import socket
import ssl
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest import mock

import pytest

from tgkit.net.http_client import HttpClient, SslHttpClient, UrllibHttpClient
from tgkit.net.http_parser import HttpReqArg, generate_request
from tgkit.net.url import Url


class _FakeRaw:
    def __init__(self):
        self.options = []

    def setsockopt(self, *option):
        self.options.append(option)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class _FakeTls:
    def __init__(self, replies):
        self.replies = list(replies)
        self.sent = b""
        self.timeouts = []

    def sendall(self, data):
        self.sent += data

    def settimeout(self, value):
        self.timeouts.append(value)

    def recv(self, size):
        reply = self.replies.pop(0) if self.replies else b""
        if isinstance(reply, BaseException):
            raise reply
        return reply

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_base_client_is_abstract():
    with pytest.raises(TypeError):
        HttpClient()


def test_subclass_must_implement_make_request():
    class Echo(HttpClient):
        def make_request(self, url, args):
            return url.path.encode()

    assert Echo().make_request(Url.parse("https://h/x"), []) == b"/x"


def test_ssl_client_sends_generated_request_and_returns_body():
    url = Url.parse("https://api.telegram.org/botT/sendMessage")
    args = [HttpReqArg("chat_id", 5), HttpReqArg("text", "hello")]
    raw = _FakeRaw()
    tls = _FakeTls([b"HTTP/1.1 200 OK\r\nContent-Length: 11\r\n\r\n{\"ok\":", b"true}", b""])
    with mock.patch.object(socket, "create_connection", return_value=raw) as connect, \
            mock.patch.object(ssl.SSLContext, "wrap_socket", return_value=tls) as wrap:
        body = SslHttpClient(no_delay=True).make_request(url, args)
    assert body == b'{"ok":true}'
    assert tls.sent == generate_request(url, args)
    assert connect.call_args.args[0] == ("api.telegram.org", 443)
    assert wrap.call_args.kwargs["server_hostname"] == "api.telegram.org"
    assert raw.options == [(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)]
    assert tls.timeouts[0] == 20.0


def test_ssl_client_stops_reading_on_ssl_error():
    url = Url.parse("https://h/p")
    tls = _FakeTls([b"HTTP/1.1 200 OK\r\n\r\nabc", ssl.SSLEOFError()])
    with mock.patch.object(socket, "create_connection", return_value=_FakeRaw()), \
            mock.patch.object(ssl.SSLContext, "wrap_socket", return_value=tls):
        assert SslHttpClient().make_request(url, []) == b"abc"


def test_ssl_client_read_timeout():
    url = Url.parse("https://h/p")
    tls = _FakeTls([socket.timeout("timed out")])
    with mock.patch.object(socket, "create_connection", return_value=_FakeRaw()), \
            mock.patch.object(ssl.SSLContext, "wrap_socket", return_value=tls):
        with pytest.raises(TimeoutError):
            SslHttpClient(read_timeout=0.5).make_request(url, [])


class _EchoHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/fail":
            self._reply(400, b'{"ok":false}')
        else:
            self._reply(200, f"{self.command} {self.path}".encode())

    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length)
        content_type = self.headers.get("Content-Type", "")
        self._reply(200, content_type.encode() + b"\n" + body)

    def _reply(self, status, body):
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server_address():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def test_urllib_client_get(server_address):
    url = Url.parse(f"http://{server_address}/botX/getMe")
    assert UrllibHttpClient().make_request(url, []) == b"GET /botX/getMe"


def test_urllib_client_drops_query(server_address):
    url = Url.parse(f"http://{server_address}/path?a=1")
    assert UrllibHttpClient().make_request(url, []) == b"GET /path"


def test_urllib_client_post_multipart(server_address):
    url = Url.parse(f"http://{server_address}/botX/sendPhoto")
    args = [
        HttpReqArg("chat_id", 9),
        HttpReqArg("photo", b"\x00\x01binary", is_file=True, mime_type="image/png", file_name="a.png"),
    ]
    reply = UrllibHttpClient().make_request(url, args)
    content_type, _, body = reply.partition(b"\n")
    assert content_type.startswith(b"multipart/form-data; boundary=")
    boundary = content_type.split(b"boundary=", 1)[1]
    assert body.endswith(b"--" + boundary + b"--\r\n")
    assert b'name="chat_id"\r\nContent-Type: text/plain\r\n\r\n9\r\n' in body
    assert b'name="photo"; filename="a.png"\r\nContent-Type: image/png\r\n\r\n\x00\x01binary' in body


def test_urllib_client_returns_error_body(server_address):
    url = Url.parse(f"http://{server_address}/fail")
    assert UrllibHttpClient().make_request(url, []) == b'{"ok":false}'


def test_urllib_client_connection_failure():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    url = Url.parse(f"http://127.0.0.1:{port}/x")
    with pytest.raises(RuntimeError):
        UrllibHttpClient(timeout=2.0).make_request(url, [])