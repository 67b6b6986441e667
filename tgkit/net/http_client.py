"""HTTP clients that send requests built from URL and argument lists."""

from __future__ import annotations

import abc
import secrets
import socket
import ssl
import urllib.error
import urllib.request
from collections.abc import Sequence

from tgkit.net.http_parser import HttpReqArg, extract_body, generate_request
from tgkit.net.url import Url


class HttpClient(abc.ABC):
    """Sends HTTP requests and returns the response body."""

    @abc.abstractmethod
    def make_request(self, url: Url, args: Sequence[HttpReqArg]) -> bytes:
        """Send a request to ``url`` and return the response body.

        Without args a GET is sent, otherwise a POST carrying the args.
        """


class SslHttpClient(HttpClient):
    """Speaks HTTP/1.1 over a raw TLS 1.2 socket.

    Certificates are not verified unless ``verify`` is set. The first read of
    the response waits at most ``read_timeout`` seconds.
    """

    def __init__(
        self,
        *,
        port: int = 443,
        read_timeout: float = 20.0,
        buffer_size: int = 1024,
        no_delay: bool = False,
        verify: bool = False,
    ) -> None:
        self.port = port
        self.read_timeout = read_timeout
        self.buffer_size = buffer_size
        self.no_delay = no_delay
        self.verify = verify

    def _context(self) -> ssl.SSLContext:
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        context.maximum_version = ssl.TLSVersion.TLSv1_2
        context.set_default_verify_paths()
        if not self.verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def make_request(self, url: Url, args: Sequence[HttpReqArg]) -> bytes:
        request = generate_request(url, args, keep_alive=False)
        with socket.create_connection((url.host, self.port)) as raw:
            if self.no_delay:
                raw.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
            with self._context().wrap_socket(raw, server_hostname=url.host) as tls:
                tls.sendall(request)
                tls.settimeout(self.read_timeout)
                try:
                    chunk = tls.recv(self.buffer_size)
                except TimeoutError as exc:
                    raise TimeoutError(f"timed out reading response from {url.host}") from exc
                tls.settimeout(None)
                chunks = [chunk]
                while chunk:
                    try:
                        chunk = tls.recv(self.buffer_size)
                    except OSError:
                        break
                    chunks.append(chunk)
        return extract_body(b"".join(chunks))


class UrllibHttpClient(HttpClient):
    """Sends requests through the standard library's URL opener.

    POST arguments always travel as multipart/form-data with a content type
    on every part. The query part of the URL is not sent. Responses with an
    error status still return their body; transport failures raise
    RuntimeError.
    """

    def __init__(self, *, timeout: float = 25.0) -> None:
        self.timeout = timeout

    @staticmethod
    def _encode(args: Sequence[HttpReqArg]) -> tuple[str, bytes]:
        values = [a.value.encode("utf-8") if isinstance(a.value, str) else a.value for a in args]
        boundary = "------------------------" + secrets.token_hex(8)
        while any(boundary.encode("ascii") in value for value in values):
            boundary = "------------------------" + secrets.token_hex(8)
        parts = []
        for arg, value in zip(args, values):
            disposition = f'Content-Disposition: form-data; name="{arg.name}"'
            if arg.is_file:
                disposition += f'; filename="{arg.file_name}"'
            head = f"--{boundary}\r\n{disposition}\r\nContent-Type: {arg.mime_type}\r\n\r\n"
            parts.append(head.encode("utf-8") + value + b"\r\n")
        parts.append(f"--{boundary}--\r\n".encode("ascii"))
        return boundary, b"".join(parts)

    def make_request(self, url: Url, args: Sequence[HttpReqArg]) -> bytes:
        args = list(args)
        request = urllib.request.Request(
            f"{url.protocol}://{url.host}{url.path}", headers={"Connection": "close"}
        )
        if args:
            boundary, body = self._encode(args)
            request.data = body
            request.add_header("Content-Type", f"multipart/form-data; boundary={boundary}")
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return response.read()
        except urllib.error.HTTPError as exc:
            with exc:
                return exc.read()
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise RuntimeError(f"request failed: {exc}") from exc