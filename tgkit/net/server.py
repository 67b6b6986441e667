"""HTTP servers that receive webhook updates over TCP or Unix sockets."""

from __future__ import annotations

import json
import logging
import socket
import threading
from collections.abc import Callable
from typing import Any, Protocol

from tgkit.net.http_parser import generate_response, parse_header

ServerHandler = Callable[[bytes, dict[str, str]], bytes]

_log = logging.getLogger(__name__)

_HEADER_END = b"\r\n\r\n"
_READ_SIZE = 1024


class _UpdateHandler(Protocol):
    def handle_update(self, update: Any) -> None: ...


class HttpServer:
    """A minimal HTTP/1.1 server that passes each request body to a handler.

    The handler receives the raw body and the parsed request head and returns
    the complete response to send. Requests without a positive Content-Length
    are answered with 400; a handler that raises yields a 500 response.
    Every connection is closed after one exchange.
    """

    def __init__(
        self,
        address: Any,
        handler: ServerHandler,
        *,
        family: int = socket.AF_INET,
        poll_interval: float = 0.2,
    ) -> None:
        self.address = address
        self.family = family
        self.poll_interval = poll_interval
        self.ready = threading.Event()
        self._handler = handler
        self._stopped = threading.Event()

    def start(self) -> None:
        """Accept connections until :meth:`stop` is called."""
        with socket.socket(self.family, socket.SOCK_STREAM) as listener:
            if self.family != getattr(socket, "AF_UNIX", None):
                listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind(self.address)
            listener.listen()
            listener.settimeout(self.poll_interval)
            self.address = listener.getsockname()
            self.ready.set()
            while not self._stopped.is_set():
                try:
                    connection, _ = listener.accept()
                except TimeoutError:
                    continue
                except OSError as exc:
                    _log.error("error in HttpServer: %s", exc)
                    continue
                connection.settimeout(None)
                threading.Thread(target=self._serve, args=(connection,), daemon=True).start()
        self.ready.clear()

    def stop(self) -> None:
        """Stop accepting new connections."""
        self._stopped.set()

    def _serve(self, connection: socket.socket) -> None:
        with connection:
            try:
                self._exchange(connection)
            except OSError as exc:
                _log.error("error in HttpServer connection: %s", exc)

    def _exchange(self, connection: socket.socket) -> None:
        buffered = b""
        while _HEADER_END not in buffered:
            chunk = connection.recv(_READ_SIZE)
            if not chunk:
                _log.error("error in HttpServer: connection closed while reading header")
                return
            buffered += chunk
        head, _, body = buffered.partition(_HEADER_END)
        headers = parse_header(head + _HEADER_END, True)

        try:
            size = int(headers.get("Content-Length", "0"))
        except ValueError:
            size = 0
        if size <= 0:
            connection.sendall(
                generate_response("Bad request", "text/plain", 400, "Bad request", False)
            )
            return

        while len(body) < size:
            chunk = connection.recv(max(_READ_SIZE, size - len(body)))
            if not chunk:
                _log.error("error in HttpServer: connection closed while reading body")
                return
            body += chunk
        body = body[:size]

        try:
            answer = self._handler(body, headers)
        except Exception as exc:  # the handler is user code; any failure becomes a 500
            _log.error("error in HttpServer handler: %s", exc)
            answer = generate_response(
                "Internal server error", "text/plain", 500, "Internal server error", False
            )
        connection.sendall(answer)


class WebhookServer(HttpServer):
    """Receives updates posted to ``path`` and hands them to an event handler.

    ``parse_update`` turns a request body into an update; by default the body
    is decoded as JSON. Every request is answered with an empty 200 response.
    """

    def __init__(
        self,
        address: Any,
        path: str,
        event_handler: _UpdateHandler,
        *,
        family: int = socket.AF_INET,
        parse_update: Callable[[bytes], Any] = json.loads,
        poll_interval: float = 0.2,
    ) -> None:
        super().__init__(address, self.handle, family=family, poll_interval=poll_interval)
        self.path = path
        self.event_handler = event_handler
        self.parse_update = parse_update

    def handle(self, data: bytes, headers: dict[str, str]) -> bytes:
        """Dispatch a POST to the webhook path and return the response."""
        if headers.get("_method") == "POST" and headers.get("_path") == self.path:
            self.event_handler.handle_update(self.parse_update(data))
        return generate_response("", "text/plain", 200, "OK", False)


class TcpWebhookServer(WebhookServer):
    """A webhook server listening on an IPv4 TCP port."""

    def __init__(
        self,
        port: int,
        path: str,
        event_handler: _UpdateHandler,
        *,
        host: str = "",
        parse_update: Callable[[bytes], Any] = json.loads,
    ) -> None:
        super().__init__(
            (host, port),
            path,
            event_handler,
            family=socket.AF_INET,
            parse_update=parse_update,
        )


class LocalWebhookServer(WebhookServer):
    """A webhook server listening on a Unix domain socket.

    Raises OSError where Unix domain sockets are not available.
    """

    def __init__(
        self,
        unix_socket_path: str,
        path: str,
        event_handler: _UpdateHandler,
        *,
        parse_update: Callable[[bytes], Any] = json.loads,
    ) -> None:
        family = getattr(socket, "AF_UNIX", None)
        if family is None:
            raise OSError("unix domain sockets are not supported on this platform")
        super().__init__(
            unix_socket_path,
            path,
            event_handler,
            family=family,
            parse_update=parse_update,
        )