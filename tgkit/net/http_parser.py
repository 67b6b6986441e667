"""Building and parsing of raw HTTP/1.1 messages."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, overload

from tgkit.net.url import Url
from tgkit.tools.strings import generate_random_string, url_encode


@dataclass
class HttpReqArg:
    """One argument of a POST request.

    Values that are not text or bytes are converted to text; booleans become
    ``"1"`` or ``"0"``. ``mime_type`` and ``file_name`` matter only for files.
    """

    name: str
    value: Any
    is_file: bool = False
    mime_type: str = "text/plain"
    file_name: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.value, bool):
            self.value = "1" if self.value else "0"
        elif isinstance(self.value, (bytearray, memoryview)):
            self.value = bytes(self.value)
        elif not isinstance(self.value, (str, bytes)):
            self.value = str(self.value)


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def generate_request(url: Url, args: Iterable[HttpReqArg], keep_alive: bool = False) -> bytes:
    """Build a GET request when there are no args, otherwise a POST.

    The POST body is multipart/form-data if any argument is a file and
    application/x-www-form-urlencoded otherwise.
    """
    args = list(args)
    target = url.path + (f"?{url.query}" if url.query else "")
    connection = "keep-alive" if keep_alive else "close"
    lines = [
        f"{'POST' if args else 'GET'} {target} HTTP/1.1",
        f"Host: {url.host}",
        f"Connection: {connection}",
    ]
    body = b""
    if args:
        boundary = generate_multipart_boundary(args)
        if boundary:
            lines.append(f"Content-Type: multipart/form-data; boundary={boundary}")
            body = generate_multipart_form_data(args, boundary)
        else:
            lines.append("Content-Type: application/x-www-form-urlencoded")
            body = generate_www_form_urlencoded(args).encode("ascii")
        lines.append(f"Content-Length: {len(body)}")
    return ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8") + body


def generate_multipart_form_data(args: Iterable[HttpReqArg], boundary: str) -> bytes:
    """Encode ``args`` as a multipart/form-data body delimited by ``boundary``."""
    parts = []
    for arg in args:
        disposition = f'Content-Disposition: form-data; name="{arg.name}'
        if arg.is_file:
            disposition += f'"; filename="{arg.file_name}'
        head = f'--{boundary}\r\n{disposition}"\r\n'
        if arg.is_file:
            head += f"Content-Type: {arg.mime_type}\r\n"
        head += "\r\n"
        parts.append(head.encode("utf-8") + _as_bytes(arg.value) + b"\r\n")
    parts.append(f"--{boundary}--\r\n".encode("utf-8"))
    return b"".join(parts)


def generate_multipart_boundary(args: Iterable[HttpReqArg]) -> str:
    """Return a random boundary absent from every file value, or "" if no file."""
    boundary = ""
    for arg in args:
        if not arg.is_file:
            continue
        content = _as_bytes(arg.value)
        while not boundary or boundary.encode("utf-8") in content:
            boundary += generate_random_string(4)
    return boundary


def generate_www_form_urlencoded(args: Iterable[HttpReqArg]) -> str:
    """Encode ``args`` as ``name=value`` pairs joined by ``&``."""
    return "&".join(f"{url_encode(arg.name)}={url_encode(arg.value)}" for arg in args)


def generate_response(
    data: str | bytes,
    mime_type: str,
    status_code: int,
    status_text: str,
    keep_alive: bool = False,
) -> bytes:
    """Build a complete HTTP/1.1 response carrying ``data``."""
    body = _as_bytes(data)
    connection = "keep-alive" if keep_alive else "close"
    head = (
        f"HTTP/1.1 {status_code} {status_text}\r\n"
        f"Content-Type: {mime_type}\r\n"
        f"Content-Length: {len(body)}\r\n"
        f"Connection: {connection}\r\n\r\n"
    )
    return head.encode("utf-8") + body


def parse_header(data: str | bytes, is_request: bool) -> dict[str, str]:
    """Parse the head of an HTTP message into a dict.

    The start line yields ``_method`` and ``_path`` for a request, or
    ``_status`` for a response. Header values are stripped of surrounding
    whitespace; only lines terminated by CRLF before the blank line count.
    """
    if isinstance(data, bytes):
        data = data.decode("latin-1")
    lines = data.split("\r\n")
    start = lines[0].split(" ")
    second = start[1] if len(start) > 1 else ""
    headers: dict[str, str] = (
        {"_method": start[0], "_path": second} if is_request else {"_status": second}
    )
    for line in lines[1:-1]:
        if not line:
            break
        name, colon, value = line.partition(":")
        if colon:
            headers[name] = value.strip()
    return headers


@overload
def extract_body(data: bytes) -> bytes: ...
@overload
def extract_body(data: str) -> str: ...


def extract_body(data: Sequence[Any]) -> Any:
    """Return what follows the first blank line, or ``data`` if there is none."""
    separator = b"\r\n\r\n" if isinstance(data, (bytes, bytearray)) else "\r\n\r\n"
    head, found, body = data.partition(separator)
    return body if found else data