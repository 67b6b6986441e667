"""String helpers: prefix checks, splitting, random strings and URL encoding."""

from __future__ import annotations

import re
import secrets

_RANDOM_ALPHABET = (
    "qwertyuiopasdfghjklzxcvbnmQWERTYUIOPASDFGHJKLZXCVBNM1234567890"
    "-=[]\\',./!@#$%^&*()_+{}|:\"<>?`~"
)

_LEGIT_BYTES = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_.-~:"
)

_PERCENT_ESCAPE = re.compile(r"%(.{0,2})", re.DOTALL)
_LEADING_HEX = re.compile(r"[0-9A-Fa-f]+")


def starts_with(text: str, prefix: str) -> bool:
    """Return True if ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Return True if ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping a trailing empty piece.

    Behaves like reading delimited fields from a stream: an empty string
    yields no fields and a trailing delimiter does not add an empty field.
    """
    if not text:
        return []
    pieces = text.split(delimiter)
    if text.endswith(delimiter):
        pieces.pop()
    return pieces


def generate_random_string(length: int) -> str:
    """Return ``length`` random characters from a fixed printable alphabet."""
    return "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(length))


def url_encode(value: str | bytes, additional_legit_chars: str = "") -> str:
    """Percent-encode every byte of ``value`` outside the unreserved set.

    Characters in ``additional_legit_chars`` are also left as they are.
    """
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    allowed = _LEGIT_BYTES | frozenset(additional_legit_chars.encode("utf-8"))
    return "".join(chr(byte) if byte in allowed else f"%{byte:02X}" for byte in data)


def url_decode(value: str) -> str:
    """Decode percent escapes in ``value``.

    Raises ValueError when a ``%`` is not followed by a hexadecimal digit.
    """
    decoded = bytearray()
    position = 0
    for match in _PERCENT_ESCAPE.finditer(value):
        decoded += value[position:match.start()].encode("utf-8", "surrogateescape")
        digits = _LEADING_HEX.match(match.group(1))
        if digits is None:
            raise ValueError(f"invalid percent escape in {value!r}")
        decoded.append(int(digits.group(0), 16) & 0xFF)
        position = match.end()
    decoded += value[position:].encode("utf-8", "surrogateescape")
    return decoded.decode("utf-8", "surrogateescape")