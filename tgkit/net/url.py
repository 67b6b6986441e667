"""Splitting of URL strings into their parts."""

from __future__ import annotations

import re
from dataclasses import dataclass

_AFTER_SCHEME = re.compile(
    r"(?P<host>[^/?#]*)(?P<path>/[^?#]*)?(?:\?(?P<query>[^#]*))?(?:#(?P<fragment>.*))?",
    re.DOTALL,
)


@dataclass(frozen=True)
class Url:
    """A URL split into protocol, host, path, query and fragment.

    ``path`` includes its leading ``/``; ``query`` and ``fragment`` exclude
    their ``?`` and ``#`` markers.
    """

    protocol: str = ""
    host: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, url: str) -> Url:
        """Split ``url``; the two characters after the scheme's ``:`` are skipped."""
        protocol, colon, _ = url.partition(":")
        if not colon:
            return cls(protocol=url)
        rest = url[len(protocol) + 3:]
        match = _AFTER_SCHEME.fullmatch(rest)
        query = match.group("query")
        fragment = match.group("fragment")
        path = match.group("path")
        if path is None:
            path = "/" if query is not None or fragment is not None else ""
        return cls(
            protocol=protocol,
            host=match.group("host"),
            path=path,
            query=query or "",
            fragment=fragment or "",
        )