"""The response of a transfer and the parsing of raw header blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Mapping, MutableMapping, Optional

from reqkit.errors import Error


class Header(MutableMapping[str, str]):
    """Case-insensitive header mapping that keeps the first spelling of each name.

    Looking up a missing name yields an empty string.
    """

    def __init__(self, data: Optional[Mapping[str, str]] = None, **kwargs: str) -> None:
        self._store: dict[str, tuple[str, str]] = {}
        self.update(data or {}, **kwargs)

    def __getitem__(self, key: str) -> str:
        return self._store.get(key.lower(), (key, ""))[1]

    def __setitem__(self, key: str, value: str) -> None:
        original = self._store.get(key.lower(), (key, ""))[0]
        self._store[key.lower()] = (original, value)

    def __delitem__(self, key: str) -> None:
        del self._store[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._store

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:  # type: ignore[override]
        return self[key] if key in self else default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        theirs = {str(k).lower(): v for k, v in other.items()}
        return {k: v for k, (_, v) in self._store.items()} == theirs

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"


_BLANKS = "\t\n\r "


def parse_header(raw: str) -> tuple[Header, str, str]:
    """Parse a raw header block into ``(header, status_line, reason)``.

    Each status line starts a new header block, so after redirects only the
    headers of the final response remain.
    """
    header = Header()
    status_line = ""
    reason = ""
    for line in raw.split("\n"):
        if line.startswith("HTTP/"):
            line = line.rstrip(_BLANKS)
            status_line = line
            parts = re.split(r"[\t ]", line, maxsplit=2)
            if len(parts) == 3:
                reason = parts[2]
            header.clear()
        if not line:
            continue
        key, sep, value = line.partition(":")
        if sep:
            header[key] = value.lstrip("\t ").rstrip(_BLANKS)
    return header, status_line, reason


@dataclass
class Response:
    """The result of one transfer."""

    status_code: int = 0
    text: str = ""
    raw_header: str = ""
    url: str = ""
    elapsed: float = 0.0
    cookies: dict[str, str] = field(default_factory=dict)
    error: Error = field(default_factory=Error)
    uploaded_bytes: int = 0
    downloaded_bytes: int = 0
    redirect_count: int = 0
    primary_ip: str = ""
    primary_port: int = 0
    cert_infos: list[list[str]] = field(default_factory=list)
    header: Header = field(init=False, default_factory=Header)
    status_line: str = field(init=False, default="")
    reason: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.header, self.status_line, self.reason = parse_header(self.raw_header)