"""Proxy hosts and per-protocol proxy credentials."""

from __future__ import annotations

from typing import Iterator, Mapping, Optional
from urllib.parse import quote


class Proxies:
    """Proxy URLs keyed by protocol."""

    def __init__(self, hosts: Optional[Mapping[str, str]] = None) -> None:
        self._hosts: dict[str, str] = dict(hosts or {})

    def has(self, protocol: str) -> bool:
        """True if a proxy is configured for the protocol."""
        return protocol in self._hosts

    def __getitem__(self, protocol: str) -> str:
        """The proxy for the protocol, or an empty string if none is set."""
        return self._hosts.get(protocol, "")

    def __contains__(self, protocol: object) -> bool:
        return protocol in self._hosts

    def __iter__(self) -> Iterator[str]:
        return iter(self._hosts)

    def __len__(self) -> int:
        return len(self._hosts)

    def __repr__(self) -> str:
        return f"Proxies({self._hosts!r})"


def _escape(value: str) -> str:
    return quote(value, safe="")


class EncodedAuthentication:
    """A username and password, each percent-encoded on construction."""

    __slots__ = ("_username", "_password")

    def __init__(self, username: str = "", password: str = "") -> None:
        self._username = _escape(username)
        self._password = _escape(password)

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EncodedAuthentication):
            return (self._username, self._password) == (other._username, other._password)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._username, self._password))

    def __repr__(self) -> str:
        return f"EncodedAuthentication(username={self._username!r}, password=***)"


class ProxyAuthentication:
    """Proxy credentials keyed by protocol."""

    def __init__(self, auths: Optional[Mapping[str, EncodedAuthentication]] = None) -> None:
        self._auths: dict[str, EncodedAuthentication] = dict(auths or {})

    def has(self, protocol: str) -> bool:
        """True if credentials are configured for the protocol."""
        return protocol in self._auths

    def _get(self, protocol: str) -> EncodedAuthentication:
        return self._auths.get(protocol) or EncodedAuthentication()

    def username(self, protocol: str) -> str:
        """The encoded username for the protocol, empty if none is set."""
        return self._get(protocol).username

    def password(self, protocol: str) -> str:
        """The encoded password for the protocol, empty if none is set."""
        return self._get(protocol).password

    def __contains__(self, protocol: object) -> bool:
        return protocol in self._auths

    def __repr__(self) -> str:
        return f"ProxyAuthentication({sorted(self._auths)!r})"