"""The set of content encodings sent in the Accept-Encoding header."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union


class AcceptEncodingMethods(Enum):
    """Known content encodings."""

    identity = "identity"
    deflate = "deflate"
    zlib = "zlib"
    gzip = "gzip"
    disabled = "disabled"


Method = Union[AcceptEncodingMethods, str]


class AcceptEncoding:
    """An ordered set of accepted encodings."""

    def __init__(self, methods: Iterable[Method] = ()) -> None:
        self._methods: dict[str, None] = {}
        for method in methods:
            name = method.value if isinstance(method, AcceptEncodingMethods) else str(method)
            self._methods[name] = None

    def empty(self) -> bool:
        """True if no encoding was given."""
        return not self._methods

    def get_string(self) -> str:
        """The encodings joined for use as a header value."""
        return ", ".join(self._methods)

    def disabled(self) -> bool:
        """True if encoding negotiation is switched off.

        Raises ``ValueError`` if 'disabled' is combined with other encodings.
        """
        if AcceptEncodingMethods.disabled.value not in self._methods:
            return False
        if len(self._methods) != 1:
            raise ValueError(
                "AcceptEncoding does not accept any other values if 'disabled' is present. "
                "You set the following encodings: " + self.get_string()
            )
        return True

    def __repr__(self) -> str:
        return f"AcceptEncoding({list(self._methods)!r})"