"""Key/value containers rendered as URL query strings or form bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Iterator, Mapping, Union
from urllib.parse import quote


@dataclass
class Parameter:
    """A URL query parameter."""

    key: str
    value: str


@dataclass
class Pair:
    """A form field of a URL-encoded payload."""

    key: str
    value: str


def _url_encode(text: str) -> str:
    return quote(text, safe="")


class CurlContainer:
    """An ordered list of key/value items.

    The ``encode`` attribute (true by default) controls whether keys and
    values are percent-encoded by :meth:`get_content`.
    """

    item_type: ClassVar[type] = Pair

    def __init__(self, items: Union[Iterable[Any], Mapping[str, str]] = ()) -> None:
        self.encode = True
        self._items: list = []
        self.add(items)

    def _coerce(self, item: Any) -> Any:
        if isinstance(item, (Parameter, Pair)):
            return self.item_type(item.key, item.value)
        key, value = item
        return self.item_type(str(key), str(value))

    def _is_single(self, arg: Any) -> bool:
        if isinstance(arg, (Parameter, Pair)):
            return True
        return isinstance(arg, tuple) and len(arg) == 2 and all(isinstance(part, str) for part in arg)

    def add(self, *args: Any) -> None:
        """Append items: single items, ``(key, value)`` tuples, iterables or mappings of them."""
        for arg in args:
            if self._is_single(arg):
                self._items.append(self._coerce(arg))
            elif isinstance(arg, Mapping):
                self._items.extend(self._coerce(entry) for entry in arg.items())
            else:
                self._items.extend(self._coerce(entry) for entry in arg)

    def get_content(self) -> str:
        """Render the items as ``key=value`` joined by ``&``."""
        if self.encode:
            return "&".join(f"{_url_encode(i.key)}={_url_encode(i.value)}" for i in self._items)
        return "&".join(f"{i.key}={i.value}" for i in self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CurlContainer):
            return type(self) is type(other) and self._items == other._items and self.encode == other.encode
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[(i.key, i.value) for i in self._items]!r})"


class Parameters(CurlContainer):
    """URL query parameters."""

    item_type = Parameter


class Payload(CurlContainer):
    """A URL-encoded form body."""

    item_type = Pair