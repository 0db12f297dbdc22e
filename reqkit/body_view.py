"""A read-only view on a request body that is not copied."""

from __future__ import annotations

from typing import Union

BodyLike = Union[str, bytes, bytearray, memoryview]


class BodyView:
    """A non-owning view of request body bytes.

    Strings are stored as UTF-8; bytes-like objects are viewed without copying.
    """

    __slots__ = ("_view",)

    def __init__(self, body: BodyLike = "") -> None:
        if isinstance(body, str):
            body = body.encode("utf-8", errors="surrogateescape")
        self._view = memoryview(body).cast("B")

    def __str__(self) -> str:
        return self._view.tobytes().decode("utf-8", errors="surrogateescape")

    def __bytes__(self) -> bytes:
        return self._view.tobytes()

    def __len__(self) -> int:
        return self._view.nbytes

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BodyView):
            return self._view == other._view
        return NotImplemented

    def __hash__(self) -> int:
        return hash(bytes(self))

    def __repr__(self) -> str:
        return f"BodyView({bytes(self)!r})"