"""Callable wrappers used to hook into the stages of a transfer."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional, Union

ReadFunction = Callable[[int, Any], Optional[Union[bytes, bytearray, str]]]
HeaderFunction = Callable[[str, Any], bool]
WriteFunction = Callable[[str, Any], bool]
ProgressFunction = Callable[[int, int, int, int, Any], bool]


@dataclass
class ReadCallback:
    """Supplies the request body piece by piece.

    The wrapped function receives the maximum chunk size and the user data and
    returns the next chunk (an empty chunk ends the body) or ``None`` to abort.
    ``size`` is the total body length, or -1 when it is not known in advance.
    """

    callback: ReadFunction
    userdata: Any = None
    size: int = -1

    def __call__(self, size: int) -> Optional[bytes]:
        chunk = self.callback(size, self.userdata)
        if chunk is None:
            return None
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        chunk = bytes(chunk)
        if len(chunk) > size:
            raise ValueError(f"read callback returned {len(chunk)} bytes, at most {size} allowed")
        return chunk


@dataclass
class HeaderCallback:
    """Receives each response header line; returning False aborts the transfer."""

    callback: HeaderFunction
    userdata: Any = None

    def __call__(self, header: str) -> bool:
        return bool(self.callback(header, self.userdata))


@dataclass
class WriteCallback:
    """Receives each piece of the response body; returning False aborts the transfer."""

    callback: WriteFunction
    userdata: Any = None

    def __call__(self, data: str) -> bool:
        return bool(self.callback(data, self.userdata))


@dataclass
class ProgressCallback:
    """Reports transfer progress; returning False aborts the transfer."""

    callback: ProgressFunction
    userdata: Any = None

    def __call__(self, download_total: int, download_now: int, upload_total: int, upload_now: int) -> bool:
        return bool(self.callback(download_total, download_now, upload_total, upload_now, self.userdata))


class InfoType(IntEnum):
    """Kind of data handed to a debug callback."""

    TEXT = 0
    HEADER_IN = 1
    HEADER_OUT = 2
    DATA_IN = 3
    DATA_OUT = 4
    SSL_DATA_IN = 5
    SSL_DATA_OUT = 6


@dataclass
class DebugCallback:
    """Receives verbose diagnostic data during a transfer."""

    callback: Callable[[InfoType, str, Any], None]
    userdata: Any = None

    def __call__(self, info_type: InfoType, data: str) -> None:
        self.callback(InfoType(info_type), data, self.userdata)


class CancellationCallback:
    """Progress hook that stops a transfer once its cancellation flag is set.

    An optional user progress callback is consulted only while the transfer
    has not been cancelled.
    """

    def __init__(
        self,
        cancellation_state: Optional[threading.Event] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> None:
        self.cancellation_state = cancellation_state if cancellation_state is not None else threading.Event()
        self._user_callback = progress_callback

    def __call__(self, download_total: int, download_now: int, upload_total: int, upload_now: int) -> bool:
        if self.cancellation_state.is_set():
            return False
        if self._user_callback is None:
            return True
        return self._user_callback(download_total, download_now, upload_total, upload_now)

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        """Chain a user progress callback behind the cancellation check."""
        self._user_callback = callback