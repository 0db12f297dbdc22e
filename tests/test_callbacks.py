import threading

import pytest

from reqkit.callbacks import (
    CancellationCallback,
    DebugCallback,
    HeaderCallback,
    InfoType,
    ProgressCallback,
    ReadCallback,
    WriteCallback,
)


def test_read_callback_returns_chunk():
    source = iter([b"abc", b""])
    cb = ReadCallback(lambda size, _ud: next(source))
    assert cb(10) == b"abc"
    assert cb(10) == b""
    assert cb.size == -1


def test_read_callback_encodes_text_and_keeps_size():
    cb = ReadCallback(lambda size, ud: ud, userdata="hi", size=2)
    assert cb(5) == b"hi"
    assert cb.size == 2


def test_read_callback_abort():
    cb = ReadCallback(lambda size, _ud: None)
    assert cb(10) is None


def test_read_callback_rejects_oversized_chunk():
    cb = ReadCallback(lambda size, _ud: b"x" * (size + 1))
    with pytest.raises(ValueError):
        cb(4)


def test_header_callback_passes_userdata():
    seen = []
    cb = HeaderCallback(lambda header, ud: seen.append((header, ud)) is None, userdata=7)
    assert cb("Content-Type: text/html") is True
    assert seen == [("Content-Type: text/html", 7)]


def test_write_callback_can_abort():
    cb = WriteCallback(lambda data, _ud: data != "stop")
    assert cb("go") is True
    assert cb("stop") is False


def test_progress_callback_arguments():
    captured = []

    def progress(dt, dn, ut, un, ud):
        captured.append((dt, dn, ut, un, ud))
        return True

    cb = ProgressCallback(progress, userdata="u")
    assert cb(10, 5, 3, 1) is True
    assert captured == [(10, 5, 3, 1, "u")]


@pytest.mark.parametrize(
    "raw, expected",
    [(0, InfoType.TEXT), (1, InfoType.HEADER_IN), (6, InfoType.SSL_DATA_OUT)],
)
def test_info_type_values(raw, expected):
    seen = []
    cb = DebugCallback(lambda t, data, ud: seen.append(t))
    cb(raw, "x")
    assert seen == [expected]


def test_debug_callback_converts_type():
    seen = []
    cb = DebugCallback(lambda t, data, ud: seen.append((t, data, ud)))
    cb(2, "sent")
    assert seen == [(InfoType.HEADER_OUT, "sent", None)]


def test_cancellation_callback_stops_after_flag():
    state = threading.Event()
    cb = CancellationCallback(state)
    assert cb(0, 0, 0, 0) is True
    state.set()
    assert cb(0, 0, 0, 0) is False


def test_cancellation_callback_consults_user_callback():
    state = threading.Event()
    user = ProgressCallback(lambda *args: False)
    cb = CancellationCallback(state, user)
    assert cb(1, 1, 1, 1) is False


def test_cancellation_callback_skips_user_when_cancelled():
    calls = []
    state = threading.Event()
    cb = CancellationCallback(state)
    cb.set_progress_callback(ProgressCallback(lambda *args: calls.append(args) is None))
    assert cb(1, 2, 3, 4) is True
    state.set()
    assert cb(1, 2, 3, 4) is False
    assert len(calls) == 1