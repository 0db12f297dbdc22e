"""Run several sessions' transfers at the same time and collect their responses."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from reqkit.response import Response


class HttpMethod(Enum):
    """The request a session performs inside a multi perform."""

    UNDEFINED = "UNDEFINED"
    GET_REQUEST = "GET"
    POST_REQUEST = "POST"
    PUT_REQUEST = "PUT"
    DELETE_REQUEST = "DELETE"
    PATCH_REQUEST = "PATCH"
    HEAD_REQUEST = "HEAD"
    OPTIONS_REQUEST = "OPTIONS"
    DOWNLOAD_REQUEST = "DOWNLOAD"


class _Session(Protocol):
    """What a session must offer to take part in a multi perform."""

    used_in_multi_perform: bool

    def prepare_get(self) -> None: ...
    def prepare_post(self) -> None: ...
    def prepare_put(self) -> None: ...
    def prepare_delete(self) -> None: ...
    def prepare_patch(self) -> None: ...
    def prepare_head(self) -> None: ...
    def prepare_options(self) -> None: ...
    def prepare_download(self, target: Any) -> None: ...
    def transfer(self) -> Any: ...
    def complete(self, result: Any) -> Response: ...
    def complete_download(self, result: Any) -> Response: ...


_PREPARERS = {
    HttpMethod.GET_REQUEST: "prepare_get",
    HttpMethod.POST_REQUEST: "prepare_post",
    HttpMethod.PUT_REQUEST: "prepare_put",
    HttpMethod.DELETE_REQUEST: "prepare_delete",
    HttpMethod.PATCH_REQUEST: "prepare_patch",
    HttpMethod.HEAD_REQUEST: "prepare_head",
    HttpMethod.OPTIONS_REQUEST: "prepare_options",
}


class InterceptorMulti:
    """A hook that runs before the transfers of a multi perform.

    Return a list of responses to answer the request yourself, or call
    ``multi.proceed()`` and return its result to continue the chain.
    Returning ``None`` lets the transfers run as usual.
    """

    def intercept(self, multi: "MultiPerform") -> Optional[list[Response]]:
        return multi.proceed()


class MultiPerform:
    """A group of sessions whose transfers run concurrently.

    Responses are returned in the order the sessions were added. Download and
    non-download requests cannot be mixed in one group.
    """

    def __init__(self) -> None:
        self._sessions: list[list[Any]] = []
        self._is_download = False
        self._interceptors: list[InterceptorMulti] = []
        self._current: Optional[int] = None
        self._first: Optional[int] = None

    def __enter__(self) -> "MultiPerform":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release every session from this group."""
        for session, _ in self._sessions:
            session.used_in_multi_perform = False
        self._sessions.clear()
        self._is_download = False

    def add_session(self, session: _Session, method: HttpMethod = HttpMethod.UNDEFINED) -> None:
        """Add a session, optionally with the request it should perform."""
        is_download = method == HttpMethod.DOWNLOAD_REQUEST
        if (not is_download and self._is_download and method != HttpMethod.UNDEFINED) or (
            is_download and not self._is_download and self._sessions
        ):
            raise ValueError("Failed to add session: Cannot mix download and non-download methods!")
        if is_download:
            self._is_download = True
        session.used_in_multi_perform = True
        self._sessions.append([session, method])

    def remove_session(self, session: _Session) -> None:
        """Remove a previously added session."""
        if not self._sessions:
            raise ValueError("Failed to find session!")
        session.used_in_multi_perform = False
        for index, (candidate, _) in enumerate(self._sessions):
            if candidate is session:
                del self._sessions[index]
                break
        else:
            raise ValueError("Failed to find session!")
        if not self._sessions:
            self._is_download = False

    def sessions(self) -> list[list[Any]]:
        """The live list of ``[session, method]`` entries in insertion order."""
        return self._sessions

    def _run_transfers(self) -> list[Any]:
        sessions = [session for session, _ in self._sessions]
        if not sessions:
            return []
        with ThreadPoolExecutor(max_workers=len(sessions), thread_name_prefix="reqkit-multi") as pool:
            return list(pool.map(lambda s: s.transfer(), sessions))

    def _collect(self, complete: Callable[[Any, Any], Response]) -> list[Response]:
        results = self._run_transfers()
        return [complete(session, result) for (session, _), result in zip(self._sessions, results)]

    def _intercept(self) -> Optional[list[Response]]:
        if self._current is None:
            self._current = self._first
        else:
            self._current += 1
            if self._current >= len(self._interceptors):
                self._current = None

        if self._current is None:
            return None
        icpt = self._current
        following = icpt + 1
        self._first = following if following < len(self._interceptors) else None
        try:
            return self._interceptors[icpt].intercept(self)
        finally:
            self._first = icpt

    def _make_request(self) -> list[Response]:
        intercepted = self._intercept()
        if intercepted is not None:
            return intercepted
        return self._collect(lambda session, result: session.complete(result))

    def _make_download_request(self) -> list[Response]:
        intercepted = self._intercept()
        if intercepted is not None:
            return intercepted
        return self._collect(lambda session, result: session.complete_download(result))

    def _prepare_sessions(self) -> None:
        for session, method in self._sessions:
            name = _PREPARERS.get(method)
            if name is None:
                raise ValueError("PrepareSessions failed: Undefined HttpMethod or download without arguments!")
            getattr(session, name)()

    def _prepare_download_session(self, index: int, target: Any) -> None:
        session, method = self._sessions[index]
        if method != HttpMethod.DOWNLOAD_REQUEST:
            raise ValueError("PrepareSessions failed: Undefined HttpMethod or non download method with arguments!")
        session.prepare_download(target)

    def _set_method(self, method: HttpMethod) -> None:
        for entry in self._sessions:
            entry[1] = method

    def _request(self, method: HttpMethod) -> list[Response]:
        self._set_method(method)
        self._prepare_sessions()
        return self._make_request()

    def get(self) -> list[Response]:
        return self._request(HttpMethod.GET_REQUEST)

    def delete(self) -> list[Response]:
        return self._request(HttpMethod.DELETE_REQUEST)

    def put(self) -> list[Response]:
        return self._request(HttpMethod.PUT_REQUEST)

    def head(self) -> list[Response]:
        return self._request(HttpMethod.HEAD_REQUEST)

    def options(self) -> list[Response]:
        return self._request(HttpMethod.OPTIONS_REQUEST)

    def patch(self) -> list[Response]:
        return self._request(HttpMethod.PATCH_REQUEST)

    def post(self) -> list[Response]:
        return self._request(HttpMethod.POST_REQUEST)

    def perform(self) -> list[Response]:
        """Run each session with the method it was added with."""
        self._prepare_sessions()
        return self._make_request()

    def _check_download_args(self, args: tuple) -> None:
        if len(args) != len(self._sessions):
            raise ValueError("Number of download arguments has to match the number of sessions added to the multiperform!")

    def download(self, *args: Any) -> list[Response]:
        """Download with every session; one write callback or file per session."""
        self._check_download_args(args)
        self._set_method(HttpMethod.DOWNLOAD_REQUEST)
        self._is_download = bool(self._sessions)
        for index, target in enumerate(args):
            self._prepare_download_session(index, target)
        return self._make_download_request()

    def perform_download(self, *args: Any) -> list[Response]:
        """Download with sessions that were added as download requests."""
        self._check_download_args(args)
        for index, target in enumerate(args):
            self._prepare_download_session(index, target)
        return self._make_download_request()

    def proceed(self) -> list[Response]:
        """Continue a request from within an interceptor."""
        if self._sessions:
            is_download = self._sessions[0][1] == HttpMethod.DOWNLOAD_REQUEST
            for _, method in self._sessions:
                if is_download != (method == HttpMethod.DOWNLOAD_REQUEST):
                    raise ValueError("Failed to proceed with session: Cannot mix download and non-download methods!")
            self._is_download = is_download
        if self._is_download:
            return self._make_download_request()
        self._prepare_sessions()
        return self._make_request()

    def add_interceptor(self, interceptor: InterceptorMulti) -> None:
        """Append an interceptor; only allowed while no interceptor is running."""
        if self._current is not None:
            raise RuntimeError("Interceptors can only be added before the first interceptor runs")
        self._interceptors.append(interceptor)
        self._first = 0