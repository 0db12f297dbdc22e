# reqkit

reqkit is a set of building blocks for an HTTP client library. It holds
the parts that do not depend on a particular network transport:

- `reqkit.errors`: `ErrorCode`, the `Error` value (a code and a message)
  carried by every response, and `error_code_to_string`.
- `reqkit.redirect`: `PostRedirectFlags`, a flag set that says which
  redirect status codes (301, 302, 303) keep the POST method, and
  `any_flags`.
- `reqkit.accept_encoding`: `AcceptEncodingMethods` and `AcceptEncoding`,
  an ordered set of encodings joined with `", "` by `get_string()`.
  `disabled()` raises `ValueError` when `"disabled"` is combined with
  other encodings.
- `reqkit.body_view`: `BodyView`, a read-only view of request body bytes;
  strings are stored as UTF-8.
- `reqkit.proxies`: `Proxies`, a map from protocol to proxy host (a
  missing protocol reads as `""`), and `EncodedAuthentication` /
  `ProxyAuthentication`, which keep percent-encoded proxy credentials per
  protocol.
- `reqkit.callbacks`: `ReadCallback`, `HeaderCallback`, `WriteCallback`,
  `ProgressCallback`, `DebugCallback` (with `InfoType`) and
  `CancellationCallback`, each wrapping a function and its user data.
- `reqkit.async_wrapper`: `AsyncWrapper` and `CancellableAsyncWrapper`
  around a `concurrent.futures.Future`, with `CancellationResult` and
  `FutureStatus`.
- `reqkit.asyncpool`: a process-wide `GlobalThreadPool` with `startup`,
  `run_async` and `cleanup`.
- `reqkit.containers`: `Parameters` and `Payload`, ordered key/value
  containers that render themselves as `key=value&...` strings.
- `reqkit.response`: `Response`, the case-insensitive `Header` mapping
  and `parse_header`.
- `reqkit.multiperform`: `MultiPerform`, which runs several sessions'
  transfers concurrently and returns their responses in the order the
  sessions were added, with `HttpMethod` and `InterceptorMulti`.

## Installing

```
pip install reqkit
```

reqkit has no dependencies outside the standard library and runs on
Python 3.10 and later.

## Examples

Errors are false when nothing went wrong:

```python
from reqkit.errors import Error, ErrorCode, error_code_to_string

error = Error()
assert not error

error.code = ErrorCode.UNSUPPORTED_PROTOCOL
assert error
assert error_code_to_string(error.code) == "UNSUPPORTED_PROTOCOL"
```

Query parameters and form payloads are percent-encoded by default; set
`encode` to `False` to send keys and values as they are:

```python
from reqkit.containers import Pair, Payload

payload = Payload([Pair("key1", "hello"), Pair("key2", "world")])
assert payload.get_content() == "key1=hello&key2=world"
```

Proxy credentials are percent-encoded when they are stored:

```python
from reqkit.proxies import EncodedAuthentication, ProxyAuthentication

password = "password"
auth = ProxyAuthentication({"http": EncodedAuthentication("user", password)})
assert auth.has("http")
assert auth.username("http") == "user"
assert auth.username("https") == ""
```

Raw header blocks are parsed into a header mapping, the status line and
the reason phrase. Only the headers after the last status line are kept:

```python
from reqkit.response import parse_header

header, status_line, reason = parse_header(
    "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n"
)
assert header["content-type"] == "text/html"
assert status_line == "HTTP/1.1 200 OK"
assert reason == "OK"
```

Work can be handed to the shared thread pool and collected later:

```python
from reqkit.asyncpool import cleanup, run_async, startup

startup()
result = run_async(pow, 2, 10)
assert result.get() == 1024
cleanup()
```

With `cancellable=True`, `run_async` returns a `CancellableAsyncWrapper`
whose `cancel()` reports a `CancellationResult`; once cancelled, `get()`,
`wait()` and `wait_for()` raise `RuntimeError`. Dropping such a wrapper
also marks its request as cancelled.

## Sessions in a multi perform

`MultiPerform` does not open connections itself. It drives session
objects that provide:

- a `used_in_multi_perform` attribute, set while the session is in a group;
- `prepare_get`, `prepare_post`, `prepare_put`, `prepare_delete`,
  `prepare_patch`, `prepare_head`, `prepare_options` and
  `prepare_download(target)`;
- `transfer()`, which does the actual work and is run on a worker thread;
- `complete(result)` and `complete_download(result)`, which turn the
  result of `transfer()` into a `Response`.

```python
from reqkit.multiperform import MultiPerform
from reqkit.response import Response


class EchoSession:
    used_in_multi_perform = False

    def __init__(self, text):
        self.text = text
        self.method = ""

    def prepare_get(self):
        self.method = "GET"

    def transfer(self):
        return self.text

    def complete(self, result):
        return Response(status_code=200, text=f"{self.method} {result}")


with MultiPerform() as multi:
    multi.add_session(EchoSession("a"))
    multi.add_session(EchoSession("b"))
    responses = multi.get()

assert [r.text for r in responses] == ["GET a", "GET b"]
```

Rules:

- Download sessions cannot be mixed with ordinary requests: adding one
  kind after the other, or calling `proceed()` on a mixed set, raises
  `ValueError`.
- Removing a session that was never added raises `ValueError`.
- `perform()` raises `ValueError` if a session has no method or is a
  download; downloads go through `download` or `perform_download`, which
  take one write target per session and raise `ValueError` when the
  counts differ.
- Interceptors (`InterceptorMulti` subclasses) run in the order they were
  added; one may return its own list of responses or call
  `multi.proceed()`. `add_interceptor` raises `RuntimeError` while an
  interceptor is running.

## What reqkit does not do

reqkit contains no network transport and no session class: it does not
resolve hosts, open sockets, speak HTTP, handle TLS, follow redirects or
store cookies. `Response` fields such as `status_code`, `url` and
`elapsed` are filled in by whatever code creates the response. There is
no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```