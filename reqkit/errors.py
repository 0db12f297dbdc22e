"""Transfer error codes and the error value attached to every response."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes relevant to HTTP transfers."""

    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    FAILED_INIT = 2
    URL_MALFORMAT = 3
    NOT_BUILT_IN = 4
    COULDNT_RESOLVE_PROXY = 5
    COULDNT_RESOLVE_HOST = 6
    COULDNT_CONNECT = 7
    WEIRD_SERVER_REPLY = 8
    REMOTE_ACCESS_DENIED = 9
    HTTP2 = 10
    PARTIAL_FILE = 11
    QUOTE_ERROR = 12
    HTTP_RETURNED_ERROR = 13
    WRITE_ERROR = 14
    UPLOAD_FAILED = 15
    READ_ERROR = 16
    OUT_OF_MEMORY = 17
    OPERATION_TIMEDOUT = 18
    RANGE_ERROR = 19
    HTTP_POST_ERROR = 20
    SSL_CONNECT_ERROR = 21
    BAD_DOWNLOAD_RESUME = 22
    FILE_COULDNT_READ_FILE = 23
    FUNCTION_NOT_FOUND = 24
    ABORTED_BY_CALLBACK = 25
    BAD_FUNCTION_ARGUMENT = 26
    INTERFACE_FAILED = 27
    TOO_MANY_REDIRECTS = 28
    UNKNOWN_OPTION = 29
    SETOPT_OPTION_SYNTAX = 30
    GOT_NOTHING = 31
    SSL_ENGINE_NOTFOUND = 32
    SSL_ENGINE_SETFAILED = 33
    SEND_ERROR = 34
    RECV_ERROR = 35
    SSL_CERTPROBLEM = 36
    SSL_CIPHER = 37
    PEER_FAILED_VERIFICATION = 38
    BAD_CONTENT_ENCODING = 39
    FILESIZE_EXCEEDED = 40
    USE_SSL_FAILED = 41
    SEND_FAIL_REWIND = 42
    SSL_ENGINE_INITFAILED = 43
    LOGIN_DENIED = 44
    SSL_CACERT_BADFILE = 45
    SSL_SHUTDOWN_FAILED = 46
    AGAIN = 47
    SSL_CRL_BADFILE = 48
    SSL_ISSUER_ERROR = 49
    CHUNK_FAILED = 50
    NO_CONNECTION_AVAILABLE = 51
    SSL_PINNEDPUBKEYNOTMATCH = 52
    SSL_INVALIDCERTSTATUS = 53
    HTTP2_STREAM = 54
    RECURSIVE_API_CALL = 55
    AUTH_ERROR = 56
    HTTP3 = 57
    QUIC_CONNECT_ERROR = 58
    PROXY = 59
    SSL_CLIENTCERT = 60
    UNRECOVERABLE_POLL = 61
    TOO_LARGE = 62
    UNKNOWN_ERROR = 1000


_CODE_NAMES = {code: code.name for code in ErrorCode}


def error_code_to_string(code: ErrorCode) -> str:
    """Return the canonical name of an error code.

    Raises ``ValueError`` for a value that is not a known error code.
    """
    return _CODE_NAMES[ErrorCode(code)]


@dataclass
class Error:
    """The outcome of a transfer: a code and a human readable message."""

    code: ErrorCode = ErrorCode.OK
    message: str = ""

    def __bool__(self) -> bool:
        """True when an error occurred."""
        return self.code != ErrorCode.OK