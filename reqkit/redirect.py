"""Flags controlling whether POST stays POST across redirects."""

from __future__ import annotations

from enum import IntFlag


class PostRedirectFlags(IntFlag):
    """Which redirect status codes keep the POST method."""

    NONE = 0
    POST_301 = 1
    POST_302 = 2
    POST_303 = 4
    POST_ALL = POST_301 | POST_302 | POST_303


def any_flags(flag: PostRedirectFlags) -> bool:
    """True if at least one flag is set."""
    return flag != PostRedirectFlags.NONE