"""Redirect-following policy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class PostRedirectFlags(IntFlag):
    """Which redirect statuses keep a POST request a POST."""

    NONE = 0
    POST_301 = 0x1
    POST_302 = 0x2
    POST_303 = 0x4
    POST_ALL = POST_301 | POST_302 | POST_303


def any_flag(flag: PostRedirectFlags) -> bool:
    """Whether any flag is set."""
    return flag != PostRedirectFlags.NONE


@dataclass(kw_only=True)
class Redirect:
    """How redirects are followed.

    ``maximum`` of 0 refuses redirects, -1 allows any number.
    """

    maximum: int = 50
    follow: bool = True
    cont_send_cred: bool = False
    post_flags: PostRedirectFlags = PostRedirectFlags.POST_ALL