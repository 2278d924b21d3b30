"""Credentials for servers and proxies."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from reqkit.util import url_encode


class AuthMode(Enum):
    """HTTP authentication schemes."""

    BASIC = "basic"
    DIGEST = "digest"
    NTLM = "ntlm"


@dataclass(frozen=True)
class Authentication:
    """A user name and password sent with a given scheme."""

    username: str
    password: str = field(repr=False)
    auth_mode: AuthMode = AuthMode.BASIC

    @property
    def auth_string(self) -> str:
        """The ``user:password`` string, unescaped."""
        return f"{self.username}:{self.password}"


class EncodedAuthentication:
    """Credentials whose user name and password are percent-encoded."""

    def __init__(self, username: str | None = None, password: str | None = None) -> None:
        if username is None and password is None:
            self._auth_string = ""
        elif username is None or password is None:
            raise TypeError("both username and password must be given, or neither")
        else:
            self._auth_string = f"{url_encode(username)}:{url_encode(password)}"

    @property
    def auth_string(self) -> str:
        """The encoded ``user:password`` string; empty when no credentials were given."""
        return self._auth_string

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodedAuthentication):
            return NotImplemented
        return self._auth_string == other._auth_string

    def __hash__(self) -> int:
        return hash(self._auth_string)

    def __repr__(self) -> str:
        return "EncodedAuthentication(...)"


class ProxyAuthentication:
    """Proxy credentials keyed by protocol."""

    def __init__(
        self,
        auths: Mapping[str, EncodedAuthentication] | Iterable[tuple[str, EncodedAuthentication]] | None = None,
    ) -> None:
        self._auths: dict[str, EncodedAuthentication] = dict(auths or {})

    def has(self, protocol: str) -> bool:
        """Whether credentials are configured for ``protocol``."""
        return protocol in self._auths

    def __getitem__(self, protocol: str) -> str:
        return self._auths[protocol].auth_string

    def __repr__(self) -> str:
        return f"ProxyAuthentication(protocols={sorted(self._auths)!r})"