"""Proxy hosts keyed by protocol."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class Proxies:
    """Maps a protocol such as ``http`` to the proxy URL to use for it."""

    def __init__(self, hosts: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._hosts: dict[str, str] = dict(hosts or {})

    def has(self, protocol: str) -> bool:
        """Whether a proxy is configured for ``protocol``."""
        return protocol in self._hosts

    def __getitem__(self, protocol: str) -> str:
        return self._hosts[protocol]

    def __repr__(self) -> str:
        return f"Proxies({self._hosts!r})"