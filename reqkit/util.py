"""Header parsing, cookie-line parsing and URL escaping helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from urllib.parse import quote, unquote_to_bytes

from reqkit.cookies import Cookies

_TRAILING_WHITESPACE = "\t\n\r "
_FIELD_SEPARATORS = "\t "


class Header(MutableMapping[str, str]):
    """Mapping of header names to values with case-insensitive keys.

    The spelling of a name is kept from its first insertion; iteration is
    ordered by the lower-cased name.
    """

    def __init__(self, initial: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._entries: dict[str, tuple[str, str]] = {}
        if initial is not None:
            self.update(initial)

    def __getitem__(self, key: str) -> str:
        if not isinstance(key, str):
            raise KeyError(key)
        try:
            return self._entries[key.lower()][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: str, value: str) -> None:
        folded = key.lower()
        existing = self._entries.get(folded)
        name = existing[0] if existing is not None else key
        self._entries[folded] = (name, value)

    def __delitem__(self, key: str) -> None:
        if not isinstance(key, str):
            raise KeyError(key)
        try:
            del self._entries[key.lower()]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._entries):
            yield self._entries[folded][0]

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``; a trailing empty field is not produced."""
    tokens = text.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def _find_any(text: str, chars: str, start: int) -> int:
    return next((index for index, ch in enumerate(text[start:], start) if ch in chars), -1)


def parse_header(headers: str) -> tuple[Header, str, str]:
    """Parse raw response headers into ``(header, status_line, reason)``.

    Each status line starts a new header block, so only the fields after the
    last one (the final response after redirects) are kept.
    """
    header = Header()
    status_line = ""
    reason = ""
    for line in split(headers, "\n"):
        if line.startswith("HTTP/"):
            line = line.rstrip(_TRAILING_WHITESPACE)
            status_line = line
            first = _find_any(line, _FIELD_SEPARATORS, 0)
            if first != -1:
                second = _find_any(line, _FIELD_SEPARATORS, first + 1)
                if second != -1:
                    line = line[second + 1 :]
                    reason = line
            header.clear()
        name, separator, value = line.partition(":")
        if separator:
            header[name] = value.lstrip("\t ").rstrip(_TRAILING_WHITESPACE)
    return header, status_line, reason


def parse_cookies(lines: Iterable[str]) -> Cookies:
    """Build cookies from tab separated cookie-jar lines (name, then value, last)."""
    cookies = Cookies()
    for line in lines:
        tokens = split(line, "\t")
        if len(tokens) < 2:
            raise ValueError(f"malformed cookie line: {line!r}")
        cookies[tokens[-2]] = tokens[-1]
    return cookies


def url_encode(text: str) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(text, safe="")


def url_decode(text: str) -> str:
    """Decode percent escapes; ``+`` is left as it is."""
    return unquote_to_bytes(text).decode("utf-8", errors="replace")