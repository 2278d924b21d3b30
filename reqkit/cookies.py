"""Cookies sent with or received from a request."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping


class Cookies(MutableMapping[str, str]):
    """Cookie names mapped to values, iterated in name order.

    ``encode`` says whether values should be URL-encoded when they are sent.
    """

    def __init__(
        self,
        initial: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        encode: bool = True,
    ) -> None:
        self.encode = encode
        self._values: dict[str, str] = {}
        if initial is not None:
            self.update(initial)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self._values:
            raise KeyError(key)
        self._values.pop(key)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Cookies({dict(self.items())!r}, encode={self.encode!r})"