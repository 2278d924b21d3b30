"""Ordered key/value collections rendered as URL-encoded strings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

from reqkit.util import url_encode


@dataclass(frozen=True)
class Parameter:
    """A query-string parameter."""

    key: str
    value: str


@dataclass(frozen=True)
class Pair:
    """A form field."""

    key: str
    value: str


_Item = TypeVar("_Item", Parameter, Pair)
_Source = Union[Mapping[str, str], Iterable[Any]]


class CurlContainer(Generic[_Item]):
    """An ordered list of key/value items joined as ``key=value&...``.

    ``encode`` controls whether keys and values are URL-encoded.
    """

    item_type: ClassVar[type] = Pair

    def __init__(self, items: _Source = (), encode: bool = True) -> None:
        self.encode = encode
        self._items: list[_Item] = []
        if isinstance(items, Mapping):
            items = items.items()
        self.add(*items)

    def add(self, *args: Any) -> None:
        """Append items, given as item objects or ``(key, value)`` tuples."""
        for item in args:
            self._items.append(self._coerce(item))

    def _coerce(self, item: Any) -> _Item:
        if isinstance(item, self.item_type):
            return item
        if isinstance(item, (Parameter, Pair)):
            return self.item_type(item.key, item.value)
        key, value = item
        return self.item_type(key, value)

    def _escape(self, text: str) -> str:
        return url_encode(text) if self.encode else text

    def _format(self, item: _Item) -> str:
        return f"{self._escape(item.key)}={self._escape(item.value)}"

    def get_content(self) -> str:
        """Render all items joined with ``&``."""
        return "&".join(self._format(item) for item in self._items)

    def __iter__(self) -> Iterator[_Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, encode={self.encode!r})"


class Parameters(CurlContainer[Parameter]):
    """Query-string parameters; an empty value renders as the bare key."""

    item_type: ClassVar[type] = Parameter

    def _format(self, item: Parameter) -> str:
        if not item.value:
            return self._escape(item.key)
        return super()._format(item)


class Payload(CurlContainer[Pair]):
    """URL-encoded form fields for a request body."""

    item_type: ClassVar[type] = Pair

    def __init__(self, pairs: _Source, encode: bool = True) -> None:
        super().__init__(pairs, encode)