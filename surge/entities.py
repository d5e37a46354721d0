from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .typehints import (HeaderName, HeaderValue, HeaderPair,
                        HeadersInput, StatusCode, Body)


class Headers(Mapping):
    """
    An ordered multimap of headers, where keys are case-insensitive and every
    key may have more than one value (like set-cookie). Names are stored
    lower-cased, values are stored in tuples, and nothing changes the object
    after it was created: add(), set(), merge() and remove() return a new one

    Indexing returns a list with all the values of a header. Use first() if
    only one value is expected
    """

    __slots__ = ('_items',)

    def __init__(self, headers: Optional[HeadersInput] = None, **kwargs: HeaderValue):
        items: Dict[HeaderName, Tuple[HeaderValue, ...]] = {}

        if isinstance(headers, Headers):
            items.update(headers._items)
        elif isinstance(headers, Mapping):
            for key, value in headers.items():
                items[key.lower()] = items.get(key.lower(), ()) + _as_values(value)
        elif headers is not None:
            for key, value in headers:
                items[key.lower()] = items.get(key.lower(), ()) + (value,)

        # kwargs are allowed only for simple headers, because of python
        # identifiers syntax. Underscores are turned into dashes
        for key, value in kwargs.items():
            key = key.lower().replace('_', '-')
            items[key] = items.get(key, ()) + _as_values(value)

        self._items = items

    @classmethod
    def _from_items(cls, items: Dict[HeaderName, Tuple[HeaderValue, ...]]) -> 'Headers':
        headers = cls.__new__(cls)
        headers._items = items

        return headers

    def __getitem__(self, item: HeaderName) -> List[HeaderValue]:
        return list(self._items[item.lower()])

    def __contains__(self, item: Any) -> bool:
        return isinstance(item, str) and item.lower() in self._items

    def __iter__(self) -> Iterator[HeaderName]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self):
        return hash(tuple(self._items.items()))

    def __repr__(self):
        return f'Headers({dict(self.items())!r})'

    def get_list(self, item: HeaderName) -> List[HeaderValue]:
        return list(self._items.get(item.lower(), ()))

    def first(self, item: HeaderName, instead: Optional[HeaderValue] = None) -> Optional[HeaderValue]:
        values = self._items.get(item.lower())

        return values[0] if values else instead

    def add(self, key: HeaderName, value: HeaderValue) -> 'Headers':
        """
        Returns new headers with the value appended to the values the header
        already has (if any). Old values are kept in the same order
        """

        items = self._items.copy()
        items[key.lower()] = items.get(key.lower(), ()) + (value,)

        return self._from_items(items)

    def set(self, key: HeaderName, value: Any) -> 'Headers':
        """
        Returns new headers where all the values of a header are replaced by
        the given one. Value may be a string or an iterable of strings
        """

        items = self._items.copy()
        items[key.lower()] = _as_values(value)

        return self._from_items(items)

    def merge(self, other: HeadersInput) -> 'Headers':
        """
        Same as set(), but for every header in other. Headers that are not
        in other are kept untouched
        """

        items = self._items.copy()
        items.update(Headers(other)._items)

        return self._from_items(items)

    def remove(self, key: HeaderName) -> 'Headers':
        items = self._items.copy()
        items.pop(key.lower(), None)

        return self._from_items(items)

    def pairs(self) -> Iterator[HeaderPair]:
        """
        Yields (name, value) for every value of every header in the order
        they were added. This is what serializers want: one line per value
        """

        for key, values in self._items.items():
            for value in values:
                yield key, value


def _as_values(value: Any) -> Tuple[HeaderValue, ...]:
    if isinstance(value, str):
        return value,

    return tuple(value)


@dataclass(frozen=True)
class Response:
    """
    Response is just a value
    The actual response will happen after some adapter serializes it

    Status 0 means that status is not set yet. Body may be a string, bytes,
    or an iterable of bytes chunks for streaming
    """

    status: StatusCode = 0
    headers: Headers = field(default_factory=Headers)
    body: Body = ''

    def __post_init__(self):
        if not isinstance(self.headers, Headers):
            # frozen dataclasses are allowed to be set only this way
            object.__setattr__(self, 'headers', Headers(self.headers))

    def replace(self, **changes: Any) -> 'Response':
        return replace(self, **changes)
