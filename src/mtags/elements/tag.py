from __future__ import annotations

from typing import Any, Tuple

from ..exceptions import InvalidArgumentException


class Tag:
    """
    An immutable key/value pair labelling one dimension of a metric measurement.
    Tags order by key, then by value.
    """

    @staticmethod
    def of(key: str, value: str) -> Tag:
        return Tag(key, value)

    @staticmethod
    def _validate(name: str, s: Any) -> str:
        if not isinstance(s, str):
            raise InvalidArgumentException(f"Tag {name} must be a str, not {type(s).__name__}")
        return s

    __slots__ = ["_key", "_value"]

    def __init__(self, key: str, value: str) -> None:
        self._key = Tag._validate("key", key)
        self._value = Tag._validate("value", value)

    def __repr__(self) -> str:
        return f"Tag({self._key!r}, {self._value!r})"

    def __str__(self) -> str:
        return f"tag({self._key}={self._value})"

    def __hash__(self) -> int:
        return hash(self._sort_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return False
        return self._key == other._key and self._value == other._value

    def __lt__(self, other: Tag) -> bool:
        if not isinstance(other, Tag):
            raise NotImplementedError
        return self._sort_key < other._sort_key

    def __gt__(self, other: Tag) -> bool:
        if not isinstance(other, Tag):
            raise NotImplementedError
        return self._sort_key > other._sort_key

    def __le__(self, other: Tag) -> bool:
        if not isinstance(other, Tag):
            raise NotImplementedError
        return self._sort_key <= other._sort_key

    def __ge__(self, other: Tag) -> bool:
        if not isinstance(other, Tag):
            raise NotImplementedError
        return self._sort_key >= other._sort_key

    @property
    def _sort_key(self) -> Tuple[str, str]:
        return self._key, self._value

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> str:
        return self._value
