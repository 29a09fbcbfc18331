"""
Tags is an immutable, sorted collection of Tag values in which no two
tags share a key. Every merge returns a new instance; when a key appears
more than once, the tag seen last wins.
"""
from __future__ import annotations

import warnings

from collections.abc import Iterable, Mapping, Sequence
from itertools import chain
from typing import Any, Dict, Final, Iterator, Optional, Tuple, overload

from loguru import logger
from ordered_set import OrderedSet

from . import Tag
from ..exceptions import InvalidArgumentException


def _merge(tags: Iterable[Any]) -> Tuple[Tag, ...]:
    merged: Dict[str, Tag] = {}
    for tag in tags:
        if not isinstance(tag, Tag):
            raise InvalidArgumentException(f"Expected Tag, not {type(tag).__name__}")
        merged[tag.key] = tag
    return tuple(sorted(merged.values()))


def _from_key_values(key_values: Sequence[str]) -> Tuple[Tag, ...]:
    if len(key_values) % 2 == 1:
        raise InvalidArgumentException.odd_length(key_values)
    return tuple(Tag(key_values[i], key_values[i + 1]) for i in range(0, len(key_values), 2))


def _as_tags(args: Tuple[Any, ...]) -> Tuple[Tag, ...]:
    """
    Normalizes the argument shapes accepted by Tags.of and Tags.and_
    (flat key/value strings, discrete Tags, a single iterable or mapping)
    into a tuple of Tag. An absent or empty argument yields an empty tuple.
    """
    if len(args) == 1:
        arg = args[0]
        if arg is None:
            return ()
        if isinstance(arg, Tag):
            return (arg,)
        if isinstance(arg, Tags):
            return arg._tags
        if isinstance(arg, Mapping):
            return tuple(Tag(k, v) for k, v in arg.items())
        if isinstance(arg, Iterable) and not isinstance(arg, str):
            args = tuple(arg)
    if not args:
        return ()
    if all(isinstance(a, str) for a in args):
        return _from_key_values(args)
    if all(isinstance(a, Tag) for a in args):
        return args
    raise InvalidArgumentException(
        f"Expected key/value strings or Tags, got {', '.join(sorted({type(a).__name__ for a in args}))}"
    )


class Tags(Sequence[Tag]):
    @classmethod
    def empty(cls) -> Tags:
        return _EMPTY_TAGS

    @overload
    @classmethod
    def of(cls, key: str, value: str, /, *key_values: str) -> Tags:
        ...

    @overload
    @classmethod
    def of(cls, *tags: Tag) -> Tags:
        ...

    @overload
    @classmethod
    def of(cls, tags: Optional[Iterable[Tag] | Mapping[str, str]], /) -> Tags:
        ...

    @classmethod
    def of(cls, *args: Any) -> Tags:
        # an existing Tags is immutable, hand it back rather than copying it
        if len(args) == 1 and isinstance(args[0], Tags):
            return args[0]
        tags = _as_tags(args)
        return Tags._create(tags) if tags else cls.empty()

    @classmethod
    def concat(cls, base: Optional[Iterable[Tag]], *args: Any) -> Tags:
        return cls.of(base).and_(*args)

    @classmethod
    def zip(cls, *key_values: str) -> Tags:
        """
        Deprecated alias of Tags.of(key, value, ...), kept for existing callers.
        """
        warnings.warn("Tags.zip is deprecated. Use Tags.of instead.", DeprecationWarning, stacklevel=2)
        logger.debug("Deprecated Tags.zip called with {} arguments", len(key_values))
        return cls.of(*key_values)

    @staticmethod
    def _create(tags: Iterable[Tag]) -> Tags:
        created = Tags(tags)
        return created if created else _EMPTY_TAGS

    __slots__ = ["_tags"]

    def __init__(self, tags: Optional[Iterable[Tag]] = None) -> None:
        self._tags: Tuple[Tag, ...] = _merge(tags) if tags else ()

    def __repr__(self) -> str:
        return f"Tags([{', '.join([repr(t) for t in self._tags])}])"

    def __str__(self) -> str:
        return f"[{','.join([str(t) for t in self._tags])}]"

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(t.key == item for t in self._tags)
        return item in self._tags

    @overload
    def __getitem__(self, index: int) -> Tag:
        ...

    @overload
    def __getitem__(self, index: slice) -> Tags:
        ...

    def __getitem__(self, index: int | slice) -> Tag | Tags:
        if isinstance(index, slice):
            return Tags._create(self._tags[index])
        return self._tags[index]

    def __hash__(self) -> int:
        return hash(self._tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tags):
            return False
        return self._tags == other._tags

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __add__(self, other: Tag | Iterable[Tag]) -> Tags:
        return self.and_(other)

    @overload
    def and_(self, key: str, value: str, /, *key_values: str) -> Tags:
        ...

    @overload
    def and_(self, *tags: Tag) -> Tags:
        ...

    @overload
    def and_(self, tags: Optional[Iterable[Tag] | Mapping[str, str]], /) -> Tags:
        ...

    def and_(self, *args: Any) -> Tags:
        """
        Returns a new Tags holding this instance's tags plus the given ones,
        which override any existing tag with the same key. Accepts a key and
        value, a flat key/value sequence, Tag values, or an iterable of Tag.
        If nothing is given, this instance is returned unchanged.

        :raises InvalidArgumentException: if a key/value sequence has odd length
        """
        tags = _as_tags(args)
        if not tags:
            return self
        return Tags._create(chain(self._tags, tags))

    def iterator(self) -> Iterator[Tag]:
        return iter(self._tags)

    def stream(self) -> Iterator[Tag]:
        yield from self._tags

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        for t in self._tags:
            if t.key == key:
                return t.value
        return default

    def keys(self) -> OrderedSet[str]:
        return OrderedSet([t.key for t in self._tags])

    def to_dict(self) -> Dict[str, str]:
        return {t.key: t.value for t in self._tags}


_EMPTY_TAGS: Final[Tags] = Tags()
