from __future__ import annotations

import pytest

from mtags.exceptions import BaseTagsException
from mtags.exceptions import InvalidArgumentException


def test_new_invalid_argument_exception() -> None:
    e = InvalidArgumentException()
    assert e
    assert type(e) == InvalidArgumentException
    assert isinstance(e, BaseTagsException)
    assert isinstance(e, ValueError)
    assert e.message == "Invalid argument"

    e = InvalidArgumentException("   ")
    assert e.message == "Invalid argument"

    e = InvalidArgumentException("  Bad tag ")
    assert e.message == "Bad tag"
    assert str(e) == "Bad tag"


def test_odd_length() -> None:
    e = InvalidArgumentException.odd_length(("k1", "v1", "k2"))
    assert type(e) == InvalidArgumentException
    assert e.message == "Size of key/value sequence must be even, got 3: ['k1', 'v1', 'k2']"

    with pytest.raises(ValueError, match="must be even, got 1"):
        raise InvalidArgumentException.odd_length(["k1"])
