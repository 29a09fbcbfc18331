from __future__ import annotations

from typing import Iterator, List

import pytest

from loguru import logger

from mtags import InvalidArgumentException
from mtags import Tags


@pytest.fixture
def messages() -> Iterator[List[str]]:
    captured: List[str] = []
    logger.enable("mtags")
    handler_id = logger.add(lambda m: captured.append(str(m)), level="DEBUG", format="{name}: {message}")
    yield captured
    logger.remove(handler_id)
    logger.disable("mtags")


def test_logging_is_disabled_by_default() -> None:
    captured: List[str] = []
    handler_id = logger.add(lambda m: captured.append(str(m)), level="DEBUG", format="{message}")
    try:
        with pytest.raises(InvalidArgumentException):
            Tags.of("k")
    finally:
        logger.remove(handler_id)
    assert captured == []


def test_invalid_argument_is_logged(messages: List[str]) -> None:
    with pytest.raises(InvalidArgumentException):
        Tags.of("t1", "v1", "t2")
    assert len(messages) == 1
    assert messages[0].startswith("mtags.exceptions.invalid_argument_exception: Rejecting tag input:")
    assert "must be even, got 3" in messages[0]


def test_deprecated_zip_is_logged(messages: List[str]) -> None:
    with pytest.deprecated_call():
        Tags.zip("k", "v")
    assert messages == ["mtags.elements.tags: Deprecated Tags.zip called with 2 arguments\n"]
