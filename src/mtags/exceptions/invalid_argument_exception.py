from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from .base_exceptions import BaseTagsException


class InvalidArgumentException(BaseTagsException, ValueError):
    @staticmethod
    def odd_length(key_values: Any) -> InvalidArgumentException:
        return InvalidArgumentException(
            f"Size of key/value sequence must be even, got {len(key_values)}: {list(key_values)!r}"
        )

    def __init__(self, message: Optional[str] = None) -> None:
        message = message.strip() if message and message.strip() else "Invalid argument"
        logger.debug("Rejecting tag input: {}", message)
        super().__init__(message)
