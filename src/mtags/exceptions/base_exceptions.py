from __future__ import annotations

from typing import Optional


class BaseTagsException(RuntimeError):
    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> Optional[str]:
        return self._message
