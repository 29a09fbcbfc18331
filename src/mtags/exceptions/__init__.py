from __future__ import annotations

from .base_exceptions import BaseTagsException as BaseTagsException
from .invalid_argument_exception import InvalidArgumentException as InvalidArgumentException
