from __future__ import annotations

from loguru import logger

from .elements import Tag as Tag
from .elements import Tags as Tags
from .exceptions import BaseTagsException as BaseTagsException
from .exceptions import InvalidArgumentException as InvalidArgumentException

# library logging stays silent unless the application calls logger.enable("mtags")
logger.disable("mtags")
