from __future__ import annotations

from .tag import Tag as Tag
from .tags import Tags as Tags
