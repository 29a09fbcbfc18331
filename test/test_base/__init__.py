from __future__ import annotations

from .test_base import TestBase as TestBase
