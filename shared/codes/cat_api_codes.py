"""
Cat API specific codes.
"""
from __future__ import annotations

from enum import IntEnum


class CatAPICode(IntEnum):
    # Generic success
    SUCCESS = 0

    # Upstream errors (6xxxx)
    SERVICE_ERROR = 60000
    RESPONSE_FORMAT_ERROR = 60001
