"""
Parameter rules for The Cat API operations.

Every check here runs before a request is dispatched. Checks are ordered:
API key first, then numeric ranges, then value and presence checks, so the
first violation reported is deterministic.
"""
from __future__ import annotations

from typing import Optional

from domain.common.exceptions import (
    ApiKeyRequiredException,
    DomainValidationException,
    ParamMissingException,
    ParamOutOfRangeException,
)
from .constants import (
    ACTIONS,
    CATEGORIES,
    MAX_TYPES,
    RESULTS_PER_PAGE_RANGE,
    SCORE_RANGE,
    SIZES,
    TYPES,
)


def require_api_key(api_key: Optional[str], operation: str) -> None:
    if not api_key:
        raise ApiKeyRequiredException(operation)


def _check_range(field: str, value: Optional[int], bounds: tuple[int, int]) -> None:
    minimum, maximum = bounds
    if value is not None and not minimum <= value <= maximum:
        raise ParamOutOfRangeException(field, value, minimum, maximum)


def is_invalid_type(type_value: str) -> bool:
    """Return True when a comma separated type list is not a subset of TYPES."""
    entries = type_value.lower().split(",")
    if len(entries) > MAX_TYPES:
        return True
    return any(entry not in TYPES for entry in entries)


def validate_get_image(
    *,
    image_id: Optional[str] = None,
    type: Optional[str] = None,
    results_per_page: Optional[int] = None,
    category: Optional[str] = None,
    size: Optional[str] = None,
) -> None:
    _check_range("results_per_page", results_per_page, RESULTS_PER_PAGE_RANGE)
    if image_id and results_per_page is not None and results_per_page > 1:
        raise DomainValidationException(
            "image_id and results_per_page are set but results_per_page is greater than 1",
            field="results_per_page",
            details={"image_id": image_id, "results_per_page": results_per_page},
        )
    if type and is_invalid_type(type):
        raise DomainValidationException(
            f"type: '{type}' is invalid",
            field="type",
            details={"allowed": list(TYPES), "max": MAX_TYPES},
        )
    if category and category.lower() not in CATEGORIES:
        raise DomainValidationException(
            f"category: '{category}' is invalid",
            field="category",
            details={"allowed": list(CATEGORIES)},
        )
    if size and size.lower() not in SIZES:
        raise DomainValidationException(
            f"size: '{size}' is invalid",
            field="size",
            details={"allowed": list(SIZES)},
        )


def validate_vote(
    api_key: Optional[str],
    *,
    image_id: Optional[str] = None,
    score: Optional[int] = None,
) -> None:
    require_api_key(api_key, "vote")
    _check_range("score", score, SCORE_RANGE)
    if score is None or not image_id:
        raise ParamMissingException(("image_id", "score"))


def validate_favourite(
    api_key: Optional[str],
    *,
    image_id: Optional[str] = None,
    action: Optional[str] = None,
) -> None:
    require_api_key(api_key, "favourite")
    if action and action.lower() not in ACTIONS:
        raise DomainValidationException(
            f"action: '{action}' is invalid",
            field="action",
            details={"allowed": list(ACTIONS)},
        )
    if not image_id:
        raise ParamMissingException(("image_id",))


def validate_image_id(api_key: Optional[str], operation: str, image_id: Optional[str]) -> None:
    """Key + image_id check shared by operations that act on a single image."""
    require_api_key(api_key, operation)
    if not image_id:
        raise ParamMissingException(("image_id",))
