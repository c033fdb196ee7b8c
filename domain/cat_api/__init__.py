"""Cat API domain exports."""
from .constants import ACTIONS, CATEGORIES, SIZES, TYPES
from .validation import (
    require_api_key,
    validate_favourite,
    validate_get_image,
    validate_image_id,
    validate_vote,
)

__all__ = [
    "ACTIONS",
    "CATEGORIES",
    "SIZES",
    "TYPES",
    "require_api_key",
    "validate_favourite",
    "validate_get_image",
    "validate_image_id",
    "validate_vote",
]
