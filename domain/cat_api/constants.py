"""Values recognised by The Cat API."""
from __future__ import annotations

TYPES: tuple[str, ...] = ("png", "jpg", "gif")

# "kittens" is accepted upstream but currently returns no images
CATEGORIES: tuple[str, ...] = (
    "hats",
    "space",
    "funny",
    "sunglasses",
    "boxes",
    "caturday",
    "ties",
    "dream",
    "kittens",
    "sinks",
    "clothes",
)

SIZES: tuple[str, ...] = ("small", "med", "full")

ACTIONS: tuple[str, ...] = ("add", "remove")

RESULTS_PER_PAGE_RANGE = (1, 100)
SCORE_RANGE = (1, 10)
MAX_TYPES = len(TYPES)

# accepted by validation, known to come back empty
EMPTY_CATEGORIES: frozenset[str] = frozenset({"kittens"})
