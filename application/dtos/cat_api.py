"""
Cat API request DTOs (Pydantic v2) used at application boundaries.

DTOs are frozen: once built (and validated by the domain rules) the
parameters sent upstream cannot change.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence, Union
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator


class CatRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    def to_query(self) -> dict[str, Any]:
        """Non-empty fields in declaration order, ready for the query string."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if value is not None and value != ""
        }


class GetImageParams(CatRequest):
    image_id: Optional[str] = None
    type: Optional[str] = None
    results_per_page: Optional[StrictInt] = None
    category: Optional[str] = None
    size: Optional[str] = None
    sub_id: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _join_types(cls, v: Union[str, Sequence[str], None]) -> Optional[str]:
        """Accept "png, jpg" or ["png", "jpg"]; spaces are dropped."""
        if v is None:
            return None
        if not isinstance(v, str):
            if not isinstance(v, (list, tuple)) or not all(isinstance(item, str) for item in v):
                raise ValueError("type must be a string or a list of strings")
            v = ",".join(v)
        return v.replace(" ", "")


class VoteParams(CatRequest):
    image_id: Optional[str] = None
    score: Optional[StrictInt] = None
    sub_id: Optional[str] = None


class GetVotesParams(CatRequest):
    sub_id: Optional[str] = None


class FavouriteParams(CatRequest):
    image_id: Optional[str] = None
    action: Optional[str] = None
    sub_id: Optional[str] = None

    @field_validator("action")
    @classmethod
    def _lower_action(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v


class GetFavouritesParams(CatRequest):
    sub_id: Optional[str] = None


class ReportParams(CatRequest):
    image_id: Optional[str] = None
    sub_id: Optional[str] = None
    reason: Optional[str] = None
