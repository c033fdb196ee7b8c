"""
Cat image gateway port (application/ports) exposing a replaceable protocol.

Application code depends on this Protocol; infrastructure implements it.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from application.dtos.cat_api import (
    FavouriteParams,
    GetFavouritesParams,
    GetImageParams,
    GetVotesParams,
    ReportParams,
    VoteParams,
)


@runtime_checkable
class CatImageGateway(Protocol):
    """Gateway protocol for the cat picture service.

    Every method returns the service's `data` payload or raises.
    """

    async def get_image(self, params: Optional[GetImageParams] = None, **options: Any) -> Any: ...

    async def vote(self, params: Optional[VoteParams] = None, **options: Any) -> Any: ...

    async def get_votes(self, params: Optional[GetVotesParams] = None, **options: Any) -> Any: ...

    async def favourite(self, params: Optional[FavouriteParams] = None, **options: Any) -> Any: ...

    async def get_favourites(self, params: Optional[GetFavouritesParams] = None, **options: Any) -> Any: ...

    async def report(self, params: Optional[ReportParams] = None, **options: Any) -> Any: ...

    async def list_categories(self) -> Any: ...

    async def get_overview(self) -> Any: ...
