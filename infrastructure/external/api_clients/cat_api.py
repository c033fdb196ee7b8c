"""
The Cat API client.

Each public coroutine validates its parameters, builds the query string,
issues one GET and returns the `<data>` payload of the XML response.
Validation errors are raised before anything is sent.
"""
from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

import httpx

from application.dtos.cat_api import (
    FavouriteParams,
    GetFavouritesParams,
    GetImageParams,
    GetVotesParams,
    ReportParams,
    VoteParams,
    CatRequest,
)
from core.logging_config import get_logger
from domain.cat_api.constants import EMPTY_CATEGORIES
from domain.cat_api.validation import (
    require_api_key,
    validate_favourite,
    validate_get_image,
    validate_image_id,
    validate_vote,
)
from .base import BaseAPIClient
from .config import ClientConfig
from .exceptions import CatAPIResponseFormatError, CatAPIServiceError
from .xml_adapter import normalize

logger = get_logger(__name__)

P = TypeVar("P", bound=CatRequest)


class CatAPIClient(BaseAPIClient):
    """Async client for thecatapi.com; implements `CatImageGateway`."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or ClientConfig()
        super().__init__(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            debug=self.config.debug,
            transport=transport,
        )

    @property
    def api_key(self) -> Optional[str]:
        return self.config.api_key

    # Operations

    async def get_image(self, params: Optional[GetImageParams] = None, **options: Any) -> Any:
        """Random image(s); `image_id` pins a single image."""
        p = self._params(GetImageParams, params, options)
        validate_get_image(
            image_id=p.image_id,
            type=p.type,
            results_per_page=p.results_per_page,
            category=p.category,
            size=p.size,
        )
        if p.category and p.category.lower() in EMPTY_CATEGORIES:
            logger.warning("cat_api_category_returns_no_images", category=p.category)
        return await self._call("images/get", p, extra={"format": "xml"})

    async def vote(self, params: Optional[VoteParams] = None, **options: Any) -> Any:
        """Score an image from 1 (bad) to 10 (good)."""
        require_api_key(self.api_key, "vote")
        p = self._params(VoteParams, params, options)
        validate_vote(self.api_key, image_id=p.image_id, score=p.score)
        return await self._call("images/vote", p)

    async def get_votes(self, params: Optional[GetVotesParams] = None, **options: Any) -> Any:
        require_api_key(self.api_key, "getVotes")
        p = self._params(GetVotesParams, params, options)
        return await self._call("images/getvotes", p)

    async def favourite(self, params: Optional[FavouriteParams] = None, **options: Any) -> Any:
        """Add (default upstream) or remove a favourite."""
        require_api_key(self.api_key, "favourite")
        p = self._params(FavouriteParams, params, options)
        validate_favourite(self.api_key, image_id=p.image_id, action=p.action)
        return await self._call("images/favourite", p)

    async def get_favourites(self, params: Optional[GetFavouritesParams] = None, **options: Any) -> Any:
        require_api_key(self.api_key, "getFavourites")
        p = self._params(GetFavouritesParams, params, options)
        return await self._call("images/getfavourites", p)

    async def report(self, params: Optional[ReportParams] = None, **options: Any) -> Any:
        """Hide an image from future `get_image` results for this API key."""
        require_api_key(self.api_key, "report")
        p = self._params(ReportParams, params, options)
        validate_image_id(self.api_key, "report", p.image_id)
        return await self._call("images/report", p)

    async def list_categories(self) -> Any:
        return await self._call("categories/list", with_key=False)

    async def get_overview(self) -> Any:
        """Request/vote/favourite counters for the configured API key."""
        require_api_key(self.api_key, "getOverview")
        return await self._call("stats/getoverview")

    # Helpers

    @staticmethod
    def _params(model: Type[P], params: Optional[P], options: dict[str, Any]) -> P:
        if params is not None and options:
            raise TypeError(f"pass either a {model.__name__} or keyword options, not both")
        if params is None:
            return model(**options)
        if not isinstance(params, model):
            raise TypeError(f"expected {model.__name__}, got {type(params).__name__}")
        return params

    def build_query(
        self,
        params: Optional[CatRequest] = None,
        *,
        extra: Optional[dict[str, Any]] = None,
        with_key: bool = True,
    ) -> dict[str, Any]:
        """Query parameters in wire order: extra, api_key, then the request fields."""
        query: dict[str, Any] = dict(extra or {})
        if with_key and self.api_key:
            query["api_key"] = self.api_key
        if params is not None:
            query.update(params.to_query())
        return query

    async def _call(
        self,
        endpoint: str,
        params: Optional[CatRequest] = None,
        *,
        extra: Optional[dict[str, Any]] = None,
        with_key: bool = True,
    ) -> Any:
        query = self.build_query(params, extra=extra, with_key=with_key)
        response = await self.get(endpoint, params=query)

        try:
            result = normalize(response.raw_content)
        except CatAPIResponseFormatError as exc:
            exc.details = {**(exc.details or {}), "endpoint": endpoint, "status_code": response.status_code}
            raise

        if result.is_error:
            logger.warning(
                "cat_api_error",
                endpoint=endpoint,
                status_code=response.status_code,
                message=result.error,
            )
            raise CatAPIServiceError(result.error, endpoint=endpoint, details={"status_code": response.status_code})
        return result.data
