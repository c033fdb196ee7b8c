"""
API客户端模块

提供与外部REST API集成的客户端实现
"""
from __future__ import annotations

from typing import Optional

from .base import BaseAPIClient, APIResponse
from .cat_api import CatAPIClient
from .config import ClientConfig
from .exceptions import CatAPIResponseFormatError, CatAPIServiceError


def get_cat_api_client(api_key: Optional[str] = None, **overrides) -> CatAPIClient:
    """Build a client from settings; explicit arguments win over configured values."""
    return CatAPIClient(ClientConfig.from_settings(api_key=api_key, **overrides))


__all__ = [
    "BaseAPIClient",
    "APIResponse",
    "CatAPIClient",
    "ClientConfig",
    "CatAPIResponseFormatError",
    "CatAPIServiceError",
    "get_cat_api_client",
]
