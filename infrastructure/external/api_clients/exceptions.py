"""
Upstream errors raised by API clients, mapped to BusinessException variants.

Transport failures are not wrapped here: httpx exceptions reach the caller unchanged.
"""
from __future__ import annotations

from typing import Optional
from domain.common.exceptions import BusinessException
from shared.codes.cat_api_codes import CatAPICode


class CatAPIServiceError(BusinessException):
    """The service answered with an <apierror> element."""

    def __init__(self, message: str, *, endpoint: str | None = None, details: Optional[dict] = None):
        full_details = {"endpoint": endpoint}
        if details:
            full_details.update(details)
        super().__init__(
            code=CatAPICode.SERVICE_ERROR,
            message=message,
            error_type="CatAPIServiceError",
            details=full_details,
        )


class CatAPIResponseFormatError(BusinessException):
    """The body could not be read as a <response> XML document."""

    def __init__(self, message: str, *, details: Optional[dict] = None):
        super().__init__(
            code=CatAPICode.RESPONSE_FORMAT_ERROR,
            message=message,
            error_type="CatAPIResponseFormatError",
            details=details,
        )
