"""
XML response adapter.

The Cat API answers with documents shaped like::

    <response><data>...</data></response>
    <response><apierror><message>...</message></apierror></response>

This module is the only place that knows about the XML parser; the client
works with `NormalizedResponse` values.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union
from xml.parsers.expat import ExpatError

import xmltodict

from .exceptions import CatAPIResponseFormatError

ROOT_ELEMENT = "response"
ERROR_ELEMENT = "apierror"
DATA_ELEMENT = "data"
UNKNOWN_ERROR = "Unknown API error"


@dataclass(frozen=True)
class NormalizedResponse:
    """Either the `data` payload or the service's error message."""

    data: Any = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


def xml_to_dict(body: Union[str, bytes]) -> dict[str, Any]:
    """Parse an XML document into plain dicts/lists/strings."""
    try:
        return xmltodict.parse(body) or {}
    except (ExpatError, ValueError) as exc:
        # ValueError: xmltodict refuses documents that declare entities
        raise CatAPIResponseFormatError(
            f"Response body is not valid XML: {exc}",
            details={"body": _preview(body)},
        ) from exc


def normalize(body: Union[str, bytes]) -> NormalizedResponse:
    document = xml_to_dict(body)
    if ROOT_ELEMENT not in document:
        raise CatAPIResponseFormatError(
            f"Response body has no <{ROOT_ELEMENT}> root",
            details={"root": next(iter(document), None)},
        )
    root = document[ROOT_ELEMENT] or {}
    if not isinstance(root, dict):
        # <response>text</response>
        return NormalizedResponse(data=None)

    if ERROR_ELEMENT in root:
        return NormalizedResponse(error=_error_message(root[ERROR_ELEMENT]))
    return NormalizedResponse(data=root.get(DATA_ELEMENT))


def _error_message(apierror: Any) -> str:
    if isinstance(apierror, dict):
        message = apierror.get("message")
    else:
        message = apierror
    return str(message) if message else UNKNOWN_ERROR


def _preview(body: Union[str, bytes], limit: int = 200) -> str:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return body[:limit]
