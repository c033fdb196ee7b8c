"""Pytest bootstrap configuration.

Keep settings deterministic before any module reads them, and provide a
client factory backed by httpx.MockTransport so no test touches the network.
"""
import os

for _name in list(os.environ):
    if _name.upper().startswith("CAT_API__"):
        del os.environ[_name]
os.environ.setdefault("DEBUG", "false")

from typing import Callable, Optional

import httpx
import pytest

from infrastructure.external.api_clients import CatAPIClient, ClientConfig

TEST_BASE_URL = "http://cats.test/api"


def xml_data(inner: str) -> bytes:
    return f"<?xml version=\"1.0\"?><response><data>{inner}</data></response>".encode()


def xml_error(message: str) -> bytes:
    return f"<response><apierror><message>{message}</message></apierror></response>".encode()


class RequestRecorder:
    """MockTransport handler that records requests and replays a fixed body."""

    def __init__(self, body: bytes = b"<response><data/></response>", status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body, headers={"content-type": "text/xml"})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_params(self) -> list[tuple[str, str]]:
        return list(self.last.url.params.multi_items())


@pytest.fixture
def recorder() -> RequestRecorder:
    return RequestRecorder()


@pytest.fixture
def make_client() -> Callable[..., CatAPIClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response], api_key: Optional[str] = "test-key") -> CatAPIClient:
        config = ClientConfig(api_key=api_key, base_url=TEST_BASE_URL)
        return CatAPIClient(config, transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def respond() -> Callable[..., RequestRecorder]:
    """respond(data="<images/>") or respond(error="msg") or respond(body=b"...")."""
    def _respond(
        data: Optional[str] = None,
        *,
        error: Optional[str] = None,
        body: Optional[bytes] = None,
        status_code: int = 200,
    ) -> RequestRecorder:
        if body is None:
            body = xml_error(error) if error is not None else xml_data(data or "")
        return RequestRecorder(body, status_code=status_code)
    return _respond
