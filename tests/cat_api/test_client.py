import httpx
import pytest

from application.dtos.cat_api import GetImageParams, VoteParams
from application.ports.cat_api import CatImageGateway
from domain.common.exceptions import (
    ApiKeyRequiredException,
    DomainValidationException,
    ParamMissingException,
    ParamOutOfRangeException,
)
from infrastructure.external.api_clients import (
    CatAPIClient,
    CatAPIResponseFormatError,
    CatAPIServiceError,
    ClientConfig,
    get_cat_api_client,
)


IMAGE_XML = "<images><image><url>http://img/1.jpg</url><id>abc</id></image></images>"


def test_client_implements_gateway_port():
    assert isinstance(CatAPIClient(ClientConfig()), CatImageGateway)


@pytest.mark.asyncio
async def test_get_image_builds_query_and_returns_data(make_client, respond):
    rec = respond(IMAGE_XML)
    async with make_client(rec) as client:
        data = await client.get_image(type="png, jpg", results_per_page=2, category="hats", size="small", sub_id="u1")

    assert data == {"images": {"image": {"url": "http://img/1.jpg", "id": "abc"}}}
    assert rec.last.method == "GET"
    assert rec.last.url.path == "/api/images/get"
    assert rec.last_params() == [
        ("format", "xml"),
        ("api_key", "test-key"),
        ("type", "png,jpg"),
        ("results_per_page", "2"),
        ("category", "hats"),
        ("size", "small"),
        ("sub_id", "u1"),
    ]


@pytest.mark.asyncio
async def test_get_image_without_key_or_params(make_client, respond):
    rec = respond(IMAGE_XML)
    async with make_client(rec, api_key=None) as client:
        await client.get_image()
    assert rec.last_params() == [("format", "xml")]


@pytest.mark.asyncio
async def test_get_image_accepts_dto(make_client, respond):
    rec = respond(IMAGE_XML)
    async with make_client(rec) as client:
        await client.get_image(GetImageParams(image_id="abc"))
    assert ("image_id", "abc") in rec.last_params()


@pytest.mark.asyncio
async def test_dto_and_options_together_rejected(make_client, respond):
    rec = respond()
    async with make_client(rec) as client:
        with pytest.raises(TypeError):
            await client.get_image(GetImageParams(), size="med")
    assert rec.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs, exc",
    [
        ({"results_per_page": 0}, ParamOutOfRangeException),
        ({"results_per_page": 101}, ParamOutOfRangeException),
        ({"image_id": "abc", "results_per_page": 5}, DomainValidationException),
        ({"type": "png,jpg,gif,jpg"}, DomainValidationException),
        ({"type": "tiff"}, DomainValidationException),
        ({"category": "dogs"}, DomainValidationException),
        ({"size": "xl"}, DomainValidationException),
    ],
)
async def test_get_image_validation_happens_before_network(make_client, respond, kwargs, exc):
    rec = respond(IMAGE_XML)
    async with make_client(rec) as client:
        with pytest.raises(exc):
            await client.get_image(**kwargs)
    assert rec.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call, operation",
    [
        (lambda c: c.vote(image_id="a", score=5), "vote"),
        (lambda c: c.vote(image_id="a", score=42), "vote"),
        (lambda c: c.get_votes(), "getVotes"),
        (lambda c: c.favourite(image_id="a", action="bogus"), "favourite"),
        (lambda c: c.get_favourites(sub_id="u1"), "getFavourites"),
        (lambda c: c.report(), "report"),
        (lambda c: c.get_overview(), "getOverview"),
    ],
)
async def test_keyed_operations_require_api_key(make_client, respond, call, operation):
    rec = respond()
    async with make_client(rec, api_key=None) as client:
        with pytest.raises(ApiKeyRequiredException) as ei:
            await call(client)
    assert str(ei.value) == f"Can't use {operation} when no API key is provided"
    assert rec.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("score", [1, 10])
async def test_vote_boundaries_are_sent(make_client, respond, score):
    rec = respond()
    async with make_client(rec) as client:
        await client.vote(VoteParams(image_id="abc", score=score, sub_id="u1"))
    assert rec.last.url.path == "/api/images/vote"
    assert rec.last_params() == [("api_key", "test-key"), ("image_id", "abc"), ("score", str(score)), ("sub_id", "u1")]


@pytest.mark.asyncio
@pytest.mark.parametrize("score", [0, 11])
async def test_vote_out_of_range(make_client, respond, score):
    rec = respond()
    async with make_client(rec) as client:
        with pytest.raises(ParamOutOfRangeException):
            await client.vote(image_id="abc", score=score)
    assert rec.requests == []


@pytest.mark.asyncio
async def test_vote_missing_fields(make_client, respond):
    rec = respond()
    async with make_client(rec) as client:
        with pytest.raises(ParamMissingException):
            await client.vote(score=4)
    assert rec.requests == []


@pytest.mark.asyncio
async def test_favourite_defaults_and_actions(make_client, respond):
    rec = respond()
    async with make_client(rec) as client:
        await client.favourite(image_id="abc")
        assert rec.last_params() == [("api_key", "test-key"), ("image_id", "abc")]
        await client.favourite(image_id="abc", action="Remove")
        assert ("action", "remove") in rec.last_params()
        with pytest.raises(DomainValidationException):
            await client.favourite(image_id="abc", action="toggle")
        with pytest.raises(ParamMissingException):
            await client.favourite(action="add")
    assert len(rec.requests) == 2
    assert rec.last.url.path == "/api/images/favourite"


@pytest.mark.asyncio
async def test_report_sends_reason(make_client, respond):
    rec = respond()
    async with make_client(rec) as client:
        await client.report(image_id="abc", reason="not a cat")
        with pytest.raises(ParamMissingException):
            await client.report(reason="no id")
    assert rec.last.url.path == "/api/images/report"
    assert rec.last_params() == [("api_key", "test-key"), ("image_id", "abc"), ("reason", "not a cat")]
    assert len(rec.requests) == 1


@pytest.mark.asyncio
async def test_votes_and_favourites_listing(make_client, respond):
    rec = respond("<images/>")
    async with make_client(rec) as client:
        await client.get_votes(sub_id="u1")
        assert rec.last.url.path == "/api/images/getvotes"
        assert rec.last_params() == [("api_key", "test-key"), ("sub_id", "u1")]
        await client.get_favourites()
        assert rec.last.url.path == "/api/images/getfavourites"
        assert rec.last_params() == [("api_key", "test-key")]


@pytest.mark.asyncio
async def test_list_categories_needs_no_key(make_client, respond):
    rec = respond("<categories><category><id>1</id><name>hats</name></category></categories>")
    async with make_client(rec, api_key=None) as client:
        data = await client.list_categories()
    assert data == {"categories": {"category": {"id": "1", "name": "hats"}}}
    assert rec.last.url.path == "/api/categories/list"
    assert rec.last_params() == []


@pytest.mark.asyncio
async def test_list_categories_does_not_send_key(make_client, respond):
    rec = respond("<categories/>")
    async with make_client(rec) as client:
        await client.list_categories()
    assert rec.last_params() == []


@pytest.mark.asyncio
async def test_get_overview(make_client, respond):
    rec = respond("<stats><statsoverview><total_get_requests>12</total_get_requests></statsoverview></stats>")
    async with make_client(rec) as client:
        data = await client.get_overview()
    assert data["stats"]["statsoverview"]["total_get_requests"] == "12"
    assert rec.last.url.path == "/api/stats/getoverview"
    assert rec.last_params() == [("api_key", "test-key")]


@pytest.mark.asyncio
async def test_service_error_is_raised_with_message(make_client, respond):
    rec = respond(error="Image not found", status_code=200)
    async with make_client(rec) as client:
        with pytest.raises(CatAPIServiceError) as ei:
            await client.vote(image_id="zzz", score=3)
    assert ei.value.message == "Image not found"
    assert ei.value.details["endpoint"] == "images/vote"


@pytest.mark.asyncio
async def test_non_xml_body_reports_status(make_client, respond):
    rec = respond(body=b"<html>Bad Gateway</html>", status_code=502)
    async with make_client(rec) as client:
        with pytest.raises(CatAPIResponseFormatError) as ei:
            await client.list_categories()
    assert ei.value.details["status_code"] == 502
    assert ei.value.details["endpoint"] == "categories/list"


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged(make_client):
    def _boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(_boom) as client:
        with pytest.raises(httpx.ConnectError):
            await client.get_overview()


@pytest.mark.asyncio
async def test_calls_share_one_http_client(make_client, respond):
    rec = respond()
    client = make_client(rec)
    await client.get_votes()
    first = client.client
    await client.get_favourites()
    assert client.client is first
    await client.close()
    assert client._client is None


def test_factory_uses_explicit_key():
    client = get_cat_api_client(api_key="from-arg")
    assert client.api_key == "from-arg"
    assert client.base_url == "http://thecatapi.com/api"


def test_factory_without_key_uses_settings_default():
    assert get_cat_api_client().api_key is None


class _RecordingLogger:
    def __init__(self):
        self.warnings: list[tuple[str, dict]] = []

    def warning(self, event, **kw):
        self.warnings.append((event, kw))


@pytest.mark.asyncio
async def test_empty_category_warns_but_still_requests(make_client, respond, monkeypatch):
    from infrastructure.external.api_clients import cat_api

    log = _RecordingLogger()
    monkeypatch.setattr(cat_api, "logger", log)
    rec = respond("<images/>")
    async with make_client(rec) as client:
        await client.get_image(category="Kittens")

    assert log.warnings == [("cat_api_category_returns_no_images", {"category": "Kittens"})]
    assert ("category", "Kittens") in rec.last_params()
    assert rec.last.url.path == "/api/images/get"


@pytest.mark.asyncio
async def test_base_get_returns_status_body_and_request_id(make_client):
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<response/>", headers={"x-request-id": "req-1"})

    async with make_client(_handler) as client:
        response = await client.get("categories/list")
    assert (response.status_code, response.raw_content, response.request_id) == (200, b"<response/>", "req-1")
    assert response.elapsed_ms >= 0
    assert set(vars(response)) == {"status_code", "raw_content", "elapsed_ms", "request_id"}
