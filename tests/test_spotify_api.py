import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp import test_utils

from conftest import ALBUM_ID, FULL_ALBUM
from spotikit.core.errors import (
    AuthenticationException,
    BadRequestException,
    SpotifyApiException,
    TooManyRequestsException,
)
from spotikit.models.album import Album, SimpleAlbum
from spotikit.models.market import Market
from spotikit.services.spotify_api import SpotifyAlbumService, album_id_from

TOKEN = "test-token"


def _error(status, message, headers=None):
    return web.json_response({"error": {"status": status, "message": message}}, status=status, headers=headers)


async def get_album(request):
    request.app["requests"].append({"path": request.path, "query": dict(request.query)})
    album_id = request.match_info["album_id"]
    if request.headers.get("Authorization") != f"Bearer {TOKEN}":
        return _error(401, "No token provided")
    if album_id == ALBUM_ID:
        return web.json_response(FULL_ALBUM)
    if album_id == "bad-id":
        return _error(400, "invalid id")
    if album_id == "bad-market":
        return _error(400, "Invalid market code")
    if album_id == "limited":
        return _error(429, "API rate limit exceeded", headers={"Retry-After": "5"})
    if album_id == "boom":
        return _error(503, "Service unavailable")
    return _error(404, "non existing id")


async def get_albums(request):
    request.app["requests"].append({"path": request.path, "query": dict(request.query)})
    ids = request.query["ids"].split(",")
    return web.json_response({"albums": [FULL_ALBUM if i == ALBUM_ID else None for i in ids]})


@pytest_asyncio.fixture
async def server():
    app = web.Application()
    app["requests"] = []
    app.router.add_get("/v1/albums/{album_id}", get_album)
    app.router.add_get("/v1/albums", get_albums)
    srv = test_utils.TestServer(app)
    await srv.start_server()
    yield srv
    await srv.close()


@pytest_asyncio.fixture
async def service(server):
    svc = SpotifyAlbumService(access_token=TOKEN, base_url=str(server.make_url("/v1")))
    yield svc
    await svc.close()


@pytest.mark.parametrize(
    "value",
    [
        ALBUM_ID,
        f"spotify:album:{ALBUM_ID}",
        f"https://open.spotify.com/album/{ALBUM_ID}?si=abc",
        f"  {ALBUM_ID} ",
    ],
)
def test_album_id_from(value):
    assert album_id_from(value) == ALBUM_ID


@pytest.mark.asyncio
async def test_get_album(service, server):
    album = await service.get_album(ALBUM_ID, market=Market.US)

    assert isinstance(album, Album)
    assert album.id == ALBUM_ID
    request = server.app["requests"][-1]
    assert request["query"]["market"] == "US"


@pytest.mark.asyncio
async def test_get_album_without_market(service, server):
    await service.get_album(f"spotify:album:{ALBUM_ID}")
    request = server.app["requests"][-1]
    assert request["path"] == f"/v1/albums/{ALBUM_ID}"
    assert "market" not in request["query"]


@pytest.mark.asyncio
@pytest.mark.parametrize("album_id", ["missing", "bad-id"])
async def test_get_album_not_found_is_none(service, album_id):
    assert await service.get_album(album_id) is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "album_id, error",
    [
        ("bad-market", BadRequestException),
        ("boom", SpotifyApiException),
    ],
)
async def test_get_album_errors_propagate(service, album_id, error):
    with pytest.raises(error):
        await service.get_album(album_id)


@pytest.mark.asyncio
async def test_get_album_rate_limited(service):
    with pytest.raises(TooManyRequestsException) as exc_info:
        await service.get_album("limited")
    assert exc_info.value.status == 429
    assert exc_info.value.retry_after == 5


@pytest.mark.asyncio
async def test_get_album_unauthorized(server):
    async with SpotifyAlbumService(access_token="wrong", base_url=str(server.make_url("/v1"))) as svc:
        with pytest.raises(AuthenticationException) as exc_info:
            await svc.get_album(ALBUM_ID)
    assert exc_info.value.message == "No token provided"


@pytest.mark.asyncio
async def test_get_albums_keeps_order(service, server):
    albums = await service.get_albums(ALBUM_ID, "missing", market="ca")

    assert [a.id if a else None for a in albums] == [ALBUM_ID, None]
    request = server.app["requests"][-1]
    assert request["query"]["ids"] == f"{ALBUM_ID},missing"
    assert request["query"]["market"] == "CA"


@pytest.mark.asyncio
async def test_get_albums_limits(service):
    with pytest.raises(ValueError):
        await service.get_albums()
    with pytest.raises(ValueError):
        await service.get_albums(*[ALBUM_ID] * 21)


@pytest.mark.asyncio
async def test_simple_album_upgrade_through_service(service, server, simple_album_json):
    simple = SimpleAlbum.model_validate(simple_album_json)

    full = await simple.to_full_album(service, market=Market.CA)

    assert full.id == simple.id
    assert len(server.app["requests"]) == 1
    assert server.app["requests"][0]["path"] == f"/v1/albums/{simple.id}"
