# src/spotikit/services/spotify_api.py
import json
import logging
import re
from typing import Any, Dict, List, Optional, Protocol, Union

import aiohttp

from spotikit.core.config import settings
from spotikit.core.errors import BadRequestException, NotFoundException, raise_for_status
from spotikit.models.album import Album, AlbumsResponse
from spotikit.models.market import Market

log = logging.getLogger(__name__)

MAX_ALBUMS_PER_REQUEST = 20

_ALBUM_ID_RE = re.compile(r"(?:spotify:album:|open\.spotify\.com/album/)([A-Za-z0-9]+)")
_INVALID_ID_RE = re.compile(r"\binvalid (?:base62 )?id\b", re.IGNORECASE)


def album_id_from(value: str) -> str:
    """Accept a bare id, a ``spotify:album:`` URI or an open.spotify.com link."""
    match = _ALBUM_ID_RE.search(value)
    if match:
        return match.group(1)
    return value.strip()


def _is_invalid_id(exc: BadRequestException) -> bool:
    return _INVALID_ID_RE.search(exc.message) is not None


class AlbumFetcher(Protocol):
    async def get_album(
        self, album: str, market: Optional[Union[Market, str]] = None
    ) -> Optional[Album]:
        ...


class SpotifyAlbumService:
    """
    Thin Spotify Web API client for album lookups.

    Takes a ready bearer token; obtaining and refreshing tokens, retries and
    rate limiting are the caller's business. Every method issues exactly one
    GET request.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
        base_url: Optional[str] = None,
        market: Optional[Union[Market, str]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._token: Optional[str] = access_token or settings.spotify_access_token
        self.base_url = (base_url or settings.spotify_api_base).rstrip("/")
        self.market: Optional[Union[Market, str]] = market or settings.spotify_market
        self._timeout = aiohttp.ClientTimeout(total=timeout or settings.spotify_timeout)
        self._sess = session
        self._owns_session = session is None

    async def __aenter__(self) -> "SpotifyAlbumService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        if self._owns_session and self._sess is not None:
            await self._sess.close()
            self._sess = None

    def _session(self) -> aiohttp.ClientSession:
        if self._sess is None:
            self._sess = aiohttp.ClientSession(timeout=self._timeout)
        return self._sess

    def _params(self, market: Optional[Union[Market, str]]) -> Dict[str, str]:
        market = market or self.market
        if market:
            return {"market": Market(market.upper()).value}
        return {}

    async def _request(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        headers = {}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        log.debug("GET %s params=%s", url, params)
        async with self._session().get(url, headers=headers, params=params) as r:
            text = await r.text()
            try:
                data = json.loads(text) if text else None
            except ValueError:
                data = text
            if r.status >= 400:
                log.info("Spotify API %s for %s: %s", r.status, path, data)
                raise_for_status(r.status, data, r.headers)
            return data

    # ---------- public methods ----------

    async def get_album(
        self, album: str, market: Optional[Union[Market, str]] = None
    ) -> Optional[Album]:
        """Full album by id, URI or link; None when Spotify has no such album."""
        album_id = album_id_from(album)
        try:
            data = await self._request(f"/albums/{album_id}", self._params(market))
        except NotFoundException:
            return None
        except BadRequestException as e:
            if _is_invalid_id(e):
                log.debug("Album id %s rejected as invalid", album_id)
                return None
            raise
        return Album.model_validate(data)

    async def get_albums(
        self, *albums: str, market: Optional[Union[Market, str]] = None
    ) -> List[Optional[Album]]:
        """Several full albums in request order; unknown ids come back as None."""
        if not albums or len(albums) > MAX_ALBUMS_PER_REQUEST:
            raise ValueError(
                f"Between 1 and {MAX_ALBUMS_PER_REQUEST} albums can be fetched at once, got {len(albums)}"
            )
        params = self._params(market)
        params["ids"] = ",".join(album_id_from(a) for a in albums)
        try:
            data = await self._request("/albums", params)
        except BadRequestException as e:
            if _is_invalid_id(e):
                return [None] * len(albums)
            raise
        return list(AlbumsResponse.model_validate(data).albums)
