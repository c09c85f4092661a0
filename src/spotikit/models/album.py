# src/spotikit/models/album.py
"""
Album models for the Spotify Web API.

A ``SimpleAlbum`` is the partial album embedded in other responses (tracks,
artist album listings, search results). ``Album`` is what ``GET /albums/{id}``
returns. Both keep the raw wire strings and expose typed, lazily computed views
of them; every raw value is checked when the model is decoded, so the views
themselves never fail.
"""
import re
from functools import cached_property
from typing import TYPE_CHECKING, Dict, Optional, Tuple, Union

from pydantic import Field, field_validator, model_validator

from spotikit.core.rest_action import SpotifyRestAction
from spotikit.models.common import (
    CoreObject,
    ExternalId,
    MarketsMixin,
    PagingObject,
    Restrictions,
    ResultEnum,
    SimpleArtist,
    SimpleTrack,
    SpotifyImage,
    SpotifyModel,
)
from spotikit.models.market import Market

if TYPE_CHECKING:
    from spotikit.services.spotify_api import AlbumFetcher


class AlbumResultType(ResultEnum):
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"
    APPEARS_ON = "appears_on"  # only valid as an album group


class CopyrightType(ResultEnum):
    COPYRIGHT = "C"
    SOUND_PERFORMANCE_COPYRIGHT = "P"


COPYRIGHT_PREFIXES = ("(P)", "(C)")
RELEASE_DATE_PRECISIONS = ("year", "month", "day")

_DIGITS_RE = re.compile(r"[0-9]+")


class ReleaseDate(SpotifyModel):
    """Release date known to year, month or day precision. Unknown parts are None."""

    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    @model_validator(mode="after")
    def check_day_has_month(self) -> "ReleaseDate":
        if self.day is not None and self.month is None:
            raise ValueError("release date has a day but no month")
        return self

    @property
    def precision(self) -> str:
        if self.day is not None:
            return "day"
        if self.month is not None:
            return "month"
        return "year"


def get_release_date(value: str) -> ReleaseDate:
    """Parse ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``; anything else raises ValueError."""
    separators = value.count("-")
    if separators not in (0, 1, 2):
        raise ValueError(f"Invalid release date: {value!r}")
    segments = value.split("-")
    if not all(_DIGITS_RE.fullmatch(segment) for segment in segments):
        raise ValueError(f"Invalid release date: {value!r}")
    parts = [int(segment) for segment in segments]
    parts += [None] * (3 - len(parts))
    return ReleaseDate(year=parts[0], month=parts[1], day=parts[2])


class SpotifyCopyright(SpotifyModel):
    text_string: str = Field(alias="text")
    type_string: str = Field(alias="type")

    @field_validator("type_string")
    @classmethod
    def check_copyright_type(cls, value: str) -> str:
        if CopyrightType.match(value) is None:
            raise ValueError(f"Unknown copyright type: {value!r}")
        return value

    @cached_property
    def text(self) -> str:
        text = self.text_string
        for prefix in COPYRIGHT_PREFIXES:
            if text.startswith(prefix):
                text = text[len(prefix):]
                break
        return text.strip()

    @cached_property
    def type(self) -> CopyrightType:
        return CopyrightType.match(self.type_string)


class AlbumBase(CoreObject, MarketsMixin):
    album_type_string: str = Field(alias="album_type")
    artists: Tuple[SimpleArtist, ...]
    images: Tuple[SpotifyImage, ...]
    name: str
    type: str
    restrictions: Optional[Restrictions] = None
    release_date_string: Optional[str] = Field(None, alias="release_date")
    release_date_precision: Optional[str] = None
    total_tracks: Optional[int] = Field(None, ge=0)

    @field_validator("album_type_string")
    @classmethod
    def check_album_type(cls, value: str) -> str:
        album_type = AlbumResultType.match(value, ignore_case=True)
        if album_type is None:
            raise ValueError(f"Unknown album type: {value!r}")
        return value

    @field_validator("release_date_string")
    @classmethod
    def check_release_date(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            get_release_date(value)
        return value

    @field_validator("release_date_precision")
    @classmethod
    def check_release_date_precision(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in RELEASE_DATE_PRECISIONS:
            raise ValueError(f"Unknown release date precision: {value!r}")
        return value

    @model_validator(mode="after")
    def check_precision(self):
        if self.release_date_string is not None and self.release_date_precision is not None:
            parsed = get_release_date(self.release_date_string)
            if parsed.precision != self.release_date_precision:
                raise ValueError(
                    f"release_date {self.release_date_string!r} does not have "
                    f"{self.release_date_precision!r} precision"
                )
        return self

    @cached_property
    def album_type(self) -> AlbumResultType:
        return AlbumResultType.match(self.album_type_string, ignore_case=True)

    @cached_property
    def release_date(self) -> Optional[ReleaseDate]:
        if self.release_date_string is None:
            return None
        return get_release_date(self.release_date_string)


class SimpleAlbum(AlbumBase):
    """Simplified album; use :meth:`to_full_album` to fetch the full :class:`Album`."""

    external_urls_string: Dict[str, str] = Field(alias="external_urls")
    album_group_string: Optional[str] = Field(None, alias="album_group")

    @field_validator("album_group_string")
    @classmethod
    def check_album_group(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and AlbumResultType.match(value) is None:
            raise ValueError(f"Unknown album group: {value!r}")
        return value

    @cached_property
    def album_group(self) -> Optional[AlbumResultType]:
        """Relationship to the artist; only present in artist album listings."""
        if self.album_group_string is None:
            return None
        return AlbumResultType.match(self.album_group_string)

    async def to_full_album(
        self, api: "AlbumFetcher", market: Optional[Union[Market, str]] = None
    ) -> Optional["Album"]:
        """
        Fetch the full album for this album's id.

        :param api: anything that can fetch an album by id, e.g. ``SpotifyAlbumService``
        :param market: limit the returned data to what is available in this country
        :return: the full album, or None when Spotify does not know the id
        """
        return await api.get_album(self.id, market=market)

    def to_full_album_rest_action(
        self, api: "AlbumFetcher", market: Optional[Union[Market, str]] = None
    ) -> SpotifyRestAction[Optional["Album"]]:
        return SpotifyRestAction(lambda: self.to_full_album(api, market=market))


class Album(AlbumBase):
    copyrights: Tuple[SpotifyCopyright, ...]
    genres: Tuple[str, ...]
    label: str
    popularity: int = Field(ge=0, le=100)
    external_ids_string: Dict[str, str] = Field(default_factory=dict, alias="external_ids")
    tracks: PagingObject[SimpleTrack]
    release_date_string: str = Field(alias="release_date")
    release_date_precision: str
    total_tracks: int = Field(ge=0)

    @cached_property
    def external_ids(self) -> Tuple[ExternalId, ...]:
        return tuple(ExternalId(key, value) for key, value in self.external_ids_string.items())


class AlbumsResponse(SpotifyModel):
    albums: Tuple[Optional[Album], ...]
