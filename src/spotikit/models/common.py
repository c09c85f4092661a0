# src/spotikit/models/common.py
"""
Building blocks shared by the Spotify Web API response models.

Raw wire values are stored in fields aliased to the JSON key (``available_markets``
lives in ``available_markets_string``); the typed view is a cached property named
after the wire key.
"""
from enum import Enum
from functools import cached_property
from typing import Dict, Generic, NamedTuple, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spotikit.models.market import Market, markets_from_codes

T = TypeVar("T")


class ResultEnum(str, Enum):
    """String enum whose members are looked up by their wire identifier."""

    @classmethod
    def match(cls, value: str, ignore_case: bool = False):
        """Return the member for ``value`` or ``None`` when it is not recognized."""
        for member in cls:
            if member.value == value:
                return member
            if ignore_case and member.value.lower() == value.lower():
                return member
        return None


class SpotifyModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ExternalUrl(NamedTuple):
    name: str
    url: str


class ExternalId(NamedTuple):
    key: str
    id: str


class SpotifyImage(SpotifyModel):
    url: str
    height: Optional[int] = None
    width: Optional[int] = None


class Restrictions(SpotifyModel):
    reason: str


class CoreObject(SpotifyModel):
    id: str
    href: str
    uri: str
    external_urls_string: Dict[str, str] = Field(default_factory=dict, alias="external_urls")

    @cached_property
    def external_urls(self) -> Tuple[ExternalUrl, ...]:
        return tuple(ExternalUrl(name, url) for name, url in self.external_urls_string.items())

    @cached_property
    def spotify_url(self) -> Optional[str]:
        return self.external_urls_string.get("spotify")


class MarketsMixin(SpotifyModel):
    available_markets_string: Tuple[str, ...] = Field(default=(), alias="available_markets")

    @field_validator("available_markets_string")
    @classmethod
    def check_markets(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        markets_from_codes(value)
        return value

    @cached_property
    def available_markets(self) -> Tuple[Market, ...]:
        return markets_from_codes(self.available_markets_string)


class SimpleArtist(CoreObject):
    name: str
    type: str = "artist"


class SimpleTrack(CoreObject, MarketsMixin):
    artists: Tuple[SimpleArtist, ...]
    disc_number: int
    duration_ms: int
    explicit: bool
    name: str
    track_number: int
    type: str = "track"
    is_local: bool = False
    is_playable: Optional[bool] = None
    preview_url: Optional[str] = None
    restrictions: Optional[Restrictions] = None


class PagingObject(SpotifyModel, Generic[T]):
    """One page of a larger result set. Cursor handling is left to the caller."""

    href: str
    items: Tuple[T, ...]
    limit: int
    offset: int
    total: int
    next: Optional[str] = None
    previous: Optional[str] = None
