import copy

import pytest

ALBUM_ID = "4aawyAB9vmqN3uQ7FjRGTy"

ARTIST = {
    "external_urls": {"spotify": "https://open.spotify.com/artist/0TnOYISbd1XYRBk9myaseg"},
    "href": "https://api.spotify.com/v1/artists/0TnOYISbd1XYRBk9myaseg",
    "id": "0TnOYISbd1XYRBk9myaseg",
    "name": "Pitbull",
    "type": "artist",
    "uri": "spotify:artist:0TnOYISbd1XYRBk9myaseg",
}

IMAGES = [
    {"height": 640, "url": "https://i.scdn.co/image/ab67616d0000b2732c5b24ecfa39523a75c993c4", "width": 640},
    {"height": 64, "url": "https://i.scdn.co/image/ab67616d000048512c5b24ecfa39523a75c993c4", "width": 64},
]

SIMPLE_ALBUM = {
    "album_type": "compilation",
    "album_group": "appears_on",
    "total_tracks": 9,
    "available_markets": ["US", "CA"],
    "external_urls": {"spotify": f"https://open.spotify.com/album/{ALBUM_ID}"},
    "href": f"https://api.spotify.com/v1/albums/{ALBUM_ID}",
    "id": ALBUM_ID,
    "images": IMAGES,
    "name": "Global Warming",
    "release_date": "2012-11-16",
    "release_date_precision": "day",
    "type": "album",
    "uri": f"spotify:album:{ALBUM_ID}",
    "artists": [ARTIST],
}

TRACK = {
    "artists": [ARTIST],
    "available_markets": ["US"],
    "disc_number": 1,
    "duration_ms": 206120,
    "explicit": False,
    "external_urls": {"spotify": "https://open.spotify.com/track/6OmhkSOpvYBokMKQxpIGx2"},
    "href": "https://api.spotify.com/v1/tracks/6OmhkSOpvYBokMKQxpIGx2",
    "id": "6OmhkSOpvYBokMKQxpIGx2",
    "is_local": False,
    "name": "Global Warming (feat. Sensato)",
    "preview_url": None,
    "track_number": 1,
    "type": "track",
    "uri": "spotify:track:6OmhkSOpvYBokMKQxpIGx2",
}

FULL_ALBUM = {
    "album_type": "compilation",
    "total_tracks": 9,
    "available_markets": ["US", "CA"],
    "external_urls": {"spotify": f"https://open.spotify.com/album/{ALBUM_ID}"},
    "href": f"https://api.spotify.com/v1/albums/{ALBUM_ID}",
    "id": ALBUM_ID,
    "images": IMAGES,
    "name": "Global Warming",
    "release_date": "2012-11-16",
    "release_date_precision": "day",
    "type": "album",
    "uri": f"spotify:album:{ALBUM_ID}",
    "artists": [ARTIST],
    "tracks": {
        "href": f"https://api.spotify.com/v1/albums/{ALBUM_ID}/tracks?offset=0&limit=50",
        "limit": 50,
        "next": None,
        "offset": 0,
        "previous": None,
        "total": 1,
        "items": [TRACK],
    },
    "copyrights": [
        {"text": "(P) 2012 RCA Records, a division of Sony Music Entertainment", "type": "P"},
        {"text": "(C) 2012 RCA Records", "type": "C"},
    ],
    "external_ids": {"upc": "886443671584"},
    "genres": [],
    "label": "Mr.305/Polo Grounds Music/RCA Records",
    "popularity": 55,
}


@pytest.fixture
def simple_album_json():
    return copy.deepcopy(SIMPLE_ALBUM)


@pytest.fixture
def album_json():
    return copy.deepcopy(FULL_ALBUM)
