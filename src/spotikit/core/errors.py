# src/spotikit/core/errors.py
from typing import Any, Mapping, Optional


class SpotifyException(Exception):
    """Error response returned by the Spotify Web API."""

    def __init__(self, status: int, message: str):
        super().__init__(f"Spotify API {status}: {message}")
        self.status = status
        self.message = message


class BadRequestException(SpotifyException):
    pass


class AuthenticationException(SpotifyException):
    pass


class NotFoundException(SpotifyException):
    pass


class TooManyRequestsException(SpotifyException):
    def __init__(self, status: int, message: str, retry_after: Optional[int] = None):
        super().__init__(status, message)
        self.retry_after = retry_after


class SpotifyApiException(SpotifyException):
    pass


def error_message(body: Any) -> str:
    # {"error": {"status": 400, "message": "invalid id"}}
    if isinstance(body, Mapping):
        err = body.get("error")
        if isinstance(err, Mapping):
            return str(err.get("message", ""))
        if err is not None:
            return str(body.get("error_description") or err)
    return str(body or "")


def raise_for_status(status: int, body: Any, headers: Optional[Mapping[str, str]] = None) -> None:
    if status < 400:
        return
    message = error_message(body)
    if status == 400:
        raise BadRequestException(status, message)
    if status in (401, 403):
        raise AuthenticationException(status, message)
    if status == 404:
        raise NotFoundException(status, message)
    if status == 429:
        retry = (headers or {}).get("Retry-After")
        raise TooManyRequestsException(
            status, message, retry_after=int(retry) if retry and retry.isdigit() else None
        )
    raise SpotifyApiException(status, message)
