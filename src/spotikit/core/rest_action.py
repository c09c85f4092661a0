# src/spotikit/core/rest_action.py
import asyncio
import logging
from typing import Any, Awaitable, Callable, Generator, Generic, Optional, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class SpotifyRestAction(Generic[T]):
    """
    A request that has been described but not sent.

    Nothing touches the network until the action is completed, awaited or
    started. Every start runs the supplier again, so each one is an
    independent request; results are never shared between starts.
    """

    def __init__(self, supplier: Callable[[], Awaitable[T]]) -> None:
        self._supplier = supplier

    async def complete(self) -> T:
        return await self._supplier()

    def __await__(self) -> Generator[Any, None, T]:
        return self.complete().__await__()

    def start(self) -> "asyncio.Task[T]":
        """Schedule the request on the running loop and return its task."""
        return asyncio.get_running_loop().create_task(self.complete())

    def map(self, transform: Callable[[T], R]) -> "SpotifyRestAction[R]":
        async def mapped() -> R:
            return transform(await self._supplier())

        return SpotifyRestAction(mapped)

    def queue(
        self,
        on_success: Callable[[T], Any],
        on_failure: Optional[Callable[[BaseException], Any]] = None,
    ) -> "asyncio.Task[T]":
        task = self.start()

        def _done(t: "asyncio.Task[T]") -> None:
            if t.cancelled():
                return
            exc = t.exception()
            if exc is None:
                on_success(t.result())
            elif on_failure is not None:
                on_failure(exc)
            else:
                log.error("Queued Spotify request failed: %s", exc, exc_info=exc)

        task.add_done_callback(_done)
        return task
