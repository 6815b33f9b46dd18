"""Page fetcher port — outbound interface for dictionary page sources."""

from typing import Protocol


class PageFetcherPort(Protocol):
    """Port for retrieving the raw markup of one word's dictionary page.

    Implementations raise FetchError on transport failure or any
    non-200 response. They never retry.
    """

    async def fetch(self, word: str) -> str: ...
