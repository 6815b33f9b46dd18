"""In-memory implementation of PageFetcherPort for testing."""

import asyncio

from domain.model.errors import FetchError


class FakePageFetcher:
    """Fake page fetcher that returns preconfigured markup per word."""

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        failures: dict[str, object] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.pages = pages or {}
        self.failures = failures or {}
        self.delays = delays or {}
        self.fetched: list[str] = []

    async def fetch(self, word: str) -> str:
        self.fetched.append(word)
        delay = self.delays.get(word)
        if delay:
            await asyncio.sleep(delay)
        if word in self.failures:
            raise FetchError(word, self.failures[word])
        if word not in self.pages:
            raise FetchError(word, "response status is 404")
        return self.pages[word]
