"""Word pipeline: fetch → parse → extract for every input word.

All words are dispatched concurrently. Each task writes into the slot of
its input index, so the result order is the input order whatever the
completion order. The first failure cancels the remaining tasks and is
re-raised as-is; no partial result is returned.
"""

import asyncio
import logging
from collections.abc import Callable

from adapter.html.document import Document, parse_document
from domain.model.entry import Entry
from port.page_fetcher import PageFetcherPort
from services.entry_extraction import extract_entry

logger = logging.getLogger(__name__)


class WordPipeline:
    """Orchestrates per-word scraping across a batch of words."""

    def __init__(
        self,
        fetcher: PageFetcherPort,
        parse: Callable[[str], Document] = parse_document,
        max_concurrency: int | None = None,
    ):
        self.fetcher = fetcher
        self.parse = parse
        # None (or anything below 1) keeps the fan-out unbounded
        self.max_concurrency = max_concurrency if max_concurrency and max_concurrency > 0 else None

    async def scrape_word(self, word: str) -> Entry:
        """Fetch, parse and extract a single word."""
        markup = await self.fetcher.fetch(word)
        document = self.parse(markup)
        return extract_entry(word, document)

    async def run(self, words: list[str]) -> list[Entry]:
        """Scrape all words, returning one Entry per word in input order.

        Raises:
            The first exception raised by any word's task.
        """
        results: list[Entry | None] = [None] * len(words)
        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

        async def _run_one(index: int, word: str) -> None:
            if semaphore is None:
                results[index] = await self.scrape_word(word)
            else:
                async with semaphore:
                    results[index] = await self.scrape_word(word)
            logger.debug("Word scraped", extra={"word": word, "index": index})

        logger.info("Scraping words", extra={
            "word_count": len(words),
            "max_concurrency": self.max_concurrency,
        })

        try:
            async with asyncio.TaskGroup() as group:
                for index, word in enumerate(words):
                    group.create_task(_run_one(index, word))
        except BaseExceptionGroup as eg:
            # Siblings are already cancelled; surface the triggering error alone
            first = _first_leaf(eg)
            logger.error("Scraping aborted", extra={"error": str(first)})
            raise first from first.__cause__

        logger.info("Scraping finished", extra={"entry_count": len(results)})
        return results  # type: ignore[return-value]


def _first_leaf(group: BaseExceptionGroup) -> BaseException:
    first = group.exceptions[0]
    while isinstance(first, BaseExceptionGroup):
        first = first.exceptions[0]
    return first
