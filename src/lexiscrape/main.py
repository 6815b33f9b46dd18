"""Command-line entry point: scrape dictionary entries for a word list.

Usage:
    lexiscrape words.txt result.json
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from adapter.external.oxford_dictionary import OxfordDictionaryFetcher
from adapter.filesystem.json_result_writer import write_entries
from adapter.filesystem.word_list import read_words
from domain.model.errors import UsageError
from port.page_fetcher import PageFetcherPort
from services.word_pipeline import WordPipeline
from utils import config
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="lexiscrape",
        description="Scrape dictionary entries for a list of words into a JSON file",
        epilog="example: lexiscrape words.txt result.json",
    )
    parser.add_argument("words_file", help="path/to/words/file, one word per line")
    parser.add_argument("output_file", help="path/to/output/json")
    return parser


async def scrape(
    words_file: str,
    output_file: str,
    fetcher: PageFetcherPort,
    max_concurrency: int | None = None,
) -> str:
    """Run the whole batch: read words → scrape → write result file.

    The result file is written only after every word succeeded.

    Returns:
        The output path.
    """
    words = read_words(words_file)
    pipeline = WordPipeline(fetcher, max_concurrency=max_concurrency)
    entries = await pipeline.run(words)
    return write_entries(output_file, entries)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the scraper CLI."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    setup_structured_logging(config.LOG_LEVEL)

    fetcher = OxfordDictionaryFetcher(timeout_seconds=config.FETCH_TIMEOUT_SECONDS)
    try:
        output_path = asyncio.run(scrape(
            args.words_file,
            args.output_file,
            fetcher,
            max_concurrency=config.MAX_CONCURRENCY,
        ))
    except KeyboardInterrupt:
        logger.info("Scraping interrupted")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"result stored at: {output_path}")


if __name__ == "__main__":
    main()
