"""Oxford Dictionaries page adapter.

Implements PageFetcherPort by downloading the HTML definition page of a
word from the Oxford Dictionaries website.

Words are joined onto the base URL with transport-level quoting only.
A word containing "/" is not escaped and ends up addressing a different
path; callers must sanitize such words beforehand.
"""

import logging
from urllib.parse import quote

import httpx

from domain.model.errors import FetchError

logger = logging.getLogger(__name__)

OXFORD_DICTIONARY_BASE_URL = "https://en.oxforddictionaries.com/definition"


def build_word_url(word: str) -> str:
    """Join the fixed base URL with a word."""
    return f"{OXFORD_DICTIONARY_BASE_URL}/{quote(word)}"


class OxfordDictionaryFetcher:
    """Adapter that fetches definition pages from Oxford Dictionaries."""

    def __init__(self, timeout_seconds: float | None = None):
        # None disables the timeout; a stalled endpoint stalls the batch
        self.timeout_seconds = timeout_seconds

    async def fetch(self, word: str) -> str:
        """Fetch the raw HTML page for a word.

        Args:
            word: The word to look up.

        Returns:
            The response body as text.

        Raises:
            FetchError: On transport failure or any status other than 200.
        """
        url = build_word_url(word)

        try:
            # Status is checked on the final response after redirects
            async with httpx.AsyncClient(timeout=self.timeout_seconds, follow_redirects=True) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            logger.warning(
                "Dictionary page request error",
                extra={"word": word, "url": url, "error_type": type(e).__name__},
            )
            raise FetchError(word, e) from e

        if response.status_code != 200:
            logger.warning(
                "Dictionary page returned non-200 status",
                extra={"word": word, "url": url, "status_code": response.status_code},
            )
            raise FetchError(word, f"response status is {response.status_code}")

        logger.debug(
            "Dictionary page fetched",
            extra={"word": word, "bytes": len(response.content)},
        )
        return response.text
