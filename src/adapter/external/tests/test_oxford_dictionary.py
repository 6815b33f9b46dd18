"""Tests for the Oxford Dictionaries page adapter.

Tests cover URL building, successful fetches, non-200 statuses and
transport errors, with httpx.AsyncClient mocked out.
"""

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from adapter.external.oxford_dictionary import (
    OXFORD_DICTIONARY_BASE_URL,
    OxfordDictionaryFetcher,
    build_word_url,
)
from domain.model.errors import FetchError


def _mock_client(mock_client_class, response=None, side_effect=None):
    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.get.side_effect = side_effect
    else:
        mock_client.get.return_value = response
    mock_client.__aenter__.return_value = mock_client
    mock_client.__aexit__.return_value = None
    mock_client_class.return_value = mock_client
    return mock_client


class TestBuildWordUrl(unittest.TestCase):
    """Test URL construction."""

    def test_plain_word(self):
        """Test a plain word is appended to the base URL."""
        self.assertEqual(build_word_url("run"), f"{OXFORD_DICTIONARY_BASE_URL}/run")

    def test_space_is_quoted(self):
        """Test characters the transport cannot carry are percent-encoded."""
        self.assertEqual(build_word_url("ice cream"), f"{OXFORD_DICTIONARY_BASE_URL}/ice%20cream")

    def test_non_ascii_is_quoted(self):
        """Test non-ASCII words are UTF-8 percent-encoded."""
        self.assertEqual(build_word_url("café"), f"{OXFORD_DICTIONARY_BASE_URL}/caf%C3%A9")

    def test_slash_is_not_escaped(self):
        """Test a slash is left alone (callers must sanitize such words)."""
        self.assertEqual(build_word_url("and/or"), f"{OXFORD_DICTIONARY_BASE_URL}/and/or")


class TestOxfordDictionaryFetcher(unittest.IsolatedAsyncioTestCase):
    """Test async page fetching."""

    @patch('adapter.external.oxford_dictionary.httpx.AsyncClient')
    async def test_successful_fetch(self, mock_client_class):
        """Test a 200 response returns the body text."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = "<html>run</html>"
        mock_response.content = b"<html>run</html>"
        mock_client = _mock_client(mock_client_class, response=mock_response)

        markup = await OxfordDictionaryFetcher().fetch("run")

        self.assertEqual(markup, "<html>run</html>")
        mock_client.get.assert_awaited_once_with(f"{OXFORD_DICTIONARY_BASE_URL}/run")

    @patch('adapter.external.oxford_dictionary.httpx.AsyncClient')
    async def test_no_timeout_by_default(self, mock_client_class):
        """Test the client is built without a timeout unless configured."""
        mock_response = MagicMock(status_code=200, text="", content=b"")
        _mock_client(mock_client_class, response=mock_response)

        await OxfordDictionaryFetcher().fetch("run")
        mock_client_class.assert_called_with(timeout=None, follow_redirects=True)

        await OxfordDictionaryFetcher(timeout_seconds=7.5).fetch("run")
        mock_client_class.assert_called_with(timeout=7.5, follow_redirects=True)

    @patch('adapter.external.oxford_dictionary.httpx.AsyncClient')
    async def test_404_raises_fetch_error(self, mock_client_class):
        """Test a 404 response raises FetchError naming the word."""
        mock_response = MagicMock()
        mock_response.status_code = 404
        _mock_client(mock_client_class, response=mock_response)

        with self.assertRaises(FetchError) as ctx:
            await OxfordDictionaryFetcher().fetch("qwxz")

        self.assertEqual(ctx.exception.word, "qwxz")
        self.assertIn("qwxz", str(ctx.exception))
        self.assertIn("404", str(ctx.exception))

    @patch('adapter.external.oxford_dictionary.httpx.AsyncClient')
    async def test_other_2xx_is_also_a_failure(self, mock_client_class):
        """Test only status 200 counts as success."""
        mock_response = MagicMock()
        mock_response.status_code = 204
        _mock_client(mock_client_class, response=mock_response)

        with self.assertRaises(FetchError):
            await OxfordDictionaryFetcher().fetch("run")

    @patch('adapter.external.oxford_dictionary.httpx.AsyncClient')
    async def test_request_error_raises_fetch_error(self, mock_client_class):
        """Test transport errors become FetchError chained to the cause."""
        error = httpx.ConnectError("Connection failed")
        _mock_client(mock_client_class, side_effect=error)

        with self.assertRaises(FetchError) as ctx:
            await OxfordDictionaryFetcher().fetch("run")

        self.assertIs(ctx.exception.cause, error)
        self.assertIs(ctx.exception.__cause__, error)

    @patch('adapter.external.oxford_dictionary.httpx.AsyncClient')
    async def test_timeout_is_not_retried(self, mock_client_class):
        """Test a timeout fails immediately after a single attempt."""
        mock_client = _mock_client(
            mock_client_class, side_effect=httpx.TimeoutException("Timeout"),
        )

        with self.assertRaises(FetchError):
            await OxfordDictionaryFetcher(timeout_seconds=1).fetch("run")

        self.assertEqual(mock_client.get.await_count, 1)


REDIRECT_TARGET = "https://www.lexico.com/definition/run"


class TestOxfordDictionaryRedirects(unittest.IsolatedAsyncioTestCase):
    """Test redirect handling against a real client on a mock transport."""

    def _patch_transport(self, final_status: int, final_body: str):
        real_client_class = httpx.AsyncClient

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "en.oxforddictionaries.com":
                return httpx.Response(301, headers={"Location": REDIRECT_TARGET})
            return httpx.Response(final_status, text=final_body)

        def build_client(**kwargs):
            return real_client_class(transport=httpx.MockTransport(handler), **kwargs)

        return patch('adapter.external.oxford_dictionary.httpx.AsyncClient', side_effect=build_client)

    async def test_redirect_to_200_returns_final_page(self):
        """Test a 301 is followed and the redirected page's body is returned."""
        with self._patch_transport(200, "<html>ok</html>"):
            markup = await OxfordDictionaryFetcher().fetch("run")

        self.assertEqual(markup, "<html>ok</html>")

    async def test_redirect_to_404_raises_fetch_error(self):
        """Test a redirect ending in 404 still fails, naming the word."""
        with self._patch_transport(404, "not found"):
            with self.assertRaises(FetchError) as ctx:
                await OxfordDictionaryFetcher().fetch("run")

        self.assertEqual(ctx.exception.word, "run")
        self.assertIn("404", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
