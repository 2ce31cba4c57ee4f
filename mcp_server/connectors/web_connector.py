import logging
import re
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from mcp_server.connectors.base_connector import BaseConnector

logger = logging.getLogger("mcp-server.web")

HIDDEN_TAGS = ["script", "style", "noscript"]
_WHITESPACE = re.compile(r"\s+")


class WebConnector(BaseConnector):
    """
    Connector for public web pages
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the web connector

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub pages
        """
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, url: str) -> str:
        """Download a page and return its HTML. Raises httpx.HTTPError on failure."""
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport, follow_redirects=True
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text

    def extract_text(self, content: str) -> str:
        soup = BeautifulSoup(content, "html.parser")
        for tag in soup.find_all(HIDDEN_TAGS):
            tag.decompose()

        root = soup.body or soup
        text = root.get_text(separator=" ")
        return _WHITESPACE.sub(" ", text).strip()

    async def fetch_text(self, url: str, max_chars: Optional[int] = None) -> str:
        """
        Fetch a page and flatten its visible text

        Args:
            url: Page to crawl
            max_chars: Keep only the first max_chars characters

        Returns:
            Visible page text
        """
        logger.info(f"Crawling URL: {url}")
        html = await self.fetch(url)
        text = self.extract_text(html)
        if max_chars is not None:
            text = text[:max_chars]
        logger.info(f"Extracted {len(text)} characters from {url}")
        return text
