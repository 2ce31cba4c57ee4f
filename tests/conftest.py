from typing import List, Optional, Union

import pytest

from llm.base_client import BaseLLMClient
from llm.models import LLMError, Message
from mcp_server.config import ServerConfig
from mcp_server.connectors.web_connector import WebConnector


class StubLLMClient(BaseLLMClient):
    """Records every conversation and answers with a canned reply or error"""

    def __init__(self, reply: str = "stub reply", error: Optional[LLMError] = None):
        super().__init__(model="default-model")
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    async def _call_llm(self, messages: List[Message], model: str) -> Union[str, LLMError]:
        self.calls.append({
            "messages": [m.model_dump() for m in messages],
            "model": model,
        })
        if self.error is not None:
            return self.error
        return self.reply


class StubConnector(WebConnector):
    """Serves a fixed page, or raises the given exception, instead of going online"""

    def __init__(self, html: str = "<html><body><p>page</p></body></html>", exc: Optional[Exception] = None):
        super().__init__()
        self.html = html
        self.exc = exc
        self.urls: List[str] = []

    async def fetch(self, url: str) -> str:
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.html


@pytest.fixture
def llm_client():
    return StubLLMClient()


@pytest.fixture
def connector():
    return StubConnector()


@pytest.fixture
def config():
    return ServerConfig.from_env({})
