import httpx
import pytest
import respx

from llm.models import LLMError
from mcp_server.connectors.web_connector import WebConnector
from mcp_server.tools import CrawlWebsiteTool, ToolError, ToolResult
from mcp_server.tools.crawl_tool import MAX_PAGE_CHARS, build_crawl_prompt
from tests.conftest import StubConnector, StubLLMClient

PAGE = (
    "<html><head><title>Docs</title><style>.x { color: red }</style></head>"
    "<body><h1>Hello</h1>\n<script>var x = 1;</script>"
    "<p>  big \n\t world </p><noscript>enable js</noscript></body></html>"
)


def _prompt(client):
    return client.calls[0]["messages"][0]["content"]


@pytest.mark.asyncio
async def test_defaults_to_summarize_and_llama3(llm_client):
    connector = StubConnector(html=PAGE)

    result = await CrawlWebsiteTool(llm_client, connector).run({"url": "https://example.com"})

    assert result == ToolResult(contentType="text/plain", content="stub reply")
    assert connector.urls == ["https://example.com"]
    assert _prompt(llm_client) == "Summarize the following webpage content:\n\nHello big world"
    assert llm_client.calls[0]["model"] == "llama3"


@pytest.mark.asyncio
async def test_extract_faqs_template(llm_client):
    connector = StubConnector(html=PAGE)

    await CrawlWebsiteTool(llm_client, connector).run(
        {"url": "https://example.com", "task": "extract_faqs", "model": "phi3"}
    )

    assert _prompt(llm_client) == "Extract important FAQs from this webpage content:\n\nHello big world"
    assert llm_client.calls[0]["model"] == "phi3"


@pytest.mark.asyncio
@pytest.mark.parametrize("task", ["generate_title", "translate", ""])
async def test_other_tasks_use_title_template(llm_client, task):
    connector = StubConnector(html=PAGE)

    await CrawlWebsiteTool(llm_client, connector).run({"url": "https://example.com", "task": task})

    assert _prompt(llm_client) == (
        "Generate a suitable title for the following webpage content:\n\nHello big world"
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("length, expected", [(120, 120), (MAX_PAGE_CHARS, MAX_PAGE_CHARS), (9500, MAX_PAGE_CHARS)])
async def test_page_text_is_truncated(llm_client, length, expected):
    connector = StubConnector(html=f"<html><body><p>{'a' * length}</p></body></html>")

    await CrawlWebsiteTool(llm_client, connector).run({"url": "https://example.com"})

    page_text = _prompt(llm_client).split("\n\n", 1)[1]
    assert page_text == "a" * expected


def test_build_crawl_prompt_truncates():
    prompt = build_crawl_prompt("summarize", "b" * 10000)

    assert prompt.endswith("b" * MAX_PAGE_CHARS)
    assert len(prompt) == len("Summarize the following webpage content:\n\n") + MAX_PAGE_CHARS


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{}, {"url": ""}, {"url": 7}, {"url": None}])
async def test_url_is_required(llm_client, params):
    connector = StubConnector()

    result = await CrawlWebsiteTool(llm_client, connector).run(params)

    assert result.kind == "invalid_params"
    assert result.message == "Invalid params: 'url' must be a string."
    assert connector.urls == []
    assert llm_client.calls == []


@pytest.mark.asyncio
async def test_fetch_failure_returns_generic_error(llm_client, caplog):
    connector = StubConnector(exc=httpx.ConnectError("dns lookup failed for internal-host"))

    result = await CrawlWebsiteTool(llm_client, connector).run({"url": "https://example.invalid"})

    assert result == ToolError(kind="internal", message="Failed to crawl and process the website.")
    assert result.data is None
    assert llm_client.calls == []
    assert "dns lookup failed" in caplog.text


@pytest.mark.asyncio
async def test_llm_failure_keeps_llm_message():
    client = StubLLMClient(error=LLMError(message="upstream 503"))

    result = await CrawlWebsiteTool(client, StubConnector(html=PAGE)).run({"url": "https://example.com"})

    assert result == ToolError(kind="internal", message="Failed to query LLM: upstream 503")


def test_extract_text_drops_hidden_elements():
    assert WebConnector().extract_text(PAGE) == "Hello big world"


def test_extract_text_without_body():
    assert WebConnector().extract_text("just <b>some</b>   text") == "just some text"


@pytest.mark.asyncio
@respx.mock
async def test_fetch_text_downloads_and_flattens():
    respx.get("https://example.com/faq").mock(return_value=httpx.Response(200, text=PAGE))

    text = await WebConnector().fetch_text("https://example.com/faq", max_chars=9)

    assert text == "Hello big"


@pytest.mark.asyncio
@respx.mock
async def test_fetch_raises_on_error_status():
    respx.get("https://example.com/missing").mock(return_value=httpx.Response(404))

    with pytest.raises(httpx.HTTPStatusError):
        await WebConnector().fetch("https://example.com/missing")


@pytest.mark.asyncio
async def test_null_task_uses_summarize(llm_client):
    result = await CrawlWebsiteTool(llm_client, StubConnector(html=PAGE)).run(
        {"url": "https://example.com", "task": None}
    )

    assert isinstance(result, ToolResult)
    assert _prompt(llm_client).startswith("Summarize the following webpage content:")


@pytest.mark.asyncio
async def test_bad_task_type_blames_task(llm_client):
    result = await CrawlWebsiteTool(llm_client, StubConnector(html=PAGE)).run(
        {"url": "https://example.com", "task": 3}
    )

    assert result.kind == "invalid_params"
    assert result.message == "Invalid params: 'task' input should be a valid string."
    assert llm_client.calls == []
