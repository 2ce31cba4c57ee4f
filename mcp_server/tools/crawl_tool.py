import logging
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from llm.base_client import BaseLLMClient
from llm.models import Message
from mcp_server.connectors.web_connector import WebConnector
from mcp_server.tools.base_tool import BaseTool, ToolError

logger = logging.getLogger("mcp-server.tools.crawl")

MAX_PAGE_CHARS = 8000
DEFAULT_CRAWL_MODEL = "llama3"
CRAWL_FAILED_MESSAGE = "Failed to crawl and process the website."

TASK_PROMPTS = {
    "summarize": "Summarize the following webpage content:\n\n{text}",
    "extract_faqs": "Extract important FAQs from this webpage content:\n\n{text}",
    "generate_title": "Generate a suitable title for the following webpage content:\n\n{text}",
}
# Tasks outside TASK_PROMPTS get the title prompt
FALLBACK_TASK = "generate_title"


class CrawlParams(BaseModel):
    url: str = Field(min_length=1)
    model: Optional[str] = None
    task: str = "summarize"

    @field_validator("task", mode="before")
    @classmethod
    def default_missing_task(cls, value):
        return "summarize" if value is None else value


def build_crawl_prompt(task: str, page_text: str) -> str:
    template = TASK_PROMPTS.get(task, TASK_PROMPTS[FALLBACK_TASK])
    return template.format(text=page_text[:MAX_PAGE_CHARS])


class CrawlWebsiteTool(BaseTool):
    """Crawls a page and asks the LLM to summarize it, list FAQs or title it"""

    name = "CrawlWebsite"
    description = "Crawls a public webpage and uses the LLM to summarize or extract info."
    content_type = "text/plain"
    params_model = CrawlParams
    invalid_params_message = "Invalid params: 'url' must be a string."
    required_field = "url"
    input_schema = {
        "type": "object",
        "properties": {
            "url": {"type": "string"},
            "model": {"type": "string"},
            "task": {
                "type": "string",
                "enum": list(TASK_PROMPTS),
            },
        },
        "required": ["url"],
    }

    def __init__(self, llm_client: BaseLLMClient, connector: Optional[WebConnector] = None):
        super().__init__(llm_client)
        self.connector = connector or WebConnector()

    def model_for(self, params: CrawlParams) -> str:
        return params.model or DEFAULT_CRAWL_MODEL

    async def build_messages(self, params: CrawlParams) -> Union[List[Message], ToolError]:
        try:
            page_text = await self.connector.fetch_text(params.url, max_chars=MAX_PAGE_CHARS)
        except Exception:
            # Details stay in the server log
            logger.exception(f"CrawlWebsite failed for {params.url}")
            return ToolError(kind="internal", message=CRAWL_FAILED_MESSAGE)

        return [Message(role="user", content=build_crawl_prompt(params.task, page_text))]
