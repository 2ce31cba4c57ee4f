"""
LLM backed tools exposed over JSON-RPC
"""
from typing import List, Optional

from llm.base_client import BaseLLMClient
from mcp_server.connectors.web_connector import WebConnector
from mcp_server.tools.ask_tool import AskLocalLLMTool
from mcp_server.tools.base_tool import BaseTool, ToolError, ToolOutcome, ToolResult
from mcp_server.tools.crawl_tool import CrawlWebsiteTool
from mcp_server.tools.text_tools import (
    ExtractCodeBlocksTool,
    GenerateTitleTool,
    SummarizeTextTool,
)


def build_tools(
    llm_client: BaseLLMClient, connector: Optional[WebConnector] = None
) -> List[BaseTool]:
    """Instantiate every tool, in the order they are advertised"""
    return [
        AskLocalLLMTool(llm_client),
        SummarizeTextTool(llm_client),
        ExtractCodeBlocksTool(llm_client),
        GenerateTitleTool(llm_client),
        CrawlWebsiteTool(llm_client, connector),
    ]


__all__ = [
    "AskLocalLLMTool",
    "BaseTool",
    "CrawlWebsiteTool",
    "ExtractCodeBlocksTool",
    "GenerateTitleTool",
    "SummarizeTextTool",
    "ToolError",
    "ToolOutcome",
    "ToolResult",
    "build_tools",
]
