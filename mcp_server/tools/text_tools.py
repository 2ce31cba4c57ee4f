"""
Tools that wrap a block of text in a fixed instruction for the LLM.
"""
from typing import List, Optional

from pydantic import BaseModel

from llm.models import Message
from mcp_server.tools.base_tool import BaseTool


class TextParams(BaseModel):
    text: str
    model: Optional[str] = None


TEXT_INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "text": {"type": "string"},
        "model": {"type": "string"},
    },
    "required": ["text"],
}


class TextPromptTool(BaseTool):
    """Sends `instruction` followed by the text as one user message"""

    instruction: str
    params_model = TextParams
    input_schema = TEXT_INPUT_SCHEMA
    invalid_params_message = "Invalid params: 'text' must be a string."
    required_field = "text"

    async def build_messages(self, params: TextParams) -> List[Message]:
        return [Message(role="user", content=f"{self.instruction}\n{params.text}")]


class SummarizeTextTool(TextPromptTool):
    name = "SummarizeText"
    description = "Summarizes the given text."
    content_type = "text/summary"
    instruction = "Summarize this:"


class ExtractCodeBlocksTool(TextPromptTool):
    name = "ExtractCodeBlocks"
    description = "Extracts code blocks from given text."
    content_type = "text/code"
    instruction = "Extract code blocks from this text:"


class GenerateTitleTool(TextPromptTool):
    name = "GenerateTitle"
    description = "Generates a title for given content."
    content_type = "text/title"
    instruction = "Generate a concise title for:"
