from typing import List, Optional

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from llm.models import Message
from mcp_server.tools.base_tool import BaseTool


class AskParams(BaseModel):
    messages: Optional[List[Message]] = None
    prompt: Optional[str] = None
    model: Optional[str] = None

    @field_validator("messages", "prompt", mode="wrap")
    @classmethod
    def drop_malformed(cls, value, handler):
        # A bad field only matters when the other one is unusable too
        try:
            return handler(value)
        except ValidationError:
            return None

    @model_validator(mode="after")
    def require_messages_or_prompt(self) -> "AskParams":
        if not self.messages and not self.prompt:
            raise ValueError("'messages' array or 'prompt' string is required")
        return self


class AskLocalLLMTool(BaseTool):
    """Queries the LLM with a conversation or a single prompt"""

    name = "AskLocalLLM"
    description = "Queries a local LLM with provided messages or prompt."
    content_type = "text/plain"
    params_model = AskParams
    invalid_params_message = "Invalid params: 'messages' array or 'prompt' string is required."
    input_schema = {
        "type": "object",
        "properties": {
            "messages": {"type": "array"},
            "prompt": {"type": "string"},
            "model": {"type": "string"},
        },
    }

    async def build_messages(self, params: AskParams) -> List[Message]:
        # A conversation wins over a prompt and is sent untouched
        if params.messages:
            return list(params.messages)
        return [Message(role="user", content=params.prompt)]
