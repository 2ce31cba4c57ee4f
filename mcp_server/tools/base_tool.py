"""
Base class and result types shared by every MCP tool.
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Mapping, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from llm.base_client import BaseLLMClient
from llm.models import LLMError, Message

logger = logging.getLogger("mcp-server.tools")

TOOL_PREFIX = "tool/execute/"

OUTPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "contentType": {"type": "string"},
        "content": {"type": "string"},
    },
}


class ToolResult(BaseModel):
    """Uniform envelope returned by every successful tool call"""
    contentType: str
    content: str


class ToolError(BaseModel):
    """Failure returned by a tool, mapped to a JSON-RPC error by the dispatcher"""
    kind: Literal["invalid_params", "internal"]
    message: str
    data: Optional[Any] = None


ToolOutcome = Union[ToolResult, ToolError]


class BaseTool(ABC):
    """
    Base class for LLM backed tools

    Subclasses declare their params model, describe themselves for discovery
    and build the conversation to send. Validation, the LLM call and result
    shaping happen here.
    """

    name: str
    description: str
    content_type: str
    input_schema: Dict[str, Any]
    params_model: Type[BaseModel]
    invalid_params_message: str = "Invalid params."
    # Field whose failure is reported with invalid_params_message
    required_field: Optional[str] = None

    def __init__(self, llm_client: BaseLLMClient):
        self.llm_client = llm_client

    @property
    def method(self) -> str:
        return f"{TOOL_PREFIX}{self.name}"

    def descriptor(self) -> Dict[str, Any]:
        """Capability entry served by mcp/initialize"""
        return {
            "name": self.method,
            "description": self.description,
            "inputSchema": self.input_schema,
            "outputSchema": OUTPUT_SCHEMA,
        }

    def parse_params(self, params: Optional[Mapping[str, Any]]) -> BaseModel:
        return self.params_model.model_validate(params or {})

    async def run(self, params: Optional[Mapping[str, Any]]) -> ToolOutcome:
        """
        Execute the tool

        Args:
            params: The JSON-RPC params object

        Returns:
            ToolResult on success, ToolError otherwise
        """
        logger.info(f"Received '{self.method}'")

        try:
            parsed = self.parse_params(params)
        except ValidationError as e:
            logger.warning(f"Rejected params for {self.method}: {e}")
            return ToolError(
                kind="invalid_params",
                message=self.describe_invalid_params(e),
                data=json.loads(e.json(include_url=False, include_input=False)),
            )

        messages = await self.build_messages(parsed)
        if isinstance(messages, ToolError):
            return messages

        reply = await self.llm_client.query(messages, self.model_for(parsed))
        if isinstance(reply, LLMError):
            return ToolError(kind="internal", message=reply.message or "LLM interaction failed.")

        return ToolResult(contentType=self.content_type, content=reply.content)

    def describe_invalid_params(self, error: ValidationError) -> str:
        """Name the field that failed; model level failures use the fixed message"""
        first = error.errors(include_url=False)[0]
        field = ".".join(str(part) for part in first["loc"])
        if not field or field == self.required_field:
            return self.invalid_params_message
        return f"Invalid params: '{field}' {first['msg'].lower()}."

    def model_for(self, params: BaseModel) -> Optional[str]:
        return getattr(params, "model", None)

    @abstractmethod
    async def build_messages(self, params: BaseModel) -> Union[List[Message], ToolError]:
        """
        Build the conversation for the LLM from validated params

        Returns:
            Messages to send, or a ToolError when the input cannot be prepared
        """
        pass
