"""
JSON-RPC 2.0 dispatch for the MCP endpoint.

Every tool and the discovery method are registered as jsonrpcserver methods.
jsonrpcserver handles the envelope, batches and notifications; this module
turns tool outcomes into Success or Error results, and is the only place
where tool failures become JSON-RPC errors.
"""
import logging
from typing import Any, Callable, Dict, Sequence

from jsonrpcserver import Error, Result, Success, async_dispatch
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS

from mcp_server.capabilities import MCP_INITIALIZE_METHOD, build_capabilities
from mcp_server.tools.base_tool import BaseTool, ToolError

logger = logging.getLogger("mcp-server.dispatcher")

ERROR_CODES = {
    "invalid_params": INVALID_PARAMS,
    "internal": INTERNAL_ERROR,
}


def to_result(outcome: Any) -> Result:
    """Map a tool outcome to a jsonrpcserver Result"""
    if isinstance(outcome, ToolError):
        code = ERROR_CODES[outcome.kind]
        if outcome.data is None:
            return Error(code, outcome.message)
        return Error(code, outcome.message, outcome.data)
    return Success(outcome.model_dump())


def tool_method(tool: BaseTool) -> Callable:
    """Wrap a tool as a jsonrpcserver method taking the params object as kwargs"""
    async def execute(**params: Any) -> Result:
        try:
            outcome = await tool.run(params)
        except Exception:
            logger.exception(f"Unhandled error in '{tool.method}'")
            return Error(INTERNAL_ERROR, "Internal error")

        if isinstance(outcome, ToolError):
            logger.error(f"'{tool.method}' failed: {outcome.message}")
        return to_result(outcome)

    execute.__name__ = tool.name
    return execute


class JSONRPCDispatcher:
    """
    Routes JSON-RPC requests to the registered tools

    Args:
        tools: Tools to expose, each under its `tool/execute/<name>` method
    """

    def __init__(self, tools: Sequence[BaseTool]):
        self.capabilities = build_capabilities(tools)
        # Per-app method table so each app carries its own tool instances
        self.methods: Dict[str, Callable] = {MCP_INITIALIZE_METHOD: self.initialize}
        for tool in tools:
            self.methods[tool.method] = tool_method(tool)

    async def initialize(self, **params: Any) -> Result:
        return Success(self.capabilities)

    async def dispatch(self, request: str) -> str:
        """
        Handle a raw request body

        Args:
            request: JSON text of a single request or a batch

        Returns:
            The serialized response, or an empty string when nothing needs
            a reply (notifications)
        """
        return await async_dispatch(request, methods=self.methods)
