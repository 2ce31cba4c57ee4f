from typing import Any, Dict, Sequence

from mcp_server.tools.base_tool import BaseTool

MCP_INITIALIZE_METHOD = "mcp/initialize"
PROTOCOL_VERSION = "0.1.0"
SERVER_NAME = "LocalLLMMCPServer"
SERVER_VERSION = "1.0.0"


def build_capabilities(tools: Sequence[BaseTool]) -> Dict[str, Any]:
    """Discovery payload describing every tool; built once per app"""
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "serverInfo": {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
        },
        "capabilities": {
            "tools": [tool.descriptor() for tool in tools],
            "resources": [],
            "prompts": [],
        },
    }
