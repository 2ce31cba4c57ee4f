"""
FastAPI application exposing the MCP JSON-RPC endpoint
"""
import json
import logging
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from llm.base_client import BaseLLMClient
from llm.llm_client import LLMClient
from mcp_server.config import ServerConfig
from mcp_server.connectors.web_connector import WebConnector
from mcp_server.dispatcher import JSONRPCDispatcher
from mcp_server.tools import build_tools

logger = logging.getLogger("mcp-server")


def create_app(
    config: ServerConfig,
    llm_client: Optional[BaseLLMClient] = None,
    connector: Optional[WebConnector] = None,
) -> FastAPI:
    """
    Build the MCP server application

    Args:
        config: Settings read at startup
        llm_client: Client to use instead of the one built from config
        connector: Web connector to use for CrawlWebsite

    Returns:
        The FastAPI app
    """
    if llm_client is None:
        llm_client = LLMClient.create(
            provider="lmstudio",
            api_url=config.lm_studio.api_url,
            model=config.lm_studio.model_name,
            timeout=config.lm_studio.timeout,
        )

    dispatcher = JSONRPCDispatcher(build_tools(llm_client, connector))

    app = FastAPI(
        title="Local LLM MCP Server",
        description="JSON-RPC tools backed by a local LM Studio model",
    )
    app.state.config = config
    app.state.dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        body = await request.body()
        if body:
            try:
                logger.info(f"Body: {json.dumps(json.loads(body), indent=2)}")
            except ValueError:
                logger.info(f"Body: {body.decode('utf-8', errors='replace')}")
        return await call_next(request)

    @app.post(config.server.mcp_endpoint)
    async def handle_mcp_request(request: Request):
        body = await request.body()
        response = await dispatcher.dispatch(body.decode("utf-8", errors="replace"))
        if not response:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return Response(content=response, media_type="application/json")

    @app.get("/health")
    async def health_check():
        """Simple HTTP health check endpoint"""
        return {"status": "ok"}

    return app
