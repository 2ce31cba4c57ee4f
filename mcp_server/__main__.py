import uvicorn

from mcp_server.config import ServerConfig
from mcp_server.logging_config import configure_logging
from mcp_server.server import create_app


def main():
    config = ServerConfig.from_env()
    logger = configure_logging(config.log_level, config.log_dir)

    app = create_app(config)

    logger.info(
        f"MCP Server listening on http://localhost:{config.server.port}{config.server.mcp_endpoint}"
    )
    logger.info(f"LM Studio API configured at: {config.lm_studio.api_url}")
    logger.info(f"Default LM Studio Model: {config.lm_studio.model_name}")
    logger.info("Ensure your LM Studio server is running and the model is loaded.")

    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
