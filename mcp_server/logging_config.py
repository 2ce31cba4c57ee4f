import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", log_dir: str = "logs") -> logging.Logger:
    """Send logs to the console and a rotating file under log_dir"""
    os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            RotatingFileHandler(
                os.path.join(log_dir, "mcp-server.log"), maxBytes=10485760, backupCount=5
            ),
            logging.StreamHandler(),
        ],
    )
    return logging.getLogger("mcp-server")
