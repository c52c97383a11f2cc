"""Entry point for the proxy endpoints: ``uvicorn api:app``."""

from src.logger_config import setup_logging
from src.proxy.app import create_app

logger = setup_logging()

app = create_app()
