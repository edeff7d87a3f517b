"""
run.py

Starts the card scanner with Uvicorn:
    python run.py

Refuses to start when required configuration is missing.
"""
import logging
import sys

import uvicorn

from app.errors import ConfigError
from app.main import create_app
from app.settings import Settings
from app.setup_logging import setup_logging


if __name__ == "__main__":
    setup_logging()
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logging.getLogger("run").error("%s. Set them in your environment or .env file.", e)
        sys.exit(1)

    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
