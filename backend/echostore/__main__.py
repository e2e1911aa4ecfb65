"""Process entry point — `python -m echostore` serves the API with uvicorn.

Invariants:
    - Host, port and release mode come from Settings (PORT defaults to 8080)
    - The app object is built by create_app with the same Settings instance
"""

import logging

import uvicorn

from echostore.config import get_settings
from echostore.infrastructure.observability import setup_logging
from echostore.main import create_app

logger = logging.getLogger("echostore")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server starting on port {settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
