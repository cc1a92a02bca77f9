"""
karmabot.api.__main__ — Entry point for ``python -m karmabot.api``
==================================================================

Serves :data:`karmabot.api.main.app` with uvicorn on the ``api_host`` /
``api_port`` from ``config.yaml``.

Run with::

    python -m karmabot.api
"""

from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv

from karmabot.config import load_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("karmabot.api")


def main() -> None:
    """Load settings and run the API server (blocking)."""
    load_dotenv()
    cfg = load_config()

    logger.info("Starting Karmabot API on %s:%d", cfg.api_host, cfg.api_port)
    uvicorn.run("karmabot.api.main:app", host=cfg.api_host, port=cfg.api_port)


if __name__ == "__main__":
    main()
