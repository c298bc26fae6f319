"""
rpgtracker.__main__ — Entry point for ``python -m rpgtracker``
===============================================================

Wiring:
1. Load .env (DATABASE_URL, CORS origins).
2. Load config.yaml (gameplay tuning, port).
3. Serve the FastAPI app with uvicorn; its lifespan creates the schema.
"""

from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv

from rpgtracker.config import load_config

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("rpgtracker")


def main() -> None:
    """Run the API server (blocks until Ctrl+C or SIGTERM)."""
    load_dotenv()

    cfg = load_config()
    logger.info("Config loaded — %s on port %d", cfg.app_title, cfg.port)

    logger.info("Starting RPG Task Tracker API…")
    try:
        uvicorn.run("rpgtracker.api.main:app", host="0.0.0.0", port=cfg.port, log_config=None)
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully…")


if __name__ == "__main__":
    main()
