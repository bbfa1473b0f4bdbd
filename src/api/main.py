"""HTTP host entry point — FastAPI app served by uvicorn."""
from __future__ import annotations

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI

from src.api.analyze_api import router as analyze_router

logger = structlog.get_logger()

app = FastAPI(title="sentence-counter", version="0.1.0")

app.include_router(analyze_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "healthy"}


def main() -> None:
    """Run the API server."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, os.getenv("LOG_LEVEL", "INFO"))
        )
    )
    port = int(os.getenv("API_PORT", "8000"))
    logger.info("api_starting", port=port)
    try:
        uvicorn.run(
            "src.api.main:app",
            host=os.getenv("API_HOST", "127.0.0.1"),
            port=port,
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
        )
    except KeyboardInterrupt:
        logger.info("api_interrupted")
    finally:
        logger.info("api_shutdown_complete")


if __name__ == "__main__":
    main()
