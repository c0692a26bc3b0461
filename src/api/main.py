import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_settings, load_config_or_default

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Validate widget config on startup (fail-fast)
    try:
        load_config_or_default(settings.rules_path)
        logger.info("Widget config checked at %s", settings.rules_path)
    except Exception as e:
        logger.critical("Widget config load failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="Rich Text Widget API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import rich_text_widget  # noqa: E402

app.include_router(
    rich_text_widget.router, prefix="/api/widgets/rich-text", tags=["Rich Text Widget"]
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
