"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from style_engine.core.config import get_settings
from style_engine.core.logging import setup_logging

# Setup logging
logger = setup_logging("style_engine")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the style engine at startup."""
    from style_engine.services.engine import StyleEngine

    app.state.style_engine = StyleEngine(get_settings())
    logger.info("Style engine initialized")
    yield


# Create FastAPI app
app = FastAPI(
    title="Style Consistency Engine",
    description="Cross-character style scoring and prompt construction",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://localhost:{settings.frontend_port}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
from style_engine.api.style import router as style_router  # noqa: E402

app.include_router(style_router)


@app.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint.

    Always returns HTTP 200; check `services.style_engine` for actual status.
    """
    engine_ok = getattr(request.app.state, "style_engine", None) is not None

    logger.info("Health check requested")
    return {
        "status": "ok",
        "version": app.version,
        "services": {
            "style_engine": "ok" if engine_ok else "unavailable",
        },
    }
