"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from payment_processor.api.errors import register_exception_handlers
from payment_processor.api.router import api_router
from payment_processor.config import get_settings
from payment_processor.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging once the application starts."""

    logger = setup_logging(get_settings())
    logger.info("Starting %s", app.title)
    yield


settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
app.include_router(api_router, prefix=settings.api_v1_prefix)
register_exception_handlers(app)


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    """Simple liveness endpoint for uptime checks."""

    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("payment_processor.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
