from __future__ import annotations

from datetime import date

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from payment_processor.api.deps import get_instruction_service
from payment_processor.api.errors import register_exception_handlers
from payment_processor.api.router import api_router
from payment_processor.config import get_settings
from payment_processor.schemas.instruction import Account
from payment_processor.services.instruction_service import PaymentInstructionService

TODAY = date(2025, 6, 15)


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set deterministic test env and reset cached Settings."""

    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("LOG_FILE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def service() -> PaymentInstructionService:
    """Service pinned to a fixed UTC date."""

    return PaymentInstructionService(today=lambda: TODAY)


@pytest.fixture
def accounts() -> list[Account]:
    return [
        Account(id="A1", balance=1000, currency="usd"),
        Account(id="A2", balance=0, currency="USD"),
    ]


@pytest.fixture
def api_app(service: PaymentInstructionService) -> FastAPI:
    """Build API app with the date-pinned service."""

    app = FastAPI()
    app.include_router(api_router, prefix="/api/v1")
    register_exception_handlers(app)
    app.dependency_overrides[get_instruction_service] = lambda: service
    return app


@pytest_asyncio.fixture
async def api_client(api_app: FastAPI) -> httpx.AsyncClient:
    """ASGI client for API integration tests."""

    transport = httpx.ASGITransport(app=api_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
