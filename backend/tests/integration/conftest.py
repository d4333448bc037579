"""HTTP-level fixtures: the FastAPI app wired to the in-memory store."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from fitit.main import create_app


@pytest.fixture
def app(store):
    application = create_app()
    application.state.document_store = store
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
