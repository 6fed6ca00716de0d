from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.api.search import router as search_router
from app.config import settings
from app.logging_conf import setup_logging
from app.middleware import RequestContextMiddleware
from app.services.request_builder import SearchRequestBuilder
from app.services.request_defaults import load_request_defaults
from app.services.search_client import HospitalSearchClient
from app.services.search_session import SearchSessions


def create_app(search_client: Optional[HospitalSearchClient] = None) -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = search_client or HospitalSearchClient(
            settings.SEARCH_API_URL,
            mock_on_decode_failure=settings.MOCK_FALLBACK_ENABLED,
        )
        app.state.search_client = client
        app.state.request_builder = SearchRequestBuilder(load_request_defaults(settings.REQUEST_DEFAULTS_PATH))
        app.state.search_sessions = SearchSessions(max_users=settings.SEARCH_SESSION_MAX_USERS)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="Hospital Cost Search", lifespan=lifespan)
    app.add_middleware(RequestContextMiddleware)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    app.include_router(search_router)
    return app


app = create_app()
