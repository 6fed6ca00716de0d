from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db_session
from app.services.profile_store import ProfileStore
from app.services.request_builder import SearchRequestBuilder
from app.services.search_client import HospitalSearchClient
from app.services.search_session import SearchSessions


async def get_profile_store(session: AsyncSession = Depends(get_db_session)) -> ProfileStore:
    return ProfileStore(session)


def get_search_client(request: Request) -> HospitalSearchClient:
    return request.app.state.search_client


def get_request_builder(request: Request) -> SearchRequestBuilder:
    return request.app.state.request_builder


def get_search_sessions(request: Request) -> SearchSessions:
    return request.app.state.search_sessions
