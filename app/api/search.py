import structlog
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_profile_store, get_request_builder, get_search_client, get_search_sessions
from app.schemas.search import SearchOutcome, SearchQuery
from app.services.presentation import present, present_failure, unavailable
from app.services.profile_store import ProfileStore
from app.services.request_builder import SearchRequestBuilder
from app.services.search_client import HospitalSearchClient, SearchClientError
from app.services.search_session import SearchSessions


log = structlog.get_logger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


async def run_search(
    query: SearchQuery,
    store: ProfileStore,
    client: HospitalSearchClient,
    builder: SearchRequestBuilder,
) -> SearchOutcome:
    if query.lat is None or query.lng is None:
        return unavailable(
            query.user_id,
            query.symptoms,
            "Unable to determine your location. Please ensure location services are enabled.",
        )

    eligibility = await store.get_eligibility(query.user_id)
    if eligibility is None:
        return unavailable(query.user_id, query.symptoms, "Unable to retrieve your insurance information.")

    profile = await store.get_profile(query.user_id)
    if profile is None:
        return unavailable(query.user_id, query.symptoms, "Unable to retrieve your profile information.")

    request = builder.build(query.symptoms, query.lat, query.lng, eligibility, profile)

    try:
        response = await client.search(request)
    except SearchClientError as exc:
        log.warning("search.failed", user_id=query.user_id, error=exc.message)
        return present_failure(query.user_id, query.symptoms, exc.message, show_mock=client.mock_on_decode_failure)

    return present(query.user_id, query.symptoms, response)


@router.post("", response_model=SearchOutcome)
async def search(
    query: SearchQuery,
    store: ProfileStore = Depends(get_profile_store),
    client: HospitalSearchClient = Depends(get_search_client),
    builder: SearchRequestBuilder = Depends(get_request_builder),
    sessions: SearchSessions = Depends(get_search_sessions),
) -> SearchOutcome:
    generation = sessions.begin(query.user_id)
    outcome = await run_search(query, store, client, builder)
    outcome = outcome.model_copy(update={"generation": generation})
    if not sessions.complete(query.user_id, generation, outcome):
        outcome = outcome.model_copy(update={"superseded": True})
    return outcome


@router.get("/{user_id}/latest", response_model=SearchOutcome)
async def latest(user_id: str, sessions: SearchSessions = Depends(get_search_sessions)) -> SearchOutcome:
    outcome = sessions.latest(user_id)
    if outcome is None:
        raise HTTPException(status_code=404, detail="No search results")
    return outcome
