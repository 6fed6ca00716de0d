from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from app.schemas.hospitals import SearchResponse
from app.schemas.search_request import SearchRequest
from app.services.mock_data import mock_search_response

log = structlog.get_logger(__name__)


class SearchClientError(Exception):
    """A hospital search that produced no usable response. `message` is user-presentable text."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SearchTransportError(SearchClientError):
    pass


class SearchHTTPError(SearchClientError):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class SearchDecodeError(SearchClientError):
    pass


def _error_message(response: httpx.Response) -> str:
    fallback = f"Server returned status code {response.status_code}"
    try:
        body = response.content.decode("utf-8")
    except UnicodeDecodeError:
        return fallback
    return body


class HospitalSearchClient:
    """
    Posts eligibility search requests to the hospital search agent.

    One instance is created at start-up and shared; it holds no per-search state.
    With `mock_on_decode_failure` set, a reply that doesn't match the response
    schema is replaced with the canned mock payload instead of failing the search.
    Transport and HTTP status failures are always raised. Redirects are
    followed, so a moved endpoint is reached rather than read as an empty reply.
    """

    def __init__(
        self,
        url: str,
        mock_on_decode_failure: bool = True,
        http: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.mock_on_decode_failure = mock_on_decode_failure
        self._http = http or httpx.AsyncClient(transport=transport, follow_redirects=True)

    async def search(self, request: SearchRequest) -> SearchResponse:
        payload = request.to_wire()
        log.info(
            "search.request",
            url=self.url,
            symptoms=request.symptoms,
            trading_partner=request.trading_partner_service_id,
        )
        log.debug("search.request.body", body=payload)

        try:
            response = await self._http.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            log.warning("search.transport_error", error=str(exc))
            raise SearchTransportError(str(exc) or exc.__class__.__name__) from exc

        log.info("search.response", status=response.status_code, bytes=len(response.content))

        if response.status_code >= 400:
            message = _error_message(response)
            log.warning("search.http_error", status=response.status_code, body=message)
            raise SearchHTTPError(response.status_code, message)

        try:
            return SearchResponse.model_validate_json(response.content)
        except ValidationError as exc:
            if not self.mock_on_decode_failure:
                raise SearchDecodeError(f"Unexpected search response: {exc.error_count()} validation error(s)") from exc
            # masks schema drift on purpose; disable MOCK_FALLBACK_ENABLED to surface it
            log.warning("search.decode_fallback", errors=exc.error_count())
            return mock_search_response()

    async def aclose(self) -> None:
        await self._http.aclose()
