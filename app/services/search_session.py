from collections import OrderedDict
from typing import Optional

import structlog

from app.schemas.search import SearchOutcome

log = structlog.get_logger(__name__)


class SearchSessions:
    """
    Latest search result per user, guarded by a generation counter.

    Starting a search clears the user's previous result. A search that
    completes after a newer one was started for the same user is dropped,
    so a slow reply can't overwrite fresher results. Only touched from the
    event loop.

    State lives in this process: with several workers each keeps its own
    counters, so run a single worker for the guard to hold. At most
    `max_users` users are tracked; the least recently searched are evicted,
    and an evicted user's in-flight search completes as stale.
    """

    def __init__(self, max_users: int = 10_000) -> None:
        self.max_users = max_users
        self._generations: "OrderedDict[str, int]" = OrderedDict()
        self._latest: "OrderedDict[str, SearchOutcome]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._generations)

    def begin(self, user_id: str) -> int:
        generation = self._generations.pop(user_id, 0) + 1
        self._generations[user_id] = generation
        self._latest.pop(user_id, None)
        while len(self._generations) > self.max_users:
            evicted, _ = self._generations.popitem(last=False)
            self._latest.pop(evicted, None)
        return generation

    def is_current(self, user_id: str, generation: int) -> bool:
        return self._generations.get(user_id) == generation

    def complete(self, user_id: str, generation: int, outcome: SearchOutcome) -> bool:
        if not self.is_current(user_id, generation):
            log.info(
                "search.stale_result",
                user_id=user_id,
                generation=generation,
                current=self._generations.get(user_id),
            )
            return False
        self._latest[user_id] = outcome
        return True

    def latest(self, user_id: str) -> Optional[SearchOutcome]:
        return self._latest.get(user_id)
