import re
from typing import Optional

from pydantic import BaseModel


EXPIRED_MARKERS = ("Coverage expired", "insurance validation failed")
EXPIRY_DATE_RE = re.compile(r"ended [0-9]{8}")


class SearchErrorInfo(BaseModel):
    coverage_expired: bool
    error_message: Optional[str] = None
    expiry_message: Optional[str] = None


def expiry_message(text: str) -> str:
    m = EXPIRY_DATE_RE.search(text)
    if not m:
        return "Your insurance plan has expired."
    stamp = m.group(0).replace("ended ", "")
    year, month, day = stamp[:4], stamp[4:6], stamp[6:8]
    return f"Your insurance plan expired on {month}/{day}/{year}."


def classify_search_error(message: str) -> SearchErrorInfo:
    """
    The search agent reports lapsed coverage only as free text, e.g.
    "insurance validation failed: Coverage expired - plan ended 20231231".
    Anything else is shown to the user as-is.
    """
    if any(marker in message for marker in EXPIRED_MARKERS):
        return SearchErrorInfo(coverage_expired=True, expiry_message=expiry_message(message))
    return SearchErrorInfo(coverage_expired=False, error_message=f"Error searching for hospitals: {message}")
