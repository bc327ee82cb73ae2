from __future__ import annotations

import datetime as dt
import re

from .models import ReservationDetails

_PARTY_RE = re.compile(r"(\d+)\s*(?:people|persons?|ppl|guests?)", re.IGNORECASE)
_FOR_RE = re.compile(r"for\s+(\d+)", re.IGNORECASE)
_DATE_RE = re.compile(r"(\d{1,2})[/\-](\d{1,2})[/\-](\d{2,4})")
_CLOCK_RE = re.compile(r"(\d{1,2}):?(\d{2})?\s*(pm|am)", re.IGNORECASE)
_MILITARY_RE = re.compile(r"(\d{1,2}):(\d{2})")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

_SPECIAL_KEYWORDS = (
    "vegetarian", "vegan", "gluten", "allergy", "birthday", "anniversary", "celebration",
)


def _extract_party_size(text: str) -> int | None:
    match = _PARTY_RE.search(text) or _FOR_RE.search(text)
    if match:
        size = int(match.group(1))
        return size if size > 0 else None
    return None


def _extract_date(text: str, today: dt.date) -> dt.date | None:
    lower = text.lower()
    if "today" in lower or "tonight" in lower:
        return today
    if "tomorrow" in lower:
        return today + dt.timedelta(days=1)

    match = _DATE_RE.search(text)
    if match:
        month, day, year = (int(g) for g in match.groups())
        if year < 100:
            year += 2000
        try:
            return dt.date(year, month, day)
        except ValueError:
            return None
    return None


def _extract_time(text: str) -> str | None:
    match = _CLOCK_RE.search(text)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2) or 0)
        period = match.group(3).lower()
        if period == "pm" and hour != 12:
            hour += 12
        elif period == "am" and hour == 12:
            hour = 0
        if hour < 24 and minute < 60:
            return f"{hour:02d}:{minute:02d}"
        return None

    match = _MILITARY_RE.search(text)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour < 24 and minute < 60:
            return f"{hour:02d}:{minute:02d}"
    return None


def _extract_special_requests(text: str) -> str | None:
    for sentence in _SENTENCE_SPLIT_RE.split(text):
        if any(keyword in sentence.lower() for keyword in _SPECIAL_KEYWORDS):
            return sentence.strip()
    return None


def extract_reservation_details(text: str | None, today: dt.date | None = None) -> ReservationDetails:
    """Pull party size, date, time and special requests out of a booking message."""
    if not text:
        return ReservationDetails()
    today = today or dt.date.today()
    return ReservationDetails(
        party_size=_extract_party_size(text),
        date=_extract_date(text, today),
        time=_extract_time(text),
        special_requests=_extract_special_requests(text),
    )
