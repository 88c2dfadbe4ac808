"""Sólides Tangerino API client - READ-ONLY.

Only GET requests are ever issued. Tangerino stores one entry/exit pair per
record; a full day is two records (morning and afternoon):

    record 1: dateIn = entry,        dateOut = lunch out
    record 2: dateIn = lunch return, dateOut = final exit

Timestamps are epoch milliseconds in UTC and are shown in São Paulo time.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional

import pytz
import requests

from ..core.constants import MAX_PUNCHES_PER_DAY, SOURCE_TIMEZONE
from ..core.exceptions import PunchSourceError, PunchSourceUnavailableError

logger = logging.getLogger(__name__)

_TZ = pytz.timezone(SOURCE_TIMEZONE)


def millis_to_time(millis: Any) -> str:
    """Epoch milliseconds -> local "HH:MM"."""
    if isinstance(millis, bool) or not isinstance(millis, (int, float)):
        raise ValueError(f"Invalid timestamp: {millis!r}")
    return datetime.fromtimestamp(millis / 1000, tz=_TZ).strftime("%H:%M")


def _as_punch(value: Any) -> Optional[str]:
    # Unreadable timestamps are passed through as-is so the day is flagged
    # as a device failure instead of silently losing a punch.
    if value is None:
        return None
    try:
        return millis_to_time(value)
    except (ValueError, OverflowError, OSError):
        return str(value)


def _extract_records(payload: Any) -> list[dict]:
    if isinstance(payload, dict):
        payload = payload.get("clock_punches") or payload.get("content") or []
    return [r for r in (payload or []) if isinstance(r, dict)]


def flatten_punches(records: list[dict]) -> list[Optional[str]]:
    """Tangerino pairs -> [punch_1, punch_2, punch_3, punch_4]."""
    paired = [r for r in records if "dateIn" in r]
    if paired:
        paired.sort(key=lambda r: r["dateIn"] if isinstance(r["dateIn"], (int, float)) else float("inf"))
        punches: list[Optional[str]] = []
        for r in paired[: MAX_PUNCHES_PER_DAY // 2]:
            punches.append(_as_punch(r.get("dateIn")))
            punches.append(_as_punch(r.get("dateOut")))
        return punches

    # Flat format: one punch per record with an "HH:MM" time.
    times = [str(r["time"])[:5] for r in records if r.get("time")]
    return sorted(times)[:MAX_PUNCHES_PER_DAY]


class SolidesPunchSource:
    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        company_id: str,
        timeout_seconds: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._company_id = company_id
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        url = f"{self._base_url}{endpoint}"
        logger.debug("GET %s %s", endpoint, params)
        try:
            response = self._session.get(url, params=params, headers=self._headers, timeout=self._timeout)
        except requests.ConnectionError as exc:
            raise PunchSourceUnavailableError(f"Sólides API unreachable: {exc}") from exc
        except requests.RequestException as exc:
            raise PunchSourceError(f"Sólides API request failed: {exc}") from exc

        if response.status_code in (401, 403):
            raise PunchSourceUnavailableError(f"Sólides API rejected credentials ({response.status_code})")
        if not response.ok:
            raise PunchSourceError(f"Sólides API error {response.status_code}: {response.text[:200]}")

        try:
            return response.json()
        except ValueError as exc:
            raise PunchSourceError("Sólides API returned invalid JSON") from exc

    def check_available(self) -> None:
        self._get("/employees", {"company_id": self._company_id})

    def fetch_punches(self, external_id: str, work_date: date) -> list[Optional[str]]:
        day = work_date.isoformat()
        payload = self._get(
            f"/employees/{external_id}/clock-punches",
            {"start_date": day, "end_date": day},
        )
        return flatten_punches(_extract_records(payload))
