from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence


class PunchSource(Protocol):
    """External punch clock provider (read-only).

    Implementations raise ``PunchSourceError`` for a failed fetch and
    ``PunchSourceUnavailableError`` when the provider cannot be used at all.
    """

    def check_available(self) -> None:
        raise NotImplementedError

    def fetch_punches(self, external_id: str, work_date: date) -> Sequence[Optional[str]]:
        """Up to four "HH:MM" punches for one employee-day, in recorded order."""

        raise NotImplementedError
