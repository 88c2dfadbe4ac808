"""Punch parsing.

Raw punches come from two places: the punch clock provider (untrusted data,
where garbage means a device failure) and manual edits (caller input, where
garbage is a validation error). Both go through ``parse_punches``; manual
edits additionally go through ``require_valid_punches``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional, Sequence, Union

from ..common.datetime_utils import minutes_of_day, parse_time_of_day
from ..core.constants import MAX_PUNCHES_PER_DAY
from ..core.enums import PunchOutcome
from ..core.exceptions import ValidationError

RawPunch = Union[str, time, None]
PunchSlots = tuple[Optional[time], Optional[time], Optional[time], Optional[time]]

EMPTY_SLOTS: PunchSlots = (None, None, None, None)


@dataclass(frozen=True)
class ParsedPunches:
    outcome: PunchOutcome
    slots: PunchSlots = EMPTY_SLOTS

    @property
    def present(self) -> list[time]:
        return [p for p in self.slots if p is not None]


def _parse_one(value: RawPunch) -> tuple[Optional[time], bool]:
    """Returns (parsed, ok)."""
    if value is None:
        return None, True
    if isinstance(value, time):
        return value, True
    if isinstance(value, str):
        if not value.strip():
            return None, True
        try:
            return parse_time_of_day(value), True
        except ValueError:
            return None, False
    return None, False


def _is_chronological(values: Sequence[time]) -> bool:
    minutes = [minutes_of_day(v) for v in values]
    return all(a < b for a, b in zip(minutes, minutes[1:]))


def parse_punches(raw: Sequence[RawPunch]) -> ParsedPunches:
    raw = list(raw or [])
    if len(raw) > MAX_PUNCHES_PER_DAY:
        return ParsedPunches(outcome=PunchOutcome.MALFORMED)

    raw += [None] * (MAX_PUNCHES_PER_DAY - len(raw))
    parsed: list[Optional[time]] = []
    malformed = False
    for value in raw:
        t, ok = _parse_one(value)
        malformed = malformed or not ok
        parsed.append(t)

    slots: PunchSlots = tuple(parsed)  # type: ignore[assignment]
    if malformed or not _is_chronological([p for p in slots if p is not None]):
        return ParsedPunches(outcome=PunchOutcome.MALFORMED, slots=slots)
    if all(p is None for p in slots):
        return ParsedPunches(outcome=PunchOutcome.ABSENT)
    return ParsedPunches(outcome=PunchOutcome.PRESENT, slots=slots)


def require_valid_punches(raw: Sequence[RawPunch]) -> ParsedPunches:
    """Strict variant for caller input: malformed punches are rejected."""
    if raw is not None and not isinstance(raw, (list, tuple)):
        raise ValidationError("Batidas devem ser uma lista de horários (HH:MM)")
    if raw and len(raw) > MAX_PUNCHES_PER_DAY:
        raise ValidationError(f"No máximo {MAX_PUNCHES_PER_DAY} batidas por dia")

    parsed = parse_punches(raw)
    if parsed.outcome == PunchOutcome.MALFORMED:
        raise ValidationError("Batidas inválidas: use HH:MM em ordem cronológica")
    return parsed
