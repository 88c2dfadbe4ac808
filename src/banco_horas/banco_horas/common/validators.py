from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} deve ser texto")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} é obrigatório")
    return value.strip()


def require_bool(value: object, field_name: str, *, default: bool = False) -> bool:
    """JSON booleans only; strings like "false" are rejected instead of coerced."""
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} deve ser verdadeiro ou falso")
    return value


def require_iso_date(value: str | None, field_name: str) -> date:
    value = require_non_empty(value, field_name)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} inválida. Use YYYY-MM-DD")


def require_date_range(start: date, end: date, *, max_days: int | None = None) -> int:
    """Validate an inclusive date range and return its length in days."""
    if start > end:
        raise ValidationError("Data inicial não pode ser posterior à data final")
    total_days = (end - start).days + 1
    if max_days is not None and total_days > max_days:
        raise ValidationError(f"Intervalo máximo de {max_days} dias")
    return total_days


def require_year(value: int) -> int:
    if not 2000 <= int(value) <= 2100:
        raise ValidationError("Ano inválido")
    return int(value)
