"""Field guards shared by the domain entities."""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from coopcredit.core.exceptions import ValidationError

# Monetary columns are NUMERIC(15, 2)
MONEY_DECIMAL_PLACES = 2
MONEY_MAX_DIGITS = 15
_MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_DECIMAL_PLACES)
_MONEY_LIMIT = Decimal(10) ** (MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES)


def require_text(value: Optional[str], field: str) -> str:
    """Return value if it is a non-blank string."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} cannot be null or blank", field=field)
    return value


def require_positive_decimal(value: Any, field: str) -> Decimal:
    """
    Coerce value to a positive monetary Decimal.

    Values that do not fit NUMERIC(15, 2) are rejected, never rounded.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} must be greater than zero", field=field)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError(f"{field} must be a decimal number", field=field) from e
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"{field} must be greater than zero", field=field)
    if amount >= _MONEY_LIMIT:
        raise ValidationError(
            f"{field} must be less than {_MONEY_LIMIT:,}", field=field
        )
    if amount != amount.quantize(_MONEY_QUANTUM):
        raise ValidationError(
            f"{field} cannot have more than {MONEY_DECIMAL_PLACES} decimal places",
            field=field,
        )
    return amount


def require_positive_int(value: Any, field: str) -> int:
    if value is None or isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field} must be a positive integer", field=field)
    return value


def require_non_negative_int(value: Any, field: str) -> int:
    if value is None or isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"{field} cannot be null or negative", field=field)
    return value


def require_past_or_present(value: Optional[date], field: str) -> date:
    """Require a date that is not in the future."""
    if value is None:
        raise ValidationError(f"{field} cannot be null", field=field)
    if value > date.today():
        raise ValidationError(f"{field} cannot be in the future", field=field)
    return value
