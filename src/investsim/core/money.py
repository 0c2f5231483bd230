"""Decimal precision rules for money, prices and share quantities."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from investsim.core.exceptions import ValidationError

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Column scales; values with more decimal places are rejected, not rounded
MONEY_PLACES = 2
PRICE_PLACES = 4
SHARE_PLACES = 8
AVG_PRICE_PLACES = 10

CENT = Decimal("0.01")
PERCENT_STEP = Decimal("0.01")

Number = Union[Decimal, int, str]


def to_decimal(value: Number, field: str) -> Decimal:
    """Coerce an int, str or Decimal into a finite Decimal."""
    if isinstance(value, float):
        raise ValidationError(f"{field} must be a Decimal, int or str, not float")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except ArithmeticError:
        raise ValidationError(f"{field} is not a valid number: {value!r}")
    if not result.is_finite():
        raise ValidationError(f"{field} must be finite")
    return result


def require_positive(value: Number, field: str, places: int) -> Decimal:
    """Return value as a Decimal, checking it is > 0 and fits `places` decimals."""
    result = to_decimal(value, field)
    if result <= ZERO:
        raise ValidationError(f"{field} must be greater than 0")
    if -result.normalize().as_tuple().exponent > places:
        raise ValidationError(f"{field} allows at most {places} decimal places")
    return result


def quantize_money(value: Decimal) -> Decimal:
    """Round to cents."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def quantize_percent(value: Decimal) -> Decimal:
    """Round a percentage to two decimal places."""
    return value.quantize(PERCENT_STEP, rounding=ROUND_HALF_UP)


def quantize_avg_price(value: Decimal) -> Decimal:
    """Round a weighted-average cost to the stored precision."""
    return value.quantize(Decimal(1).scaleb(-AVG_PRICE_PLACES), rounding=ROUND_HALF_UP)
