"""Decimal helpers for monetary amounts.

Amounts are kept as ``Decimal`` rounded to minor units (cents) so that
repeated deposits, withdrawals and interest postings never drift the way
binary floats do. Values are rounded once, when they enter the model.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from bank_sim.exceptions import ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# Far below the 28-digit default context, so sums of amounts stay exact
MAX_AMOUNT = Decimal("1000000000000000.00")


def to_decimal(value: Any, field_name: str = "amount") -> Decimal:
    """Convert a user-supplied number to ``Decimal`` without rounding.

    Parameters
    ----------
    value : Any
        ``Decimal``, ``int``, ``float`` or numeric ``str``.
    field_name : str
        Name used in the error message.

    Returns
    -------
    Decimal
        Finite decimal value.

    Raises
    ------
    ValidationError
        If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(f"{field_name} must be a number, got {value!r}") from None
    else:
        raise ValidationError(f"{field_name} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValidationError(f"{field_name} must be a finite number, got {value!r}")
    return result


def quantize(value: Decimal, field_name: str = "amount") -> Decimal:
    """Round a decimal to cents (half-up).

    Raises
    ------
    ValidationError
        If the value has too many digits to be represented in cents.
    """
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError(f"{field_name} is too large: {value}") from None


def to_amount(value: Any, field_name: str = "amount") -> Decimal:
    """Convert a user-supplied number to a cent-rounded ``Decimal``.

    Raises
    ------
    ValidationError
        If the value is not a finite number or exceeds ``MAX_AMOUNT``.
    """
    result = to_decimal(value, field_name)
    if abs(result) > MAX_AMOUNT:
        raise ValidationError(f"{field_name} must not exceed {MAX_AMOUNT}")
    return quantize(result, field_name)
