"""Fixed-point amount conversion helpers."""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from .exceptions import ValidationError

Amount = Union[int, str, Decimal]

# Enough digits for any uint256 value.
_PRECISION = 100


def format_token_amount(amount: Union[int, str], decimals: int = 18) -> str:
    """
    Format an integer token amount as a decimal string.

    The result always carries at least one fractional digit, so
    ``format_token_amount(10**18)`` returns ``"1.0"``.
    """
    value = int(amount)
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10 ** decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction_str}"


def parse_token_amount(amount: Amount, decimals: int = 18, field: str = "amount") -> int:
    """
    Parse a human readable amount into integer base units.

    Args:
        amount: Amount such as ``"1.5"``
        decimals: Token decimals
        field: Name reported on ValidationError

    Returns:
        Amount in base units

    Raises:
        ValidationError: If the amount is not numeric or has more fractional
            digits than ``decimals``
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise ValidationError(f"Invalid token amount: {amount}", field=field, value=amount)
        if not value.is_finite():
            raise ValidationError(f"Invalid token amount: {amount}", field=field, value=amount)

        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValidationError(
                f"Amount {amount} has more than {decimals} decimal places",
                field=field,
                value=amount
            )
        return int(scaled)


def format_percentage(value: Union[int, float], scale: int = 10000) -> str:
    """Format a scaled value as a percentage, e.g. 1000 basis points -> "10.00%"."""
    return f"{value / scale * 100:.2f}%"


def to_int(value: Amount, field: str = "value") -> int:
    """
    Convert an integer-valued argument (int, integer string or Decimal) to int.

    Raises:
        ValidationError: If the value is not a whole number
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, bool):
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            try:
                number = Decimal(str(value).strip())
            except InvalidOperation:
                number = None
            if number is not None and number.is_finite() and number == number.to_integral_value():
                return int(number)
    raise ValidationError(f"{field} must be an integer: {value!r}", field=field, value=value)
