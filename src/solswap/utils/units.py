"""Token amount conversions."""

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Union

Number = Union[Decimal, int, float, str]


def to_decimal(amount: Number) -> Decimal:
    """Convert a user supplied amount to Decimal.

    Floats go through ``str`` so 1.1 stays 1.1 instead of its binary expansion.
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise ValueError(f"Invalid amount: {amount!r}")
    try:
        if isinstance(amount, float):
            return Decimal(str(amount))
        return Decimal(amount)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid amount: {amount!r}") from e


def to_base_units(amount: Number, decimals: int) -> int:
    """Scale a human readable amount into integer base units.

    Rounds half to even on the last base unit.

    Args:
        amount: Amount in human units (e.g. 1.5 SOL)
        decimals: Token decimal precision

    Returns:
        Amount in base units (e.g. 1_500_000_000 lamports)
    """
    if decimals < 0:
        raise ValueError(f"Invalid decimals: {decimals}")

    value = to_decimal(amount)
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")

    scaled = value.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_HALF_EVEN)
    return int(scaled)
