"""Combat power display formatting.

Used by both the card view and the share text so the two always agree.
"""

from decimal import ROUND_DOWN, Decimal

POWER_DECIMALS = 2


def format_power(value: float) -> str:
    """Format a power value for display.

    Fixed-point with POWER_DECIMALS places, truncated toward zero rather
    than rounded, with comma thousands grouping.

    Args:
        value: Raw power value.

    Returns:
        Display string, e.g. 1234.567 -> "1,234.56".
    """
    # str() first so binary float noise does not leak into truncation
    quantum = Decimal(1).scaleb(-POWER_DECIMALS)
    truncated = Decimal(str(value)).quantize(quantum, rounding=ROUND_DOWN)
    if truncated == 0:
        truncated = abs(truncated)
    return f"{truncated:,.{POWER_DECIMALS}f}"
