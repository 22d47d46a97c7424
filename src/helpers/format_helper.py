"""Display formatting for prices and change rates."""

import math


def format_price(amount: float) -> str:
    """Round half up to an integer and group thousands, e.g. ``"1,234,568"``."""
    return f"{math.floor(amount + 0.5):,}"


def format_change_rate(rate: float) -> str:
    """Render a fractional rate as a signed percentage, e.g. ``"+5.23%"``."""
    sign = "+" if rate >= 0 else ""
    return f"{sign}{rate * 100:.2f}%"
