"""Financial Helper Functions

Historical ROI of a lump-sum investment, computed from Upbit daily candles.
"""

import numpy as np
from typing import Optional, Sequence

from src.core.models import DayCandle, HistoricalInvestment


def calculate_roi(entry_price: float, current_price: float) -> float:
    """Calculate the simple return between two prices.

    Args:
        entry_price: Price paid at entry
        current_price: Latest price

    Returns:
        Return as a decimal (e.g., 0.15 for 15%), NaN if entry_price <= 0
    """
    if entry_price is None or entry_price <= 0:
        return np.nan

    return current_price / entry_price - 1


def calculate_historical_investment(
    market: str,
    candles: Sequence[DayCandle],
    days_ago: int,
    invested_amount: float
) -> Optional[HistoricalInvestment]:
    """Value today of `invested_amount` bought at the close `days_ago` days back.

    Args:
        market: Market code (e.g., 'KRW-BTC')
        candles: Daily candles ordered newest first, as returned by Upbit
        days_ago: Number of daily candles to look back (0 = today)
        invested_amount: Amount invested at the entry close

    Returns:
        HistoricalInvestment, or None if the history is too short
    """
    if days_ago < 0:
        raise ValueError("days_ago must be non-negative")

    if len(candles) <= days_ago:
        return None

    current = candles[0]
    entry = candles[days_ago]
    roi = calculate_roi(entry.trade_price, current.trade_price)

    if np.isnan(roi):
        return None

    return HistoricalInvestment(
        market=market,
        days_ago=days_ago,
        entry_time=entry.candle_date_time_kst,
        entry_price=entry.trade_price,
        current_price=current.trade_price,
        invested_amount=invested_amount,
        current_value=invested_amount * (1 + roi),
        roi=roi
    )
