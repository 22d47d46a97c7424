"""Helpers that turn Upbit candles into chart data and persist it.

This module provides:
- to_chart_data: Map raw minute/day candles to ChartPoint records.
- to_chart_frame: The same points as a time-sorted DataFrame.
- save_df_to_csv: CSV writer with optional directory creation.
"""

from __future__ import annotations

import os
from dataclasses import asdict
from typing import Iterable, Optional, Union

import pandas as pd

from src.core.models import ChartPoint, DayCandle, MinuteCandle

CHART_COLUMNS = ["time", "open", "high", "low", "close", "volume"]


def to_chart_data(candles: Iterable[Union[MinuteCandle, DayCandle]]) -> list[ChartPoint]:
    """Map each candle to a ChartPoint, one-to-one and in input order."""
    return [
        ChartPoint(
            time=candle.candle_date_time_kst,
            open=candle.opening_price,
            high=candle.high_price,
            low=candle.low_price,
            close=candle.trade_price,
            volume=candle.candle_acc_trade_volume,
        )
        for candle in candles
    ]


def to_chart_frame(candles: Iterable[Union[MinuteCandle, DayCandle]]) -> pd.DataFrame:
    """Chart points as a DataFrame with a parsed ``time`` column, oldest first.

    Upbit returns candles newest first; charts want them ascending.
    """
    points = to_chart_data(candles)
    df = pd.DataFrame([asdict(p) for p in points], columns=CHART_COLUMNS)
    df["time"] = pd.to_datetime(df["time"])
    return df.sort_values("time").reset_index(drop=True)


def save_df_to_csv(
    df: pd.DataFrame,
    file_path: str,
    *,
    index: bool = False,
    create_dirs: bool = True,
    date_format: Optional[str] = None,
    **kwargs,
) -> None:
    """Save a DataFrame to CSV.

    Parameters
    - df: DataFrame to write
    - file_path: Destination CSV path
    - index: Whether to write the index
    - create_dirs: Create parent directories if missing
    - date_format: strftime format for datetimes
    - kwargs: Passed through to pandas.DataFrame.to_csv

    Raises
    - ValueError: If df is not a pandas DataFrame
    """
    if not isinstance(df, pd.DataFrame):
        raise ValueError("df must be a pandas DataFrame")

    parent = os.path.dirname(os.path.abspath(file_path))
    if create_dirs and parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)

    df.to_csv(file_path, index=index, date_format=date_format, **kwargs)
