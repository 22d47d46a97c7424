import pandas as pd

from src.core.models import ChartPoint, DayCandle, MinuteCandle
from src.helpers.data_helper import CHART_COLUMNS, save_df_to_csv, to_chart_data, to_chart_frame


def make_minute_candle(kst, close, volume=1.0):
    return MinuteCandle(
        market="KRW-BTC",
        candle_date_time_utc=kst,
        candle_date_time_kst=kst,
        opening_price=close - 1,
        high_price=close + 2,
        low_price=close - 3,
        trade_price=close,
        timestamp=0,
        candle_acc_trade_price=close * volume,
        candle_acc_trade_volume=volume,
        unit=1,
    )


def make_day_candle(kst, close):
    return DayCandle(
        market="KRW-ETH",
        candle_date_time_utc=kst,
        candle_date_time_kst=kst,
        opening_price=close,
        high_price=close,
        low_price=close,
        trade_price=close,
        timestamp=0,
        candle_acc_trade_price=0.0,
        candle_acc_trade_volume=3.0,
        prev_closing_price=close,
        change_price=0.0,
        change_rate=0.0,
    )


def test_to_chart_data_preserves_length_and_order():
    candles = [
        make_minute_candle("2024-01-01T09:02:00", 300.0, 2.0),
        make_minute_candle("2024-01-01T09:01:00", 200.0, 4.0),
        make_minute_candle("2024-01-01T09:00:00", 100.0, 6.0),
    ]
    points = to_chart_data(candles)

    assert len(points) == len(candles)
    for candle, point in zip(candles, points):
        assert isinstance(point, ChartPoint)
        assert point.time == candle.candle_date_time_kst
        assert point.open == candle.opening_price
        assert point.high == candle.high_price
        assert point.low == candle.low_price
        assert point.close == candle.trade_price
        assert point.volume == candle.candle_acc_trade_volume


def test_to_chart_data_accepts_day_candles():
    points = to_chart_data([make_day_candle("2024-01-02T09:00:00", 42.0)])
    assert points == [ChartPoint("2024-01-02T09:00:00", 42.0, 42.0, 42.0, 42.0, 3.0)]


def test_to_chart_data_empty():
    assert to_chart_data([]) == []


def test_to_chart_frame_sorted_oldest_first():
    candles = [
        make_day_candle("2024-01-03T09:00:00", 3.0),
        make_day_candle("2024-01-02T09:00:00", 2.0),
        make_day_candle("2024-01-01T09:00:00", 1.0),
    ]
    df = to_chart_frame(candles)

    assert list(df.columns) == CHART_COLUMNS
    assert pd.api.types.is_datetime64_any_dtype(df["time"])
    assert df["close"].tolist() == [1.0, 2.0, 3.0]
    assert df["time"].is_monotonic_increasing


def test_save_df_to_csv_creates_dirs(tmp_path):
    df = to_chart_frame([make_day_candle("2024-01-01T09:00:00", 1.0)])
    out = tmp_path / "charts" / "nested" / "chart.csv"

    save_df_to_csv(df, str(out))

    assert out.exists()
    loaded = pd.read_csv(out, parse_dates=["time"])
    assert list(loaded.columns) == CHART_COLUMNS
    assert len(loaded) == 1
