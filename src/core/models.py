from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Market:
    market: str          # exchange pair code, e.g. "KRW-BTC"
    korean_name: str
    english_name: str
    market_warning: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "Market":
        return cls(
            market=data['market'],
            korean_name=data.get('korean_name', ''),
            english_name=data.get('english_name', ''),
            market_warning=data.get('market_warning')
        )

@dataclass(frozen=True)
class MinuteCandle:
    market: str
    candle_date_time_utc: str
    candle_date_time_kst: str
    opening_price: float
    high_price: float
    low_price: float
    trade_price: float   # close
    timestamp: int       # ms since epoch of the last trade in the bucket
    candle_acc_trade_price: float
    candle_acc_trade_volume: float
    unit: int

    @classmethod
    def from_json(cls, data: dict) -> "MinuteCandle":
        return cls(
            market=data['market'],
            candle_date_time_utc=data['candle_date_time_utc'],
            candle_date_time_kst=data['candle_date_time_kst'],
            opening_price=data['opening_price'],
            high_price=data['high_price'],
            low_price=data['low_price'],
            trade_price=data['trade_price'],
            timestamp=data['timestamp'],
            candle_acc_trade_price=data['candle_acc_trade_price'],
            candle_acc_trade_volume=data['candle_acc_trade_volume'],
            unit=data['unit']
        )

@dataclass(frozen=True)
class DayCandle:
    market: str
    candle_date_time_utc: str
    candle_date_time_kst: str
    opening_price: float
    high_price: float
    low_price: float
    trade_price: float
    timestamp: int
    candle_acc_trade_price: float
    candle_acc_trade_volume: float
    prev_closing_price: float
    change_price: float
    change_rate: float
    converted_trade_price: Optional[float] = None  # only with convertingPriceUnit

    @classmethod
    def from_json(cls, data: dict) -> "DayCandle":
        return cls(
            market=data['market'],
            candle_date_time_utc=data['candle_date_time_utc'],
            candle_date_time_kst=data['candle_date_time_kst'],
            opening_price=data['opening_price'],
            high_price=data['high_price'],
            low_price=data['low_price'],
            trade_price=data['trade_price'],
            timestamp=data['timestamp'],
            candle_acc_trade_price=data['candle_acc_trade_price'],
            candle_acc_trade_volume=data['candle_acc_trade_volume'],
            prev_closing_price=data.get('prev_closing_price', 0.0),
            change_price=data.get('change_price', 0.0),
            change_rate=data.get('change_rate', 0.0),
            converted_trade_price=data.get('converted_trade_price')
        )

@dataclass(frozen=True)
class Ticker:
    market: str
    trade_price: float
    opening_price: float
    high_price: float
    low_price: float
    prev_closing_price: float
    change: str          # "RISE", "EVEN" or "FALL"
    change_price: float
    change_rate: float   # unsigned fraction, see signed_change_rate
    signed_change_price: float
    signed_change_rate: float
    trade_volume: float
    acc_trade_price_24h: float
    acc_trade_volume_24h: float
    timestamp: int

    @classmethod
    def from_json(cls, data: dict) -> "Ticker":
        return cls(
            market=data['market'],
            trade_price=data['trade_price'],
            opening_price=data.get('opening_price', 0.0),
            high_price=data.get('high_price', 0.0),
            low_price=data.get('low_price', 0.0),
            prev_closing_price=data.get('prev_closing_price', 0.0),
            change=data.get('change', 'EVEN'),
            change_price=data.get('change_price', 0.0),
            change_rate=data.get('change_rate', 0.0),
            signed_change_price=data.get('signed_change_price', 0.0),
            signed_change_rate=data.get('signed_change_rate', 0.0),
            trade_volume=data.get('trade_volume', 0.0),
            acc_trade_price_24h=data.get('acc_trade_price_24h', 0.0),
            acc_trade_volume_24h=data.get('acc_trade_volume_24h', 0.0),
            timestamp=data.get('timestamp', 0)
        )

@dataclass(frozen=True)
class Account:
    currency: str
    balance: float
    locked: float        # amount held by open orders
    avg_buy_price: float
    unit_currency: str

    @classmethod
    def from_json(cls, data: dict) -> "Account":
        # Upbit sends amounts as decimal strings
        return cls(
            currency=data['currency'],
            balance=float(data['balance']),
            locked=float(data.get('locked', 0)),
            avg_buy_price=float(data.get('avg_buy_price', 0)),
            unit_currency=data.get('unit_currency', 'KRW')
        )

@dataclass(frozen=True)
class AuthClaims:
    access_key: str
    nonce: str

@dataclass(frozen=True)
class ChartPoint:
    time: str            # KST timestamp of the candle bucket
    open: float
    high: float
    low: float
    close: float
    volume: float

@dataclass(frozen=True)
class HistoricalInvestment:
    market: str
    days_ago: int
    entry_time: str
    entry_price: float
    current_price: float
    invested_amount: float
    current_value: float
    roi: float
