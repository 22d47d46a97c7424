from abc import ABC, abstractmethod
from typing import List, Optional
from src.core.models import Account, DayCandle, Market, MinuteCandle, Ticker

class ExchangeClient(ABC):

    # Quotation Methods (public)
    @abstractmethod
    def list_markets(self) -> List[Market]:
        pass

    @abstractmethod
    def get_minute_candles(self, market: str, unit: int = 1, count: int = 200) -> List[MinuteCandle]:
        pass

    @abstractmethod
    def get_day_candles(self, market: str, count: int = 200, converting_price_unit: Optional[str] = None) -> List[DayCandle]:
        pass

    @abstractmethod
    def get_ticker(self, markets: List[str]) -> List[Ticker]:
        pass

    # Exchange Methods (private)
    @abstractmethod
    def get_accounts(self) -> List[Account]:
        pass
