"""
Thin client for the Upbit REST API.

Quotation (public) endpoints::

    GET /v1/market/all
    GET /v1/candles/minutes/{unit}?market=KRW-BTC&count=200
    GET /v1/candles/days?market=KRW-BTC&count=200&convertingPriceUnit=KRW
    GET /v1/ticker?markets=KRW-BTC,KRW-ETH

Exchange (private) endpoints, signed with a bearer JWT::

    GET /v1/accounts
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from src.core.config import UpbitSettings
from src.core.models import Account, DayCandle, Market, MinuteCandle, Ticker
from src.exchanges.base import ExchangeClient
from src.exchanges.errors import AuthenticationError
from src.exchanges.upbit_auth import build_auth_headers

_MARKETS_ENDPOINT = "/v1/market/all"
_MINUTE_CANDLES_ENDPOINT = "/v1/candles/minutes/{unit}"
_DAY_CANDLES_ENDPOINT = "/v1/candles/days"
_TICKER_ENDPOINT = "/v1/ticker"
_ACCOUNTS_ENDPOINT = "/v1/accounts"

_PUBLIC_HEADERS = {"Accept": "application/json"}

MINUTE_UNITS = (1, 3, 5, 10, 15, 30, 60, 240)
MAX_CANDLE_COUNT = 200


class UpbitClient(ExchangeClient):
    """
    Fetches markets, candles, tickers and balances from Upbit.

    The client holds only its settings. Every call is a single GET; errors
    from public endpoints propagate as raised by ``requests``
    (``TransportError``), while any failure on a private endpoint becomes a
    generic :class:`AuthenticationError`.

    Parameters
    ----------
    settings : UpbitSettings
        Endpoint and credential configuration, resolved by the caller.
    session : requests.Session, optional
        Transport to issue requests with. Defaults to the ``requests`` module.
    timeout : float, optional
        Passed through to the transport. ``None`` keeps its default.
    logger : logging.Logger, optional
    """

    def __init__(
        self,
        settings: UpbitSettings,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self._http = session if session is not None else requests
        self._timeout = timeout
        self._base_url = settings.base_url

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get(self, endpoint: str, params: Optional[dict] = None, headers: Optional[dict] = None):
        url = self._base_url + endpoint
        self.logger.debug(f"GET {url} params={params}")
        response = self._http.get(
            url,
            params=params,
            headers=headers or _PUBLIC_HEADERS,
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response.json()

    # ------------------------------------------------------------------
    # Quotation API
    # ------------------------------------------------------------------

    def list_markets(self) -> list[Market]:
        raw = self._get(_MARKETS_ENDPOINT)
        return [Market.from_json(item) for item in raw]

    def get_minute_candles(
        self,
        market: str,
        unit: int = 1,
        count: int = MAX_CANDLE_COUNT,
    ) -> list[MinuteCandle]:
        """
        Fetch minute candles for *market*, newest first.

        *unit* must be one of ``MINUTE_UNITS`` and *count* is capped at 200 by
        Upbit; neither is checked here, the server rejects bad values.
        """
        raw = self._get(
            _MINUTE_CANDLES_ENDPOINT.format(unit=unit),
            params={"market": market, "count": count},
        )
        return [MinuteCandle.from_json(item) for item in raw]

    def get_day_candles(
        self,
        market: str,
        count: int = MAX_CANDLE_COUNT,
        converting_price_unit: Optional[str] = None,
    ) -> list[DayCandle]:
        """
        Fetch daily candles for *market*, newest first.

        ``converting_price_unit`` (e.g. ``"KRW"``) asks Upbit to also quote the
        close in that currency as ``converted_trade_price``.
        """
        params = {"market": market, "count": count}
        if converting_price_unit:
            params["convertingPriceUnit"] = converting_price_unit

        raw = self._get(_DAY_CANDLES_ENDPOINT, params=params)
        return [DayCandle.from_json(item) for item in raw]

    def get_ticker(self, markets: list[str]) -> list[Ticker]:
        # Upbit expects one comma-separated value, not repeated parameters
        raw = self._get(_TICKER_ENDPOINT, params={"markets": ",".join(markets)})
        return [Ticker.from_json(item) for item in raw]

    # ------------------------------------------------------------------
    # Exchange API
    # ------------------------------------------------------------------

    def get_accounts(self) -> list[Account]:
        try:
            headers = build_auth_headers(self.settings.access_key, self.settings.secret_key)
            raw = self._get(_ACCOUNTS_ENDPOINT, headers=headers)
            return [Account.from_json(item) for item in raw]
        except Exception as exc:
            self.logger.debug(f"Private request {_ACCOUNTS_ENDPOINT} failed: {type(exc).__name__}")
            raise AuthenticationError() from None
