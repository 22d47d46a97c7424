"""Coin Snapshot Job

Builds the data behind the "Past ROI" coin grid from the Upbit API.

The job:
1. Reads configuration from config/coin_snapshot_config.json
2. Fetches the current ticker of every configured market in one request
3. For each market, fetches daily candles, saves chart data to CSV and
   computes what a fixed investment made N days ago would be worth today
4. Saves the ROI summary to CSV and, if enabled, logs account balances

Designed to run daily via scheduled task/cron, from the repository root:

    python -m src.jobs.coin_snapshot_job
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import pandas as pd

from src.core.config import UpbitSettings
from src.core.models import DayCandle, HistoricalInvestment, Ticker
from src.exchanges.errors import AuthenticationError, TransportError
from src.exchanges.upbit import UpbitClient
from src.helpers.data_helper import save_df_to_csv, to_chart_frame
from src.helpers.financial_helper import calculate_historical_investment
from src.helpers.format_helper import format_change_rate, format_price
from src.utils.logger import setup_logger

# Resolve project root (two levels up from this file: src/jobs/ -> repo root)
ROOT = Path(__file__).resolve().parents[2]

ROI_COLUMNS = [
    "market", "days_ago", "entry_time", "entry_price",
    "current_price", "invested_amount", "current_value", "roi",
]


# ---------------------------------------------------------------------------
# STAGE 1: INIT
# ---------------------------------------------------------------------------

def load_config(config_path: str | Path) -> dict:
    """Load configuration from JSON file.

    Args:
        config_path: Path to config JSON file

    Returns:
        Dictionary with configuration parameters
    """
    with open(config_path, 'r') as f:
        return json.load(f)


def init(config_path: Optional[Path] = None) -> tuple[dict, logging.Logger]:
    config_path = config_path or ROOT / "config" / "coin_snapshot_config.json"
    config = load_config(config_path)

    log_path = ROOT / config["data_paths"]["log_path"] / "coin_snapshot_job.log"
    log_level = getattr(logging, config.get("log_level", "INFO").upper(), logging.INFO)

    logger = setup_logger("coin_snapshot_job", log_path, level=log_level)
    logger.info("========== Coin Snapshot Job starting ==========")
    logger.info("========== Stage 1 ==========")
    logger.info(f"Config loaded from: {config_path}")
    logger.info(
        f"Markets: {', '.join(config['markets'])} | "
        f"Lookbacks: {config['roi']['lookback_days']}d"
    )

    return config, logger


# ---------------------------------------------------------------------------
# STAGE 2: TICKERS
# ---------------------------------------------------------------------------

def fetch_tickers(
    config: dict,
    client: UpbitClient,
    logger: logging.Logger,
) -> dict[str, Ticker]:
    """Fetch the current ticker of every configured market in one request."""
    logger.info("========== Stage 2 ==========")

    tickers = client.get_ticker(config["markets"])
    for ticker in tickers:
        logger.info(
            f"[{ticker.market}] price={format_price(ticker.trade_price)} "
            f"change={format_change_rate(ticker.signed_change_rate)}"
        )

    logger.info(f"{len(tickers)}/{len(config['markets'])} tickers fetched.")
    return {ticker.market: ticker for ticker in tickers}


# ---------------------------------------------------------------------------
# STAGE 3: HISTORY & ROI
# ---------------------------------------------------------------------------

def build_investments(
    market: str,
    candles: list[DayCandle],
    lookback_days: list[int],
    invested_amount: float,
    logger: logging.Logger,
) -> list[HistoricalInvestment]:
    investments = []
    for days_ago in lookback_days:
        investment = calculate_historical_investment(market, candles, days_ago, invested_amount)
        if investment is None:
            logger.warning(f"[{market}] Not enough history for a {days_ago}d lookback.")
            continue
        logger.info(
            f"[{market}] {days_ago}d ago: {format_price(investment.invested_amount)} -> "
            f"{format_price(investment.current_value)} ({format_change_rate(investment.roi)})"
        )
        investments.append(investment)
    return investments


def process_history(
    config: dict,
    client: UpbitClient,
    logger: logging.Logger,
    root: Path = ROOT,
) -> list[HistoricalInvestment]:
    """Fetch daily candles per market, save chart CSVs and compute ROI rows."""
    logger.info("========== Stage 3 ==========")

    chart_dir = root / config["data_paths"]["chart_path"]
    candle_count = config.get("candle_count", 200)
    converting_unit = config.get("converting_price_unit")
    lookback_days = config["roi"]["lookback_days"]
    invested_amount = config["roi"]["invested_amount"]

    investments = []
    for market in config["markets"]:
        try:
            candles = client.get_day_candles(market, candle_count, converting_unit)
        except TransportError as e:
            logger.error(f"[{market}] Failed to fetch day candles: {e}")
            continue

        if not candles:
            logger.warning(f"[{market}] No candles returned.")
            continue

        save_df_to_csv(to_chart_frame(candles), str(chart_dir / f"chart_{market}.csv"))
        logger.debug(f"[{market}] Saved {len(candles)} chart points.")

        investments.extend(
            build_investments(market, candles, lookback_days, invested_amount, logger)
        )

    return investments


# ---------------------------------------------------------------------------
# STAGE 4: SUMMARY
# ---------------------------------------------------------------------------

def save_summary(
    config: dict,
    investments: list[HistoricalInvestment],
    logger: logging.Logger,
    root: Path = ROOT,
) -> Path:
    logger.info("========== Stage 4 ==========")
    summary_path = root / config["data_paths"]["summary_path"]
    df = pd.DataFrame([asdict(i) for i in investments], columns=ROI_COLUMNS)
    save_df_to_csv(df, str(summary_path))
    logger.info(f"Saved {len(df)} ROI rows to {summary_path}")
    return summary_path


def log_accounts(client: UpbitClient, logger: logging.Logger) -> None:
    try:
        accounts = client.get_accounts()
    except AuthenticationError as e:
        logger.warning(str(e))
        return

    for account in accounts:
        logger.info(
            f"[{account.currency}] balance={account.balance} locked={account.locked} "
            f"avg_buy_price={format_price(account.avg_buy_price)} {account.unit_currency}"
        )


def run_coin_snapshot_job(
    config: dict,
    client: UpbitClient,
    logger: logging.Logger,
    root: Path = ROOT,
) -> Path:
    fetch_tickers(config, client, logger)
    investments = process_history(config, client, logger, root)
    summary_path = save_summary(config, investments, logger, root)

    if config.get("include_accounts", False):
        log_accounts(client, logger)

    logger.info("========== Coin Snapshot Job finished ==========")
    return summary_path


# ---------------------------------------------------------------------------
# MAIN ENTRY POINT
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    config, logger = init()
    client = UpbitClient(UpbitSettings(), logger=logger)

    try:
        run_coin_snapshot_job(config, client, logger)
    except TransportError as e:
        logger.error(f"Coin snapshot job aborted: {e}")
        raise SystemExit(1)
