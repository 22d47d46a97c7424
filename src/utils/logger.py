import io
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from datetime import datetime
from typing import Optional

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


class MillisecondFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        ct = datetime.fromtimestamp(record.created)
        return ct.strftime(datefmt or "%Y-%m-%d %H:%M:%S") + f".{int(record.msecs):03d}"


def setup_logger(name: str, log_path: Optional[str | Path] = None, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Jobs may be re-initialised in the same process
    if logger.handlers:
        return logger

    formatter = MillisecondFormatter(LOG_FORMAT)

    # Console handler: UTF-8 so Korean market names print on any console
    if hasattr(sys.stdout, "buffer"):
        stream = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
    else:
        stream = sys.stdout
    ch = logging.StreamHandler(stream)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5, encoding="utf-8")
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
