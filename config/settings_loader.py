# config/settings_loader.py

from __future__ import annotations
import logging
import os
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv
from stock_ledger.infrastructure.db.sqlite_connection import SQLiteConfig


@dataclass
class AppSettings:
    db: SQLiteConfig = field(default_factory=SQLiteConfig)
    log_level: str = "INFO"
    market_data_timeout: int = 10


def load_settings() -> AppSettings:
    """
    .env dosyasını okuyarak AppSettings nesnesi oluşturur.
    """
    load_dotenv()  # .env otomatik yukarıya doğru taranır (Geliştirme ortamı için)

    # Exe modunda (Nuitka/PyInstaller) .env dosyasını temp klasöründen oku (Gömülü dosya)
    if getattr(sys, 'frozen', False):
        # Bu dosya: config/settings_loader.py. İki üst klasör root'tur.
        base_path = os.path.dirname(os.path.dirname(__file__))
        env_path = os.path.join(base_path, '.env')

        if os.path.exists(env_path):
            load_dotenv(env_path)

    db_path = os.getenv("LEDGER_DB_PATH", "stock.db")
    db_timeout = float(os.getenv("LEDGER_DB_TIMEOUT", "5.0"))

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    market_data_timeout = int(os.getenv("MARKET_DATA_TIMEOUT", "10"))

    return AppSettings(
        db=SQLiteConfig(db_path=db_path, timeout=db_timeout),
        log_level=log_level,
        market_data_timeout=market_data_timeout,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
