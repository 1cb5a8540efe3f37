# stock_ledger/domain/models/investment.py

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from stock_ledger.domain.validation import (
    normalize_symbol,
    validate_cost_price,
    validate_shares,
)


class Direction(str, Enum):
    GAIN = "GAIN"
    LOSS = "LOSS"
    FLAT = "FLAT"


@dataclass(frozen=True)
class InvestmentRecord:
    """
    Tek bir hisse alımını temsil eder.
    DB'deki investments tablosunun domain karşılığıdır.

    Not:
      - symbol, cost_price ve shares oluşturulduktan sonra değişmez.
      - Değişebilen tek alan current_price (kullanıcı girene kadar None).
    """
    id: Optional[int]
    symbol: str                             # Örn: "AAPL"
    cost_price: Decimal                     # alış anındaki birim fiyat
    shares: int                             # lot sayısı
    current_price: Optional[Decimal] = None

    @property
    def has_current_price(self) -> bool:
        return self.current_price is not None

    @classmethod
    def new(
        cls,
        symbol: str,
        cost_price: Union[Decimal, int, float],
        shares: Union[int, float, Decimal],
    ) -> "InvestmentRecord":
        """
        Yeni bir yatırım kaydı oluşturur (id henüz yok, DB insert sonrası gelir).
        Sembol burada normalize edilir, fiyat/lot burada doğrulanır.
        """
        return cls(
            id=None,
            symbol=normalize_symbol(symbol),
            cost_price=validate_cost_price(cost_price),
            shares=validate_shares(shares),
            current_price=None,
        )
