# stock_ledger/application/services/valuation_service.py

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from stock_ledger.domain.errors import ComputationUndefined
from stock_ledger.domain.models.investment import Direction, InvestmentRecord

CENT = Decimal("0.01")
RATE_STEP = Decimal("0.0001")


def round_currency(value: Decimal) -> Decimal:
    """Para tutarlarını ekranda göstermek için 2 haneye yuvarlar (half-up)."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _require_current_price(record: InvestmentRecord, quantity: str) -> Decimal:
    if record.current_price is None:
        raise ComputationUndefined(record.id, quantity)
    return record.current_price


# ---------- Temel hesaplar ---------- #

def cost_basis(record: InvestmentRecord, precise: bool = False) -> Decimal:
    """
    Maliyet = cost_price * shares.
    precise=True yuvarlanmamış değeri verir.
    """
    value = record.cost_price * Decimal(record.shares)
    return value if precise else round_currency(value)


def current_value(record: InvestmentRecord, precise: bool = False) -> Decimal:
    """Güncel değer = current_price * shares."""
    price = _require_current_price(record, "current value")
    value = price * Decimal(record.shares)
    return value if precise else round_currency(value)


def gain_loss(record: InvestmentRecord, precise: bool = False) -> Decimal:
    """
    Gerçekleşmemiş kar/zarar = (current_price - cost_price) * shares.
    """
    price = _require_current_price(record, "gain/loss")
    value = (price - record.cost_price) * Decimal(record.shares)
    return value if precise else round_currency(value)


def direction(record: InvestmentRecord) -> Direction:
    """
    Kazanç/kayıp yönü. Yuvarlanmamış fiyatlar karşılaştırılır,
    aksi halde 0.004'lük farklar FLAT görünürdü.
    """
    price = _require_current_price(record, "direction")
    if price > record.cost_price:
        return Direction.GAIN
    if price < record.cost_price:
        return Direction.LOSS
    return Direction.FLAT


def return_rate(record: InvestmentRecord, precise: bool = False) -> Decimal:
    """
    Basit getiri oranı = gain_loss / cost_basis
    (örn. Decimal("0.1017") = %10.17)
    """
    rate = gain_loss(record, precise=True) / cost_basis(record, precise=True)
    return rate if precise else rate.quantize(RATE_STEP, rounding=ROUND_HALF_UP)


# ---------- UI için snapshot / dto ---------- #

@dataclass(frozen=True)
class InvestmentValuation:
    """
    Tek bir kaydın ekranda gösterilecek özeti.
    Güncel fiyat yoksa fiyata bağlı alanlar None.
    """
    record: InvestmentRecord
    cost_basis: Decimal
    current_value: Optional[Decimal] = None
    gain_loss: Optional[Decimal] = None
    return_rate: Optional[Decimal] = None
    direction: Optional[Direction] = None


def value_investment(record: InvestmentRecord) -> InvestmentValuation:
    if record.current_price is None:
        return InvestmentValuation(record=record, cost_basis=cost_basis(record))

    return InvestmentValuation(
        record=record,
        cost_basis=cost_basis(record),
        current_value=current_value(record),
        gain_loss=gain_loss(record),
        return_rate=return_rate(record),
        direction=direction(record),
    )


@dataclass(frozen=True)
class LedgerSummary:
    """
    Tüm defterin özeti.

    - total_cost_basis: bütün kayıtların maliyeti
    - priced_*: sadece güncel fiyatı girilmiş kayıtlar üzerinden
    """
    record_count: int
    priced_count: int
    total_cost_basis: Decimal
    priced_cost_basis: Decimal
    total_current_value: Decimal
    total_gain_loss: Decimal
    direction: Optional[Direction]

    @property
    def unpriced_count(self) -> int:
        return self.record_count - self.priced_count


def summarize(records: Iterable[InvestmentRecord]) -> LedgerSummary:
    record_count = 0
    priced_count = 0
    total_cost = Decimal("0")
    priced_cost = Decimal("0")
    total_value = Decimal("0")

    for record in records:
        record_count += 1
        basis = cost_basis(record, precise=True)
        total_cost += basis
        if record.current_price is None:
            continue
        priced_count += 1
        priced_cost += basis
        total_value += current_value(record, precise=True)

    total_gain = total_value - priced_cost

    summary_direction: Optional[Direction] = None
    if priced_count:
        if total_gain > 0:
            summary_direction = Direction.GAIN
        elif total_gain < 0:
            summary_direction = Direction.LOSS
        else:
            summary_direction = Direction.FLAT

    return LedgerSummary(
        record_count=record_count,
        priced_count=priced_count,
        total_cost_basis=round_currency(total_cost),
        priced_cost_basis=round_currency(priced_cost),
        total_current_value=round_currency(total_value),
        total_gain_loss=round_currency(total_gain),
        direction=summary_direction,
    )
