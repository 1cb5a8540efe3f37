# stock_ledger/domain/validation.py

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import Union

from .errors import InvalidRecord

PriceInput = Union[Decimal, int, float]

# SQLite INTEGER (signed 64-bit) sınırı
MAX_SHARES = 2 ** 63 - 1


def _to_decimal(value: PriceInput, field_name: str) -> Decimal:
    """
    int/float/Decimal değeri güvenli şekilde Decimal'e çevirir.
    float'lar str() üzerinden geçer, böylece 165.25 -> Decimal("165.25") olur.
    """
    # bool, int'in alt sınıfı; True'nun fiyat olarak geçmesini istemiyoruz.
    if isinstance(value, bool):
        raise InvalidRecord(f"{field_name} must be a number, got bool")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, Real):
        result = Decimal(str(value))
    else:
        raise InvalidRecord(f"{field_name} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidRecord(f"{field_name} must be finite, got {value!r}")
    return result


def _to_price(value: PriceInput, field_name: str) -> Decimal:
    """
    Fiyatlar DB'de REAL olarak tutuluyor; float'a sığmayan değerler
    (1e400 -> inf, 1e-400 -> 0.0) burada reddedilir.
    Dönen değer, DB'den geri okunacak değerin aynısıdır.
    """
    result = _to_decimal(value, field_name)
    stored = Decimal(str(float(result)))

    if not stored.is_finite():
        raise InvalidRecord(f"{field_name} is too large to store, got {value!r}")
    if stored == 0 and result != 0:
        raise InvalidRecord(f"{field_name} is too small to store, got {value!r}")
    return stored


def normalize_symbol(raw: str) -> str:
    """
    Sembolü kırpar ve büyük harfe çevirir: " aapl " -> "AAPL".
    Sadece kayıt oluşturulurken bir kez çağrılır.
    """
    if not isinstance(raw, str):
        raise InvalidRecord(f"symbol must be a string, got {type(raw).__name__}")

    symbol = raw.strip().upper()
    if not symbol:
        raise InvalidRecord("symbol must not be empty")
    return symbol


def validate_cost_price(value: PriceInput) -> Decimal:
    price = _to_price(value, "cost_price")
    if price <= 0:
        raise InvalidRecord(f"cost_price must be positive, got {value!r}")
    return price


def validate_shares(value: Union[int, float, Decimal]) -> int:
    """
    Lot sayısı pozitif tam sayı olmalı (kesirli hisse yok).
    2.0 gibi tam değerli float'lar kabul edilir, 2.5 reddedilir.
    """
    if isinstance(value, bool):
        raise InvalidRecord("shares must be an integer, got bool")

    if isinstance(value, int):
        shares = value
    elif isinstance(value, (float, Decimal)):
        as_decimal = _to_decimal(value, "shares")
        if as_decimal != as_decimal.to_integral_value():
            raise InvalidRecord(f"shares must be a whole number, got {value!r}")
        shares = int(as_decimal)
    else:
        raise InvalidRecord(f"shares must be an integer, got {type(value).__name__}")

    if shares <= 0:
        raise InvalidRecord(f"shares must be positive, got {value!r}")
    if shares > MAX_SHARES:
        raise InvalidRecord(f"shares is too large to store, got {value!r}")
    return shares


def validate_current_price(value: PriceInput) -> Decimal:
    """Güncel fiyat 0 olabilir, negatif olamaz."""
    price = _to_price(value, "current_price")
    if price < 0:
        raise InvalidRecord(f"current_price must not be negative, got {value!r}")
    return price


# ---------- Input alanlarından gelen ham metin ---------- #

def _parse_decimal_text(text: str, field_name: str) -> Decimal:
    if text is None or not str(text).strip():
        raise InvalidRecord(f"{field_name} is required")

    try:
        return Decimal(str(text).strip())
    except InvalidOperation:
        raise InvalidRecord(f"{field_name} is not a number: {text!r}") from None


def parse_price_text(text: str, allow_zero: bool = False) -> Decimal:
    """
    Kullanıcının yazdığı fiyat metnini Decimal'e çevirir.

    allow_zero=False -> alış fiyatı (cost_price) kuralları
    allow_zero=True  -> güncel fiyat (current_price) kuralları
    """
    field_name = "current_price" if allow_zero else "cost_price"
    value = _parse_decimal_text(text, field_name)
    if allow_zero:
        return validate_current_price(value)
    return validate_cost_price(value)


def parse_shares_text(text: str) -> int:
    return validate_shares(_parse_decimal_text(text, "shares"))
