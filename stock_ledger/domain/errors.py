# stock_ledger/domain/errors.py

from __future__ import annotations

from typing import Optional


class LedgerError(Exception):
    """
    Yatırım defterinin fırlattığı tüm hataların ortak atası.
    Sunum katmanı tek bir except ile hepsini yakalayabilir.
    """


class StorageUnavailable(LedgerError):
    """
    SQLite dosyası açılamadı ya da veritabanı işlem sırasında çalışamaz
    durumda. Çağıran taraf isterse tekrar dener, store kendi içinde denemez.
    """


class InvalidRecord(LedgerError, ValueError):
    """
    Eksik/hatalı girdi (boş sembol, pozitif olmayan fiyat/lot vb.).
    Herhangi bir yazma işleminden ÖNCE fırlatılır.
    """


class RecordNotFound(LedgerError, LookupError):
    """Güncellenmek istenen kayıt yok."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Investment record not found: id={record_id}")
        self.record_id = record_id


class ComputationUndefined(LedgerError):
    """
    Güncel fiyatı girilmemiş bir kayıt için güncel değer, kar/zarar
    veya yön hesaplanmak istendi.
    """

    def __init__(self, record_id: Optional[int], quantity: str) -> None:
        super().__init__(
            f"{quantity} is undefined for investment id={record_id}: current price is not set"
        )
        self.record_id = record_id
        self.quantity = quantity
