# stock_ledger/domain/services_interfaces/i_investment_repo.py

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Union

from stock_ledger.domain.models.investment import InvestmentRecord


class IInvestmentRepository(ABC):
    """
    'investments' tablosuna erişim için soyut arayüz.

    Amaç:
      - Uygulama & servis katmanı bu interface'e göre programlar.
      - SQLite/başka DB implementasyonları bu interface'i uygular.
    """

    @abstractmethod
    def initialize(self) -> None:
        """
        Tabloyu yoksa oluşturur. Her açılışta çağrılabilir,
        var olan veriye dokunmaz.
        """
        raise NotImplementedError

    # ---------- READ operasyonları ---------- #

    @abstractmethod
    def list_all(self) -> List[InvestmentRecord]:
        """
        Tüm kayıtları ekleme sırasına göre döner.
        Dönen liste bir snapshot'tır; sonraki değişiklikleri görmek için tekrar çağır.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, record_id: int) -> Optional[InvestmentRecord]:
        """
        Tek bir kaydı id üzerinden döner.
        Bulunamazsa None.
        """
        raise NotImplementedError

    # ---------- WRITE operasyonları ---------- #

    @abstractmethod
    def create(
        self,
        symbol: str,
        cost_price: Union[Decimal, int, float],
        shares: int,
    ) -> int:
        """
        Yeni bir yatırım kaydı ekler (current_price boş).
        Dönüş:
          DB'nin atadığı id.
        Hatalı girdide yazmadan önce InvalidRecord fırlatır.
        """
        raise NotImplementedError

    @abstractmethod
    def set_current_price(
        self,
        record_id: int,
        price: Union[Decimal, int, float],
    ) -> None:
        """
        Sadece current_price alanını günceller.
        Kayıt yoksa RecordNotFound fırlatır.
        """
        raise NotImplementedError
