# stock_ledger/application/services/ledger_service.py

from __future__ import annotations

import asyncio
import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Callable, List, Optional, TypeVar, Union

from stock_ledger.domain.errors import StorageUnavailable
from stock_ledger.domain.models.investment import InvestmentRecord
from stock_ledger.domain.services_interfaces.i_investment_repo import IInvestmentRepository
from stock_ledger.domain.validation import validate_current_price

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LedgerService:
    """
    Yatırım defteri ile ilgili işlemleri yöneten application servisi.
    Sunum katmanı sadece bu sınıfla konuşur.

    - Tüm metotlar coroutine; DB çağrıları tek thread'lik bir executor'da
      çalışır, event loop bloklanmaz.
    - create / set_current_price await edilmeden list_all çağrılırsa
      yeni durum görünmeyebilir. Önce await, sonra list_all.
    """

    def __init__(
        self,
        investment_repo: IInvestmentRepository,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        self._repo = investment_repo
        self._on_close = on_close
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="ledger-db")
        self._closed = False

    async def _run(self, func: Callable[..., T], *args) -> T:
        if self._closed:
            raise StorageUnavailable("ledger is closed")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, functools.partial(func, *args))

    # --------- Şema --------- #

    async def initialize(self) -> None:
        await self._run(self._repo.initialize)

    # --------- Görüntüleme --------- #

    async def list_all(self) -> List[InvestmentRecord]:
        records = await self._run(self._repo.list_all)
        logger.debug("Loaded %d investment records", len(records))
        return records

    async def get_by_id(self, record_id: int) -> Optional[InvestmentRecord]:
        return await self._run(self._repo.get_by_id, record_id)

    # --------- Kayıt ekleme / güncelleme --------- #

    async def create(
        self,
        symbol: str,
        cost_price: Union[Decimal, int, float],
        shares: Union[int, float, Decimal],
    ) -> int:
        """
        Yeni bir yatırım ekler, DB'nin verdiği id'yi döner.
        Girdi burada doğrulanır; hatalıysa executor'a hiç gitmeden InvalidRecord.
        """
        record = InvestmentRecord.new(symbol, cost_price, shares)
        return await self._run(
            self._repo.create, record.symbol, record.cost_price, record.shares
        )

    async def set_current_price(
        self,
        record_id: int,
        price: Union[Decimal, int, float],
    ) -> None:
        current_price = validate_current_price(price)
        await self._run(self._repo.set_current_price, record_id, current_price)

    # --------- Kapanış --------- #

    async def close(self) -> None:
        """
        Bekleyen işleri bitirir, executor'ı kapatır ve store handle'ını bırakır.
        """
        if self._on_close is not None:
            await self._run(self._on_close)
            self._on_close = None
        self._executor.shutdown(wait=True)
        self._closed = True

    async def __aenter__(self) -> "LedgerService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
