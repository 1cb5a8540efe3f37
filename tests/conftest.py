import pytest
import pytest_asyncio

from stock_ledger.application.services.ledger_service import LedgerService
from stock_ledger.infrastructure.db.investment_repository import SQLiteInvestmentRepository
from stock_ledger.infrastructure.db.sqlite_connection import SQLiteConfig, SQLiteConnectionProvider


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "stock.db")


@pytest.fixture
def provider(db_path):
    cp = SQLiteConnectionProvider(SQLiteConfig(db_path=db_path))
    yield cp
    cp.close()


@pytest.fixture
def repo(provider):
    """Şeması hazır, boş repository."""
    repository = SQLiteInvestmentRepository(provider)
    repository.initialize()
    return repository


@pytest_asyncio.fixture
async def ledger(db_path):
    cp = SQLiteConnectionProvider(SQLiteConfig(db_path=db_path))
    service = LedgerService(SQLiteInvestmentRepository(cp), on_close=cp.close)
    await service.initialize()
    yield service
    await service.close()
