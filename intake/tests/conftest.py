import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from intake.app.db.store import StatementResult
from intake.app.db.tables import metadata
from intake.app.services.records import RawReservation
from intake.app.services.reservations import ReservationService


class FakeStore:
    """In-memory stand-in for the row store that records every statement."""

    def __init__(self, inserted_id: int = 1349, error: Exception | None = None):
        self.inserted_id = inserted_id
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    async def execute(self, statement, parameters):
        self.calls.append((statement, dict(parameters)))
        if self.error is not None:
            raise self.error
        return StatementResult(inserted_id=self.inserted_id)


@pytest.fixture
def make_store():
    """Build a FakeStore, e.g. ``make_store(error=StorageError(...))``."""
    return FakeStore


@pytest.fixture
def fake_store(make_store):
    return make_store()


@pytest.fixture
def service(fake_store):
    return ReservationService(fake_store)


@pytest.fixture
def raw_reservation():
    return RawReservation(
        date="2017/06/10",
        time="06:02 AM",
        party=4,
        name="Family",
        email="username@example.com",
    )


@pytest_asyncio.fixture
async def async_engine():
    """In-memory SQLite engine shared across connections."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
