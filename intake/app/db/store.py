from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from intake.app.core.errors import StorageError
from intake.app.core.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class StatementResult:
    inserted_id: int


class ReservationStore(Protocol):
    async def execute(self, statement: str, parameters: Mapping[str, Any]) -> StatementResult:
        """Run one insert statement and return the identifier of the new row."""
        ...


class SqlReservationStore:
    """Execute insert statements through a SQLAlchemy async session factory.

    Statements must end in ``RETURNING id`` so the new row's identifier can be
    read back on every backend.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]):
        self._sessionmaker = sessionmaker

    async def execute(self, statement: str, parameters: Mapping[str, Any]) -> StatementResult:
        try:
            async with self._sessionmaker() as session:
                async with session.begin():
                    result = await session.execute(text(statement), dict(parameters))
                    inserted_id = result.scalar_one()
        except (SQLAlchemyError, OSError) as exc:
            # asyncpg raises OSError directly when the server is unreachable
            logger.error(
                "Statement execution failed",
                exc_info=exc,
                extra={"extra_fields": {"error_type": type(exc).__name__}},
            )
            raise StorageError(str(getattr(exc, "orig", exc))) from exc

        return StatementResult(inserted_id=int(inserted_id))
