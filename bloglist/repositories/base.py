"""Shared SQLAlchemy plumbing for the blog and user repositories."""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class BaseRepository[ModelT: SQLModel]:
    """
    Lookups, deletion and flushing for one table.

    Writes are only flushed. The request-scoped session from
    :func:`bloglist.db.get_session` commits when the request ends, and
    :meth:`commit` is there for the points where a change must be durable
    before the next step runs.
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def _id_column(self) -> Any:
        return getattr(self.model, self.id_field)

    async def _first_where(self, column: Any, value: object) -> ModelT | None:
        result = await self.session.execute(select(self.model).where(column == value))
        return result.scalar_one_or_none()

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        return await self._first_where(self._id_column, record_id)

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> list[ModelT]:
        """Rows whose primary key is in ``record_ids``, in no particular order."""
        if not record_ids:
            return []
        result = await self.session.execute(select(self.model).where(self._id_column.in_(record_ids)))
        return list(result.scalars().all())

    async def get_all(self) -> list[ModelT]:
        """Every row, oldest first."""
        created_at = self.model.created_at  # type: ignore[attr-defined]
        result = await self.session.execute(select(self.model).order_by(created_at))
        return list(result.scalars().all())

    async def delete(self, record_id: UUID) -> bool:
        """Delete a row; False when there was nothing to delete."""
        record = await self.get_by_id(record_id)
        if record is None:
            return False
        await self.session.delete(record)
        await self.session.flush()
        return True

    async def commit(self) -> None:
        """
        Commit the session now.

        Raises:
            DatabaseError: If the commit fails; the session is rolled back first
        """
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception("Commit failed", model=self.model.__name__)
            raise DatabaseError(detail=f"Failed to commit {self.model.__name__} changes") from e

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Stage ``record``, flush it and reload server-side defaults.

        Raises:
            DuplicateEntryError: On a unique constraint violation
            DatabaseError: On any other integrity violation
            DatabaseConnectionError: If the flush cannot reach the database
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            reason = str(e.orig or e)
            if "unique" in reason.lower() or "duplicate" in reason.lower():
                raise DuplicateEntryError(detail=reason) from e
            raise DatabaseError(detail=f"Database integrity error: {reason}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save record: {e}") from e
        return record
