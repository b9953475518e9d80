"""Unit of Work — all-or-nothing boundary around a group of writes.

Invariants:
    - Clean exit commits; ANY exception (including asyncio.CancelledError)
      rolls back before it propagates
    - The exception that caused the rollback is re-raised unchanged in kind,
      except IntegrityError which becomes ConflictError
    - A unit of work is single-use

Design Decisions:
    - Wraps the request-scoped AsyncSession instead of opening a new one:
      reads done inside the unit see its own uncommitted writes
    - begin() is explicit when the session is idle so the whole unit runs
      in one database transaction
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.errors import ConflictError, ErrorContext

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Explicit begin/commit/abort around a session."""

    def __init__(self, session: AsyncSession, operation: str):
        self.session = session
        self.operation = operation
        self._finished = False

    async def begin(self) -> None:
        if not self.session.in_transaction():
            await self.session.begin()

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.error(
                f"Integrity error committing {self.operation}: {e}",
                extra={"operation": self.operation, "error_code": "CONFLICT"},
            )
            raise ConflictError(
                "Integrity constraint violated",
                ErrorContext(operation=self.operation),
            ) from e
        finally:
            self._finished = True

    async def abort(self) -> None:
        self._finished = True
        await self.session.rollback()

    async def __aenter__(self) -> "UnitOfWork":
        if self._finished:
            raise RuntimeError(f"Unit of work '{self.operation}' already finished")
        await self.begin()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            await self.commit()
            return False

        await self.abort()
        logger.warning(
            f"Rolled back {self.operation}: {exc_type.__name__}",
            extra={"operation": self.operation},
        )
        if isinstance(exc, IntegrityError):
            raise ConflictError(
                "Integrity constraint violated",
                ErrorContext(operation=self.operation),
            ) from exc
        return False
