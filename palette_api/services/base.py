from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from palette_api.core.errors import InternalError

logger = logging.getLogger(__name__)


class BaseService:
    """
    Base class for services. Holds a session for use across multiple repositories.

    Services keep business rules and orchestration, delegating data access
    to repositories. Every public operation runs inside unit_of_work().
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[AsyncSession]:
        """
        Run the enclosed checks and mutations as one transaction.

        Commits on success and rolls back on any exception. Storage failures
        are re-raised as InternalError.
        """
        try:
            yield self.session
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Storage failure, transaction rolled back")
            raise InternalError("Storage operation failed", cause=exc) from exc
        except Exception:
            await self.session.rollback()
            raise
