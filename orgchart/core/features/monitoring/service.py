import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


async def check_db_status(session: AsyncSession) -> bool:
	try:
		await session.execute(text("SELECT 1"))
		return True
	except (SQLAlchemyError, OSError) as e:
		logger.error(f"Database health check failed: {e}")
		return False
