from typing import Annotated

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.ext.asyncio import AsyncSession

from orgchart.core.db.engine import get_db
from orgchart.core.features.monitoring.service import check_db_status

router = APIRouter(
	prefix="/monitoring",
	tags=["monitoring"]
)


@router.get("/health")
async def health_check(session: Annotated[AsyncSession, Depends(get_db)]):
	db_status = await check_db_status(session)

	return {
		"status": "ok" if db_status else "error",
		"details": {
			"database": "up" if db_status else "down",
		}
	}


@router.get("/metrics")
def metrics():
	return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
