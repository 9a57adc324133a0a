from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import traceback

from app.schemas.common import DateWindow, date_window
from app.schemas.stats import StatsResponse
from app.db.session import get_db
from app.services.stats_services import StatsServices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/stats", tags=["Stats"])


@router.get("", response_model=StatsResponse, summary="Dashboard headline numbers")
async def get_stats(
    window: DateWindow = Depends(date_window),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await StatsServices.get_stats_service(window, db)
    except Exception as e:
        logger.error("Error in get_stats: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")
