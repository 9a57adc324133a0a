from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import traceback

from app.schemas.common import DateWindow, date_window
from app.schemas.financials import FinancialConfigValues, FinancialConfigUpdateRequest, FinancialReportResponse
from app.db.session import get_db
from app.services.financial_report import FinancialReportServices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/financials", tags=["Financials"])


@router.get(
    "/config",
    response_model=FinancialConfigValues,
    summary="Get the financial configuration",
    description="Returns the fixed income/expense configuration, creating it on first access. "
                "All zero when endDate predates the first agent.",
)
async def get_financial_config(
    window: DateWindow = Depends(date_window),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await FinancialReportServices.get_config_service(window, db)
    except Exception as e:
        logger.error("Error in get_financial_config: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.put("/config", response_model=FinancialConfigValues, summary="Update the financial configuration")
async def update_financial_config(
    request: FinancialConfigUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        return await FinancialReportServices.update_config_service(request, db)
    except Exception as e:
        logger.error("Error in update_financial_config: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get(
    "/report",
    response_model=FinancialReportResponse,
    summary="Income statement for a window",
    description="Profit and loss between startDate and endDate (inclusive calendar days).",
)
async def get_financial_report(
    window: DateWindow = Depends(date_window),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await FinancialReportServices.generate_report_service(window, db)
    except Exception as e:
        logger.error("Error in get_financial_report: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")
