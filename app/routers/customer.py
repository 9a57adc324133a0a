from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from redis.asyncio import Redis
from redis.exceptions import LockError
from uuid import UUID
import logging
import traceback

from app.schemas.common import DateWindow, SuccessResponse, date_window
from app.schemas.customer import CustomerCreateRequest, CustomerUpdateRequest, CustomerResponse
from app.db.session import get_db
from app.db.redis_client import get_redis
from app.services.customer_services import CustomerServices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/customers", tags=["Customers"])


@router.get("", response_model=List[CustomerResponse], summary="List customers")
async def list_customers(
    window: DateWindow = Depends(date_window),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await CustomerServices.list_customers_service(window, db)
    except Exception as e:
        logger.error("Error in list_customers: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post("", response_model=CustomerResponse, status_code=201, summary="Create a customer")
async def create_customer(
    request: CustomerCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        return await CustomerServices.create_customer_service(request, db)
    except Exception as e:
        logger.error("Error in create_customer: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Update a customer",
    description="Updates a customer. Moving it into \"Closed\" awards the agent 10 points and one sale "
                "and takes one unit of the sold property out of stock.",
)
async def update_customer(
    customer_id: UUID,
    request: CustomerUpdateRequest,
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
):
    try:
        return await CustomerServices.update_customer_service(customer_id, request, db, redis)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LockError:
        raise HTTPException(status_code=409, detail="Customer is being updated by another request")
    except Exception as e:
        logger.error("Error in update_customer: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.delete("/{customer_id}", response_model=SuccessResponse, summary="Delete a customer")
async def delete_customer(
    customer_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    try:
        await CustomerServices.delete_customer_service(customer_id, db)
        return SuccessResponse()
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error("Error in delete_customer: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")
