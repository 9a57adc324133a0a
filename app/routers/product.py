from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import logging
import traceback

from app.schemas.common import DateWindow, SuccessResponse, date_window
from app.schemas.product import ProductCreateRequest, ProductUpdateRequest, ProductResponse
from app.db.session import get_db
from app.services.media_store import MediaStore, get_media_store
from app.services.product_services import ProductServices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/products", tags=["Products"])


@router.get("", response_model=List[ProductResponse], summary="List products that existed by endDate")
async def list_products(
    window: DateWindow = Depends(date_window),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await ProductServices.list_products_service(window, db)
    except Exception as e:
        logger.error("Error in list_products: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post("", response_model=ProductResponse, status_code=201, summary="Create a product")
async def create_product(
    request: ProductCreateRequest,
    db: AsyncSession = Depends(get_db),
    media: MediaStore = Depends(get_media_store),
):
    try:
        return await ProductServices.create_product_service(request, db, media)
    except Exception as e:
        logger.error("Error in create_product: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    description="Partial update. A quantity of 0 marks the listing Sold; restocking a Sold listing marks it Available.",
)
async def update_product(
    product_id: UUID,
    request: ProductUpdateRequest,
    db: AsyncSession = Depends(get_db),
    media: MediaStore = Depends(get_media_store),
):
    try:
        return await ProductServices.update_product_service(product_id, request, db, media)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error("Error in update_product: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.delete("/{product_id}", response_model=SuccessResponse, summary="Delete a product")
async def delete_product(
    product_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    try:
        await ProductServices.delete_product_service(product_id, db)
        return SuccessResponse()
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error("Error in delete_product: %s\n%s", e, traceback.format_exc())
        raise HTTPException(status_code=500, detail="Internal Server Error")
