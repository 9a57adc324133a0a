from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import product as crud_product
from app.models import Product, AVAILABLE_STATUS, SOLD_STATUS
from app.schemas.common import DateWindow
from app.schemas.product import ProductCreateRequest, ProductUpdateRequest
from app.services.media_store import MediaStore
from app.services.temporal_query import existence_filter


def resolve_listing_status(changes: dict) -> dict:
    """
    Keep status in line with a quantity sent in an update:
    - quantity 0 always means "Sold";
    - a positive quantity re-opens the listing only when the body says "Sold".
    """
    quantity = changes.get("quantity")
    if isinstance(quantity, int):
        if quantity == 0:
            changes["status"] = SOLD_STATUS
        elif changes.get("status") == SOLD_STATUS and quantity > 0:
            changes["status"] = AVAILABLE_STATUS
    return changes


class ProductServices:

    @staticmethod
    async def create_product_service(request: ProductCreateRequest, db: AsyncSession, media: MediaStore) -> Product:
        product_data = request.model_dump()

        # Handle Image Uploads
        if product_data["images"]:
            product_data["images"] = await media.upload_all(product_data["images"])

        return await crud_product.create_product(db, product_data)

    @staticmethod
    async def list_products_service(window: DateWindow, db: AsyncSession):
        return await crud_product.list_products(db, existence_filter(Product.created_at, window.end_date))

    @staticmethod
    async def update_product_service(
        product_id: UUID,
        request: ProductUpdateRequest,
        db: AsyncSession,
        media: MediaStore,
    ) -> Product:
        product = await crud_product.get_product(db, product_id)
        if not product:
            raise LookupError("Product not found")

        # 1. --- Auto status update based on quantity ---
        changes = resolve_listing_status(request.model_dump(exclude_unset=True, exclude_none=True))

        # 2. --- Handle new images (base64 strings) ---
        if changes.get("images") is not None:
            changes["images"] = await media.upload_each(changes["images"])

        for field, value in changes.items():
            setattr(product, field, value)

        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def delete_product_service(product_id: UUID, db: AsyncSession) -> bool:
        if not await crud_product.delete_product(db, product_id):
            raise LookupError("Product not found")
        return True
