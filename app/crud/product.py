# app/crud/product.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import update, delete, func, or_
from typing import Dict, Iterable, List, Optional
from uuid import UUID, uuid4

from app.models.product import Product, AVAILABLE_STATUS, SOLD_STATUS


# ---------------- CREATE ----------------
async def create_product(db: AsyncSession, product_data: dict) -> Product:
    product = Product(product_id=uuid4(), **product_data)
    db.add(product)
    await db.commit()
    await db.refresh(product)
    return product


# ---------------- READ ----------------
async def get_product(db: AsyncSession, product_id: UUID) -> Optional[Product]:
    result = await db.execute(select(Product).where(Product.product_id == product_id))
    return result.scalar_one_or_none()


async def get_products_by_ids(db: AsyncSession, product_ids: Iterable[UUID]) -> Dict[UUID, Product]:
    ids = {pid for pid in product_ids if pid}
    if not ids:
        return {}
    result = await db.execute(select(Product).where(Product.product_id.in_(ids)))
    return {p.product_id: p for p in result.scalars().all()}


async def list_products(db: AsyncSession, filters: list) -> List[Product]:
    """ Newest listings first """
    result = await db.execute(
        select(Product).where(*filters).order_by(Product.created_at.desc())
    )
    return result.scalars().all()


async def count_active_listings(db: AsyncSession, filters: list) -> int:
    """ Listings that are marked Available or still have stock """
    result = await db.execute(
        select(func.count(Product.product_id)).where(
            *filters,
            or_(Product.status == AVAILABLE_STATUS, Product.quantity > 0),
        )
    )
    return result.scalar() or 0


# ---------------- UPDATE ----------------
async def decrement_quantity(db: AsyncSession, product_id: UUID) -> bool:
    """
    Take one unit out of stock. The quantity > 0 guard keeps the
    decrement atomic and the quantity non-negative.
    Returns False when nothing was decremented (missing or depleted).
    """
    result = await db.execute(
        update(Product)
        .where(Product.product_id == product_id, Product.quantity > 0)
        .values(quantity=Product.quantity - 1)
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount > 0


async def mark_sold_if_depleted(db: AsyncSession, product_id: UUID) -> bool:
    result = await db.execute(
        update(Product)
        .where(Product.product_id == product_id, Product.quantity == 0)
        .values(status=SOLD_STATUS)
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount > 0


# ---------------- DELETE ----------------
async def delete_product(db: AsyncSession, product_id: UUID) -> bool:
    result = await db.execute(delete(Product).where(Product.product_id == product_id))
    await db.commit()
    return result.rowcount > 0
