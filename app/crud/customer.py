# app/crud/customer.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import delete, func
from typing import List, Optional
from uuid import UUID, uuid4

from app.models.customer import Customer, CLOSED_STATUS


# ---------------- CREATE ----------------
async def create_customer(db: AsyncSession, customer_data: dict) -> Customer:
    customer = Customer(customer_id=uuid4(), **customer_data)
    db.add(customer)
    await db.commit()
    await db.refresh(customer)
    return customer


# ---------------- READ ----------------
async def get_customer(db: AsyncSession, customer_id: UUID) -> Optional[Customer]:
    result = await db.execute(select(Customer).where(Customer.customer_id == customer_id))
    return result.scalar_one_or_none()


async def list_customers(db: AsyncSession, filters: list) -> List[Customer]:
    """ Most recently touched first """
    result = await db.execute(
        select(Customer).where(*filters).order_by(Customer.updated_at.desc())
    )
    return result.scalars().all()


async def count_customers(db: AsyncSession, filters: list) -> int:
    result = await db.execute(select(func.count(Customer.customer_id)).where(*filters))
    return result.scalar() or 0


async def get_closed_customers(db: AsyncSession, filters: list) -> List[Customer]:
    """ Closed deals, ordered by closing date (updated_at) """
    result = await db.execute(
        select(Customer)
        .where(Customer.status == CLOSED_STATUS, *filters)
        .order_by(Customer.updated_at.asc())
    )
    return result.scalars().all()


# ---------------- DELETE ----------------
async def delete_customer(db: AsyncSession, customer_id: UUID) -> bool:
    result = await db.execute(delete(Customer).where(Customer.customer_id == customer_id))
    await db.commit()
    return result.rowcount > 0
