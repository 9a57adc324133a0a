from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from redis.asyncio import Redis
from redis.exceptions import LockError
import logging
import os

from app.crud import customer as crud_customer
from app.db.redis_client import customer_status_lock, release_lock
from app.models import Customer
from app.schemas.customer import CustomerCreateRequest, CustomerUpdateRequest
from app.schemas.common import DateWindow
from app.services.deal_closing import DealClosingManager
from app.services.status_transition import apply_status_transition
from app.services.temporal_query import window_filter

logger = logging.getLogger(__name__)

CUSTOMER_LOCK_TIMEOUT = float(os.getenv("CUSTOMER_LOCK_TIMEOUT", "10"))
CUSTOMER_LOCK_TTL = float(os.getenv("CUSTOMER_LOCK_TTL", "60"))


class CustomerServices:

    @staticmethod
    async def create_customer_service(request: CustomerCreateRequest, db: AsyncSession) -> Customer:
        return await crud_customer.create_customer(db, request.model_dump())

    @staticmethod
    async def list_customers_service(window: DateWindow, db: AsyncSession):
        filters = window_filter(Customer.created_at, window.start_date, window.end_date)
        return await crud_customer.list_customers(db, filters)

    @staticmethod
    async def update_customer_service(
        customer_id: UUID,
        request: CustomerUpdateRequest,
        db: AsyncSession,
        redis: Redis,
    ) -> Customer:
        """
        Update a customer and run the deal-closing protocol when the update
        moves it into "Closed".

        Workflow:
        1. Take the per-customer Redis lock so the read of the old status and
           the write of the new one cannot interleave with another request.
        2. Fetch the customer (old status, owning agent).
        3. Ask the transition policy which effects are owed.
        4. Apply those effects (agent points, inventory) best-effort.
        5. Copy every field present in the request onto the customer.
        6. Commit effects and customer update together.

        Args:
            customer_id (UUID): Customer being updated.
            request (CustomerUpdateRequest): Partial body; only fields sent are applied.
            db (AsyncSession): Active SQLAlchemy async database session.
            redis (Redis): Redis client used for the status lock.

        Returns:
            Customer: The refreshed customer row.

        Raises:
            LookupError: If the customer does not exist.
            redis.exceptions.LockError: If another update of the same customer
                holds the lock for longer than CUSTOMER_LOCK_TIMEOUT.
        """
        changes = request.model_dump(exclude_unset=True)
        if changes.get("status") is None:
            changes.pop("status", None)  # status is never cleared

        # 1. --- Serialize updates per customer ---
        lock = customer_status_lock(redis, customer_id, ttl=CUSTOMER_LOCK_TTL, wait=CUSTOMER_LOCK_TIMEOUT)
        if not await lock.acquire():
            raise LockError("Customer is being updated by another request")

        try:
            # 2. --- Fetch Customer (read before write) ---
            customer = await crud_customer.get_customer(db, customer_id)
            if not customer:
                raise LookupError("Customer not found")

            # 3. --- Which side effects does this transition owe? ---
            effects = apply_status_transition(
                old_status=customer.status,
                new_status=changes.get("status"),
                agent_id=customer.agent_id,
                property_id=changes.get("property_id"),
            )

            # 4. --- Points & inventory ---
            if effects:
                logger.info("Customer %s closed, applying %d effect(s)", customer_id, len(effects))
                await DealClosingManager(db).apply_effects(effects)

            # 5. --- Apply the request body ---
            for field, value in changes.items():
                setattr(customer, field, value)

            await db.commit()
            await db.refresh(customer)
        finally:
            await release_lock(lock)

        return customer

    @staticmethod
    async def delete_customer_service(customer_id: UUID, db: AsyncSession) -> bool:
        if not await crud_customer.delete_customer(db, customer_id):
            raise LookupError("Customer not found")
        return True
