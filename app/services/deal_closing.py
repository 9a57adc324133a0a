# app/services/deal_closing.py
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.crud import agent as crud_agent
from app.crud import product as crud_product
from app.services.status_transition import AwardAgentPoints, DecrementInventory, PendingEffect

logger = logging.getLogger(__name__)


class DealClosingManager:
    """
        Executes the side effects of a customer moving into "Closed".

        Responsibilities:
        1. Agent performance (`award_agent_points`):
        - Increments the agent's lifetime `points` and `sales_count`.
        - A missing agent is skipped, not an error.

        2. Inventory (`decrement_inventory`):
        - Takes one unit of stock from the sold property if any is left.
        - Flags the property "Sold" once its quantity is 0.
        - A missing or depleted property is skipped, not an error.

        Each effect runs inside its own SAVEPOINT so a database failure in
        one is rolled back and logged without stopping the others. Nothing
        is committed here: the caller commits together with the customer
        update.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def apply_effects(self, effects: List[PendingEffect]) -> List[PendingEffect]:
        """ Attempt every effect in order, return the ones that took hold """
        applied = []
        for effect in effects:
            try:
                async with self.db.begin_nested():
                    if await self._apply(effect):
                        applied.append(effect)
            except SQLAlchemyError as e:
                logger.warning("Deal-closing effect %r failed and was skipped: %s", effect, e)
        return applied

    async def _apply(self, effect: PendingEffect) -> bool:
        if isinstance(effect, AwardAgentPoints):
            return await self.award_agent_points(effect)
        if isinstance(effect, DecrementInventory):
            return await self.decrement_inventory(effect)
        raise TypeError(f"Unknown deal-closing effect: {effect!r}")

    async def award_agent_points(self, effect: AwardAgentPoints) -> bool:
        awarded = await crud_agent.increment_performance(
            self.db, effect.agent_id, points=effect.points, sales=effect.sales
        )
        if awarded:
            logger.info("Agent %s awarded %s points for a closed deal", effect.agent_id, effect.points)
        else:
            logger.info("Agent %s not found, no points awarded", effect.agent_id)
        return awarded

    async def decrement_inventory(self, effect: DecrementInventory) -> bool:
        decremented = await crud_product.decrement_quantity(self.db, effect.product_id)
        # Also covers a property that was already at 0 but not flagged yet
        sold_out = await crud_product.mark_sold_if_depleted(self.db, effect.product_id)
        if decremented:
            logger.info("Product %s stock decremented%s", effect.product_id, " (now sold out)" if sold_out else "")
        else:
            logger.info("Product %s missing or out of stock, inventory untouched", effect.product_id)
        return decremented
