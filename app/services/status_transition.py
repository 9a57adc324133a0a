# app/services/status_transition.py
from dataclasses import dataclass
from typing import List, Optional, Union
from uuid import UUID

from app.models.customer import CLOSED_STATUS

POINTS_PER_DEAL = 10


@dataclass(frozen=True)
class AwardAgentPoints:
    agent_id: UUID
    points: int = POINTS_PER_DEAL
    sales: int = 1


@dataclass(frozen=True)
class DecrementInventory:
    product_id: UUID


PendingEffect = Union[AwardAgentPoints, DecrementInventory]


def is_closing(old_status: Optional[str], new_status: Optional[str]) -> bool:
    return new_status == CLOSED_STATUS and old_status != CLOSED_STATUS


def apply_status_transition(
    old_status: Optional[str],
    new_status: Optional[str],
    agent_id: Optional[UUID] = None,
    property_id: Optional[UUID] = None,
) -> List[PendingEffect]:
    """
    Effects owed for moving a customer from `old_status` to `new_status`.

    Only a move *into* "Closed" has effects: the owning agent earns
    POINTS_PER_DEAL points and one sale, and the sold property loses one
    unit of stock. Re-saving a closed customer and moving out of
    "Closed" produce nothing (there is no reversal).
    """
    if not is_closing(old_status, new_status):
        return []

    effects: List[PendingEffect] = []
    if agent_id:
        effects.append(AwardAgentPoints(agent_id=agent_id))
    if property_id:
        effects.append(DecrementInventory(product_id=property_id))
    return effects
