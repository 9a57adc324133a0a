from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.crud import agent as crud_agent
from app.models import Agent
from app.schemas.agent import AgentCreateRequest, AgentTarget, AgentUpdateRequest
from app.schemas.common import DateWindow
from app.services.temporal_query import existence_filter

logger = logging.getLogger(__name__)


def upsert_target(targets: List[dict], new_target: AgentTarget) -> List[dict]:
    """
    Targets are unique per (startDate, endDate): replace the matching
    period's target in place, otherwise append a new period.
    """
    entry = new_target.model_dump(by_alias=True)
    updated = [dict(t) for t in targets or []]
    for t in updated:
        if t.get("startDate") == entry["startDate"] and t.get("endDate") == entry["endDate"]:
            t["target"] = entry["target"]
            return updated
    updated.append(entry)
    return updated


class AgentServices:

    @staticmethod
    async def create_agent_service(request: AgentCreateRequest, db: AsyncSession) -> Agent:
        return await crud_agent.create_agent(db, request.model_dump())

    @staticmethod
    async def list_agents_service(window: DateWindow, db: AsyncSession):
        return await crud_agent.list_agents(db, existence_filter(Agent.created_at, window.end_date))

    @staticmethod
    async def update_agent_service(agent_id: UUID, request: AgentUpdateRequest, db: AsyncSession) -> Agent:
        agent = await crud_agent.get_agent(db, agent_id)
        if not agent:
            raise LookupError("Agent not found")

        for field, value in request.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(agent, field, value)

        await db.commit()
        await db.refresh(agent)
        return agent

    @staticmethod
    async def set_target_service(agent_id: UUID, request: AgentTarget, db: AsyncSession) -> Agent:
        agent = await crud_agent.get_agent(db, agent_id)
        if not agent:
            raise LookupError("Agent not found")

        # Assign a new list so the JSON column is flagged as changed
        agent.targets = upsert_target(agent.targets, request)
        await db.commit()
        await db.refresh(agent)
        logger.info("Agent %s target set for %s..%s", agent_id, request.start_date, request.end_date)
        return agent

    @staticmethod
    async def delete_agent_service(agent_id: UUID, db: AsyncSession) -> bool:
        if not await crud_agent.delete_agent(db, agent_id):
            raise LookupError("Agent not found")
        return True
