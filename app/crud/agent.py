# app/crud/agent.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import update, delete, func
from typing import List, Optional
from uuid import UUID, uuid4
from datetime import datetime

from app.models import Agent


# ---------------- CREATE ----------------
async def create_agent(db: AsyncSession, agent_data: dict) -> Agent:
    agent = Agent(agent_id=uuid4(), **agent_data)
    db.add(agent)
    await db.commit()
    await db.refresh(agent)
    return agent


# ---------------- READ ----------------
async def get_agent(db: AsyncSession, agent_id: UUID) -> Optional[Agent]:
    result = await db.execute(select(Agent).where(Agent.agent_id == agent_id))
    return result.scalar_one_or_none()


async def list_agents(db: AsyncSession, filters: list) -> List[Agent]:
    """ Agents matching the given predicates, oldest first """
    result = await db.execute(
        select(Agent).where(*filters).order_by(Agent.created_at.asc())
    )
    return result.scalars().all()


async def count_agents(db: AsyncSession, filters: list) -> int:
    result = await db.execute(select(func.count(Agent.agent_id)).where(*filters))
    return result.scalar() or 0


async def get_earliest_created_at(db: AsyncSession) -> Optional[datetime]:
    """ Creation time of the first agent, i.e. when the agency came into existence """
    result = await db.execute(select(func.min(Agent.created_at)))
    return result.scalar()


# ---------------- UPDATE ----------------
async def increment_performance(db: AsyncSession, agent_id: UUID, points: int, sales: int) -> bool:
    """
    In-database increment of the lifetime counters.
    Returns False when the agent does not exist.
    """
    result = await db.execute(
        update(Agent)
        .where(Agent.agent_id == agent_id)
        .values(points=Agent.points + points, sales_count=Agent.sales_count + sales)
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount > 0


# ---------------- DELETE ----------------
async def delete_agent(db: AsyncSession, agent_id: UUID) -> bool:
    result = await db.execute(delete(Agent).where(Agent.agent_id == agent_id))
    await db.commit()
    return result.rowcount > 0
