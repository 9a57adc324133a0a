# models/agent.py
from sqlalchemy import Column, String, Boolean, Integer, Float, JSON, Uuid, CheckConstraint, Index
from sqlalchemy.dialects.postgresql import JSONB
from uuid import uuid4
from app.db.base_class import Base

class Agent(Base):
    __tablename__ = "agents"

    agent_id = Column(Uuid, primary_key=True, default=uuid4)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=True)
    phone = Column(String(20), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    commission_rate = Column(Float, nullable=False, default=100)  # paid per closed deal
    sales_count = Column(Integer, nullable=False, default=0)
    points = Column(Integer, nullable=False, default=0)
    # [{"startDate": ..., "endDate": ..., "target": ...}], unique by (startDate, endDate)
    targets = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)

    __table_args__ = (
        CheckConstraint("commission_rate >= 0", name="chk_agent_commission_rate"),
        CheckConstraint("points >= 0 AND sales_count >= 0", name="chk_agent_counters"),
        Index("idx_agents_created_at", "created_at"),
    )
