# models/customer.py
from sqlalchemy import Column, String, Float, Uuid, Index
from uuid import uuid4
from app.db.base_class import Base

LEAD_STATUS = "Lead"
CLOSED_STATUS = "Closed"

class Customer(Base):
    __tablename__ = "customers"

    customer_id = Column(Uuid, primary_key=True, default=uuid4)
    name = Column(String(200), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    status = Column(String(30), nullable=False, default=LEAD_STATUS)  # free-form; only "Closed" has side effects
    budget = Column(Float, nullable=True)

    # By-value references, dangling ids are tolerated
    agent_id = Column(Uuid, nullable=True)
    property_id = Column(Uuid, nullable=True)

    __table_args__ = (
        Index("idx_customers_status_updated", "status", "updated_at"),
        Index("idx_customers_agent", "agent_id"),
        Index("idx_customers_created_at", "created_at"),
    )
