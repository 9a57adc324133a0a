# models/product.py
from sqlalchemy import Column, String, Integer, Float, JSON, Uuid, CheckConstraint, Index
from sqlalchemy.dialects.postgresql import JSONB
from uuid import uuid4
from app.db.base_class import Base

AVAILABLE_STATUS = "Available"
SOLD_STATUS = "Sold"

class Product(Base):
    __tablename__ = "products"

    product_id = Column(Uuid, primary_key=True, default=uuid4)
    title = Column(String(255), nullable=True)
    address = Column(String(500), nullable=True)
    price = Column(Float, nullable=False, default=0)
    type = Column(String(50), nullable=False, default="House")
    status = Column(String(30), nullable=False, default=AVAILABLE_STATUS)
    quantity = Column(Integer, nullable=False, default=1)
    agent_id = Column(Uuid, nullable=True)
    images = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)

    # Transaction costs charged against the sale
    vat_tax = Column(Float, nullable=False, default=0)
    other_cost = Column(Float, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="chk_product_quantity"),
        Index("idx_products_status", "status"),
        Index("idx_products_created_at", "created_at"),
    )
