# models/financial_config.py
from sqlalchemy import Column, Integer, Float, CheckConstraint
from app.db.base_class import Base

SINGLETON_ID = 1

class FinancialConfig(Base):
    __tablename__ = "financial_config"

    # Single-slot table: the only legal row is SINGLETON_ID
    config_id = Column(Integer, primary_key=True, default=SINGLETON_ID, autoincrement=False)

    # Fixed income
    interest_income = Column(Float, nullable=False, default=0)
    other_income = Column(Float, nullable=False, default=0)

    # Fixed expenses
    rent = Column(Float, nullable=False, default=0)
    utilities = Column(Float, nullable=False, default=0)
    supplies = Column(Float, nullable=False, default=0)
    marketing = Column(Float, nullable=False, default=0)
    insurance = Column(Float, nullable=False, default=0)
    maintenance = Column(Float, nullable=False, default=0)
    misc = Column(Float, nullable=False, default=0)
    base_salaries = Column(Float, nullable=False, default=0)
    depreciation = Column(Float, nullable=False, default=0)
    taxes = Column(Float, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint(f"config_id = {SINGLETON_ID}", name="chk_financial_config_singleton"),
    )
