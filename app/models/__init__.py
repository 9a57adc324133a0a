from .agent import Agent
from .customer import Customer, LEAD_STATUS, CLOSED_STATUS
from .product import Product, AVAILABLE_STATUS, SOLD_STATUS
from .financial_config import FinancialConfig, SINGLETON_ID

__all__ = [
    "Agent", "Customer", "Product", "FinancialConfig",
    "LEAD_STATUS", "CLOSED_STATUS", "AVAILABLE_STATUS", "SOLD_STATUS", "SINGLETON_ID",
]
