from typing import List, Optional
from pydantic import Field
from datetime import datetime

from app.schemas.common import CamelModel


# --- Singleton configuration ---
class FinancialConfigValues(CamelModel):
    interest_income: float = 0
    other_income: float = 0
    rent: float = 0
    utilities: float = 0
    supplies: float = 0
    marketing: float = 0
    insurance: float = 0
    maintenance: float = 0
    misc: float = 0
    base_salaries: float = 0
    depreciation: float = 0
    taxes: float = 0


# Unknown keys are ignored, omitted keys keep their stored value
class FinancialConfigUpdateRequest(CamelModel):
    interest_income: Optional[float] = None
    other_income: Optional[float] = None
    rent: Optional[float] = None
    utilities: Optional[float] = None
    supplies: Optional[float] = None
    marketing: Optional[float] = None
    insurance: Optional[float] = None
    maintenance: Optional[float] = None
    misc: Optional[float] = None
    base_salaries: Optional[float] = None
    depreciation: Optional[float] = None
    taxes: Optional[float] = None


# --- Income statement: income side ---
class SoldProductItem(CamelModel):
    title: Optional[str] = None
    price: float
    date: datetime


class IncomeDetails(CamelModel):
    sold_products: List[SoldProductItem] = []


class Income(CamelModel):
    sales_revenue: float = 0
    service_revenue: float = 0
    interest_income: float = 0
    other_income: float = 0
    total_income: float = 0
    details: IncomeDetails = Field(default_factory=IncomeDetails)


# --- Income statement: expense side ---
class AgentCommission(CamelModel):
    agent_name: str
    amount: float
    points: int


class PropertyCostItem(CamelModel):
    title: Optional[str] = None
    cost: float
    breakdown: str


class ExpenseDetails(CamelModel):
    base_salaries: float = 0
    commissions: List[AgentCommission] = []
    property_costs: List[PropertyCostItem] = []


class Expenses(CamelModel):
    rent: float = 0
    salaries_wages: float = 0
    utilities: float = 0
    supplies_raw_materials: float = 0
    depreciation: float = 0
    taxes: float = 0
    insurance: float = 0
    marketing_advertising: float = 0
    maintenance_repairs: float = 0
    miscellaneous_expenses: float = 0
    property_transaction_costs: float = 0
    total_expenses: float = 0
    details: ExpenseDetails = Field(default_factory=ExpenseDetails)


# --- Full response model ---
class FinancialReportResponse(CamelModel):
    income: Income = Field(default_factory=Income)
    expenses: Expenses = Field(default_factory=Expenses)
    net_profit_loss: float = 0
