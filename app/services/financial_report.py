# app/services/financial_report.py
from typing import List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.crud import agent as crud_agent
from app.crud import customer as crud_customer
from app.crud import product as crud_product
from app.models import Agent, Customer, Product
from app.schemas.common import DateWindow
from app.schemas.financials import (
    AgentCommission,
    ExpenseDetails,
    Expenses,
    FinancialConfigUpdateRequest,
    FinancialConfigValues,
    FinancialReportResponse,
    Income,
    IncomeDetails,
    PropertyCostItem,
    SoldProductItem,
)
from app.services.commission import CommissionCalculator
from app.services.config_store import FinancialConfigStore
from app.services.temporal_query import existence_filter, predates, range_filter

logger = logging.getLogger(__name__)

SERVICE_FEE_RATE = 0.03


def _amount(value) -> str:
    value = value or 0
    return str(int(value)) if float(value).is_integer() else str(value)


async def get_closed_deals(db: AsyncSession, window: DateWindow) -> Tuple[List[Customer], List[Tuple[Customer, Product]]]:
    """
    Closed customers of the window (closing date = updated_at, only bounded
    when both dates are given) and the subset whose property still resolves.
    Dangling property references are skipped.
    """
    closed = await crud_customer.get_closed_customers(
        db, range_filter(Customer.updated_at, window.start_date, window.end_date)
    )
    products = await crud_product.get_products_by_ids(db, (c.property_id for c in closed))

    sales = []
    for customer in closed:
        product = products.get(customer.property_id) if customer.property_id else None
        if product is not None:
            sales.append((customer, product))
    return closed, sales


async def is_pre_system(db: AsyncSession, window: DateWindow) -> bool:
    """ Does the window end before the first agent existed? """
    if not window.end_date:
        return False
    return predates(window.end_date, await crud_agent.get_earliest_created_at(db))


class FinancialReportServices:
    """
        Builds the agency's income statement for a reporting window.

        Revenue and commissions are re-derived from the current customer,
        product and agent rows on every request; nothing is read from a
        ledger. Reports never write (the configuration slot is only peeked)
        and may run concurrently.

        Income
            sales revenue      sum of sold property prices
            service revenue    SERVICE_FEE_RATE of sales revenue
            interest / other   fixed, from configuration

        Expenses
            salaries & wages   base salaries + commissions of the window
            operating costs    rent, utilities, supplies, marketing,
                               insurance, maintenance, misc
            depreciation, taxes
            property costs     VAT + other cost of each sold property

        Pre-system windows (ending before the first agent was created) use
        an all-zero configuration, and collapse to the empty statement when
        no sales are found either.
    """

    @staticmethod
    async def get_config_service(window: DateWindow, db: AsyncSession):
        if await is_pre_system(db, window):
            return FinancialConfigStore.zero()
        return await FinancialConfigStore(db).get()

    @staticmethod
    async def update_config_service(request: FinancialConfigUpdateRequest, db: AsyncSession):
        return await FinancialConfigStore(db).update(request.model_dump(exclude_none=True))

    @staticmethod
    async def generate_report_service(window: DateWindow, db: AsyncSession) -> FinancialReportResponse:
        # 1. --- Configuration (never created by a report) ---
        config = FinancialConfigStore.values_of(await FinancialConfigStore(db).peek())

        # 2. --- Pre-system reset ---
        pre_system = await is_pre_system(db, window)
        if pre_system:
            config = FinancialConfigStore.zero()

        # 3. --- Closed deals of the window ---
        closed, sales = await get_closed_deals(db, window)

        # 4. --- Commissions for agents that existed by the end date ---
        agents = await crud_agent.list_agents(db, existence_filter(Agent.created_at, window.end_date))
        commissions, total_commissions = CommissionCalculator.calculate(agents, closed)

        report = FinancialReportServices.compose_statement(config, sales, commissions, total_commissions)

        if pre_system and report.income.sales_revenue == 0:
            logger.info("Report window ending %s predates the agency, returning empty statement", window.end_date)
            return FinancialReportResponse()

        return report

    @staticmethod
    def compose_statement(
        config: FinancialConfigValues,
        sales: List[Tuple[Customer, Product]],
        commissions: List[AgentCommission],
        total_commissions: float,
    ) -> FinancialReportResponse:
        """ Pure aggregation of the figures gathered for a window """

        sales_revenue = 0.0
        property_costs_total = 0.0
        sold_products = []
        property_costs = []
        for customer, product in sales:
            sales_revenue += product.price
            sold_products.append(SoldProductItem(title=product.title, price=product.price, date=customer.updated_at))

            cost = (product.vat_tax or 0) + (product.other_cost or 0)
            property_costs_total += cost
            property_costs.append(PropertyCostItem(
                title=product.title,
                cost=cost,
                breakdown=f"VAT: {_amount(product.vat_tax)}, Other: {_amount(product.other_cost)}",
            ))

        service_revenue = sales_revenue * SERVICE_FEE_RATE
        total_income = sales_revenue + service_revenue + config.interest_income + config.other_income

        total_salaries = config.base_salaries + total_commissions
        operating_expenses = (
            config.rent + config.utilities + config.supplies + config.marketing
            + config.insurance + config.maintenance + config.misc
        )
        total_expenses = (
            total_salaries + operating_expenses + config.depreciation + config.taxes + property_costs_total
        )

        return FinancialReportResponse(
            income=Income(
                sales_revenue=sales_revenue,
                service_revenue=service_revenue,
                interest_income=config.interest_income,
                other_income=config.other_income,
                total_income=total_income,
                details=IncomeDetails(sold_products=sold_products),
            ),
            expenses=Expenses(
                rent=config.rent,
                salaries_wages=total_salaries,
                utilities=config.utilities,
                supplies_raw_materials=config.supplies,
                depreciation=config.depreciation,
                taxes=config.taxes,
                insurance=config.insurance,
                marketing_advertising=config.marketing,
                maintenance_repairs=config.maintenance,
                miscellaneous_expenses=config.misc,
                property_transaction_costs=property_costs_total,
                total_expenses=total_expenses,
                details=ExpenseDetails(
                    base_salaries=config.base_salaries,
                    commissions=commissions,
                    property_costs=property_costs,
                ),
            ),
            net_profit_loss=total_income - total_expenses,
        )
