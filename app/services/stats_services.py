# app/services/stats_services.py
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import agent as crud_agent
from app.crud import customer as crud_customer
from app.crud import product as crud_product
from app.models import Agent, Customer, Product
from app.schemas.common import DateWindow
from app.schemas.stats import StatsResponse
from app.services.financial_report import get_closed_deals
from app.services.temporal_query import existence_filter, window_filter


class StatsServices:

    @staticmethod
    async def get_stats_service(window: DateWindow, db: AsyncSession) -> StatsResponse:
        """
        Headline numbers for the dashboard.

        - totalAgents: agents that existed by the end date.
        - activeListings: existing products marked Available or still in stock.
        - totalCustomers: customers created in the window (or by the end date).
        - totalSales: price of every resolvable property sold in the window,
          same revenue rule as the financial report.
        """
        total_agents = await crud_agent.count_agents(db, existence_filter(Agent.created_at, window.end_date))
        active_listings = await crud_product.count_active_listings(
            db, existence_filter(Product.created_at, window.end_date)
        )
        total_customers = await crud_customer.count_customers(
            db, window_filter(Customer.created_at, window.start_date, window.end_date)
        )

        _, sales = await get_closed_deals(db, window)
        total_sales = sum(product.price for _, product in sales)

        return StatsResponse(
            total_sales=total_sales,
            active_listings=active_listings,
            total_customers=total_customers,
            total_agents=total_agents,
        )
