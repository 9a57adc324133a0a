from app.schemas.common import CamelModel


class StatsResponse(CamelModel):
    total_sales: float
    active_listings: int
    total_customers: int
    total_agents: int
