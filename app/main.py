from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from app.routers import agent, customer, product, financials, stats
from app.db.session import async_session, init_db
from app.services.config_store import FinancialConfigStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema + the financial configuration slot
    await init_db()
    async with async_session() as db:
        await FinancialConfigStore(db).get()
    logger.info("Database ready")
    yield


app = FastAPI(
    title="Ridge Park CRM Back Office",
    version="1.0.0",
    lifespan=lifespan,
)

# --- Register Routers ---
app.include_router(agent.router)       # /api/v1/agents/*
app.include_router(customer.router)    # /api/v1/customers/*
app.include_router(product.router)     # /api/v1/products/*
app.include_router(financials.router)  # /api/v1/financials/*
app.include_router(stats.router)       # /api/v1/stats


# --- Root health check ---
@app.get("/")
async def root():
    return {"message": "Ridge Park CRM Backend API is running"}
