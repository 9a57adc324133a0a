"""Direct-to-database builders with controllable timestamps."""

from datetime import datetime
from uuid import uuid4

from app.models import Agent, Customer, FinancialConfig, Product, SINGLETON_ID


def _stamped(obj, created_at, updated_at):
    if created_at is not None:
        obj.created_at = created_at
    if updated_at is not None:
        obj.updated_at = updated_at
    elif created_at is not None:
        obj.updated_at = created_at
    return obj


async def add_agent(db, name="Agent", commission_rate=100, created_at=None, **fields) -> Agent:
    agent = _stamped(
        Agent(agent_id=uuid4(), name=name, commission_rate=commission_rate, **fields),
        created_at, None,
    )
    db.add(agent)
    await db.commit()
    return agent


async def add_product(db, title="Villa", price=0, quantity=1, vat_tax=0, other_cost=0,
                      status="Available", created_at=None) -> Product:
    product = _stamped(
        Product(
            product_id=uuid4(), title=title, price=price, quantity=quantity,
            vat_tax=vat_tax, other_cost=other_cost, status=status,
        ),
        created_at, None,
    )
    db.add(product)
    await db.commit()
    return product


async def add_customer(db, status="Lead", agent_id=None, property_id=None,
                       created_at=None, updated_at=None, name="Customer") -> Customer:
    customer = _stamped(
        Customer(
            customer_id=uuid4(), name=name, status=status,
            agent_id=agent_id, property_id=property_id,
        ),
        created_at, updated_at,
    )
    db.add(customer)
    await db.commit()
    return customer


async def add_config(db, **values) -> FinancialConfig:
    config = FinancialConfig(config_id=SINGLETON_ID, **values)
    db.add(config)
    await db.commit()
    return config


def at(year, month, day, hour=12) -> datetime:
    return datetime(year, month, day, hour)
