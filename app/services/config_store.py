# app/services/config_store.py
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
import logging

from app.models import FinancialConfig, SINGLETON_ID
from app.schemas.financials import FinancialConfigValues

logger = logging.getLogger(__name__)


class FinancialConfigStore:
    """
        Single-slot store for the agency's fixed income and expense lines.

        Exactly one row (config_id == SINGLETON_ID) ever exists. It is
        created lazily with every amount at 0 and afterwards only updated.

        Methods:
            peek(): Read the slot without creating it (None if empty).
            get(): Read the slot, creating the default row on first access.
            update(values): Upsert the slot with the given field overrides.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def peek(self) -> Optional[FinancialConfig]:
        result = await self.db.execute(
            select(FinancialConfig).where(FinancialConfig.config_id == SINGLETON_ID)
        )
        return result.scalar_one_or_none()

    async def get(self) -> FinancialConfig:
        config = await self.peek()
        if config:
            return config
        return await self._create()

    async def update(self, values: dict) -> FinancialConfig:
        config = await self.get()
        for field, value in values.items():
            if value is not None and hasattr(FinancialConfig, field):
                setattr(config, field, value)
        await self.db.commit()
        await self.db.refresh(config)
        logger.info("Financial configuration updated: %s", sorted(values))
        return config

    async def _create(self) -> FinancialConfig:
        config = FinancialConfig(config_id=SINGLETON_ID)
        self.db.add(config)
        try:
            await self.db.commit()
        except IntegrityError:
            # Another request created the slot first
            await self.db.rollback()
            return await self.peek()
        await self.db.refresh(config)
        logger.info("Financial configuration created with default values")
        return config

    @staticmethod
    def zero() -> FinancialConfigValues:
        return FinancialConfigValues()

    @staticmethod
    def values_of(config: Optional[FinancialConfig]) -> FinancialConfigValues:
        """ Plain values of a stored row, all-zero when the slot is empty """
        if config is None:
            return FinancialConfigValues()
        return FinancialConfigValues.model_validate(config)
