# db/base_class.py
from sqlalchemy.orm import as_declarative, declared_attr
from datetime import datetime
from sqlalchemy import Column, DateTime

@as_declarative()
class Base:
    id: any
    __name__: str

    # Generate __tablename__ automatically if not provided
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()

    # Timestamps for all tables; updated_at doubles as the deal-closing date for customers
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
