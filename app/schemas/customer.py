from typing import Optional
from pydantic import Field
from uuid import UUID
from datetime import datetime

from app.schemas.common import CamelModel


class CustomerCreateRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: str = "Lead"
    budget: Optional[float] = None
    agent_id: Optional[UUID] = None
    property_id: Optional[UUID] = None


# Only fields present in the body are applied
class CustomerUpdateRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    budget: Optional[float] = None
    agent_id: Optional[UUID] = None
    property_id: Optional[UUID] = None


class CustomerResponse(CamelModel):
    id: UUID = Field(validation_alias="customer_id", serialization_alias="id")
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: str
    budget: Optional[float] = None
    agent_id: Optional[UUID] = None
    property_id: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime
