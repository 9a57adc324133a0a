from typing import List, Optional
from pydantic import EmailStr, Field
from uuid import UUID
from datetime import datetime

from app.schemas.common import CamelModel


# --- Targets ---
class AgentTarget(CamelModel):
    start_date: str
    end_date: str
    target: float


# --- Requests ---
class AgentCreateRequest(CamelModel):
    name: str
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    commission_rate: float = Field(100, ge=0)
    is_active: bool = Field(True, alias="active")


class AgentUpdateRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    commission_rate: Optional[float] = Field(None, ge=0)
    is_active: Optional[bool] = Field(None, alias="active")


# --- Response ---
class AgentResponse(CamelModel):
    id: UUID = Field(validation_alias="agent_id", serialization_alias="id")
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = Field(alias="active")
    commission_rate: float
    sales_count: int
    points: int
    targets: List[AgentTarget] = []
    created_at: datetime
    updated_at: datetime
