from typing import List, Optional
from pydantic import Field
from uuid import UUID
from datetime import datetime

from app.schemas.common import CamelModel


class ProductCreateRequest(CamelModel):
    title: Optional[str] = None
    address: Optional[str] = None
    price: float = Field(0, ge=0)
    type: str = "House"
    status: str = "Available"
    quantity: int = Field(1, ge=0)
    agent_id: Optional[UUID] = None
    images: List[str] = []  # URLs or base64 data URIs
    vat_tax: float = 0
    other_cost: float = 0


class ProductUpdateRequest(CamelModel):
    title: Optional[str] = None
    address: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    type: Optional[str] = None
    status: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    agent_id: Optional[UUID] = None
    images: Optional[List[str]] = None
    vat_tax: Optional[float] = None
    other_cost: Optional[float] = None


class ProductResponse(CamelModel):
    id: UUID = Field(validation_alias="product_id", serialization_alias="id")
    title: Optional[str] = None
    address: Optional[str] = None
    price: float
    type: str
    status: str
    quantity: int
    agent_id: Optional[UUID] = None
    images: List[Optional[str]] = []  # failed uploads stay as null
    vat_tax: float
    other_cost: float
    created_at: datetime
    updated_at: datetime
