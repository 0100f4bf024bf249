"""
Canonical order schemas
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class OrderLine(BaseModel):
    """
    A single product line of an order

    trackingNumber and shippedAt are both null until the line ships.
    """
    sku: str
    quantity: int
    tracking_number: Optional[str] = None
    shipped_at: Optional[datetime] = None
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Order(BaseModel):
    """Order in the portal's stable shape"""
    order_number: str
    user_email: str
    status: str
    shipment_date: Optional[datetime] = None
    created_at: datetime
    order_lines: tuple[OrderLine, ...]
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OrderListResponse(BaseModel):
    """Schema for list of orders response"""
    orders: list[Order]
