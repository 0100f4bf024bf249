"""
Pydantic schemas describing the ERP's native record shapes

These mirror the payloads of the external system of record (snake_case
field names). Unknown fields are dropped on validation so that schema
additions on the ERP side never leak into the canonical records.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, Literal
from datetime import date, datetime
from decimal import Decimal


class ERPProduct(BaseModel):
    """Product record as returned by the ERP"""
    sku: str = Field(..., min_length=1)
    name: str
    retail_price: Decimal = Field(..., ge=0)
    wholesale_price_paypal: Decimal = Field(..., ge=0)
    wholesale_price_bank_wire: Decimal = Field(..., ge=0)
    status: Literal['in_stock', 'presale']
    cut_off_date: Optional[date] = None
    quantity_per_carton: Optional[int] = Field(None, gt=0)
    box_size: Optional[str] = None
    
    model_config = ConfigDict(extra="ignore")


class ERPOrderLine(BaseModel):
    """Order line as returned by the ERP"""
    sku: str
    quantity: int = Field(..., gt=0)
    tracking_number: Optional[str] = None
    shipped_at: Optional[datetime] = None
    
    model_config = ConfigDict(extra="ignore")


class ERPOrder(BaseModel):
    """Order record as returned by the ERP"""
    order_number: str
    user_email: str
    status: str
    shipment_date: Optional[datetime] = None
    created_at: datetime
    order_lines: list[ERPOrderLine] = Field(..., min_length=1)
    
    model_config = ConfigDict(extra="ignore")
