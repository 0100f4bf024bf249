"""
Canonical product schemas
"""
from pydantic import BaseModel, Field, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel
from typing import Optional, Literal, Annotated
from datetime import date
from decimal import Decimal

# Prices are kept as Decimal internally but rendered as JSON numbers
Price = Annotated[
    Decimal,
    Field(ge=0),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class Product(BaseModel):
    """Product in the portal's stable shape"""
    sku: str
    name: str
    retail_price: Price
    wholesale_price_paypal: Price
    wholesale_price_bank_wire: Price
    status: Literal['in_stock', 'presale']
    cut_off_date: Optional[date] = None
    quantity_per_carton: Optional[int] = None
    box_size: Optional[str] = None
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ProductListResponse(BaseModel):
    """Schema for list of products response"""
    products: list[Product]


class ProductDetailResponse(BaseModel):
    """Schema for single product response"""
    product: Product
