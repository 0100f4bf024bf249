"""
Schemas package
"""
from portal.schemas.erp import ERPProduct, ERPOrderLine, ERPOrder
from portal.schemas.product import Product, ProductListResponse, ProductDetailResponse
from portal.schemas.order import OrderLine, Order, OrderListResponse
from portal.schemas.user import (
    Identity,
    UserProfile,
    ProfileUpdate,
    PasswordChange,
    UserCreate,
    ProfileResponse,
    UserCreatedResponse,
    UserListResponse,
    MessageResponse
)
from portal.schemas.auth import LoginRequest, RegisterRequest, AuthUser, AuthResponse

__all__ = [
    "ERPProduct",
    "ERPOrderLine",
    "ERPOrder",
    "Product",
    "ProductListResponse",
    "ProductDetailResponse",
    "OrderLine",
    "Order",
    "OrderListResponse",
    "Identity",
    "UserProfile",
    "ProfileUpdate",
    "PasswordChange",
    "UserCreate",
    "ProfileResponse",
    "UserCreatedResponse",
    "UserListResponse",
    "MessageResponse",
    "LoginRequest",
    "RegisterRequest",
    "AuthUser",
    "AuthResponse"
]
