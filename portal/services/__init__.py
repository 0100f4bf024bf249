"""
Services package
"""
from portal.services.erp_client import (
    RecordSource,
    MockRecordSource,
    HttpRecordSource,
    RecordSourceError,
    RecordSourceUnavailableError,
    MalformedRecordError,
    get_record_source
)
from portal.services.order_service import OrderService, apply_ordering
from portal.services.product_service import ProductService
from portal.services.auth_service import AuthService
from portal.services.user_service import UserService

__all__ = [
    "RecordSource",
    "MockRecordSource",
    "HttpRecordSource",
    "RecordSourceError",
    "RecordSourceUnavailableError",
    "MalformedRecordError",
    "get_record_source",
    "OrderService",
    "apply_ordering",
    "ProductService",
    "AuthService",
    "UserService"
]
