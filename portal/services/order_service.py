"""
Order Service - Visibility & Ordering Policy
"""
import logging
from functools import cmp_to_key
from typing import Iterable, List, Optional

from portal.schemas.order import Order
from portal.schemas.user import Identity
from portal.services.auth_service import UnauthenticatedError
from portal.services.erp_client import RecordSource
from portal.services.normalization import normalize_order

logger = logging.getLogger(__name__)


def compare_by_shipment_date(a: Order, b: Order) -> int:
    """
    Three-way comparator: most recent shipment first, unshipped orders last

    Returns 0 for two unshipped orders and for equal shipment dates so a
    stable sort keeps their original relative order.
    """
    if a.shipment_date is None and b.shipment_date is None:
        return 0
    if a.shipment_date is None:
        return 1
    if b.shipment_date is None:
        return -1
    if a.shipment_date > b.shipment_date:
        return -1
    if a.shipment_date < b.shipment_date:
        return 1
    return 0


def apply_ordering(orders: Iterable[Order]) -> List[Order]:
    """Sort orders for presentation; sorted() is stable so ties keep input order"""
    return sorted(orders, key=cmp_to_key(compare_by_shipment_date))


class OrderService:
    """Service layer deciding which orders a caller sees and in what order"""

    def __init__(self, source: RecordSource):
        self.source = source

    async def orders_for_user(self, email: str) -> List[Order]:
        """
        Get the orders owned by one account

        Filtering by email happens in the record source; this layer only
        normalizes and orders what it gets back.
        """
        records = await self.source.fetch_orders_for_account(email)
        return apply_ordering(normalize_order(r) for r in records)

    async def orders_for_admin(self) -> List[Order]:
        """Get every order in the ERP"""
        records = await self.source.fetch_all_orders()
        return apply_ordering(normalize_order(r) for r in records)

    async def orders_for_identity(self, identity: Optional[Identity]) -> List[Order]:
        """
        Route a caller to the admin or own-orders path

        Raises:
            UnauthenticatedError: If no identity was resolved for the request
        """
        if identity is None:
            raise UnauthenticatedError("User not authenticated")

        if identity.is_admin:
            logger.info("Admin %s listing all orders", identity.id)
            return await self.orders_for_admin()
        return await self.orders_for_user(identity.email)
