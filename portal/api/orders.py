"""
Order API endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends

from portal.api.deps import get_optional_identity, get_source, source_error, unauthenticated
from portal.schemas.order import OrderListResponse
from portal.schemas.user import Identity
from portal.services.auth_service import UnauthenticatedError
from portal.services.erp_client import RecordSource, RecordSourceError
from portal.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(source: RecordSource = Depends(get_source)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(source)


@router.get("", response_model=OrderListResponse, summary="Get visible orders")
async def get_orders(
    identity: Optional[Identity] = Depends(get_optional_identity),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve the orders the caller may see

    - Admins get every order
    - Other users get only orders placed under their account email

    Most recently shipped first; orders not yet shipped come last.
    """
    try:
        orders = await service.orders_for_identity(identity)
    except UnauthenticatedError as e:
        raise unauthenticated(str(e))
    except RecordSourceError as e:
        raise source_error(e)
    return OrderListResponse(orders=orders)
