"""
Normalization of ERP records into the portal's canonical shape

Pure mapping functions: renames fields, coerces types and pins timestamps
to UTC. No derived fields are computed and order lines keep the order the
ERP sent them in.
"""
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from portal.schemas.erp import ERPProduct, ERPOrderLine, ERPOrder
from portal.schemas.product import Product
from portal.schemas.order import OrderLine, Order
from portal.services.erp_client import MalformedRecordError


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive ERP timestamps as UTC so all dates compare cleanly"""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _validate(schema, source: Any, kind: str):
    if isinstance(source, schema):
        return source
    try:
        return schema.model_validate(source)
    except ValidationError as e:
        key = None
        if isinstance(source, Mapping):
            key = source.get("order_number") or source.get("sku")
        raise MalformedRecordError(
            f"Malformed ERP {kind} record {key!r}: {e.error_count()} validation error(s)"
        ) from e


def normalize_product(source: Any) -> Product:
    """Map an ERP product record to a canonical Product"""
    erp_product = _validate(ERPProduct, source, "product")
    return Product(
        sku=erp_product.sku,
        name=erp_product.name,
        retail_price=erp_product.retail_price,
        wholesale_price_paypal=erp_product.wholesale_price_paypal,
        wholesale_price_bank_wire=erp_product.wholesale_price_bank_wire,
        status=erp_product.status,
        cut_off_date=erp_product.cut_off_date,
        quantity_per_carton=erp_product.quantity_per_carton,
        box_size=erp_product.box_size,
    )


def normalize_order_line(source: Any) -> OrderLine:
    """Map an ERP order line to a canonical OrderLine"""
    erp_line = _validate(ERPOrderLine, source, "order line")
    return OrderLine(
        sku=erp_line.sku,
        quantity=erp_line.quantity,
        tracking_number=erp_line.tracking_number,
        shipped_at=_as_utc(erp_line.shipped_at),
    )


def normalize_order(source: Any) -> Order:
    """Map an ERP order record, including all of its lines, to a canonical Order"""
    erp_order = _validate(ERPOrder, source, "order")
    return Order(
        order_number=erp_order.order_number,
        user_email=erp_order.user_email,
        status=erp_order.status,
        shipment_date=_as_utc(erp_order.shipment_date),
        created_at=_as_utc(erp_order.created_at),
        order_lines=tuple(normalize_order_line(line) for line in erp_order.order_lines),
    )
