"""
Product Service - catalog reads from the ERP
"""
from typing import List, Optional

from portal.schemas.product import Product
from portal.services.erp_client import RecordSource
from portal.services.normalization import normalize_product


class ProductService:
    """Service layer for catalog lookups"""

    def __init__(self, source: RecordSource):
        self.source = source

    async def list_products(self, sku: Optional[str] = None) -> List[Product]:
        """Get the catalog, optionally narrowed to SKUs containing `sku`"""
        records = await self.source.fetch_products(sku)
        return [normalize_product(r) for r in records]

    async def get_product_by_sku(self, sku: str) -> Optional[Product]:
        """Get product by exact SKU"""
        record = await self.source.fetch_product_by_sku(sku)
        if record is None:
            return None
        return normalize_product(record)
