"""SQLAlchemy Catalog Lookup Implementation

Reads current product prices from the products table.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.catalog_lookup import CatalogLookup
from src.domain.product import Product


class SqlAlchemyCatalogLookup(CatalogLookup):
    """
    Catalog lookup backed by the products table

    When company_id is given, products of other companies are treated as
    not found.
    """

    def __init__(self, session: AsyncSession, company_id: Optional[int] = None):
        self.session = session
        self.company_id = company_id

    async def price_of(self, product_id: int) -> Optional[Decimal]:
        statement = select(Product.price).where(Product.id == product_id)
        if self.company_id is not None:
            statement = statement.where(Product.company_id == self.company_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
