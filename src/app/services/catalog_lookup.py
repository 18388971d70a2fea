"""Catalog Lookup Interface

Resolves a product reference to its current unit price.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional


class CatalogLookup(ABC):
    """
    Read-only price source used when a product is picked for an invoice line
    """

    @abstractmethod
    async def price_of(self, product_id: int) -> Optional[Decimal]:
        """
        Get the current unit price of a product

        Args:
            product_id: Product identifier

        Returns:
            Unit price if the product exists, None otherwise
        """
        pass
