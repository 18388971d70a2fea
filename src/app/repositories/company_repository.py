"""Company Repository Interface

Defines the contract for company settings persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.company import Company


class CompanyRepository(ABC):
    """
    Repository interface for Company persistence
    """

    @abstractmethod
    async def get_by_id(self, company_id: int) -> Optional[Company]:
        """
        Retrieve company by ID

        Args:
            company_id: Company ID

        Returns:
            Company if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, company: Company) -> Company:
        """
        Update an existing company

        Args:
            company: Company entity with updated values

        Returns:
            Updated Company
        """
        pass
