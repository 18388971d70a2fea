"""SQLAlchemy Company Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.company_repository import CompanyRepository
from src.domain.company import Company


class SqlAlchemyCompanyRepository(CompanyRepository):
    """
    SQLAlchemy implementation of CompanyRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: int) -> Optional[Company]:
        statement = select(Company).where(Company.id == company_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, company: Company) -> Company:
        """
        Update an existing company

        Args:
            company: Company entity with updated values

        Returns:
            Updated Company
        """
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company
