from .company_repository import SqlAlchemyCompanyRepository

__all__ = [
    "SqlAlchemyCompanyRepository",
]
