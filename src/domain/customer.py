"""Customer Domain Entity"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, ForeignKey, String
from src.domain.base import BaseModel, IdType, utc_now


class Customer(BaseModel, table=True):
    """
    Customer - Party an invoice is billed to

    Domain Rules:
    - Each customer belongs to exactly one company
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_company_id', 'company_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique customer identifier (auto-increment)"
    )

    company_id: int = Field(
        sa_column=Column(IdType, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Company"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer display name"
    )

    email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    phone: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    address: Optional[str] = Field(default=None, sa_column=Column(String(500), nullable=True))

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Customer creation timestamp"
    )
