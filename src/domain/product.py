"""Product Domain Entity

Catalog entries whose current price seeds new invoice lines.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, CheckConstraint, ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, IdType, utc_now


class Product(BaseModel, table=True):
    """
    Product - Sellable catalog item

    Domain Rules:
    - price is the current unit price, copied onto invoice lines when selected
    - Changing price never rewrites existing invoice lines
    """

    __tablename__ = "products"
    __table_args__ = (
        Index('ix_products_company_id', 'company_id'),
        CheckConstraint('price >= 0', name='price_non_negative'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique product identifier (auto-increment)"
    )

    company_id: int = Field(
        sa_column=Column(IdType, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Company"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Product name printed on invoices"
    )

    sku: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))

    price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Current unit price (precision: 12,2)"
    )

    stock: int = Field(default=0, sa_column=Column(Integer, nullable=False, default=0))

    category: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Product creation timestamp"
    )
