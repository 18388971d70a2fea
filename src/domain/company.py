"""Company Domain Entity

Holds the business details printed on invoices and the tax settings
applied when invoices are composed.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, Boolean, CheckConstraint, Numeric, String
from src.domain.base import BaseModel, IdType, utc_now


class Company(BaseModel, table=True):
    """
    Company - Business details and tax settings of the invoicing company

    Domain Rules:
    - gst_rate is a percentage (18.00 means 18%)
    - default_discount_rate is a percentage, only used when enable_discount is set
    - Rates must be non-negative
    """

    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint('gst_rate >= 0', name='gst_rate_non_negative'),
        CheckConstraint('default_discount_rate >= 0', name='discount_rate_non_negative'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique company identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Company name shown on invoices"
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(String(500), nullable=True),
        description="Postal address"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Contact phone number"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Contact email"
    )

    gst_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="GST registration number"
    )

    gst_rate: Decimal = Field(
        default=Decimal("18.00"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=Decimal("18.00")),
        description="GST rate as a percentage (precision: 5,2)"
    )

    enable_discount: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
        description="Whether discounts may be applied"
    )

    default_discount_rate: Decimal = Field(
        default=Decimal("5.00"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=Decimal("5.00")),
        description="Default discount as a percentage (precision: 5,2)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Company creation timestamp"
    )

    @property
    def tax_rate(self) -> Decimal:
        """GST rate as a fraction (0.18 for 18%)"""
        return Decimal(self.gst_rate) / Decimal("100")

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Sharma Traders",
                "address": "12 MG Road, Pune",
                "phone": "+91 20 5550 1234",
                "email": "accounts@sharmatraders.in",
                "gst_number": "27AAACS1234A1Z5",
                "gst_rate": "18.00",
                "enable_discount": True,
                "default_discount_rate": "5.00",
                "created_at": "2024-01-01T00:00:00Z"
            }
        }
