"""Invoice Domain Entity

Invoice header row. Line items live in invoice_items and are owned by
the header.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, Date, ForeignKey, Numeric, String
from src.domain.base import BaseModel, IdType, utc_now


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class Invoice(BaseModel, table=True):
    """
    Invoice - Header of a customer invoice

    Domain Rules:
    - invoice_number must be unique
    - total_amount = subtotal + gst_amount (both rounded to 2 decimals)
    - subtotal is never stored; it is total_amount - gst_amount
    - Line items must be deleted before the header
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_company_id', 'company_id'),
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_invoice_number', 'invoice_number', unique=True),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    company_id: int = Field(
        sa_column=Column(IdType, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Company"
    )

    customer_id: int = Field(
        sa_column=Column(IdType, ForeignKey("customers.id"), nullable=False),
        description="Foreign key to Customer"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Unique invoice number (e.g., INV1718035200123)"
    )

    issue_date: date = Field(
        sa_column=Column("date", Date, nullable=False),
        description="Invoice date"
    )

    total_amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Grand total including GST (precision: 12,2)"
    )

    gst_amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="GST charged (precision: 12,2)"
    )

    discount_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=Decimal("0.00")),
        description="Discount applied (precision: 12,2)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status (pending, paid, overdue)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Invoice creation timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "company_id": 1,
                "customer_id": 7,
                "invoice_number": "INV1718035200123",
                "issue_date": "2024-06-10",
                "total_amount": "295.00",
                "gst_amount": "45.00",
                "discount_amount": "0.00",
                "status": "pending",
                "created_at": "2024-06-10T16:00:00Z"
            }
        }
