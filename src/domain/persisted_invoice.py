"""Typed records exchanged with the ledger store

Rows coming back from storage are mapped into these models before they
reach the composer or the document emitter.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.invoice import InvoiceStatus


class InvoiceHeader(BaseModel):
    """Header fields written when an invoice is submitted"""

    company_id: int
    customer_id: int
    invoice_number: str
    issue_date: date
    total_amount: Decimal
    gst_amount: Decimal
    discount_amount: Decimal = Decimal("0.00")
    status: InvoiceStatus = InvoiceStatus.PENDING


class NewLineItem(BaseModel):
    """Line item written after its header"""

    product_id: int
    quantity: int = Field(..., ge=1)
    price: Decimal = Field(..., ge=0)
    amount: Decimal


class PersistedLineItem(BaseModel):
    id: int
    invoice_id: int
    product_id: int
    product_name: Optional[str] = None
    quantity: int
    price: Decimal
    amount: Decimal


class PersistedInvoice(BaseModel):
    """
    Invoice as stored, with related names resolved

    customer_name and product_name are None when the relation does not resolve.
    """

    id: int
    company_id: int
    customer_id: int
    customer_name: Optional[str] = None
    invoice_number: str
    issue_date: date
    total_amount: Decimal
    gst_amount: Decimal
    discount_amount: Decimal = Decimal("0.00")
    status: InvoiceStatus
    created_at: Optional[datetime] = None
    items: List[PersistedLineItem] = Field(default_factory=list)

    @property
    def subtotal(self) -> Decimal:
        return self.total_amount - self.gst_amount


class InvoiceSummary(BaseModel):
    """
    Sales figures of a company

    total_sales sums total_amount over every invoice, pending_total only
    over pending ones. recent holds the newest invoices, newest first.
    """

    company_id: int
    invoice_count: int
    total_sales: Decimal
    pending_total: Decimal
    recent: List[PersistedInvoice] = Field(default_factory=list)
