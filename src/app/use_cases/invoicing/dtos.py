"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.invoice import InvoiceStatus
from src.domain.persisted_invoice import PersistedInvoice


class InvoiceItemCommandDTO(BaseModel):
    """
    One requested invoice line

    When price is omitted the product's current catalog price is used.
    """

    product_id: Optional[int] = Field(
        default=None,
        description="Product identifier"
    )

    quantity: int = Field(
        default=1,
        description="Number of units"
    )

    price: Optional[Decimal] = Field(
        default=None,
        description="Unit price override (defaults to catalog price)"
    )


class SubmitInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to SubmitInvoice and PreviewInvoiceTotals use cases.
    """

    company_id: int = Field(
        ...,
        description="Company issuing the invoice"
    )

    customer_id: Optional[int] = Field(
        default=None,
        description="Customer being billed"
    )

    issue_date: date = Field(
        default_factory=date.today,
        description="Invoice date"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Initial status (pending, paid, overdue)"
    )

    items: List[InvoiceItemCommandDTO] = Field(
        default_factory=list,
        description="Invoice lines in display order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": 1,
                "customer_id": 7,
                "issue_date": "2024-06-10",
                "status": "pending",
                "items": [
                    {"product_id": 3, "quantity": 2},
                    {"product_id": 5, "quantity": 1, "price": "50.00"}
                ]
            }
        }


class InvoiceTotalsDTO(BaseModel):
    subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    grand_total: Decimal


class DraftLineDTO(BaseModel):
    product_id: Optional[int] = None
    quantity: int
    unit_price: Decimal
    amount: Decimal


class PreviewTotalsResponseDTO(BaseModel):
    """
    Response DTO for totals preview

    Returned by PreviewInvoiceTotals use case. Nothing is persisted.
    """

    lines: List[DraftLineDTO] = Field(..., description="Lines with defaulted prices and amounts")
    totals: InvoiceTotalsDTO


class SubmitInvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice submission

    Returned by SubmitInvoice use case.
    """

    invoice_id: int = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Generated invoice number")
    company_id: int
    customer_id: int
    issue_date: date
    status: str
    total_amount: Decimal = Field(..., description="Stored grand total (2 decimals)")
    gst_amount: Decimal = Field(..., description="Stored GST (2 decimals)")
    item_count: int
    totals: InvoiceTotalsDTO

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "invoice_number": "INV1718035200123",
                "company_id": 1,
                "customer_id": 7,
                "issue_date": "2024-06-10",
                "status": "pending",
                "total_amount": "295.00",
                "gst_amount": "45.00",
                "item_count": 2,
                "totals": {
                    "subtotal": "250.00",
                    "tax_rate": "0.18",
                    "tax": "45.0000",
                    "grand_total": "295.0000"
                }
            }
        }


class InvoiceListResponseDTO(BaseModel):
    """Response DTO for ListInvoices use case"""

    company_id: int
    invoices: List[PersistedInvoice]
    total_count: int


class InvoiceSummaryResponseDTO(BaseModel):
    """Response DTO for GetInvoiceSummary use case"""

    company_id: int
    invoice_count: int
    total_sales: Decimal
    pending_total: Decimal
    recent_invoices: List[PersistedInvoice]


class DeleteInvoiceResponseDTO(BaseModel):
    invoice_id: int
    invoice_number: str
    deleted_items: int


class InvoiceDocumentDTO(BaseModel):
    """
    Response DTO for invoice document generation

    Returned by GenerateInvoiceDocument use case.
    """

    invoice_id: int
    invoice_number: str
    filename: str = Field(..., description="Download name (invoice-<number>.pdf)")
    media_type: str
    document_base64: str = Field(..., description="Base64-encoded document")
    generated_at: datetime


class CompanySettingsDTO(BaseModel):
    """Company details and tax settings"""

    company_id: int
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gst_number: Optional[str] = None
    gst_rate: Decimal
    enable_discount: bool
    default_discount_rate: Decimal


class UpdateCompanySettingsCommandDTO(BaseModel):
    """
    Command DTO for updating company settings

    Only fields that are set are written.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gst_number: Optional[str] = None
    gst_rate: Optional[Decimal] = Field(default=None, ge=0, le=100)
    enable_discount: Optional[bool] = None
    default_discount_rate: Optional[Decimal] = Field(default=None, ge=0, le=100)
