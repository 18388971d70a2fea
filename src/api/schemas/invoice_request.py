"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests. Form-level checks
(quantity >= 1, non-negative price) happen here; business rules such as
"every line needs a product" are checked by the invoice composer.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.invoice import InvoiceStatus


class InvoiceItemRequestSchema(BaseModel):
    product_id: Optional[int] = Field(
        default=None,
        description="Product identifier (required before submission)"
    )

    quantity: int = Field(
        default=1,
        ge=1,
        description="Number of units (must be >= 1)"
    )

    price: Optional[Decimal] = Field(
        default=None,
        ge=0,
        decimal_places=2,
        description="Unit price; omitted to use the catalog price"
    )


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating or previewing an invoice

    Used for POST /invoices and POST /invoices/preview endpoints.
    """

    company_id: Optional[int] = Field(
        default=None,
        description="Company issuing the invoice (defaults to the configured company)"
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
        description="Invoice status (pending, paid, overdue)"
    )

    items: List[InvoiceItemRequestSchema] = Field(
        default_factory=list,
        description="Invoice lines"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 7,
                "issue_date": "2024-06-10",
                "status": "pending",
                "items": [
                    {"product_id": 3, "quantity": 2},
                    {"product_id": 5, "quantity": 1, "price": "50.00"}
                ]
            }
        }
