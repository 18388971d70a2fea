from .base import BaseModel, IdType
from .company import Company
from .customer import Customer
from .product import Product
from .invoice import Invoice, InvoiceStatus
from .invoice_item import InvoiceItem
from .persisted_invoice import (
    InvoiceHeader,
    InvoiceSummary,
    NewLineItem,
    PersistedInvoice,
    PersistedLineItem,
)
from .invoice_draft import (
    InvoiceDraft,
    InvoiceTotals,
    LineItem,
    compute_totals,
    line_amount,
    round_money,
)

__all__ = [
    "BaseModel",
    "IdType",
    "Company",
    "Customer",
    "Product",
    "Invoice",
    "InvoiceStatus",
    "InvoiceItem",
    "InvoiceHeader",
    "InvoiceSummary",
    "NewLineItem",
    "PersistedInvoice",
    "PersistedLineItem",
    "InvoiceDraft",
    "InvoiceTotals",
    "LineItem",
    "compute_totals",
    "line_amount",
    "round_money",
]
