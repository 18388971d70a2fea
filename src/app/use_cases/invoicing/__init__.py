"""Invoicing use cases"""
from .submit_invoice import SubmitInvoice
from .preview_totals import PreviewInvoiceTotals
from .list_invoices import ListInvoices
from .invoice_summary import GetInvoiceSummary
from .delete_invoice import DeleteInvoice
from .generate_invoice_document import GenerateInvoiceDocument
from .company_settings import GetCompanySettings, UpdateCompanySettings
from .dtos import (
    InvoiceItemCommandDTO,
    SubmitInvoiceCommandDTO,
    InvoiceTotalsDTO,
    DraftLineDTO,
    PreviewTotalsResponseDTO,
    SubmitInvoiceResponseDTO,
    InvoiceListResponseDTO,
    InvoiceSummaryResponseDTO,
    DeleteInvoiceResponseDTO,
    InvoiceDocumentDTO,
    CompanySettingsDTO,
    UpdateCompanySettingsCommandDTO,
)

__all__ = [
    "SubmitInvoice",
    "PreviewInvoiceTotals",
    "ListInvoices",
    "GetInvoiceSummary",
    "DeleteInvoice",
    "GenerateInvoiceDocument",
    "GetCompanySettings",
    "UpdateCompanySettings",
    "InvoiceItemCommandDTO",
    "SubmitInvoiceCommandDTO",
    "InvoiceTotalsDTO",
    "DraftLineDTO",
    "PreviewTotalsResponseDTO",
    "SubmitInvoiceResponseDTO",
    "InvoiceListResponseDTO",
    "InvoiceSummaryResponseDTO",
    "DeleteInvoiceResponseDTO",
    "InvoiceDocumentDTO",
    "CompanySettingsDTO",
    "UpdateCompanySettingsCommandDTO",
]
