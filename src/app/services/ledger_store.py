"""Ledger Store Interface

Durable storage for invoices and their line items.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.persisted_invoice import (
    InvoiceHeader,
    InvoiceSummary,
    NewLineItem,
    PersistedInvoice,
)


class LedgerStore(ABC):
    """
    Storage contract used by the invoice composer and invoice use cases

    Every call is an independent remote write or read: there is no
    transaction spanning insert_invoice and insert_line_items.
    """

    @abstractmethod
    async def insert_invoice(self, header: InvoiceHeader) -> int:
        """
        Persist an invoice header

        Args:
            header: Header fields

        Returns:
            Generated invoice ID
        """
        pass

    @abstractmethod
    async def insert_line_items(self, invoice_id: int, items: List[NewLineItem]) -> None:
        """
        Persist the line items of an existing invoice

        Args:
            invoice_id: ID returned by insert_invoice
            items: Line items in display order
        """
        pass

    @abstractmethod
    async def delete_line_items(self, invoice_id: int) -> None:
        pass

    @abstractmethod
    async def delete_invoice(self, invoice_id: int) -> None:
        """
        Delete an invoice header

        Line items must already be deleted (see delete_line_items).
        """
        pass

    @abstractmethod
    async def list_invoices(self, company_id: int) -> List[PersistedInvoice]:
        """
        List invoices of a company with customer and product names resolved

        Args:
            company_id: Company identifier

        Returns:
            Invoices, newest first
        """
        pass

    @abstractmethod
    async def get_invoice(self, invoice_id: int) -> Optional[PersistedInvoice]:
        pass

    @abstractmethod
    async def invoice_number_exists(self, invoice_number: str) -> bool:
        pass

    @abstractmethod
    async def summarize_invoices(self, company_id: int, recent_limit: int = 5) -> InvoiceSummary:
        """
        Aggregate a company's invoices

        Args:
            company_id: Company identifier
            recent_limit: Number of newest invoices to include

        Returns:
            InvoiceSummary with totals over all invoices of the company
        """
        pass
