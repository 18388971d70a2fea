"""Invoice Document Service Interface

Defines the contract for rendering printable invoices.
"""

from abc import ABC, abstractmethod
from src.domain.persisted_invoice import PersistedInvoice


class DocumentService(ABC):
    """
    Service interface for invoice document generation

    Implementations must render unresolved customer/product names as
    empty strings instead of failing.
    """

    media_type = "application/pdf"
    extension = "pdf"

    @abstractmethod
    def render_invoice(self, invoice: PersistedInvoice) -> bytes:
        """
        Render a persisted invoice

        Args:
            invoice: Invoice with resolved customer and product names

        Returns:
            Document as bytes
        """
        pass

    def filename_for(self, invoice: PersistedInvoice) -> str:
        return f"invoice-{invoice.invoice_number}.{self.extension}"
