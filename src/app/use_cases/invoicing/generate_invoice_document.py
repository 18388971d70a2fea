"""GenerateInvoiceDocument Use Case

Renders a persisted invoice into a printable document for download.
"""

import base64
import logging
from datetime import datetime, timezone
from libs.result import Result, Return, Error
from src.app.services.document_service import DocumentService
from src.app.services.ledger_store import LedgerStore
from .dtos import InvoiceDocumentDTO

logger = logging.getLogger(__name__)


class GenerateInvoiceDocument:
    """
    Use Case: Generate the printable invoice

    Business Rules:
    1. Invoice must exist
    2. Missing customer or product names print as blanks
    3. File name is invoice-<invoice_number>.<ext>

    Flow:
    1. Retrieve invoice with resolved names
    2. Render document
    3. Return response with document as base64
    """

    def __init__(
        self,
        ledger: LedgerStore,
        document_service: DocumentService,
    ):
        self.ledger = ledger
        self.document_service = document_service

    async def execute(self, invoice_id: int) -> Result[InvoiceDocumentDTO]:
        """
        Execute invoice document generation

        Args:
            invoice_id: Invoice ID to render

        Returns:
            Result[InvoiceDocumentDTO]: Success with document or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.ledger.get_invoice(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Render
            document = self.document_service.render_invoice(invoice)
            logger.info(f"Rendered invoice {invoice.invoice_number} ({len(document)} bytes)")

            # Step 3: Build response
            response = InvoiceDocumentDTO(
                invoice_id=invoice.id,
                invoice_number=invoice.invoice_number,
                filename=self.document_service.filename_for(invoice),
                media_type=self.document_service.media_type,
                document_base64=base64.b64encode(document).decode("utf-8"),
                generated_at=datetime.now(timezone.utc),
            )

            return Return.ok(response)

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_DOCUMENT_FAILED",
                    message="Failed to generate invoice document",
                    reason=str(e),
                )
            )
