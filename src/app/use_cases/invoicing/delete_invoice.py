"""DeleteInvoice Use Case

Removes an invoice and the line items it owns.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.ledger_store import LedgerStore
from .dtos import DeleteInvoiceResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice

    Business Rules:
    1. Invoice must exist
    2. Line items are deleted before the header (foreign key dependency)
    """

    def __init__(self, ledger: LedgerStore):
        self.ledger = ledger

    async def execute(self, invoice_id: int) -> Result[DeleteInvoiceResponseDTO]:
        try:
            invoice = await self.ledger.get_invoice(invoice_id)
            if invoice is None:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            await self.ledger.delete_line_items(invoice_id)
            await self.ledger.delete_invoice(invoice_id)

            logger.info(f"Deleted invoice {invoice.invoice_number} with {len(invoice.items)} items")

            return Return.ok(
                DeleteInvoiceResponseDTO(
                    invoice_id=invoice_id,
                    invoice_number=invoice.invoice_number,
                    deleted_items=len(invoice.items),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message=f"Failed to delete invoice {invoice_id}",
                    reason=str(e),
                )
            )
