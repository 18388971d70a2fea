"""ListInvoices Use Case"""

from libs.result import Result, Return, Error
from src.app.services.ledger_store import LedgerStore
from .dtos import InvoiceListResponseDTO


class ListInvoices:
    """
    Use Case: List a company's invoices with customer and product names
    """

    def __init__(self, ledger: LedgerStore):
        self.ledger = ledger

    async def execute(self, company_id: int) -> Result[InvoiceListResponseDTO]:
        try:
            invoices = await self.ledger.list_invoices(company_id)
            return Return.ok(
                InvoiceListResponseDTO(
                    company_id=company_id,
                    invoices=invoices,
                    total_count=len(invoices),
                )
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message=f"Failed to list invoices for company {company_id}",
                    reason=str(e),
                )
            )
