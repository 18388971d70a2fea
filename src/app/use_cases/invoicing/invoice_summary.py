"""GetInvoiceSummary Use Case"""

from libs.result import Result, Return, Error
from src.app.services.ledger_store import LedgerStore
from .dtos import InvoiceSummaryResponseDTO

RECENT_INVOICES = 5


class GetInvoiceSummary:
    """
    Use Case: Sales overview of a company

    Total sales cover every invoice; the pending total only invoices still
    awaiting payment. The newest invoices come along for a quick glance.
    """

    def __init__(self, ledger: LedgerStore):
        self.ledger = ledger

    async def execute(
        self, company_id: int, recent_limit: int = RECENT_INVOICES
    ) -> Result[InvoiceSummaryResponseDTO]:
        try:
            summary = await self.ledger.summarize_invoices(company_id, recent_limit=recent_limit)
        except Exception as e:
            return Return.err(
                Error(
                    code="INVOICE_SUMMARY_FAILED",
                    message=f"Failed to summarize invoices for company {company_id}",
                    reason=str(e),
                )
            )

        return Return.ok(
            InvoiceSummaryResponseDTO(
                company_id=summary.company_id,
                invoice_count=summary.invoice_count,
                total_sales=summary.total_sales,
                pending_total=summary.pending_total,
                recent_invoices=summary.recent,
            )
        )
