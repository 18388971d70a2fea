"""PreviewInvoiceTotals Use Case

Computes line amounts and totals for a draft without writing anything.
"""

from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.composer.errors import RemoteWriteError
from src.app.composer.invoice_composer import DEFAULT_TAX_RATE, InvoiceComposer
from src.app.repositories.company_repository import CompanyRepository
from src.app.services.catalog_lookup import CatalogLookup
from .draft_builder import fill_draft, line_dtos, load_company, tax_rate_for, totals_dto
from .dtos import PreviewTotalsResponseDTO, SubmitInvoiceCommandDTO


class PreviewInvoiceTotals:
    """
    Use Case: Show subtotal, GST and total while an invoice is being edited

    Incomplete drafts (no customer, lines without products) are allowed.
    Nothing is written, so no ledger store is involved.
    """

    def __init__(
        self,
        catalog: CatalogLookup,
        company_repo: CompanyRepository,
        default_tax_rate: Decimal = DEFAULT_TAX_RATE,
    ):
        self.catalog = catalog
        self.company_repo = company_repo
        self.default_tax_rate = default_tax_rate

    async def execute(self, command: SubmitInvoiceCommandDTO) -> Result[PreviewTotalsResponseDTO]:
        try:
            company = await load_company(self.company_repo, command.company_id)
            if company is None:
                return Return.err(
                    Error(
                        code="COMPANY_NOT_FOUND",
                        message=f"Company with ID {command.company_id} not found",
                        reason="Company does not exist",
                    )
                )

            composer = InvoiceComposer(
                catalog=self.catalog,
                ledger=None,
                company_id=company.id,
                tax_rate=tax_rate_for(company, self.default_tax_rate),
            )
            await fill_draft(composer, command)

            return Return.ok(
                PreviewTotalsResponseDTO(
                    lines=line_dtos(composer),
                    totals=totals_dto(composer.compute_totals()),
                )
            )

        except RemoteWriteError as e:
            return Return.err(
                Error(
                    code="REMOTE_WRITE_FAILED",
                    message=e.message,
                    reason=str(e.__cause__) if e.__cause__ else None,
                )
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="PREVIEW_TOTALS_FAILED",
                    message="Failed to compute invoice totals",
                    reason=str(e),
                )
            )
