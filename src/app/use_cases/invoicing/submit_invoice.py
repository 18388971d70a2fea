"""SubmitInvoice Use Case

Composes an invoice from a command and writes header and line items to
the ledger.
"""

from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.composer.errors import RemoteWriteError, ValidationError
from src.app.composer.invoice_composer import DEFAULT_TAX_RATE, InvoiceComposer
from src.app.composer.numbering import InvoiceNumberGenerator
from src.app.repositories.company_repository import CompanyRepository
from src.app.services.catalog_lookup import CatalogLookup
from src.app.services.ledger_store import LedgerStore
from .draft_builder import fill_draft, load_company, tax_rate_for, totals_dto
from .dtos import SubmitInvoiceCommandDTO, SubmitInvoiceResponseDTO


class SubmitInvoice:
    """
    Use Case: Create an invoice with its line items

    Business Rules:
    1. Company must exist; its GST rate is applied to the subtotal
    2. Customer and a product for every line are required
    3. Lines without an explicit price use the catalog price
    4. Invoice number is generated (INV + epoch milliseconds, collision-checked)
    5. Header is written before line items; a header whose items fail to
       save is deleted again

    Flow:
    1. Load company tax settings
    2. Replay command onto a composer draft
    3. Submit draft (validate, number, write header, write items)
    4. Return response
    """

    def __init__(
        self,
        catalog: CatalogLookup,
        ledger: LedgerStore,
        company_repo: CompanyRepository,
        number_generator: Optional[InvoiceNumberGenerator] = None,
        default_tax_rate: Decimal = DEFAULT_TAX_RATE,
        compensate_orphans: bool = True,
    ):
        self.catalog = catalog
        self.ledger = ledger
        self.company_repo = company_repo
        self.number_generator = number_generator
        self.default_tax_rate = default_tax_rate
        self.compensate_orphans = compensate_orphans

    async def execute(self, command: SubmitInvoiceCommandDTO) -> Result[SubmitInvoiceResponseDTO]:
        """
        Execute invoice submission

        Args:
            command: SubmitInvoiceCommandDTO with customer, date, status and items

        Returns:
            Result[SubmitInvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            # Step 1: Load company tax settings
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
                ledger=self.ledger,
                company_id=company.id,
                tax_rate=tax_rate_for(company, self.default_tax_rate),
                number_generator=self.number_generator,
                compensate_orphans=self.compensate_orphans,
            )

            # Step 2: Build the draft
            await fill_draft(composer, command)

            # Step 3: Submit
            submitted = await composer.submit()

        except ValidationError as e:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message=e.message,
                    reason=e.field if e.line_index is None else f"items[{e.line_index}].{e.field}",
                )
            )
        except RemoteWriteError as e:
            reason = str(e.__cause__) if e.__cause__ else None
            if e.orphaned_invoice_id is not None:
                reason = f"{reason}; invoice {e.orphaned_invoice_id} saved without items"
            return Return.err(
                Error(
                    code="REMOTE_WRITE_FAILED",
                    message=e.message,
                    reason=reason,
                )
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="SUBMIT_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )

        # Step 4: Build response
        header = submitted.header
        response = SubmitInvoiceResponseDTO(
            invoice_id=submitted.invoice_id,
            invoice_number=submitted.invoice_number,
            company_id=header.company_id,
            customer_id=header.customer_id,
            issue_date=header.issue_date,
            status=header.status.value,
            total_amount=header.total_amount,
            gst_amount=header.gst_amount,
            item_count=len(command.items),
            totals=totals_dto(submitted.totals),
        )

        return Return.ok(response)
