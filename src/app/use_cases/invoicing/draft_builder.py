"""Helpers shared by use cases that compose invoices from a command"""

import logging
from decimal import Decimal
from typing import List, Optional
from src.app.composer.invoice_composer import InvoiceComposer
from src.app.repositories.company_repository import CompanyRepository
from src.domain.company import Company
from src.domain.invoice_draft import InvoiceTotals
from .dtos import DraftLineDTO, InvoiceTotalsDTO, SubmitInvoiceCommandDTO

logger = logging.getLogger(__name__)


async def load_company(company_repo: CompanyRepository, company_id: int) -> Optional[Company]:
    company = await company_repo.get_by_id(company_id)
    if company is None:
        logger.warning(f"Company {company_id} not found")
    return company


def tax_rate_for(company: Company, default: Decimal) -> Decimal:
    """GST rate of the company as a fraction, falling back to the default"""
    if company.gst_rate is None:
        return default
    return company.tax_rate


async def fill_draft(composer: InvoiceComposer, command: SubmitInvoiceCommandDTO) -> None:
    """
    Replay a command onto a composer's draft

    Product selection runs first so that an explicit price overrides the
    catalog default, mirroring how a user edits a line.
    """
    composer.set_customer(command.customer_id)
    composer.set_issue_date(command.issue_date)
    composer.set_status(command.status)

    for index, item in enumerate(command.items):
        composer.add_line()
        if item.product_id is not None:
            await composer.set_line_product(index, item.product_id)
        composer.set_line_quantity(index, item.quantity)
        if item.price is not None:
            composer.set_line_unit_price(index, item.price)


def totals_dto(totals: InvoiceTotals) -> InvoiceTotalsDTO:
    return InvoiceTotalsDTO(
        subtotal=totals.subtotal,
        tax_rate=totals.tax_rate,
        tax=totals.tax,
        grand_total=totals.grand_total,
    )


def line_dtos(composer: InvoiceComposer) -> List[DraftLineDTO]:
    return [
        DraftLineDTO(
            product_id=line.product_id,
            quantity=line.quantity,
            unit_price=line.unit_price,
            amount=line.amount,
        )
        for line in composer.lines
    ]
