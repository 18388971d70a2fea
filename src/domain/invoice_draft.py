"""Invoice Draft

In-memory invoice being composed, before it is written to the ledger.
Derived values (line amounts, totals) are computed here and nowhere else.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field
from src.domain.invoice import InvoiceStatus

CENT = Decimal("0.01")


def line_amount(quantity: int, unit_price: Decimal) -> Decimal:
    """Amount of a single line. The only place a line amount is derived."""
    return Decimal(quantity) * unit_price


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class LineItem(BaseModel):
    """
    One product/quantity/price entry of a draft

    amount is read-only and always equals quantity * unit_price.
    A line without product_id is incomplete and blocks submission.
    """

    model_config = ConfigDict(validate_assignment=True)

    product_id: Optional[int] = None
    quantity: int = 1
    unit_price: Decimal = Decimal("0")

    @computed_field
    @property
    def amount(self) -> Decimal:
        return line_amount(self.quantity, self.unit_price)


class InvoiceTotals(BaseModel):
    """Derived totals of a draft. Exact, never rounded."""

    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    grand_total: Decimal


def compute_totals(lines: Iterable[LineItem], tax_rate: Decimal) -> InvoiceTotals:
    """
    Compute subtotal, tax and grand total for a sequence of lines

    Pure function: the same lines and rate always give equal totals.
    """
    subtotal = sum((line.amount for line in lines), Decimal("0"))
    tax = subtotal * tax_rate
    return InvoiceTotals(
        subtotal=subtotal,
        tax_rate=tax_rate,
        tax=tax,
        grand_total=subtotal + tax,
    )


class InvoiceDraft(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    customer_id: Optional[int] = None
    issue_date: date = Field(default_factory=date.today)
    lines: List[LineItem] = Field(default_factory=list)
    status: InvoiceStatus = InvoiceStatus.PENDING
