"""Invoice Composer

Builds a multi-line invoice in memory and writes it to the ledger as one
header followed by its line items.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple
from pydantic import BaseModel
from src.app.services.catalog_lookup import CatalogLookup
from src.app.services.ledger_store import LedgerStore
from src.domain.invoice import InvoiceStatus
from src.domain.invoice_draft import (
    InvoiceDraft,
    InvoiceTotals,
    LineItem,
    compute_totals,
    round_money,
)
from src.domain.persisted_invoice import InvoiceHeader, NewLineItem
from .errors import NotFoundError, RemoteWriteError, ValidationError
from .numbering import InvoiceNumberGenerator

logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal("0.18")


class SubmittedInvoice(BaseModel):
    invoice_id: int
    invoice_number: str
    header: InvoiceHeader
    totals: InvoiceTotals


class InvoiceComposer:
    """
    Stateful editor for one invoice draft

    The draft belongs to a single composer; nothing else mutates it.
    Line amounts and totals are always derived, never stored on the draft.
    Without a ledger the composer only edits and totals a draft; submit()
    is then unavailable.

    Usage:
        composer = InvoiceComposer(catalog, ledger, company_id=1)
        composer.set_customer(7)
        composer.add_line()
        await composer.set_line_product(0, product_id=3)
        composer.set_line_quantity(0, 2)
        submitted = await composer.submit()
    """

    def __init__(
        self,
        catalog: CatalogLookup,
        ledger: Optional[LedgerStore],
        company_id: int,
        tax_rate: Decimal = DEFAULT_TAX_RATE,
        number_generator: Optional[InvoiceNumberGenerator] = None,
        compensate_orphans: bool = True,
    ):
        self.catalog = catalog
        self.ledger = ledger
        self.company_id = company_id
        self.tax_rate = tax_rate
        if number_generator is None and ledger is not None:
            number_generator = InvoiceNumberGenerator(ledger)
        self.number_generator = number_generator
        self.compensate_orphans = compensate_orphans
        self._draft = InvoiceDraft()

    @property
    def draft(self) -> InvoiceDraft:
        return self._draft

    @property
    def lines(self) -> Tuple[LineItem, ...]:
        return tuple(self._draft.lines)

    def _line(self, index: int) -> LineItem:
        if not 0 <= index < len(self._draft.lines):
            raise IndexError(f"No invoice line at position {index}")
        return self._draft.lines[index]

    # Header fields

    def set_customer(self, customer_id: Optional[int]) -> None:
        self._draft.customer_id = customer_id

    def set_issue_date(self, issue_date: date) -> None:
        self._draft.issue_date = issue_date

    def set_status(self, status: InvoiceStatus) -> None:
        self._draft.status = status

    # Lines

    def add_line(self) -> LineItem:
        line = LineItem()
        self._draft.lines.append(line)
        return line

    def remove_line(self, index: int) -> None:
        """Remove the line at index. Out-of-range indices are ignored."""
        if 0 <= index < len(self._draft.lines):
            del self._draft.lines[index]

    async def set_line_product(self, index: int, product_id: Optional[int]) -> None:
        """
        Select a product for a line and default its price from the catalog

        Args:
            index: Line position
            product_id: Product to select, None to clear the selection

        Raises:
            IndexError: if index is out of range
            RemoteWriteError: if the catalog call fails; the line is unchanged
        """
        line = self._line(index)

        if product_id is None:
            line.product_id = None
            return

        try:
            price = await self.catalog.price_of(product_id)
        except NotFoundError:
            price = None
        except Exception as e:
            logger.error(f"Catalog lookup failed for product {product_id}: {e}")
            raise RemoteWriteError(
                f"Failed to look up price for product {product_id}"
            ) from e

        # The line may have been removed while the lookup was in flight.
        if not any(existing is line for existing in self._draft.lines):
            return

        line.product_id = product_id
        if price is None:
            logger.info(f"Product {product_id} not in catalog, keeping price {line.unit_price}")
        else:
            line.unit_price = price

    def set_line_quantity(self, index: int, quantity: int) -> None:
        self._line(index).quantity = quantity

    def set_line_unit_price(self, index: int, unit_price: Decimal) -> None:
        self._line(index).unit_price = unit_price

    # Totals and submission

    def compute_totals(self) -> InvoiceTotals:
        return compute_totals(self._draft.lines, self.tax_rate)

    def validate(self) -> None:
        """
        Check the draft is complete enough to submit

        Raises:
            ValidationError: naming the first missing or invalid field
        """
        draft = self._draft

        if draft.customer_id is None:
            raise ValidationError("Please select a customer", field="customer_id")

        if not draft.lines:
            raise ValidationError("Invoice must have at least one item", field="lines")

        for index, line in enumerate(draft.lines):
            if line.product_id is None:
                raise ValidationError(
                    f"Please select a product for item {index + 1}",
                    field="product_id",
                    line_index=index,
                )
            if line.quantity < 1:
                raise ValidationError(
                    f"Quantity for item {index + 1} must be at least 1",
                    field="quantity",
                    line_index=index,
                )
            if line.unit_price < 0:
                raise ValidationError(
                    f"Price for item {index + 1} cannot be negative",
                    field="unit_price",
                    line_index=index,
                )
            if line.unit_price != round_money(line.unit_price):
                raise ValidationError(
                    f"Price for item {index + 1} cannot have more than 2 decimal places",
                    field="unit_price",
                    line_index=index,
                )

    def build_line_items(self) -> List[NewLineItem]:
        return [
            NewLineItem(
                product_id=line.product_id,
                quantity=line.quantity,
                price=line.unit_price,
                amount=line.amount,
            )
            for line in self._draft.lines
        ]

    async def submit(self) -> SubmittedInvoice:
        """
        Validate the draft and write it to the ledger

        Flow:
        1. Validate (no remote calls on failure)
        2. Generate invoice number
        3. Insert header, obtain invoice ID
        4. Insert line items referencing that ID
        5. Clear the draft

        Raises:
            ValidationError: draft incomplete; nothing written
            RuntimeError: composer was built without a ledger
            RemoteWriteError: a ledger call failed; draft left intact
        """
        if self.ledger is None:
            raise RuntimeError("Invoice composer has no ledger store to submit to")

        self.validate()

        totals = self.compute_totals()
        items = self.build_line_items()

        try:
            invoice_number = await self.number_generator.next_number()
        except Exception as e:
            logger.error(f"Invoice number generation failed: {e}")
            raise RemoteWriteError("Failed to generate invoice number") from e

        gst_amount = round_money(totals.tax)
        header = InvoiceHeader(
            company_id=self.company_id,
            customer_id=self._draft.customer_id,
            invoice_number=invoice_number,
            issue_date=self._draft.issue_date,
            total_amount=round_money(totals.subtotal) + gst_amount,
            gst_amount=gst_amount,
            status=self._draft.status,
        )

        try:
            invoice_id = await self.ledger.insert_invoice(header)
        except Exception as e:
            logger.error(f"Failed to write invoice {invoice_number}: {e}")
            raise RemoteWriteError(f"Failed to create invoice {invoice_number}") from e

        try:
            await self.ledger.insert_line_items(invoice_id, items)
        except Exception as e:
            logger.error(f"Failed to write line items of invoice {invoice_id}: {e}")
            orphaned_id = await self._compensate(invoice_id)
            raise RemoteWriteError(
                f"Failed to save items of invoice {invoice_number}",
                orphaned_invoice_id=orphaned_id,
            ) from e

        logger.info(
            f"Created invoice {invoice_number} (id={invoice_id}) with {len(items)} items, "
            f"total {header.total_amount}"
        )

        self._draft = InvoiceDraft()

        return SubmittedInvoice(
            invoice_id=invoice_id,
            invoice_number=invoice_number,
            header=header,
            totals=totals,
        )

    async def _compensate(self, invoice_id: int) -> Optional[int]:
        """Delete a header whose items failed to save. Returns the ID if it is still orphaned."""
        if not self.compensate_orphans:
            logger.error(f"Invoice {invoice_id} left without line items")
            return invoice_id

        try:
            await self.ledger.delete_line_items(invoice_id)
            await self.ledger.delete_invoice(invoice_id)
        except Exception as e:
            logger.error(f"Could not remove orphaned invoice {invoice_id}: {e}")
            return invoice_id

        logger.warning(f"Removed invoice {invoice_id} after line item failure")
        return None

    def cancel(self) -> None:
        """Discard the draft. Writes already issued by submit() are not undone."""
        self._draft = InvoiceDraft()
