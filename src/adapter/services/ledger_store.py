"""SQLAlchemy Ledger Store Implementation

Implements invoice storage using SQLAlchemy async session. Every write
commits on its own, so a header and its line items are two separate
transactions.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, List, Optional
from sqlalchemy import case, delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.ledger_store import LedgerStore
from src.domain.customer import Customer
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from src.domain.persisted_invoice import (
    InvoiceHeader,
    InvoiceSummary,
    NewLineItem,
    PersistedInvoice,
    PersistedLineItem,
)
from src.domain.invoice_draft import round_money
from src.domain.product import Product

logger = logging.getLogger(__name__)


def _money(value) -> Decimal:
    # SUM over no rows is NULL; SQLite sums NUMERIC as float
    return round_money(Decimal(str(value or 0)))


def _to_persisted_line_item(item: InvoiceItem, product_name: Optional[str]) -> PersistedLineItem:
    return PersistedLineItem(
        id=item.id,
        invoice_id=item.invoice_id,
        product_id=item.product_id,
        product_name=product_name,
        quantity=item.quantity,
        price=item.price,
        amount=item.amount,
    )


def _to_persisted_invoice(
    invoice: Invoice,
    customer_name: Optional[str],
    items: List[PersistedLineItem],
) -> PersistedInvoice:
    return PersistedInvoice(
        id=invoice.id,
        company_id=invoice.company_id,
        customer_id=invoice.customer_id,
        customer_name=customer_name,
        invoice_number=invoice.invoice_number,
        issue_date=invoice.issue_date,
        total_amount=invoice.total_amount,
        gst_amount=invoice.gst_amount,
        discount_amount=invoice.discount_amount,
        status=InvoiceStatus(invoice.status),
        created_at=invoice.created_at,
        items=items,
    )


class SqlAlchemyLedgerStore(LedgerStore):
    """
    SQLAlchemy implementation of LedgerStore

    Uses async session for database operations. Customer and product names
    are resolved with outer joins so a dangling reference yields None.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert_invoice(self, header: InvoiceHeader) -> int:
        """
        Insert and commit an invoice header

        Args:
            header: Header fields

        Returns:
            Generated invoice ID
        """
        invoice = Invoice(**header.model_dump())
        try:
            self.session.add(invoice)
            await self.session.flush()
            invoice_id = invoice.id
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return invoice_id

    async def insert_line_items(self, invoice_id: int, items: List[NewLineItem]) -> None:
        """
        Insert and commit line items of an invoice

        Args:
            invoice_id: Owning invoice ID
            items: Line items in display order
        """
        try:
            for item in items:
                self.session.add(InvoiceItem(invoice_id=invoice_id, **item.model_dump()))
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def delete_line_items(self, invoice_id: int) -> None:
        try:
            await self.session.execute(
                delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def delete_invoice(self, invoice_id: int) -> None:
        try:
            await self.session.execute(delete(Invoice).where(Invoice.id == invoice_id))
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def list_invoices(self, company_id: int) -> List[PersistedInvoice]:
        """
        List invoices of a company, newest first

        Args:
            company_id: Company identifier

        Returns:
            Invoices with customer and product names resolved
        """
        return await self._newest_invoices(company_id)

    async def summarize_invoices(self, company_id: int, recent_limit: int = 5) -> InvoiceSummary:
        """
        Aggregate a company's invoices in one query plus the recent list

        Args:
            company_id: Company identifier
            recent_limit: Number of newest invoices to include

        Returns:
            InvoiceSummary with count, total sales and pending total
        """
        pending_amount = case(
            (Invoice.status == InvoiceStatus.PENDING, Invoice.total_amount),
            else_=0,
        )
        statement = (
            select(
                func.count(Invoice.id),
                func.sum(Invoice.total_amount),
                func.sum(pending_amount),
            )
            .where(Invoice.company_id == company_id)
        )
        result = await self.session.execute(statement)
        invoice_count, total_sales, pending_total = result.one()

        return InvoiceSummary(
            company_id=company_id,
            invoice_count=invoice_count,
            total_sales=_money(total_sales),
            pending_total=_money(pending_total),
            recent=await self._newest_invoices(company_id, limit=recent_limit),
        )

    async def _newest_invoices(
        self, company_id: int, limit: Optional[int] = None
    ) -> List[PersistedInvoice]:
        statement = (
            select(Invoice, Customer.name)
            .outerjoin(Customer, Customer.id == Invoice.customer_id)
            .where(Invoice.company_id == company_id)
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
        )
        if limit is not None:
            statement = statement.limit(limit)
        result = await self.session.execute(statement)
        rows = result.all()

        items_by_invoice = await self._items_for([invoice.id for invoice, _ in rows])

        return [
            _to_persisted_invoice(invoice, customer_name, items_by_invoice.get(invoice.id, []))
            for invoice, customer_name in rows
        ]

    async def get_invoice(self, invoice_id: int) -> Optional[PersistedInvoice]:
        """
        Retrieve a single invoice with resolved names

        Args:
            invoice_id: Invoice ID

        Returns:
            PersistedInvoice if found, None otherwise
        """
        statement = (
            select(Invoice, Customer.name)
            .outerjoin(Customer, Customer.id == Invoice.customer_id)
            .where(Invoice.id == invoice_id)
        )
        result = await self.session.execute(statement)
        row = result.first()
        if row is None:
            return None

        invoice, customer_name = row
        items_by_invoice = await self._items_for([invoice.id])
        return _to_persisted_invoice(invoice, customer_name, items_by_invoice.get(invoice.id, []))

    async def invoice_number_exists(self, invoice_number: str) -> bool:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.invoice_number == invoice_number)
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def _items_for(self, invoice_ids: List[int]) -> Dict[int, List[PersistedLineItem]]:
        if not invoice_ids:
            return {}

        statement = (
            select(InvoiceItem, Product.name)
            .outerjoin(Product, Product.id == InvoiceItem.product_id)
            .where(InvoiceItem.invoice_id.in_(invoice_ids))
            .order_by(InvoiceItem.id)
        )
        result = await self.session.execute(statement)

        items: Dict[int, List[PersistedLineItem]] = defaultdict(list)
        for item, product_name in result.all():
            items[item.invoice_id].append(_to_persisted_line_item(item, product_name))
        return items
