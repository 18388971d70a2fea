from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.composer.invoice_composer import InvoiceComposer
from src.app.composer.numbering import InvoiceNumberGenerator
from src.domain.company import Company
from src.domain.invoice import InvoiceStatus
from src.domain.persisted_invoice import PersistedInvoice, PersistedLineItem

FIXED_CLOCK = 1718035200.0  # 2024-06-10T16:00:00Z


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def catalog_prices():
    """Prices served by the mock catalog, keyed by product ID"""
    return {
        1: Decimal("100.00"),
        2: Decimal("50.00"),
        3: Decimal("75.00"),
    }


@pytest.fixture
def mock_catalog(catalog_prices):
    """Mock catalog lookup returning None for unknown products"""
    catalog = MagicMock()

    async def price_of(product_id):
        return catalog_prices.get(product_id)

    catalog.price_of = AsyncMock(side_effect=price_of)
    return catalog


@pytest.fixture
def mock_ledger():
    """Mock ledger store that accepts every write"""
    ledger = MagicMock()
    ledger.insert_invoice = AsyncMock(return_value=101)
    ledger.insert_line_items = AsyncMock(return_value=None)
    ledger.delete_line_items = AsyncMock(return_value=None)
    ledger.delete_invoice = AsyncMock(return_value=None)
    ledger.invoice_number_exists = AsyncMock(return_value=False)
    ledger.get_invoice = AsyncMock(return_value=None)
    ledger.list_invoices = AsyncMock(return_value=[])
    ledger.summarize_invoices = AsyncMock()
    return ledger


@pytest.fixture
def number_generator(mock_ledger):
    return InvoiceNumberGenerator(mock_ledger, prefix="INV", clock=lambda: FIXED_CLOCK)


@pytest.fixture
def composer(mock_catalog, mock_ledger, number_generator):
    """Composer with 18% GST and mocked collaborators"""
    return InvoiceComposer(
        catalog=mock_catalog,
        ledger=mock_ledger,
        company_id=1,
        tax_rate=Decimal("0.18"),
        number_generator=number_generator,
    )


@pytest.fixture
def sample_company():
    return Company(
        id=1,
        name="Sharma Traders",
        address="12 MG Road, Pune",
        gst_number="27AAACS1234A1Z5",
        gst_rate=Decimal("18.00"),
        enable_discount=True,
        default_discount_rate=Decimal("5.00"),
        created_at=datetime(2024, 1, 1),
    )


@pytest.fixture
def sample_persisted_invoice():
    """Invoice with two resolved line items: 2 x 100 + 1 x 50, 18% GST"""
    return PersistedInvoice(
        id=101,
        company_id=1,
        customer_id=7,
        customer_name="Asha Enterprises",
        invoice_number="INV1718035200000",
        issue_date=date(2024, 6, 10),
        total_amount=Decimal("295.00"),
        gst_amount=Decimal("45.00"),
        status=InvoiceStatus.PENDING,
        created_at=datetime(2024, 6, 10, 16, 0, 0),
        items=[
            PersistedLineItem(
                id=1,
                invoice_id=101,
                product_id=1,
                product_name="Steel bracket",
                quantity=2,
                price=Decimal("100.00"),
                amount=Decimal("200.00"),
            ),
            PersistedLineItem(
                id=2,
                invoice_id=101,
                product_id=2,
                product_name="Hinge set",
                quantity=1,
                price=Decimal("50.00"),
                amount=Decimal("50.00"),
            ),
        ],
    )
