"""Unit tests for ListInvoices use case"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.invoicing.list_invoices import ListInvoices


@pytest.mark.asyncio
class TestListInvoices:
    async def test_list_invoices_success(self, mock_ledger, sample_persisted_invoice):
        mock_ledger.list_invoices = AsyncMock(return_value=[sample_persisted_invoice])

        result = await ListInvoices(mock_ledger).execute(1)

        assert result.is_ok()
        assert result.value.company_id == 1
        assert result.value.total_count == 1
        assert result.value.invoices[0].customer_name == "Asha Enterprises"
        mock_ledger.list_invoices.assert_awaited_once_with(1)

    async def test_empty_list(self, mock_ledger):
        result = await ListInvoices(mock_ledger).execute(1)

        assert result.is_ok()
        assert result.value.invoices == []
        assert result.value.total_count == 0

    async def test_storage_failure(self, mock_ledger):
        mock_ledger.list_invoices = AsyncMock(side_effect=ConnectionError("db down"))

        result = await ListInvoices(mock_ledger).execute(1)

        assert result.is_err()
        assert result.error.code == "LIST_INVOICES_FAILED"
        assert result.error.reason == "db down"
