"""Unit tests for company settings use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.company_settings import GetCompanySettings, UpdateCompanySettings
from src.app.use_cases.invoicing.dtos import UpdateCompanySettingsCommandDTO


@pytest.fixture
def mock_company_repo(sample_company):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=sample_company)
    repo.update = AsyncMock(side_effect=lambda company: company)
    return repo


@pytest.mark.asyncio
class TestGetCompanySettings:
    async def test_get_settings_success(self, mock_company_repo):
        result = await GetCompanySettings(mock_company_repo).execute(1)

        assert result.is_ok()
        assert result.value.name == "Sharma Traders"
        assert result.value.gst_rate == Decimal("18.00")

    async def test_company_not_found(self, mock_company_repo):
        mock_company_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetCompanySettings(mock_company_repo).execute(9)

        assert result.is_err()
        assert result.error.code == "COMPANY_NOT_FOUND"


@pytest.mark.asyncio
class TestUpdateCompanySettings:
    async def test_only_set_fields_change(self, mock_uow, mock_company_repo):
        """
        Given: A command that only sets gst_rate
        When: execute is called
        Then: GST rate changes, other settings stay, and the change is committed
        """
        command = UpdateCompanySettingsCommandDTO(gst_rate=Decimal("12.00"))

        result = await UpdateCompanySettings(mock_uow, mock_company_repo).execute(1, command)

        assert result.is_ok()
        assert result.value.gst_rate == Decimal("12.00")
        assert result.value.name == "Sharma Traders"
        assert result.value.enable_discount is True
        mock_uow.commit.assert_awaited_once()

    async def test_company_not_found(self, mock_uow, mock_company_repo):
        mock_company_repo.get_by_id = AsyncMock(return_value=None)

        result = await UpdateCompanySettings(mock_uow, mock_company_repo).execute(
            9, UpdateCompanySettingsCommandDTO(name="New name")
        )

        assert result.is_err()
        assert result.error.code == "COMPANY_NOT_FOUND"
        mock_uow.commit.assert_not_called()

    async def test_failure_rolls_back(self, mock_uow, mock_company_repo):
        mock_company_repo.update = AsyncMock(side_effect=ConnectionError("db down"))

        result = await UpdateCompanySettings(mock_uow, mock_company_repo).execute(
            1, UpdateCompanySettingsCommandDTO(name="New name")
        )

        assert result.is_err()
        assert result.error.code == "UPDATE_COMPANY_SETTINGS_FAILED"
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_called()

    async def test_explicit_null_is_rejected(self, mock_uow, mock_company_repo, sample_company):
        """
        Given: A command that explicitly sets gst_rate to None
        When: execute is called
        Then: A validation error is returned and nothing is written
        """
        command = UpdateCompanySettingsCommandDTO(gst_rate=None)

        result = await UpdateCompanySettings(mock_uow, mock_company_repo).execute(1, command)

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.reason == "gst_rate"
        assert sample_company.gst_rate == Decimal("18.00")
        mock_company_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_optional_contact_field_can_be_cleared(self, mock_uow, mock_company_repo):
        result = await UpdateCompanySettings(mock_uow, mock_company_repo).execute(
            1, UpdateCompanySettingsCommandDTO(address=None)
        )

        assert result.is_ok()
        assert result.value.address is None
        mock_uow.commit.assert_awaited_once()
