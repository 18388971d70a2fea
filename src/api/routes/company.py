"""Company Settings API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.company_request import CompanySettingsRequestSchema
from src.app.use_cases.invoicing.company_settings import (
    GetCompanySettings,
    UpdateCompanySettings,
)
from src.app.use_cases.invoicing.dtos import (
    CompanySettingsDTO,
    UpdateCompanySettingsCommandDTO,
)
from src.adapter.repositories.company_repository import SqlAlchemyCompanyRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/companies", tags=["Company"])


def _raise_for(error) -> None:
    if error.code == "COMPANY_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ClientError(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get(
    "/{company_id}/settings",
    response_model=CompanySettingsDTO,
    status_code=status.HTTP_200_OK,
)
async def get_company_settings(
    company_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Get company details and tax settings.
    """
    use_case = GetCompanySettings(SqlAlchemyCompanyRepository(session))
    result = await use_case.execute(company_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.patch(
    "/{company_id}/settings",
    response_model=CompanySettingsDTO,
    status_code=status.HTTP_200_OK,
)
async def update_company_settings(
    company_id: int,
    request: CompanySettingsRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Update company details and tax settings.

    The GST rate applies to invoices created after the change.
    """
    command = UpdateCompanySettingsCommandDTO(**request.model_dump(exclude_unset=True))

    async with SqlAlchemyUnitOfWork(session) as uow:
        use_case = UpdateCompanySettings(uow, SqlAlchemyCompanyRepository(session))
        result = await use_case.execute(company_id, command)

    if result.is_err():
        _raise_for(result.error)

    return result.value
