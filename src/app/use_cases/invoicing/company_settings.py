"""Company Settings Use Cases

Read and update company details and the tax settings used for invoicing.
"""

from libs.result import Result, Return, Error
from src.app.repositories.company_repository import CompanyRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.company import Company
from .dtos import CompanySettingsDTO, UpdateCompanySettingsCommandDTO

# Backed by NOT NULL columns
REQUIRED_SETTINGS = ("name", "gst_rate", "enable_discount", "default_discount_rate")


def _to_settings_dto(company: Company) -> CompanySettingsDTO:
    return CompanySettingsDTO(
        company_id=company.id,
        name=company.name,
        address=company.address,
        phone=company.phone,
        email=company.email,
        gst_number=company.gst_number,
        gst_rate=company.gst_rate,
        enable_discount=company.enable_discount,
        default_discount_rate=company.default_discount_rate,
    )


def _company_not_found(company_id: int) -> Error:
    return Error(
        code="COMPANY_NOT_FOUND",
        message=f"Company with ID {company_id} not found",
        reason="Company does not exist",
    )


class GetCompanySettings:
    def __init__(self, company_repo: CompanyRepository):
        self.company_repo = company_repo

    async def execute(self, company_id: int) -> Result[CompanySettingsDTO]:
        try:
            company = await self.company_repo.get_by_id(company_id)
            if company is None:
                return Return.err(_company_not_found(company_id))
            return Return.ok(_to_settings_dto(company))
        except Exception as e:
            return Return.err(
                Error(
                    code="GET_COMPANY_SETTINGS_FAILED",
                    message="Failed to load company settings",
                    reason=str(e),
                )
            )


class UpdateCompanySettings:
    """
    Use Case: Update company details and tax settings

    Business Rules:
    1. Company must exist
    2. Only fields present in the command are changed
    3. Name, GST rate, discount flag and discount rate cannot be cleared
    4. New GST rate applies to invoices created afterwards only
    """

    def __init__(self, uow: UnitOfWork, company_repo: CompanyRepository):
        self.uow = uow
        self.company_repo = company_repo

    async def execute(
        self, company_id: int, command: UpdateCompanySettingsCommandDTO
    ) -> Result[CompanySettingsDTO]:
        try:
            company = await self.company_repo.get_by_id(company_id)
            if company is None:
                return Return.err(_company_not_found(company_id))

            changes = command.model_dump(exclude_unset=True)
            cleared = [
                field for field in REQUIRED_SETTINGS
                if field in changes and changes[field] is None
            ]
            if cleared:
                return Return.err(
                    Error(
                        code="VALIDATION_ERROR",
                        message=f"Company settings cannot be cleared: {', '.join(cleared)}",
                        reason=cleared[0],
                    )
                )

            for field, value in changes.items():
                setattr(company, field, value)

            updated = await self.company_repo.update(company)
            await self.uow.commit()

            return Return.ok(_to_settings_dto(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_COMPANY_SETTINGS_FAILED",
                    message="Failed to update company settings",
                    reason=str(e),
                )
            )
