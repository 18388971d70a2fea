"""Invoice API Routes

FastAPI routes for creating, listing, deleting and printing invoices.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
import base64
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.error import ClientError
from src.api.schemas.invoice_request import CreateInvoiceRequestSchema
from src.app.composer.numbering import InvoiceNumberGenerator
from src.app.use_cases.invoicing.dtos import (
    DeleteInvoiceResponseDTO,
    InvoiceItemCommandDTO,
    InvoiceListResponseDTO,
    InvoiceSummaryResponseDTO,
    PreviewTotalsResponseDTO,
    SubmitInvoiceCommandDTO,
    SubmitInvoiceResponseDTO,
)
from src.app.use_cases.invoicing.submit_invoice import SubmitInvoice
from src.app.use_cases.invoicing.preview_totals import PreviewInvoiceTotals
from src.app.use_cases.invoicing.list_invoices import ListInvoices
from src.app.use_cases.invoicing.invoice_summary import GetInvoiceSummary
from src.app.use_cases.invoicing.delete_invoice import DeleteInvoice
from src.app.use_cases.invoicing.generate_invoice_document import GenerateInvoiceDocument
from src.adapter.repositories.company_repository import SqlAlchemyCompanyRepository
from src.adapter.services.catalog_lookup import SqlAlchemyCatalogLookup
from src.adapter.services.ledger_store import SqlAlchemyLedgerStore
from src.adapter.services.pdf_service import ReportLabDocumentService
from src.depends import get_session

router = APIRouter(prefix="/invoices", tags=["Invoices"])

ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "COMPANY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVOICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "REMOTE_WRITE_FAILED": status.HTTP_502_BAD_GATEWAY,
}

NOT_FOUND_EXAMPLE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVOICE_NOT_FOUND",
                    "message": "Invoice with ID 123 not found"
                }
            }
        }
    }
}


def _raise_for(error) -> None:
    raise ClientError(
        error,
        status_code=ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def _to_command(request: CreateInvoiceRequestSchema) -> SubmitInvoiceCommandDTO:
    return SubmitInvoiceCommandDTO(
        company_id=request.company_id or ApplicationConfig.DEFAULT_COMPANY_ID,
        customer_id=request.customer_id,
        issue_date=request.issue_date,
        status=request.status,
        items=[
            InvoiceItemCommandDTO(
                product_id=item.product_id,
                quantity=item.quantity,
                price=item.price,
            )
            for item in request.items
        ],
    )


@router.post(
    "",
    response_model=SubmitInvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Incomplete invoice",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Please select a customer"
                        }
                    }
                }
            }
        },
        502: {
            "description": "Storage write failed",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "REMOTE_WRITE_FAILED",
                            "message": "Failed to save items of invoice INV1718035200123"
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice with its line items.

    Lines without a price take the product's current catalog price.
    GST is charged at the company's rate.

    **Returns:**
    - 201: Invoice created
    - 400: Customer or product missing
    - 404: Company not found
    - 502: Storage write failed (no partial invoice is kept)
    """
    command = _to_command(request)
    ledger = SqlAlchemyLedgerStore(session)

    use_case = SubmitInvoice(
        catalog=SqlAlchemyCatalogLookup(session, company_id=command.company_id),
        ledger=ledger,
        company_repo=SqlAlchemyCompanyRepository(session),
        number_generator=InvoiceNumberGenerator(
            ledger, prefix=ApplicationConfig.INVOICE_NUMBER_PREFIX
        ),
        default_tax_rate=ApplicationConfig.DEFAULT_TAX_RATE,
        compensate_orphans=ApplicationConfig.COMPENSATE_ORPHANED_INVOICES,
    )
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.post(
    "/preview",
    response_model=PreviewTotalsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def preview_invoice_totals(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Compute line amounts, subtotal, GST and total without saving anything.
    """
    command = _to_command(request)

    use_case = PreviewInvoiceTotals(
        catalog=SqlAlchemyCatalogLookup(session, company_id=command.company_id),
        company_repo=SqlAlchemyCompanyRepository(session),
        default_tax_rate=ApplicationConfig.DEFAULT_TAX_RATE,
    )
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "",
    response_model=InvoiceListResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    company_id: Optional[int] = Query(default=None, description="Company identifier"),
    session: AsyncSession = Depends(get_session)
):
    """
    List invoices of a company with customer and product names.
    """
    use_case = ListInvoices(SqlAlchemyLedgerStore(session))
    result = await use_case.execute(company_id or ApplicationConfig.DEFAULT_COMPANY_ID)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/summary",
    response_model=InvoiceSummaryResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def invoice_summary(
    company_id: Optional[int] = Query(default=None, description="Company identifier"),
    limit: int = Query(default=5, ge=1, le=50, description="Number of recent invoices"),
    session: AsyncSession = Depends(get_session)
):
    """
    Total sales, pending payments and the most recent invoices of a company.
    """
    use_case = GetInvoiceSummary(SqlAlchemyLedgerStore(session))
    result = await use_case.execute(
        company_id or ApplicationConfig.DEFAULT_COMPANY_ID, recent_limit=limit
    )

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.delete(
    "/{invoice_id}",
    response_model=DeleteInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_EXAMPLE}
)
async def delete_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete an invoice and its line items.
    """
    use_case = DeleteInvoice(SqlAlchemyLedgerStore(session))
    result = await use_case.execute(invoice_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: NOT_FOUND_EXAMPLE
    }
)
async def download_invoice_pdf(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Download the printable invoice as invoice-<invoice_number>.pdf.
    """
    document_service = ReportLabDocumentService(
        currency_prefix=ApplicationConfig.CURRENCY_PREFIX,
        company_name=ApplicationConfig.COMPANY_NAME,
    )

    use_case = GenerateInvoiceDocument(SqlAlchemyLedgerStore(session), document_service)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        _raise_for(result.error)

    document = result.value
    return Response(
        content=base64.b64decode(document.document_base64),
        media_type=document.media_type,
        headers={
            "Content-Disposition": f"attachment; filename={document.filename}"
        }
    )
