from .unit_of_work import SqlAlchemyUnitOfWork
from .catalog_lookup import SqlAlchemyCatalogLookup
from .ledger_store import SqlAlchemyLedgerStore
from .pdf_service import ReportLabDocumentService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "SqlAlchemyCatalogLookup",
    "SqlAlchemyLedgerStore",
    "ReportLabDocumentService",
]
