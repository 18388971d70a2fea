from .unit_of_work import UnitOfWork
from .catalog_lookup import CatalogLookup
from .ledger_store import LedgerStore
from .document_service import DocumentService

__all__ = [
    "UnitOfWork",
    "CatalogLookup",
    "LedgerStore",
    "DocumentService",
]
