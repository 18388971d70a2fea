from .errors import InvoiceComposerError, NotFoundError, RemoteWriteError, ValidationError
from .numbering import InvoiceNumberGenerator
from .invoice_composer import DEFAULT_TAX_RATE, InvoiceComposer, SubmittedInvoice

__all__ = [
    "InvoiceComposerError",
    "NotFoundError",
    "RemoteWriteError",
    "ValidationError",
    "InvoiceNumberGenerator",
    "DEFAULT_TAX_RATE",
    "InvoiceComposer",
    "SubmittedInvoice",
]
