"""Errors raised while composing and submitting invoices"""

from typing import Optional


class InvoiceComposerError(Exception):
    """Base class for composer errors"""


class ValidationError(InvoiceComposerError):
    """
    Draft is incomplete; raised before any remote call

    Attributes:
        field: Name of the missing or invalid field
        line_index: Position of the offending line, None for header fields
    """

    def __init__(self, message: str, field: str, line_index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.line_index = line_index


class RemoteWriteError(InvoiceComposerError):
    """
    A catalog or ledger call failed

    Attributes:
        orphaned_invoice_id: Header left behind without its line items, if any
    """

    def __init__(self, message: str, orphaned_invoice_id: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.orphaned_invoice_id = orphaned_invoice_id


class NotFoundError(InvoiceComposerError):
    """Catalog has no product for the given reference"""
