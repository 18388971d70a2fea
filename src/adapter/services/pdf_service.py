"""ReportLab Invoice Document Implementation

Draws invoices on a fixed grid with ReportLab's canvas API.
"""

from datetime import date
from decimal import Decimal
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from src.app.services.document_service import DocumentService
from src.domain.invoice_draft import round_money
from src.domain.persisted_invoice import PersistedInvoice

PAGE_WIDTH, PAGE_HEIGHT = A4

# Positions are in mm measured from the top-left corner of the page.
MARGIN_LEFT = 20
MARGIN_TOP = 20
MARGIN_BOTTOM = 20
LINE_HEIGHT = 10
TABLE_WIDTH = 170
TITLE_X = 105
COL_ITEM = 25
COL_QTY = 100
COL_PRICE = 130
COL_AMOUNT = 160

TITLE_FONT_SIZE = 20
BODY_FONT_SIZE = 12
HEADER_FILL = (240 / 255, 240 / 255, 240 / 255)


def format_money(value: Decimal, prefix: str) -> str:
    return f"{prefix}{round_money(Decimal(value)):,.2f}"


def format_date(value: date) -> str:
    """Locale short date"""
    return value.strftime("%x")


class ReportLabDocumentService(DocumentService):
    """
    ReportLab implementation of DocumentService

    Layout is fixed (column positions, line height), and the canvas runs in
    invariant mode, so identical invoices produce identical bytes.
    """

    def __init__(
        self,
        currency_prefix: str = "Rs. ",
        company_name: str = "",
        page_compression: bool = True,
    ):
        self.currency_prefix = currency_prefix
        self.company_name = company_name
        self.page_compression = page_compression

    def render_invoice(self, invoice: PersistedInvoice) -> bytes:
        """
        Render an invoice as PDF

        Args:
            invoice: Invoice with resolved customer and product names

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        pdf = canvas.Canvas(
            buffer,
            pagesize=A4,
            invariant=1,
            pageCompression=1 if self.page_compression else 0,
        )
        pdf.setTitle(f"Invoice {invoice.invoice_number}")
        if self.company_name:
            pdf.setAuthor(self.company_name)

        y = MARGIN_TOP

        # Header
        pdf.setFont("Helvetica", TITLE_FONT_SIZE)
        pdf.drawCentredString(TITLE_X * mm, self._y(y), "Invoice")
        y += LINE_HEIGHT * 2

        # Invoice details
        pdf.setFont("Helvetica", BODY_FONT_SIZE)
        self._text(pdf, MARGIN_LEFT, y, f"Invoice Number: {invoice.invoice_number}")
        y += LINE_HEIGHT
        self._text(pdf, MARGIN_LEFT, y, f"Date: {format_date(invoice.issue_date)}")
        y += LINE_HEIGHT
        self._text(pdf, MARGIN_LEFT, y, f"Customer: {invoice.customer_name or ''}")
        y += LINE_HEIGHT * 2

        # Items
        self._draw_items_header(pdf, y)
        y += LINE_HEIGHT

        for item in invoice.items:
            y += LINE_HEIGHT
            if self._past_bottom(y):
                y = self._new_page(pdf)
                self._draw_items_header(pdf, y)
                y += LINE_HEIGHT * 2
            self._text(pdf, COL_ITEM, y, item.product_name or "")
            self._text(pdf, COL_QTY, y, str(item.quantity))
            self._text(pdf, COL_PRICE, y, format_money(item.price, self.currency_prefix))
            self._text(pdf, COL_AMOUNT, y, format_money(item.amount, self.currency_prefix))

        y += LINE_HEIGHT * 2
        if self._past_bottom(y + LINE_HEIGHT * 2):
            y = self._new_page(pdf)

        # Totals
        self._text(pdf, COL_PRICE, y, "Subtotal:")
        self._text(pdf, COL_AMOUNT, y, format_money(invoice.subtotal, self.currency_prefix))
        y += LINE_HEIGHT
        self._text(pdf, COL_PRICE, y, "GST:")
        self._text(pdf, COL_AMOUNT, y, format_money(invoice.gst_amount, self.currency_prefix))
        y += LINE_HEIGHT
        pdf.setFont("Helvetica-Bold", BODY_FONT_SIZE)
        self._text(pdf, COL_PRICE, y, "Total:")
        self._text(pdf, COL_AMOUNT, y, format_money(invoice.total_amount, self.currency_prefix))

        pdf.showPage()
        pdf.save()
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    @staticmethod
    def _y(top_mm: float) -> float:
        return PAGE_HEIGHT - top_mm * mm

    def _text(self, pdf: canvas.Canvas, x_mm: float, y_mm: float, text: str) -> None:
        pdf.drawString(x_mm * mm, self._y(y_mm), text)

    def _draw_items_header(self, pdf: canvas.Canvas, y: float) -> None:
        pdf.setFillColorRGB(*HEADER_FILL)
        pdf.rect(
            MARGIN_LEFT * mm,
            self._y(y + LINE_HEIGHT),
            TABLE_WIDTH * mm,
            LINE_HEIGHT * mm,
            stroke=0,
            fill=1,
        )
        pdf.setFillColorRGB(0, 0, 0)
        self._text(pdf, COL_ITEM, y + 7, "Item")
        self._text(pdf, COL_QTY, y + 7, "Qty")
        self._text(pdf, COL_PRICE, y + 7, "Price")
        self._text(pdf, COL_AMOUNT, y + 7, "Amount")

    @staticmethod
    def _past_bottom(y: float) -> bool:
        return y > PAGE_HEIGHT / mm - MARGIN_BOTTOM

    @staticmethod
    def _new_page(pdf: canvas.Canvas) -> float:
        pdf.showPage()
        pdf.setFont("Helvetica", BODY_FONT_SIZE)
        return MARGIN_TOP
