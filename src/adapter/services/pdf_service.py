"""ReportLab Invoice Renderer Implementation

Renders an InvoiceDocument to PDF using ReportLab.
"""

from io import BytesIO
from decimal import Decimal
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.invoice_renderer import InvoiceRenderer, InvoiceDocument


def _money(symbol: str, amount: Decimal) -> str:
    return f"{symbol}{amount:,.2f}"


class ReportLabInvoiceRenderer(InvoiceRenderer):
    """
    ReportLab implementation of InvoiceRenderer

    Layout: seller header, invoice number and date, customer block, one row
    per work line (item name with notes and work date underneath) and the
    total.
    """

    media_type = "application/pdf"

    def render(self, document: InvoiceDocument) -> bytes:
        """
        Render the invoice as a PDF

        Args:
            document: Invoice projection to render

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Invoice {document.number}",
        )

        styles = getSampleStyleSheet()
        elements = []

        # Custom styles
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=20,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#7F8C8D"),
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )
        notes_style = ParagraphStyle(
            "NotesStyle",
            parent=styles["Normal"],
            fontSize=8,
            textColor=colors.HexColor("#444444"),
        )

        # Header - seller
        elements.append(Paragraph(escape(document.seller.name), title_style))
        if document.seller.address:
            elements.append(Paragraph(escape(document.seller.address), header_style))
        if document.seller.tax_id:
            elements.append(Paragraph(f"Tax ID: {escape(document.seller.tax_id)}", header_style))
        elements.append(Spacer(1, 8 * mm))

        elements.append(Paragraph(f"Invoice {escape(document.number)}", title_style))
        elements.append(
            Paragraph(f"Date: {document.issued_at.strftime('%Y-%m-%d %H:%M')}", header_style)
        )
        elements.append(Spacer(1, 6 * mm))

        # Customer block
        customer = document.customer
        elements.append(Paragraph(f"<b>Customer:</b> {escape(customer.name)}", normal_style))
        if customer.tax_id:
            elements.append(Paragraph(f"Tax ID: {escape(customer.tax_id)}", normal_style))
        if customer.address:
            elements.append(Paragraph(f"Address: {escape(customer.address)}", normal_style))
        if customer.locality:
            elements.append(Paragraph(escape(customer.locality), normal_style))
        if customer.phone:
            elements.append(Paragraph(f"Phone: {escape(customer.phone)}", normal_style))
        elements.append(Spacer(1, 8 * mm))

        # Line Items Table
        symbol = document.currency_symbol
        line_data = [["Item", "Qty", "Price", "Amount"]]
        for row in document.rows:
            description = [Paragraph(escape(row.description), normal_style)]
            if row.notes:
                description.append(Paragraph(escape(row.notes), notes_style))
            if row.work_date:
                description.append(
                    Paragraph(f"Work date: {row.work_date.isoformat()}", notes_style)
                )
            line_data.append(
                [
                    description,
                    f"{row.qty:,.2f}",
                    _money(symbol, row.price),
                    _money(symbol, row.amount),
                ]
            )

        line_table = Table(
            line_data, colWidths=[85 * mm, 20 * mm, 30 * mm, 35 * mm], repeatRows=1
        )
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LINEBELOW", (0, 0), (-1, -1), 0.5, colors.HexColor("#EEEEEE")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )

        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Total
        total_data = [["", "", "Total", _money(symbol, document.total)]]
        total_table = Table(total_data, colWidths=[85 * mm, 20 * mm, 30 * mm, 35 * mm])
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (2, 0), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 11),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (2, 0), (-1, 0), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 8),
                ]
            )
        )
        elements.append(total_table)

        # Build PDF
        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
