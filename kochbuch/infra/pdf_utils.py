import io
from xml.sax.saxutils import escape
from typing import Optional
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from kochbuch.domain.ShoppingList import ShoppingList, format_amount
from kochbuch.utilities.config import SHOPPING_LIST_TITLE


def generate_pdf_for_shopping_list(shopping_list: ShoppingList, title: Optional[str] = None) -> bytes:
    """Generate a simple PDF table: Amount / Unit / Ingredient for the shopping list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(escape(title or SHOPPING_LIST_TITLE), styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Menge", "Einheit", "Zutat"]]
    for item in shopping_list:
        data.append([format_amount(item.amount), item.unit, item.name])

    table = Table(data, repeatRows=1, colWidths=[70, 80, 300])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (0,-1), "RIGHT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
