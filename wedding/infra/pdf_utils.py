import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from wedding.logic.reporting.summary import compute_plan_summary

_HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#E91E63")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 11),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
]


def generate_pdf_for_plan(plan, today=None):
    """Generate a one-page PDF summary: couple, budget table, guest/task/vendor counts."""
    info = plan.basic_info
    summary = compute_plan_summary(plan, today)
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=30, leftMargin=30, topMargin=30, bottomMargin=30)

    styles = getSampleStyleSheet()
    couple = escape(" & ".join(n for n in (info.bride_name, info.groom_name) if n) or "Our Wedding")
    when = info.wedding_date.isoformat() if info.wedding_date else "date to be decided"
    venue = escape(info.venue or "venue to be decided")
    theme = escape(info.theme or "no theme yet")
    elements = [
        Paragraph(f"Wedding Plan – {couple}", styles["Title"]),
        Paragraph(f"{when} · {venue} · {theme}", styles["Normal"]),
        Paragraph(f"Planning progress: {summary['completion']}%", styles["Normal"]),
        Spacer(1, 16),
    ]

    data = [["Category", "Allocated", "Spent"]]
    for entry in plan.budget.allocated:
        data.append([entry.category, f"{entry.amount:,}", f"{entry.spent:,}"])
    data.append(["Total", f"{summary['budget']['allocated']:,}", f"{summary['budget']['spent']:,}"])
    data.append(["Budget", f"{summary['budget']['total']:,}", ""])
    budget_table = Table(data, repeatRows=1)
    budget_table.setStyle(TableStyle(_HEADER_STYLE))
    elements.extend([budget_table, Spacer(1, 16)])

    rsvp = summary['guests']['rsvp']
    counts = [
        ["Item", "Count"],
        ["Guests", str(summary['guests']['total'])],
        ["Confirmed / Pending / Declined",
         f"{rsvp['Confirmed']} / {rsvp['Pending']} / {rsvp['Declined']}"],
        ["Tasks completed", f"{summary['timeline']['completed']} of {summary['timeline']['total']}"],
        ["Vendors", str(summary['vendors']['total'])],
    ]
    counts_table = Table(counts, repeatRows=1)
    counts_table.setStyle(TableStyle(_HEADER_STYLE))
    elements.append(counts_table)

    doc.build(elements)
    return buf.getvalue()
