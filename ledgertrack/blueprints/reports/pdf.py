import logging

from flask import render_template

from ...ledger.formatting import format_amount_fr, format_date_fr

logger = logging.getLogger(__name__)

PDF_MIMETYPE = "application/pdf"


def period_label(start_date=None, end_date=None):
    if start_date and end_date:
        return f"Période: Du {format_date_fr(start_date)} au {format_date_fr(end_date)}"
    return "Période: Toutes dates"


def render_report_html(template, **context):
    """Render a report template; the money/date filters use French formatting."""
    return render_template(
        f"pdf/{template}",
        money=format_amount_fr,
        fr_date=format_date_fr,
        **context,
    )


def html_to_pdf(html: str) -> bytes:
    # WeasyPrint pulls in native libraries (pango/cairo); import on first use
    from weasyprint import HTML

    pdf = HTML(string=html).write_pdf()
    logger.info(f"Rendered PDF report ({len(pdf)} bytes)")
    return pdf
