from datetime import date

from flask import Response, current_app
from flask_login import login_required

from ...extensions import limiter
from ...ledger import build_journal, compute_balance_sheet, compute_monthly, compute_pnl
from ..accounting.helpers import entry_query, ledger_settings, request_filter
from . import reports_bp
from .pdf import PDF_MIMETYPE, html_to_pdf, period_label, render_report_html
from .renderers import CSV_MIMETYPE, XLSX_MIMETYPE, journal_to_csv, journal_to_xlsx


def _export_limit():
    return current_app.config.get("EXPORT_RATE_LIMIT", "30/minute")


def _attachment(body, mimetype, basename, ext):
    filename = f"{basename}-{date.today().isoformat()}.{ext}"
    return Response(
        body,
        mimetype=mimetype,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _journal():
    criteria = request_filter()
    entries = entry_query().find(criteria)
    journal = build_journal(entries, currency=ledger_settings()["currency"])
    return criteria, entries, journal


@reports_bp.route("/journal", methods=["GET"])
@login_required
def journal():
    _, _, journal = _journal()
    return {
        "rows": journal["rows"],
        "total": float(journal["total"]),
        "currency": journal["currency"],
    }


@reports_bp.route("/csv", methods=["GET"])
@limiter.limit(_export_limit)
@login_required
def journal_csv():
    _, _, journal = _journal()
    return _attachment(journal_to_csv(journal["rows"]), CSV_MIMETYPE, "journal-comptable", "csv")


@reports_bp.route("/excel", methods=["GET"])
@limiter.limit(_export_limit)
@login_required
def journal_excel():
    _, _, journal = _journal()
    body = journal_to_xlsx(journal["rows"], journal["total"], currency=journal["currency"])
    return _attachment(body, XLSX_MIMETYPE, "journal-comptable", "xlsx")


@reports_bp.route("/pdf", methods=["GET"])
@limiter.limit(_export_limit)
@login_required
def journal_pdf():
    criteria, entries, journal = _journal()
    html = render_report_html(
        "journal.html",
        entries=entries,
        rows=journal["rows"],
        total=journal["total"],
        currency=journal["currency"],
        period=period_label(criteria.start_date, criteria.end_date),
    )
    return _attachment(html_to_pdf(html), PDF_MIMETYPE, "journal-comptable", "pdf")


@reports_bp.route("/pnl", methods=["GET"])
@login_required
def pnl():
    # arithmetic over an empty set is well defined: zero totals, no 204
    entries = entry_query().find(request_filter())
    return compute_pnl(entries).to_dict()


@reports_bp.route("/pnl.pdf", methods=["GET"])
@limiter.limit(_export_limit)
@login_required
def pnl_pdf():
    criteria = request_filter()
    entries = entry_query().find(criteria)
    if not entries:
        current_app.logger.info("No entries for P&L PDF export")
        return Response(status=204)
    report = compute_pnl(entries)
    html = render_report_html(
        "pnl.html",
        report=report,
        currency=ledger_settings()["currency"],
        period=period_label(criteria.start_date, criteria.end_date),
    )
    return _attachment(html_to_pdf(html), PDF_MIMETYPE, "compte-resultat", "pdf")


@reports_bp.route("/monthly", methods=["GET"])
@login_required
def monthly():
    entries = entry_query().find(request_filter())
    return {"months": compute_monthly(entries)}


def _balance_sheet():
    # the account-class filter never applies to the balance sheet
    criteria = request_filter().without_account_class()
    entries = entry_query().find(criteria)
    settings = ledger_settings()
    sheet = compute_balance_sheet(
        entries, class_digits=settings["class_digits"], tolerance=settings["tolerance"]
    )
    return criteria, sheet, settings


@reports_bp.route("/balance-sheet", methods=["GET"])
@login_required
def balance_sheet():
    _, sheet, _ = _balance_sheet()
    return sheet.to_dict()


@reports_bp.route("/balance-sheet.pdf", methods=["GET"])
@limiter.limit(_export_limit)
@login_required
def balance_sheet_pdf():
    criteria, sheet, settings = _balance_sheet()
    html = render_report_html(
        "balance_sheet.html",
        sheet=sheet,
        currency=settings["currency"],
        period=period_label(criteria.start_date, criteria.end_date),
    )
    return _attachment(html_to_pdf(html), PDF_MIMETYPE, "bilan-ohada", "pdf")
