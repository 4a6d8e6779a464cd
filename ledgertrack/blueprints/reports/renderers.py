"""
Spreadsheet and CSV renderers for the accounting journal.
They consume rows built by ``ledger.formatting.format_row``.
"""
import csv
import io

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ...ledger import EXPORT_FIELDS

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MIMETYPE = "text/csv; charset=utf-8"

EXCEL_COLUMNS = [
    {"key": "Date", "header": "Date", "width": 15},
    {"key": "Journal", "header": "Journal", "width": 10},
    {"key": "Référence", "header": "Référence", "width": 15},
    {"key": "Compte Débit", "header": "Compte Débit", "width": 15},
    {"key": "Compte Crédit", "header": "Compte Crédit", "width": 15},
    {"key": "Libellé", "header": "Libellé", "width": 30},
    {"key": "Montant", "header": "Montant ({currency})", "width": 15, "numeric": True},
    {"key": "Type Justificatif", "header": "Type Justificatif", "width": 15},
    {"key": "Numéro Justificatif", "header": "Numéro Justificatif", "width": 20},
    {"key": "Entreprise", "header": "Entreprise", "width": 20},
]


def journal_to_csv(rows, delimiter=";") -> str:
    """CSV text with a UTF-8 BOM so spreadsheet tools pick the right encoding."""
    output = io.StringIO()
    writer = csv.DictWriter(
        output, fieldnames=EXPORT_FIELDS, delimiter=delimiter, quoting=csv.QUOTE_MINIMAL
    )
    writer.writeheader()
    for row in rows:
        writer.writerow({k: row.get(k, "") for k in EXPORT_FIELDS})
    return "\ufeff" + output.getvalue()


def journal_to_xlsx(rows, total, currency="XAF") -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Écritures Comptables"
    amount_format = f'#,##0.00 "{currency}"'

    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="4F81BD", end_color="4F81BD", fill_type="solid")
    for col_idx, col in enumerate(EXCEL_COLUMNS, 1):
        cell = ws.cell(row=1, column=col_idx, value=col["header"].format(currency=currency))
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center")
        ws.column_dimensions[get_column_letter(col_idx)].width = col["width"]

    for row_idx, row in enumerate(rows, 2):
        for col_idx, col in enumerate(EXCEL_COLUMNS, 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=row.get(col["key"], ""))
            if col.get("numeric"):
                cell.number_format = amount_format

    amount_col = next(i for i, c in enumerate(EXCEL_COLUMNS, 1) if c.get("numeric"))
    total_row = len(rows) + 2
    ws.merge_cells(start_row=total_row, start_column=1, end_row=total_row, end_column=amount_col - 1)
    label = ws.cell(row=total_row, column=1, value="TOTAL")
    label.font = Font(bold=True)
    label.alignment = Alignment(horizontal="right")
    total_cell = ws.cell(row=total_row, column=amount_col, value=float(total))
    total_cell.number_format = amount_format
    total_cell.font = Font(bold=True)

    ws.freeze_panes = ws.cell(row=2, column=1)

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)
    return output.getvalue()
