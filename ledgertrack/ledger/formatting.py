"""
Journal export rows.

``format_row`` produces the single row shape every journal export target
consumes (JSON table, CSV, spreadsheet, PDF); renderers pick columns from it
but never compute their own values.
"""
from decimal import Decimal

from ..errors import NoData
from ..models.accounting import EntryType
from .pnl import amount_of

NA = "N/A"
DEFAULT_JOURNAL = "OD"
DEFAULT_CURRENCY = "XAF"

EXPORT_FIELDS = [
    "Date",
    "Type d'écriture",
    "Compte Débit",
    "Compte Crédit",
    "Libellé",
    "Montant",
    "Devise",
    "Journal",
    "Référence",
    "Type Justificatif",
    "Numéro Justificatif",
    "Date Justificatif",
    "Document ID",
    "Entreprise",
]


def format_date_fr(value, default=NA):
    if not value:
        return default
    return value.strftime("%d/%m/%Y")


def format_amount_fr(value, currency=DEFAULT_CURRENCY):
    """1234567.5 -> '1 234 567,50 XAF'"""
    text = f"{float(value or 0):,.2f}".replace(",", " ").replace(".", ",")
    return f"{text} {currency}"


def type_label(entry_type):
    return "Produit" if entry_type == EntryType.PRODUCT else "Charge"


def format_row(entry, currency=DEFAULT_CURRENCY):
    documents = getattr(entry, "documents", None) or []
    company = getattr(entry, "company", None)
    return {
        "Date": format_date_fr(entry.date),
        "Compte Débit": entry.debit_account or NA,
        "Compte Crédit": entry.credit_account or NA,
        "Type d'écriture": type_label(entry.type),
        "Libellé": entry.label or NA,
        "Montant": float(entry.amount) if entry.amount else 0,
        "Devise": currency,
        "Journal": entry.journal_code or DEFAULT_JOURNAL,
        "Référence": entry.reference or NA,
        "Type Justificatif": entry.document_type or NA,
        "Numéro Justificatif": entry.document_number or NA,
        "Date Justificatif": format_date_fr(entry.document_date),
        "Document ID": documents[0].id if documents else NA,
        "Entreprise": company.name if company is not None else NA,
    }


def journal_total(entries):
    return sum((amount_of(e) for e in entries), Decimal("0"))


def build_journal(entries, currency=DEFAULT_CURRENCY):
    """Rows plus grand total for a journal export. Empty input raises NoData."""
    if not entries:
        raise NoData()
    return {
        "rows": [format_row(e, currency) for e in entries],
        "total": journal_total(entries),
        "currency": currency,
    }
