"""Accounting ledger: entry queries, journal exports and financial statements."""
from .balance import BalanceSheet, account_class, compute_balance_sheet
from .formatting import EXPORT_FIELDS, build_journal, format_row
from .mutations import EntryService
from .pnl import PnlReport, compute_monthly, compute_pnl
from .query import EntryQuery
from .schemas import EntryFilter, EntryInput
from .store import EntryStore, SqlAlchemyEntryStore

__all__ = [
    "BalanceSheet",
    "EXPORT_FIELDS",
    "EntryFilter",
    "EntryInput",
    "EntryQuery",
    "EntryService",
    "EntryStore",
    "PnlReport",
    "SqlAlchemyEntryStore",
    "account_class",
    "build_journal",
    "compute_balance_sheet",
    "compute_monthly",
    "compute_pnl",
    "format_row",
]
