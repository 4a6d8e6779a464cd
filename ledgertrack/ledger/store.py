"""
Entry store: the only shared resource of the ledger.

Services receive a store instance explicitly; ``SqlAlchemyEntryStore`` is the
production implementation, tests substitute an in-memory one with the same
methods.
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError

from ..errors import StoreFailure
from ..models.accounting import AccountingEntry, EntryType
from ..models.company import Company
from ..models.document import Document

logger = logging.getLogger(__name__)


class EntryStore:
    """Interface shared by every entry store implementation."""

    def get_company_by_slug(self, slug: str) -> Optional[Company]:
        raise NotImplementedError

    def get_document(self, document_id: int) -> Optional[Document]:
        raise NotImplementedError

    def list_entries(
        self,
        company_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_class: Optional[str] = None,
        entry_type: Optional[EntryType] = None,
        newest_first: bool = False,
    ) -> List[AccountingEntry]:
        """Return matching entries in ascending date order, or descending with ``newest_first``."""
        raise NotImplementedError

    def get_entry(self, entry_id: str) -> Optional[AccountingEntry]:
        raise NotImplementedError

    def add_entry(self, entry: AccountingEntry, document: Optional[Document] = None) -> AccountingEntry:
        raise NotImplementedError

    def save_entry(self, entry: AccountingEntry, document: Optional[Document] = None) -> AccountingEntry:
        """Persist a full replacement of ``entry``; ``document`` becomes its only link."""
        raise NotImplementedError

    def delete_entry(self, entry: AccountingEntry) -> None:
        raise NotImplementedError


class SqlAlchemyEntryStore(EntryStore):
    def __init__(self, session):
        self.session = session

    def _fail(self, action: str, exc: Exception):
        self.session.rollback()
        logger.exception(f"Store failure while {action}: {exc}")
        raise StoreFailure() from exc

    def get_company_by_slug(self, slug):
        try:
            return self.session.query(Company).filter_by(slug=slug).first()
        except SQLAlchemyError as e:
            self._fail("resolving company", e)

    def get_document(self, document_id):
        try:
            return self.session.get(Document, document_id)
        except SQLAlchemyError as e:
            self._fail("loading document", e)

    def list_entries(self, company_id=None, start_date=None, end_date=None, account_class=None,
                     entry_type=None, newest_first=False):
        q = self.session.query(AccountingEntry)
        if company_id is not None:
            q = q.filter(AccountingEntry.company_id == company_id)
        if entry_type is not None:
            q = q.filter(AccountingEntry.type == entry_type)
        if start_date is not None:
            q = q.filter(AccountingEntry.date >= start_date)
        if end_date is not None:
            q = q.filter(AccountingEntry.date <= end_date)
        if account_class:
            q = q.filter(
                or_(
                    AccountingEntry.debit_account.startswith(account_class, autoescape=True),
                    AccountingEntry.credit_account.startswith(account_class, autoescape=True),
                )
            )
        if newest_first:
            q = q.order_by(AccountingEntry.date.desc(), AccountingEntry.created_at.desc())
        else:
            q = q.order_by(AccountingEntry.date.asc(), AccountingEntry.created_at.asc())
        try:
            return q.all()
        except SQLAlchemyError as e:
            self._fail("listing entries", e)

    def get_entry(self, entry_id):
        try:
            return self.session.get(AccountingEntry, entry_id)
        except SQLAlchemyError as e:
            self._fail("loading entry", e)

    def add_entry(self, entry, document=None):
        try:
            self.session.add(entry)
            if document is not None:
                entry.documents = [document]
            self.session.commit()
            return entry
        except SQLAlchemyError as e:
            self._fail("creating entry", e)

    def save_entry(self, entry, document=None):
        try:
            entry.documents = [document] if document is not None else []
            self.session.commit()
            return entry
        except SQLAlchemyError as e:
            self._fail("updating entry", e)

    def delete_entry(self, entry):
        try:
            self.session.delete(entry)
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail("deleting entry", e)
