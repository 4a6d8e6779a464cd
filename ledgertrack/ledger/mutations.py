import logging
from datetime import date

from ..errors import InvalidCompany, NotFound
from ..models.accounting import AccountingEntry
from .schemas import EntryInput

logger = logging.getLogger(__name__)


class EntryService:
    """
    Create, replace and delete accounting entries.

    All validation (payload schema, company, linked document) happens before
    the single write that persists the change.
    """

    def __init__(self, store):
        self.store = store

    def _company(self, slug):
        company = self.store.get_company_by_slug(slug)
        if company is None:
            raise InvalidCompany()
        return company

    def _document(self, document_id):
        if document_id is None:
            return None
        document = self.store.get_document(document_id)
        if document is None:
            raise NotFound("Justificatif introuvable")
        return document

    @staticmethod
    def _apply(entry, payload: EntryInput, company):
        entry.type = payload.type
        entry.amount = payload.amount
        entry.company_id = company.id
        entry.company = company
        entry.label = payload.label
        entry.journal_code = payload.journal_code
        entry.reference = payload.reference
        entry.debit_account = payload.debit_account
        entry.credit_account = payload.credit_account
        entry.document_type = payload.document_type
        entry.document_number = payload.document_number
        entry.document_date = payload.document_date

    def create(self, data, actor_id) -> AccountingEntry:
        payload = data if isinstance(data, EntryInput) else EntryInput.parse(data)
        company = self._company(payload.company_slug)
        document = self._document(payload.document_id)

        entry = AccountingEntry(created_by_id=actor_id)
        self._apply(entry, payload, company)
        entry.date = payload.entry_date or date.today()

        entry = self.store.add_entry(entry, document)
        logger.info(f"Accounting entry {entry.id} created by user {actor_id}")
        return entry

    def update(self, entry_id, data) -> AccountingEntry:
        """Full replacement: optional fields left out of ``data`` are cleared."""
        payload = data if isinstance(data, EntryInput) else EntryInput.parse(data)
        entry = self.store.get_entry(entry_id)
        if entry is None:
            raise NotFound()
        company = self._company(payload.company_slug)
        document = self._document(payload.document_id)

        self._apply(entry, payload, company)
        # the transaction date is mandatory, keep it unless a new one is given
        if payload.entry_date is not None:
            entry.date = payload.entry_date

        entry = self.store.save_entry(entry, document)
        logger.info(f"Accounting entry {entry.id} updated")
        return entry

    def remove(self, entry_id) -> bool:
        entry = self.store.get_entry(entry_id)
        if entry is None:
            raise NotFound()
        self.store.delete_entry(entry)
        logger.info(f"Accounting entry {entry_id} deleted")
        return True
