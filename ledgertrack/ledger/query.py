import logging
from typing import List

from ..errors import InvalidCompany
from .schemas import EntryFilter

logger = logging.getLogger(__name__)


class EntryQuery:
    """Resolves filter criteria against an entry store. Read-only."""

    def __init__(self, store):
        self.store = store

    def resolve_company(self, slug):
        company = self.store.get_company_by_slug(slug)
        if company is None:
            raise InvalidCompany()
        return company

    def find(self, criteria: EntryFilter, newest_first: bool = False) -> List:
        """
        Return the entries matching ``criteria`` in chronological order
        (most recent first when ``newest_first`` is set).

        An unknown company slug raises ``InvalidCompany`` rather than yielding
        an empty list, so callers can tell "bad filter" from "no entries".
        """
        logger.info(
            "Entry query: company=%s start=%s end=%s class=%s type=%s",
            criteria.company_slug, criteria.start_date, criteria.end_date, criteria.account_class,
            criteria.entry_type.value if criteria.entry_type else None,
        )
        company_id = None
        if criteria.company_slug:
            company_id = self.resolve_company(criteria.company_slug).id

        entries = self.store.list_entries(
            company_id=company_id,
            start_date=criteria.start_date,
            end_date=criteria.end_date,
            account_class=criteria.account_class,
            entry_type=criteria.entry_type,
            newest_first=newest_first,
        )
        logger.info("Entry query matched %d entries", len(entries))
        return entries
