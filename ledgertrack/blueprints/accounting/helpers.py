from decimal import Decimal

from flask import current_app, request

from ...errors import InvalidPayload
from ...extensions import db
from ...ledger import EntryFilter, EntryQuery, EntryService, SqlAlchemyEntryStore


def entry_store():
    """Request-scoped store bound to the Flask-SQLAlchemy session."""
    return SqlAlchemyEntryStore(db.session)


def entry_query():
    return EntryQuery(entry_store())


def entry_service():
    return EntryService(entry_store())


def request_filter() -> EntryFilter:
    return EntryFilter.from_args(request.args)


def request_json():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidPayload("Corps de requête JSON attendu")
    return data


def ledger_settings():
    """Class-digit convention, currency and balance tolerance from app config."""
    return {
        "class_digits": int(current_app.config.get("LEDGER_CLASS_DIGITS", 1)),
        "currency": current_app.config.get("LEDGER_CURRENCY", "XAF"),
        "tolerance": current_app.config.get("BALANCE_TOLERANCE", Decimal("0.01")),
    }
