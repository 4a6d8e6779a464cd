from datetime import date
from decimal import Decimal

import pytest

from ledgertrack.errors import InvalidCompany, InvalidPayload, InvalidType, NotFound
from ledgertrack.ledger import EntryService
from ledgertrack.models import EntryType
from fakes import InMemoryEntryStore, make_company, make_document


@pytest.fixture
def store():
    return InMemoryEntryStore(
        companies=[make_company(id=1, slug="africanut-fish-market")],
        documents=[make_document(id=7), make_document(id=8, number="FA-002")],
    )


@pytest.fixture
def service(store):
    return EntryService(store)


def _payload(**overrides):
    data = {
        "type": "PRODUCT",
        "amount": "1000",
        "companySlug": "africanut-fish-market",
        "label": "Vente poissons",
        "date": "2024-01-10",
        "journalCode": "VT",
        "reference": "REF-1",
        "debitAccount": "512000",
        "creditAccount": "701000",
    }
    data.update(overrides)
    return data


def test_create_entry(service, store):
    entry = service.create(_payload(documentId=7), actor_id=3)

    assert entry.id in store.entries
    assert entry.type == EntryType.PRODUCT
    assert entry.amount == Decimal("1000")
    assert entry.company_id == 1
    assert entry.created_by_id == 3
    assert entry.date == date(2024, 1, 10)
    assert [d.id for d in entry.documents] == [7]


def test_create_defaults_date_to_today(service):
    entry = service.create(_payload(date=None), actor_id=1)
    assert entry.date == date.today()


def test_create_with_unknown_company_persists_nothing(service, store):
    with pytest.raises(InvalidCompany):
        service.create(_payload(companySlug="invalid", amount=100), actor_id=1)
    assert store.entries == {}
    assert store.writes == 0


def test_create_without_company(service, store):
    data = _payload()
    del data["companySlug"]
    with pytest.raises(InvalidCompany):
        service.create(data, actor_id=1)
    assert store.writes == 0


@pytest.mark.parametrize("bad_type", ["INCOME", "", None, "product"])
def test_create_rejects_unknown_type(service, store, bad_type):
    with pytest.raises(InvalidType):
        service.create(_payload(type=bad_type), actor_id=1)
    assert store.writes == 0


@pytest.mark.parametrize("amount", ["-5", "abc", float("inf"), "NaN"])
def test_create_rejects_bad_amounts(service, store, amount):
    with pytest.raises(InvalidPayload):
        service.create(_payload(amount=amount), actor_id=1)
    assert store.writes == 0


def test_amount_is_coerced(service):
    assert service.create(_payload(amount="1 250,50"), actor_id=1).amount == Decimal("1250.50")
    assert service.create(_payload(amount=99), actor_id=1).amount == Decimal("99")


def test_create_with_unknown_document(service, store):
    with pytest.raises(NotFound):
        service.create(_payload(documentId=999), actor_id=1)
    assert store.writes == 0


def test_update_replaces_all_fields(service):
    entry = service.create(_payload(documentId=7), actor_id=1)

    updated = service.update(entry.id, {
        "type": "EXPENSE",
        "amount": 400,
        "companySlug": "africanut-fish-market",
        "debitAccount": "601000",
    })

    assert updated.type == EntryType.EXPENSE
    assert updated.amount == Decimal("400")
    assert updated.debit_account == "601000"
    # optional fields left out are cleared, not merged
    assert updated.credit_account is None
    assert updated.label is None
    assert updated.journal_code is None
    assert updated.reference is None
    assert updated.date == date(2024, 1, 10)


def test_update_without_document_clears_link(service):
    entry = service.create(_payload(documentId=7), actor_id=1)
    assert [d.id for d in entry.documents] == [7]

    updated = service.update(entry.id, _payload())

    assert updated.documents == []


def test_update_switches_document(service):
    entry = service.create(_payload(documentId=7), actor_id=1)
    updated = service.update(entry.id, _payload(documentId=8))
    assert [d.id for d in updated.documents] == [8]


def test_update_missing_entry(service):
    with pytest.raises(NotFound):
        service.update("missing", _payload())


def test_update_revalidates_company(service, store):
    entry = service.create(_payload(), actor_id=1)
    with pytest.raises(InvalidCompany):
        service.update(entry.id, _payload(companySlug="nope", label="changed"))
    assert store.entries[entry.id].label == "Vente poissons"


def test_remove(service, store):
    entry = service.create(_payload(), actor_id=1)
    assert service.remove(entry.id) is True
    assert entry.id not in store.entries


def test_remove_missing_entry(service):
    with pytest.raises(NotFound):
        service.remove("missing")
