from init_db import GROUP_COMPANIES, seed_companies
from ledgertrack.models import Company


def test_seed_companies_only_when_empty(db_session):
    assert seed_companies() == len(GROUP_COMPANIES)
    assert seed_companies() == 0

    slugs = {c.slug for c in db_session.query(Company).all()}
    assert slugs == {
        "africanut-fish-market",
        "magaton-provender",
        "nouvelle-academie-numerique-africaine",
        "africanut-media",
    }
