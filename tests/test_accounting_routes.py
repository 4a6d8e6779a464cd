from ledgertrack.models import AccountingEntry, Document


def _entry(**overrides):
    data = {
        "type": "PRODUCT",
        "amount": 1000,
        "companySlug": "africanut-fish-market",
        "label": "Vente poissons",
        "date": "2024-01-10",
        "debitAccount": "512000",
        "creditAccount": "701000",
    }
    data.update(overrides)
    return data


def _seed(client):
    first = client.post("/api/accounting", json=_entry())
    second = client.post("/api/accounting", json=_entry(
        type="EXPENSE", amount=400, label="Achat aliments", date="2024-01-15",
        debitAccount="601000", creditAccount="512000",
    ))
    assert first.status_code == 201
    assert second.status_code == 201
    return first.get_json(), second.get_json()


def test_requires_authentication(client, companies):
    response = client.get("/api/accounting")
    assert response.status_code == 401
    assert response.get_json() == {"error": "Authentification requise"}

    response = client.post("/api/accounting", json=_entry())
    assert response.status_code == 401


def test_create_and_list(auth_client, companies, user):
    created, _ = _seed(auth_client)

    assert created["type"] == "PRODUCT"
    assert created["amount"] == 1000.0
    assert created["company"]["slug"] == "africanut-fish-market"
    assert created["createdById"] == user.id
    assert created["createdBy"]["email"] == user.email

    response = auth_client.get("/api/accounting")
    assert response.status_code == 200
    assert [e["date"] for e in response.get_json()] == ["2024-01-10", "2024-01-15"]


def test_list_filters(auth_client, companies):
    _seed(auth_client)
    auth_client.post("/api/accounting", json=_entry(companySlug="africanut-media", date="2024-01-11"))

    response = auth_client.get("/api/accounting?startDate=2024-01-01&endDate=2024-01-12"
                               "&companySlug=africanut-fish-market")
    assert [e["label"] for e in response.get_json()] == ["Vente poissons"]

    response = auth_client.get("/api/accounting?accountClass=6")
    assert [e["debitAccount"] for e in response.get_json()] == ["601000"]


def test_list_with_unknown_company(auth_client, companies):
    response = auth_client.get("/api/accounting?companySlug=does-not-exist")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Entreprise invalide"}


def test_create_validation_errors(auth_client, companies, db_session):
    response = auth_client.post("/api/accounting", json=_entry(companySlug="invalid", amount=100))
    assert response.status_code == 400
    assert response.get_json()["error"] == "Entreprise invalide"

    response = auth_client.post("/api/accounting", json=_entry(type="INCOME"))
    assert response.status_code == 400
    assert "PRODUCT ou EXPENSE" in response.get_json()["error"]

    response = auth_client.post("/api/accounting", data="not json", content_type="text/plain")
    assert response.status_code == 400

    assert db_session.query(AccountingEntry).count() == 0


def test_update_clears_document_link(auth_client, companies, db_session):
    doc = Document(label="Facture", type="Facture", number="FA-001", company_id=companies["fish"].id)
    db_session.add(doc)
    db_session.commit()
    doc_id = doc.id

    created = auth_client.post("/api/accounting", json=_entry(documentId=doc_id)).get_json()
    assert [d["id"] for d in created["documents"]] == [doc_id]

    response = auth_client.put(f"/api/accounting/{created['id']}", json=_entry(label=None))
    assert response.status_code == 200
    body = response.get_json()
    assert body["documents"] == []
    assert body["label"] is None

    db_session.expire_all()
    assert db_session.get(Document, doc_id).accounting_entry_id is None


def test_update_and_delete_missing_entry(auth_client, companies):
    assert auth_client.put("/api/accounting/missing", json=_entry()).status_code == 404
    assert auth_client.delete("/api/accounting/missing").status_code == 404


def test_delete_entry(auth_client, companies, db_session):
    created, _ = _seed(auth_client)

    response = auth_client.delete(f"/api/accounting/{created['id']}")
    assert response.status_code == 200
    assert response.get_json() == {"success": True}
    assert auth_client.get(f"/api/accounting/{created['id']}").status_code == 404
    assert db_session.query(AccountingEntry).count() == 1
