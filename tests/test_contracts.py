from datetime import date

import pytest
from sqlalchemy.orm import Session

import rental_manager.repositories.payment as payment_repo
import rental_manager.services.contract as contract_service
from rental_manager.db.models.contract import Contract as ContractModel
from rental_manager.db.models.payment import Payment as PaymentModel
from rental_manager.schemas.contract import ContractCreate


def _contract_payload(owner, tenant, rental_property, **overrides) -> dict:
    payload = {
        "owner_id": owner.id,
        "tenant_id": tenant.id,
        "property_id": rental_property.id,
        "start_date": "2024-03-01",
        "duration": 6,
        "rent_value": 180000,
        "payment_day": 5,
    }
    payload.update(overrides)
    return payload


# ============================================================================
# CREATE + INSTALLMENTS
# ============================================================================


def test_create_contract_generates_installments(
    client, db: Session, auth_headers: dict, owner, tenant, rental_property
):
    response = client.post(
        "/api/v1/contracts",
        json=_contract_payload(owner, tenant, rental_property),
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "active"
    assert data["end_date"] == "2024-09-01"

    payments = client.get(
        f"/api/v1/contracts/{data['id']}/payments", headers=auth_headers
    ).json()
    assert len(payments) == 6
    assert [p["due_date"] for p in payments] == [
        "2024-03-05",
        "2024-04-05",
        "2024-05-05",
        "2024-06-05",
        "2024-07-05",
        "2024-08-05",
    ]
    for index, payment in enumerate(payments):
        assert payment["value"] == 180000
        assert payment["is_paid"] is False
        assert payment["payment_date"] is None
        assert payment["interest_amount"] == 0
        assert payment["late_payment_fee"] == 0
        assert payment["payment_method"] is None
        assert payment["receipt_number"] is None
        assert payment["observations"] == f"Installment {index + 1}/6"


def test_installment_count_matches_duration(db: Session, contract):
    payments = payment_repo.get_payments_by_contract_id(db, contract.id)
    assert len(payments) == contract.duration == 12
    assert payments[0].due_date == date(2024, 1, 10)
    assert payments[-1].due_date == date(2024, 12, 10)


def test_payment_day_beyond_month_end_is_clamped(
    client, db: Session, auth_headers: dict, owner, tenant, rental_property
):
    response = client.post(
        "/api/v1/contracts",
        json=_contract_payload(
            owner,
            tenant,
            rental_property,
            start_date="2024-01-20",
            duration=3,
            payment_day=31,
        ),
        headers=auth_headers,
    )
    assert response.status_code == 201
    payments = client.get(
        f"/api/v1/contracts/{response.json()['id']}/payments", headers=auth_headers
    ).json()
    assert [p["due_date"] for p in payments] == [
        "2024-01-31",
        "2024-02-29",
        "2024-03-31",
    ]


def test_explicit_end_date_is_kept(
    client, db: Session, auth_headers: dict, owner, tenant, rental_property
):
    response = client.post(
        "/api/v1/contracts",
        json=_contract_payload(owner, tenant, rental_property, end_date="2024-12-31"),
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["end_date"] == "2024-12-31"


def test_end_date_before_start_date_rejected(
    client, db: Session, auth_headers: dict, owner, tenant, rental_property
):
    response = client.post(
        "/api/v1/contracts",
        json=_contract_payload(owner, tenant, rental_property, end_date="2024-01-01"),
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.parametrize(
    "field,value", [("duration", 0), ("payment_day", 0), ("payment_day", 32), ("rent_value", 0)]
)
def test_create_contract_invalid_numbers(
    client, db: Session, auth_headers: dict, owner, tenant, rental_property, field, value
):
    response = client.post(
        "/api/v1/contracts",
        json=_contract_payload(owner, tenant, rental_property, **{field: value}),
        headers=auth_headers,
    )
    assert response.status_code == 422
    assert db.query(ContractModel).count() == 0


def test_create_contract_unknown_tenant(
    client, db: Session, auth_headers: dict, owner, tenant, rental_property
):
    response = client.post(
        "/api/v1/contracts",
        json=_contract_payload(owner, tenant, rental_property, tenant_id=9999),
        headers=auth_headers,
    )
    assert response.status_code == 404
    assert "Tenant" in response.json()["detail"]


def test_create_contract_property_of_another_owner(
    client, db: Session, auth_headers: dict, owner, tenant, rental_property, address_payload
):
    other_owner = client.post(
        "/api/v1/owners",
        json={
            "name": "Other Owner",
            "document": "222.333.444-55",
            "email": "other@example.com",
            "phone": "(11) 2222-3333",
            "address": address_payload,
        },
        headers=auth_headers,
    ).json()

    response = client.post(
        "/api/v1/contracts",
        json=_contract_payload(owner, tenant, rental_property, owner_id=other_owner["id"]),
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["field"] == "property_id"
    assert db.query(ContractModel).count() == 0


def test_contract_creation_is_atomic(
    db: Session, owner, tenant, rental_property, monkeypatch
):
    """A failure while generating installments leaves neither contract nor payments behind."""

    def failing_generate_installments(session, contract):
        payment_repo.add_payment(
            session, contract_id=contract.id, due_date=date(2024, 1, 5), value=100
        )
        session.flush()
        raise RuntimeError("storage failure")

    monkeypatch.setattr(
        contract_service, "generate_installments", failing_generate_installments
    )

    with pytest.raises(RuntimeError):
        contract_service.create_contract(
            db,
            ContractCreate(
                owner_id=owner.id,
                tenant_id=tenant.id,
                property_id=rental_property.id,
                start_date=date(2024, 1, 1),
                duration=3,
                rent_value=100000,
                payment_day=5,
            ),
        )

    assert db.query(ContractModel).count() == 0
    assert db.query(PaymentModel).count() == 0


def test_create_contract_without_authentication(
    client, db: Session, owner, tenant, rental_property
):
    response = client.post(
        "/api/v1/contracts", json=_contract_payload(owner, tenant, rental_property)
    )
    assert response.status_code == 401


# ============================================================================
# READ
# ============================================================================


def test_list_contracts_filters(
    client, db: Session, auth_headers: dict, contract, owner, tenant
):
    assert [
        c["id"]
        for c in client.get(
            f"/api/v1/contracts?owner_id={owner.id}", headers=auth_headers
        ).json()
    ] == [contract.id]
    assert (
        client.get(
            f"/api/v1/contracts?tenant_id={tenant.id + 1000}", headers=auth_headers
        ).json()
        == []
    )
    assert (
        client.get("/api/v1/contracts?status=closed", headers=auth_headers).json() == []
    )


def test_get_contract_not_found(client, db: Session, auth_headers: dict):
    response = client.get("/api/v1/contracts/9999", headers=auth_headers)
    assert response.status_code == 404


def test_contract_document_data(
    client, db: Session, auth_headers: dict, contract, owner, tenant, rental_property
):
    response = client.get(
        f"/api/v1/contracts/{contract.id}/document-data", headers=auth_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert data["contract"]["id"] == contract.id
    assert data["owner"]["id"] == owner.id
    assert data["tenant"]["id"] == tenant.id
    assert data["property"]["id"] == rental_property.id


def test_contract_document_data_not_found(client, db: Session, auth_headers: dict):
    response = client.get("/api/v1/contracts/9999/document-data", headers=auth_headers)
    assert response.status_code == 404


# ============================================================================
# UPDATE / DELETE
# ============================================================================


def test_update_contract(client, db: Session, auth_headers: dict, contract):
    response = client.put(
        f"/api/v1/contracts/{contract.id}",
        json={"status": "closed", "observations": "Tenant moved out"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "closed"
    assert data["observations"] == "Tenant moved out"
    assert data["duration"] == 12


def test_update_contract_payment_day_keeps_installments(
    client, db: Session, auth_headers: dict, contract
):
    response = client.put(
        f"/api/v1/contracts/{contract.id}",
        json={"payment_day": 20},
        headers=auth_headers,
    )
    assert response.status_code == 200
    payments = payment_repo.get_payments_by_contract_id(db, contract.id)
    assert payments[0].due_date == date(2024, 1, 10)


def test_update_contract_end_date_before_start(
    client, db: Session, auth_headers: dict, contract
):
    response = client.put(
        f"/api/v1/contracts/{contract.id}",
        json={"end_date": "2023-12-31"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["field"] == "end_date"


def test_delete_contract_with_payments_refused(
    client, db: Session, auth_headers: dict, contract
):
    response = client.delete(f"/api/v1/contracts/{contract.id}", headers=auth_headers)
    assert response.status_code == 400
    assert db.query(ContractModel).count() == 1


def test_delete_contract_with_only_archived_payments_refused(
    client, db: Session, auth_headers: dict, contract
):
    for payment in payment_repo.get_payments_by_contract_id(db, contract.id):
        client.delete(f"/api/v1/payments/{payment.id}", headers=auth_headers)

    response = client.delete(f"/api/v1/contracts/{contract.id}", headers=auth_headers)
    assert response.status_code == 400


def test_delete_contract_not_found(client, db: Session, auth_headers: dict):
    response = client.delete("/api/v1/contracts/9999", headers=auth_headers)
    assert response.status_code == 404
