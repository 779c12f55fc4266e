from sqlalchemy.orm import Session

from rental_manager.db.models.owner import Owner as OwnerModel
from rental_manager.schemas.owner import Owner


def _owner_payload(address: dict, **overrides) -> dict:
    payload = {
        "name": "Carlos Pereira",
        "document": "111.222.333-44",
        "email": "carlos@example.com",
        "phone": "(21) 99876-5432",
        "address": address,
    }
    payload.update(overrides)
    return payload


# ============================================================================
# CREATE
# ============================================================================


def test_create_owner(client, db: Session, auth_headers: dict, address_payload: dict):
    response = client.post(
        "/api/v1/owners", json=_owner_payload(address_payload), headers=auth_headers
    )
    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["status"] == "active"
    assert data["address"] == address_payload
    assert data["created_at"]


def test_create_owner_with_cnpj(
    client, db: Session, auth_headers: dict, address_payload: dict
):
    response = client.post(
        "/api/v1/owners",
        json=_owner_payload(address_payload, document="12.345.678/0001-90"),
        headers=auth_headers,
    )
    assert response.status_code == 201


def test_create_owner_duplicate_document(
    client, db: Session, auth_headers: dict, address_payload: dict
):
    client.post(
        "/api/v1/owners", json=_owner_payload(address_payload), headers=auth_headers
    )
    response = client.post(
        "/api/v1/owners",
        json=_owner_payload(address_payload, name="Someone Else"),
        headers=auth_headers,
    )
    assert response.status_code == 409
    data = response.json()
    assert data["code"] == "DUPLICATE_RESOURCE"
    assert data["field"] == "document"
    assert db.query(OwnerModel).count() == 1


def test_duplicate_document_of_inactive_owner_rejected(
    client, db: Session, auth_headers: dict, owner, address_payload: dict
):
    client.post(f"/api/v1/owners/{owner.id}/deactivate", headers=auth_headers)
    response = client.post(
        "/api/v1/owners",
        json=_owner_payload(address_payload, document=owner.document),
        headers=auth_headers,
    )
    assert response.status_code == 409


def test_create_owner_invalid_document(
    client, db: Session, auth_headers: dict, address_payload: dict
):
    response = client.post(
        "/api/v1/owners",
        json=_owner_payload(address_payload, document="12345678900"),
        headers=auth_headers,
    )
    assert response.status_code == 422


def test_create_owner_invalid_phone(
    client, db: Session, auth_headers: dict, address_payload: dict
):
    response = client.post(
        "/api/v1/owners",
        json=_owner_payload(address_payload, phone="11987654321"),
        headers=auth_headers,
    )
    assert response.status_code == 422


def test_create_owner_incomplete_address(
    client, db: Session, auth_headers: dict, address_payload: dict
):
    address_payload.pop("city")
    response = client.post(
        "/api/v1/owners", json=_owner_payload(address_payload), headers=auth_headers
    )
    assert response.status_code == 422


def test_create_owner_without_authentication(client, db: Session, address_payload: dict):
    response = client.post("/api/v1/owners", json=_owner_payload(address_payload))
    assert response.status_code == 401


def test_regular_user_can_create_owner(
    client, db: Session, user_token: str, address_payload: dict
):
    response = client.post(
        "/api/v1/owners",
        json=_owner_payload(address_payload),
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 201


# ============================================================================
# READ
# ============================================================================


def test_address_round_trips_through_storage(
    client, db: Session, auth_headers: dict, owner, address_payload: dict
):
    db.expire_all()
    stored = db.query(OwnerModel).filter(OwnerModel.id == owner.id).first()
    assert stored.address == address_payload
    assert Owner.model_validate(stored).address.model_dump() == address_payload

    response = client.get(f"/api/v1/owners/{owner.id}", headers=auth_headers)
    assert response.json()["address"] == address_payload


def test_list_owners_hides_inactive_by_default(
    client, db: Session, auth_headers: dict, owner, address_payload: dict
):
    other = client.post(
        "/api/v1/owners", json=_owner_payload(address_payload), headers=auth_headers
    ).json()
    client.post(f"/api/v1/owners/{other['id']}/deactivate", headers=auth_headers)

    active_only = client.get("/api/v1/owners", headers=auth_headers).json()
    assert [o["id"] for o in active_only] == [owner.id]

    everything = client.get(
        "/api/v1/owners?show_inactive=true", headers=auth_headers
    ).json()
    assert {o["id"] for o in everything} == {owner.id, other["id"]}


def test_get_owner_not_found(client, db: Session, auth_headers: dict):
    response = client.get("/api/v1/owners/9999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_get_owner_properties_and_contracts(
    client, db: Session, auth_headers: dict, owner, contract, rental_property
):
    properties = client.get(
        f"/api/v1/owners/{owner.id}/properties", headers=auth_headers
    ).json()
    assert [p["id"] for p in properties] == [rental_property.id]

    contracts = client.get(
        f"/api/v1/owners/{owner.id}/contracts", headers=auth_headers
    ).json()
    assert [c["id"] for c in contracts] == [contract.id]


# ============================================================================
# UPDATE / STATUS
# ============================================================================


def test_update_owner_partial(client, db: Session, auth_headers: dict, owner):
    response = client.put(
        f"/api/v1/owners/{owner.id}",
        json={"email": "new@example.com"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "new@example.com"
    assert data["name"] == "Maria Souza"
    assert data["document"] == "123.456.789-00"


def test_update_owner_address(
    client, db: Session, auth_headers: dict, owner, address_payload: dict
):
    new_address = dict(address_payload, number="10", complement=None)
    response = client.put(
        f"/api/v1/owners/{owner.id}",
        json={"address": new_address},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["address"] == new_address


def test_update_owner_to_existing_document(
    client, db: Session, auth_headers: dict, owner, address_payload: dict
):
    other = client.post(
        "/api/v1/owners", json=_owner_payload(address_payload), headers=auth_headers
    ).json()
    response = client.put(
        f"/api/v1/owners/{other['id']}",
        json={"document": owner.document},
        headers=auth_headers,
    )
    assert response.status_code == 409
    assert response.json()["field"] == "document"


def test_update_owner_keeping_own_document(
    client, db: Session, auth_headers: dict, owner
):
    response = client.put(
        f"/api/v1/owners/{owner.id}",
        json={"document": owner.document, "name": "Maria S."},
        headers=auth_headers,
    )
    assert response.status_code == 200


def test_update_owner_null_name_rejected(client, db: Session, auth_headers: dict, owner):
    response = client.put(
        f"/api/v1/owners/{owner.id}", json={"name": None}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["field"] == "name"


def test_owner_status_transitions(client, db: Session, auth_headers: dict, owner):
    response = client.post(f"/api/v1/owners/{owner.id}/deactivate", headers=auth_headers)
    assert response.json()["status"] == "inactive"

    response = client.post(f"/api/v1/owners/{owner.id}/activate", headers=auth_headers)
    assert response.json()["status"] == "active"

    response = client.post(
        f"/api/v1/owners/{owner.id}/toggle-status", headers=auth_headers
    )
    assert response.json()["status"] == "inactive"

    response = client.patch(
        f"/api/v1/owners/{owner.id}/status",
        json={"status": "active"},
        headers=auth_headers,
    )
    assert response.json()["status"] == "active"


# ============================================================================
# DELETE
# ============================================================================


def test_delete_unreferenced_owner(client, db: Session, auth_headers: dict, owner):
    response = client.delete(f"/api/v1/owners/{owner.id}", headers=auth_headers)
    assert response.status_code == 204
    assert client.get(f"/api/v1/owners/{owner.id}", headers=auth_headers).status_code == 404


def test_delete_owner_with_property_refused(
    client, db: Session, auth_headers: dict, owner, rental_property
):
    response = client.delete(f"/api/v1/owners/{owner.id}", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert client.get(f"/api/v1/owners/{owner.id}", headers=auth_headers).status_code == 200
