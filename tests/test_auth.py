from datetime import timedelta

from sqlalchemy.orm import Session

from rental_manager.core.security import create_access_token, verify_password
from rental_manager.repositories.user import get_user_by_id, update_user


# ============================================================================
# LOGIN
# ============================================================================


def test_login_success(client, db: Session, admin_user: dict):
    response = client.post(
        "/api/v1/auth/login",
        data={"username": admin_user["username"], "password": admin_user["password"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["user"]["username"] == admin_user["username"]
    assert data["user"]["role"] == "admin"
    assert "password_hash" not in data["user"]


def test_login_stamps_last_login(client, db: Session, admin_user: dict):
    assert get_user_by_id(db, admin_user["id"]).last_login is None

    response = client.post(
        "/api/v1/auth/login",
        data={"username": admin_user["username"], "password": admin_user["password"]},
    )
    assert response.status_code == 200
    assert response.json()["user"]["last_login"] is not None

    db.expire_all()
    assert get_user_by_id(db, admin_user["id"]).last_login is not None


def test_login_unknown_username(client, db: Session):
    response = client.post(
        "/api/v1/auth/login",
        data={"username": "nobody", "password": "whatever123"},
    )
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_login_wrong_password(client, db: Session, admin_user: dict):
    response = client.post(
        "/api/v1/auth/login",
        data={"username": admin_user["username"], "password": "WrongPass123"},
    )
    assert response.status_code == 401
    assert "Incorrect username or password" in response.json()["detail"]


def test_login_inactive_user_refused(client, db: Session, regular_user: dict):
    update_user(db, regular_user["id"], is_active=False)

    response = client.post(
        "/api/v1/auth/login",
        data={
            "username": regular_user["username"],
            "password": regular_user["password"],
        },
    )
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


# ============================================================================
# CURRENT USER
# ============================================================================


def test_me_returns_current_user(client, db: Session, regular_user: dict, user_token: str):
    response = client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Bearer {user_token}"}
    )
    assert response.status_code == 200
    assert response.json()["username"] == regular_user["username"]
    assert response.json()["role"] == "user"


def test_me_without_token(client, db: Session):
    response = client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.json() == {"detail": "Not authenticated", "code": "UNAUTHORIZED"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_me_with_invalid_token(client, db: Session):
    response = client.get(
        "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"
    assert response.headers["www-authenticate"] == "Bearer"


def test_me_with_expired_token(client, db: Session, admin_user: dict):
    token = create_access_token(admin_user["id"], expires_delta=timedelta(minutes=-1))
    response = client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401


def test_token_of_deactivated_user_rejected(
    client, db: Session, regular_user: dict, user_token: str
):
    update_user(db, regular_user["id"], is_active=False)
    response = client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Bearer {user_token}"}
    )
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


# ============================================================================
# CHANGE PASSWORD
# ============================================================================


def test_change_password_success(
    client, db: Session, regular_user: dict, user_token: str
):
    response = client.put(
        "/api/v1/auth/password",
        json={"current_password": regular_user["password"], "new_password": "NewPass456"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 200

    db.expire_all()
    user = get_user_by_id(db, regular_user["id"])
    assert verify_password("NewPass456", user.password_hash)

    login = client.post(
        "/api/v1/auth/login",
        data={"username": regular_user["username"], "password": "NewPass456"},
    )
    assert login.status_code == 200


def test_change_password_wrong_current(
    client, db: Session, regular_user: dict, user_token: str
):
    response = client.put(
        "/api/v1/auth/password",
        json={"current_password": "NotMyPass1", "new_password": "NewPass456"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 400
    assert response.json()["field"] == "current_password"


def test_change_password_without_digit(
    client, db: Session, regular_user: dict, user_token: str
):
    response = client.put(
        "/api/v1/auth/password",
        json={"current_password": regular_user["password"], "new_password": "NoDigitsHere"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 400
    assert "number" in response.json()["detail"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
