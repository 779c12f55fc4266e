import os
import tempfile
from datetime import date

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for the default database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_rental_manager.db")
os.environ["STORAGE_BACKEND"] = "database"
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["FIRST_ADMIN_USERNAME"] = "admin"
os.environ["FIRST_ADMIN_EMAIL"] = "admin@test.example.com"
os.environ["FIRST_ADMIN_PASSWORD"] = "AdminTest123!"
os.environ["FRONTEND_URL"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from rental_manager.core.config import settings
from rental_manager.core.security import create_access_token, get_password_hash
from rental_manager.db import create_db_engine, create_session_factory, run_migrations
from rental_manager.db.models.user import User as UserModel
from rental_manager.domain.enums import PropertyType, UserRole
from rental_manager.main import app
from rental_manager.schemas.address import Address
from rental_manager.schemas.contract import ContractCreate
from rental_manager.schemas.owner import OwnerCreate
from rental_manager.schemas.property import PropertyCreate
from rental_manager.schemas.tenant import TenantCreate


@pytest.fixture(scope="function", params=["database", "memory"])
def db_session(request, tmp_path):
    """
    Create a fresh, migrated database for each test.

    Every test runs once per storage backend: a SQLite file through the
    "database" backend and the in-process "memory" backend.
    """
    if request.param == "database":
        engine = create_db_engine("database", f"sqlite:///{tmp_path / 'test.db'}")
    else:
        engine = create_db_engine("memory")

    # Run Alembic migrations to set up the schema and seed the first admin
    run_migrations(engine)

    db = create_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from rental_manager.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def admin_user(db: Session) -> dict:
    """The admin seeded by the users migration."""
    from rental_manager.repositories.user import get_user_by_username

    user = get_user_by_username(db, settings.first_admin_username)
    if not user:
        raise RuntimeError("Admin user not found. Check migration 001.")

    return {
        "id": user.id,
        "username": user.username,
        "password": settings.first_admin_password,
        "role": user.role,
    }


@pytest.fixture(scope="function")
def admin_token(admin_user: dict) -> str:
    return create_access_token(admin_user["id"])


@pytest.fixture(scope="function")
def regular_user(db: Session) -> dict:
    """Create a non-admin user for testing."""
    password = "UserPass123"
    user = UserModel(
        username="operator",
        name="Test Operator",
        email="operator@example.com",
        password_hash=get_password_hash(password),
        role=UserRole.USER,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    return {
        "id": user.id,
        "username": user.username,
        "password": password,
        "role": user.role,
    }


@pytest.fixture(scope="function")
def user_token(regular_user: dict) -> str:
    return create_access_token(regular_user["id"])


@pytest.fixture(scope="function")
def auth_headers(admin_token: str) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture(scope="function")
def address_payload() -> dict:
    return {
        "zip_code": "01310-100",
        "street": "Avenida Paulista",
        "number": "1578",
        "complement": "Apto 42",
        "neighborhood": "Bela Vista",
        "city": "São Paulo",
        "state": "SP",
    }


@pytest.fixture(scope="function")
def owner(db: Session, address_payload: dict):
    from rental_manager.services.owner import create_owner

    return create_owner(
        db,
        OwnerCreate(
            name="Maria Souza",
            document="123.456.789-00",
            email="maria@example.com",
            phone="(11) 98765-4321",
            address=Address(**address_payload),
        ),
    )


@pytest.fixture(scope="function")
def tenant(db: Session, address_payload: dict):
    from rental_manager.services.tenant import create_tenant

    return create_tenant(
        db,
        TenantCreate(
            name="João Lima",
            document="987.654.321-00",
            rg="12.345.678-9",
            email="joao@example.com",
            phone="(11) 3456-7890",
            address=Address(**address_payload),
        ),
    )


@pytest.fixture(scope="function")
def rental_property(db: Session, owner, address_payload: dict):
    from rental_manager.services.property import create_property

    return create_property(
        db,
        PropertyCreate(
            owner_id=owner.id,
            type=PropertyType.APARTMENT,
            address=Address(**address_payload),
            rent_value=150000,
            bedrooms=2,
            bathrooms=1,
            area=70,
        ),
    )


@pytest.fixture(scope="function")
def contract(db: Session, owner, tenant, rental_property):
    """A 12-month contract starting 2024-01-15, rent due on day 10."""
    from rental_manager.services.contract import create_contract

    return create_contract(
        db,
        ContractCreate(
            owner_id=owner.id,
            tenant_id=tenant.id,
            property_id=rental_property.id,
            start_date=date(2024, 1, 15),
            duration=12,
            rent_value=150000,
            payment_day=10,
        ),
    )
