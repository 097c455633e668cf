import pytest
from fastapi.testclient import TestClient

from restaurant_api.core.config import Settings
from restaurant_api.database import build_engine, build_session_maker, init_db
from restaurant_api.main import create_app
from restaurant_api.repositories import Repositories
from restaurant_api.services import AdminService, CustomerService


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "race: documents an accepted read-then-write race"
    )


@pytest.fixture()
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file, ignoring any .env."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        password_hash_rounds=4,
        restaurant_name="Test Bistro",
        restaurant_subdomain="  TestBistro ",
    )


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    """Test client with the lifespan (tables, repositories, services) running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture()
async def repositories(settings):
    engine = build_engine(settings)
    await init_db(engine)
    yield Repositories.build(build_session_maker(engine), settings)
    await engine.dispose()


@pytest.fixture()
def admin_service(repositories):
    return AdminService(repositories)


@pytest.fixture()
def customer_service(repositories):
    return CustomerService(repositories)


@pytest.fixture()
def make_category(client):
    def _make(name="Drinks", **extra):
        response = client.post("/api/admin/categories", json={"name": name, **extra})
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture()
def make_item(client):
    def _make(category_id, name="Cola", price=2.5):
        response = client.post(
            "/api/admin/items",
            json={"name": name, "price": price, "categoryId": category_id},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make
