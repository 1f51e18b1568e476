import pytest

from app import create_app
from config.config import TestConfig
from extensions import db
from services.auth_service import create_admin_user

ADMIN_EMAIL = "admin@merit.com"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    return create_admin_user(ADMIN_EMAIL, ADMIN_PASSWORD, name="Admin")


@pytest.fixture
def auth_client(client, admin):
    response = client.post("/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
