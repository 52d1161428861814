# conftest.py
import pytest
from mockfirestore import MockFirestore

from petsocial import create_app


@pytest.fixture
def db():
    return MockFirestore()


@pytest.fixture
def app(db):
    return create_app('testing', db=db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return app.services


@pytest.fixture
def signup(client, services):
    """Registers a user through the API and returns ``(auth_headers, user_id)``."""
    def _signup(name, login, password="secret123"):
        response = client.post('/v1/user', json={"name": name, "login": login, "password": password})
        assert response.status_code == 200, response.get_json()
        headers = {"Authorization": f"Bearer {response.get_json()['token']}"}
        return headers, services['users'].find_by_login(login).user_id
    return _signup


@pytest.fixture
def make_admin(services):
    def _make_admin(user_id):
        services['users'].grant(user_id, ['admin'])
    return _make_admin
