# petsocial/api/auth/test_auth_services.py
from datetime import datetime, timedelta, timezone

import pytest

from petsocial.core.errors import AuthenticationError, NotFoundError, ValidationError


def _register(services, login="ana@x.com", name="Ana", password="secret123"):
    return services['auth'].register({"name": name, "login": login, "password": password})


def test_register_creates_user_and_profile(services):
    user_id = _register(services)

    user = services['users'].find_by_id(user_id)
    assert user.login == "ana@x.com"
    assert user.permissions == ["user"]
    assert user.following == []
    assert user.password != "secret123"

    profile = services['profiles'].read(user_id)
    assert profile.user_id == user_id
    assert profile.name == "Ana"


def test_register_reports_every_invalid_field(services):
    with pytest.raises(ValidationError) as exc:
        services['auth'].register({"name": "", "login": "", "password": "abc"})

    assert {m["path"] for m in exc.value.messages} == {"name", "login", "password"}
    assert services['users'].find_all() == []


def test_register_rejects_duplicate_login(services):
    _register(services)

    with pytest.raises(ValidationError) as exc:
        _register(services, name="Other Ana")

    assert exc.value.messages == [{"path": "login", "message": "Already registered."}]


def test_login(services):
    user_id = _register(services)
    assert services['auth'].login({"login": "ana@x.com", "password": "secret123"}) == user_id


@pytest.mark.parametrize("login, password", [
    ("ana@x.com", "wrong-password"),
    ("nobody@x.com", "secret123"),
])
def test_login_with_bad_credentials(services, login, password):
    _register(services)
    with pytest.raises(AuthenticationError) as exc:
        services['auth'].login({"login": login, "password": password})
    assert exc.value.message == "Invalid login or password."


def test_login_of_disabled_user(services):
    user_id = _register(services)
    services['users'].disable(user_id)

    with pytest.raises(AuthenticationError):
        services['auth'].login({"login": "ana@x.com", "password": "secret123"})


def test_login_requires_both_fields(services):
    with pytest.raises(ValidationError) as exc:
        services['auth'].login({})
    assert {m["path"] for m in exc.value.messages} == {"login", "password"}


def test_change_password(services):
    user_id = _register(services)

    services['auth'].change_password(user_id, {"current_password": "secret123", "new_password": "another1"})

    assert services['auth'].login({"login": "ana@x.com", "password": "another1"}) == user_id
    with pytest.raises(AuthenticationError):
        services['auth'].login({"login": "ana@x.com", "password": "secret123"})


def test_change_password_with_wrong_current_password(services):
    user_id = _register(services)

    with pytest.raises(AuthenticationError):
        services['auth'].change_password(user_id, {"current_password": "nope-nope", "new_password": "another1"})


def test_logout_revokes_token(services):
    payload = {
        "jti": "token-1",
        "sub": "u1",
        "exp": (datetime.now(timezone.utc) + timedelta(hours=1)).timestamp()
    }
    assert not services['auth'].is_token_revoked(payload)

    services['auth'].logout(payload)

    assert services['auth'].is_token_revoked(payload)
    assert not services['auth'].is_token_revoked({"jti": "token-2"})


def test_change_password_of_disabled_user(services):
    user_id = _register(services)
    services['users'].disable(user_id)

    with pytest.raises(NotFoundError):
        services['auth'].change_password(user_id, {"current_password": "secret123", "new_password": "another1"})


def test_login_lookup_goes_through_user_service(services):
    user_id = _register(services)

    assert services['auth'].user_service is services['users']
    assert services['users'].find_by_login("ana@x.com").user_id == user_id
