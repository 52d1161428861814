# petsocial/api/users/test_user_services.py
import pytest

from petsocial.core.errors import AuthorizationError, DomainRuleError, NotFoundError, ValidationError
from petsocial.models.lifecycle import Lifecycle
from petsocial.models.user import User


@pytest.fixture
def users(services):
    user_service = services['users']
    for user_id, name in (("u1", "Ana"), ("u2", "Bruno"), ("u3", "Carla")):
        user_service._save(User(user_id=user_id, login=f"{name.lower()}@x.com", name=name,
                                password="hash", permissions=["user"]))
    return user_service


def test_follow_adds_target_and_returns_it(users):
    followed = users.follow("u1", "u2")

    assert followed.user_id == "u2"
    assert followed.name == "Bruno"
    assert users.get_following("u1") == ["u2"]
    assert users.get_following("u2") == []


def test_follow_twice_is_rejected(users):
    users.follow("u1", "u2")

    with pytest.raises(DomainRuleError) as exc:
        users.follow("u1", "u2")

    assert exc.value.fail_at == "user-follow"
    assert users.get_following("u1") == ["u2"]


def test_unfollow(users):
    users.follow("u1", "u2")
    users.follow("u1", "u3")

    unfollowed = users.unfollow("u1", "u2")

    assert unfollowed.user_id == "u2"
    assert users.get_following("u1") == ["u3"]


def test_unfollow_without_following_is_rejected(users):
    users.follow("u1", "u3")

    with pytest.raises(DomainRuleError) as exc:
        users.unfollow("u1", "u2")
    assert exc.value.to_dict() == {
        "fail_at": "user-follow",
        "message": "You do not follow this user, so you cannot unfollow it."
    }
    assert users.get_following("u1") == ["u3"]


def test_follow_unknown_user(users):
    with pytest.raises(NotFoundError):
        users.follow("u1", "ghost")
    assert users.get_following("u1") == []


def test_grant_and_revoke(users):
    users.grant("u1", ["admin"])
    assert users.find_by_id("u1").permissions == ["user", "admin"]

    users.revoke("u1", ["user"])
    assert users.find_by_id("u1").permissions == ["admin"]


def test_grant_rejects_invalid_permissions(users):
    with pytest.raises(ValidationError):
        users.grant("u1", [])
    with pytest.raises(ValidationError):
        users.grant("u1", None)


def test_has_permission(users):
    assert users.has_permission("u1", "user").user_id == "u1"

    with pytest.raises(AuthorizationError):
        users.require_admin("u1")

    users.grant("u1", ["admin"])
    assert users.require_admin("u1").user_id == "u1"


def test_has_permission_for_disabled_user(users):
    users.grant("u1", ["admin"])
    users.disable("u1")

    with pytest.raises(NotFoundError):
        users.require_admin("u1")


def test_enable_and_disable(users):
    assert users.disable("u2").status is Lifecycle.DISABLED
    assert not users.find_by_id("u2").enabled

    users.enable("u2")
    assert users.find_by_id("u2").enabled


def test_find_all_and_find_by_login(users):
    assert {u.user_id for u in users.find_all()} == {"u1", "u2", "u3"}
    assert users.find_by_login("carla@x.com").user_id == "u3"
    assert users.find_by_login("nobody@x.com") is None
