# petsocial/models/test_models.py
from datetime import date, datetime, timezone

from petsocial.models.lifecycle import Lifecycle
from petsocial.models.pet import Pet, PetGender
from petsocial.models.post import Post
from petsocial.models.user import User


def test_lifecycle_parse():
    assert Lifecycle.parse("ACTIVE") is Lifecycle.ACTIVE
    assert Lifecycle.parse(Lifecycle.DISABLED) is Lifecycle.DISABLED
    assert Lifecycle.parse(True) is Lifecycle.ACTIVE
    assert Lifecycle.parse(False) is Lifecycle.DISABLED
    assert Lifecycle.parse("garbage") is Lifecycle.DISABLED


def test_like_count_follows_likes():
    post = Post(post_id="p1", user_id="u1", title="Hello")

    post.like("a")
    post.like("b")
    post.like("a")
    assert post.likes == ["a", "b"]
    assert post.like_count == 2

    post.unlike("a")
    post.unlike("never-liked")
    assert post.likes == ["b"]
    assert post.like_count == len(post.likes)


def test_post_round_trip_keeps_status_and_dates():
    post = Post(post_id="p1", user_id="u1", title="Hello", status=Lifecycle.DISABLED)
    restored = Post.from_dict(post.to_dict())

    assert restored.status is Lifecycle.DISABLED
    assert not restored.enabled
    assert restored.created_at.tzinfo == timezone.utc


def test_user_grant_and_revoke():
    user = User(user_id="u1", login="ana@x.com", name="Ana", password="hash", permissions=["user"])

    user.grant(["admin", "user"])
    assert user.permissions == ["user", "admin"]

    user.revoke(["user"])
    assert user.permissions == ["admin"]
    assert user.has_permission("admin")
    assert not user.has_permission("user")


def test_pet_from_dict_converts_stored_values():
    pet = Pet.from_dict({
        'pet_id': 'pet1',
        'user_id': 'u1',
        'name': 'Toby',
        'gender': 'MALE',
        'birth_date': datetime(2020, 5, 1, tzinfo=timezone.utc),
        'status': 'ACTIVE',
        'unknown_field': 'ignored',
    })

    assert pet.gender is PetGender.MALE
    assert pet.birth_date == date(2020, 5, 1)
    assert pet.enabled


def test_pet_from_dict_with_invalid_gender():
    pet = Pet.from_dict({'pet_id': 'pet1', 'user_id': 'u1', 'name': 'Toby', 'gender': 'DRAGON'})
    assert pet.gender is None
