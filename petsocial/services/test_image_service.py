# petsocial/services/test_image_service.py
import pytest

from petsocial.core.errors import NotFoundError, ValidationError


def test_create_and_find(services):
    image = services['images'].create("aGVsbG8=")

    found = services['images'].find_by_id(image.image_id)
    assert found.image == "aGVsbG8="


@pytest.mark.parametrize("payload", [None, "", 42])
def test_create_rejects_empty_payload(services, payload):
    with pytest.raises(ValidationError):
        services['images'].create(payload)


def test_find_unknown_image(services):
    with pytest.raises(NotFoundError):
        services['images'].find_by_id("missing")


def test_resolve(services):
    image = services['images'].create("aGVsbG8=")

    assert services['images'].resolve(image.image_id) == "aGVsbG8="
    assert services['images'].resolve(None, default="/assets/default.jpg") == "/assets/default.jpg"
