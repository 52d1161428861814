# petsocial/api/images/test_image_routes.py


def test_store_and_fetch_image(client, signup):
    ana, _ = signup("Ana", "ana@x.com")

    created = client.post('/v1/image', headers=ana, json={"image": "aGVsbG8="})
    assert created.status_code == 201
    image_id = created.get_json()['id']

    fetched = client.get(f'/v1/image/{image_id}', headers=ana)
    assert fetched.get_json() == {"id": image_id, "image": "aGVsbG8="}


def test_store_empty_image(client, signup):
    ana, _ = signup("Ana", "ana@x.com")

    response = client.post('/v1/image', headers=ana, json={})

    assert response.status_code == 400
    assert response.get_json() == {"messages": [{"path": "image", "message": "Invalid image."}]}


def test_unknown_image(client, signup):
    ana, _ = signup("Ana", "ana@x.com")
    assert client.get('/v1/image/missing', headers=ana).status_code == 500
