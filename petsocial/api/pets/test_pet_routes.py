# petsocial/api/pets/test_pet_routes.py


def test_pet_lifecycle(client, signup):
    ana, ana_id = signup("Ana", "ana@x.com")
    bruno, _ = signup("Bruno", "bruno@x.com")

    created = client.post('/v1/pet', headers=ana, json={
        "name": "Toby",
        "gender": "MALE",
        "birth_date": "2020-05-01"
    })
    assert created.status_code == 201
    pet = created.get_json()
    assert pet['user'] == ana_id
    assert pet['birth_date'] == "2020-05-01"

    assert [p['name'] for p in client.get('/v1/pet', headers=ana).get_json()] == ["Toby"]
    assert client.get('/v1/pet', headers=bruno).get_json() == []

    assert client.put(f"/v1/pet/{pet['id']}", headers=bruno, json={"name": "Rex"}).status_code == 500
    updated = client.put(f"/v1/pet/{pet['id']}", headers=ana, json={"name": "Tobias"})
    assert updated.get_json()['name'] == "Tobias"

    removed = client.delete(f"/v1/pet/{pet['id']}", headers=ana)
    assert removed.get_json()['enabled'] is False
    assert client.get('/v1/pet', headers=ana).get_json() == []


def test_pet_with_invalid_gender(client, signup):
    ana, _ = signup("Ana", "ana@x.com")

    response = client.post('/v1/pet', headers=ana, json={"name": "Toby", "gender": "DRAGON"})

    assert response.status_code == 400
    assert response.get_json()['messages'][0]['path'] == "gender"
