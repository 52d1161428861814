# petsocial/api/auth/test_auth_routes.py


def test_register_returns_token(client):
    response = client.post('/v1/user', json={"name": "ana", "login": "ana@x.com", "password": "secret123"})

    assert response.status_code == 200
    assert response.get_json()['token']


def test_register_then_current_user(client, signup):
    headers, user_id = signup("ana", "ana@x.com")

    current = client.get('/v1/users/current', headers=headers).get_json()
    assert current['id'] == user_id
    assert current['following'] == []
    assert current['profile']

    profile = client.get(f"/v1/profile/id/{current['profile']}", headers=headers).get_json()
    assert profile['name'] == "ana"


def test_register_validation_error_body(client):
    response = client.post('/v1/user', json={"name": "ana", "login": "ana@x.com", "password": "abc"})

    assert response.status_code == 400
    assert response.get_json() == {"messages": [{"path": "password", "message": "At least 5 characters."}]}


def test_register_with_wrong_types(client):
    response = client.post('/v1/user', json={"name": 12, "login": "ana@x.com", "password": "secret123"})

    assert response.status_code == 400
    assert response.get_json()['messages'][0]['path'] == "name"


def test_sign_in(client, signup):
    signup("ana", "ana@x.com")

    ok = client.post('/v1/user/signin', json={"login": "ana@x.com", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.get_json()['token']

    bad = client.post('/v1/user/signin', json={"login": "ana@x.com", "password": "wrong-one"})
    assert bad.status_code == 401


def test_sign_out_revokes_token(client, signup):
    headers, _ = signup("ana", "ana@x.com")

    assert client.get('/v1/user/signout', headers=headers).status_code == 200
    assert client.get('/v1/users/current', headers=headers).status_code == 401


def test_change_password(client, signup):
    headers, _ = signup("ana", "ana@x.com")

    response = client.post('/v1/user/password', headers=headers,
                           json={"current_password": "secret123", "new_password": "another1"})
    assert response.status_code == 200

    signin = client.post('/v1/user/signin', json={"login": "ana@x.com", "password": "another1"})
    assert signin.status_code == 200


def test_protected_route_without_token(client):
    assert client.get('/v1/users/current').status_code == 401
