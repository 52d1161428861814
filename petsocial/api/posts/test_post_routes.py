# petsocial/api/posts/test_post_routes.py


def _publish(client, headers, title, **fields):
    response = client.post('/v1/publish', headers=headers, json={"title": title, **fields})
    assert response.status_code == 200, response.get_json()
    return response.get_json()


def test_publish_and_read(client, signup):
    ana, ana_id = signup("Ana", "ana@x.com")

    post = _publish(client, ana, "First walk", description="At the park", pets=["pet1"])

    assert post['user'] == ana_id
    assert post['like_count'] == 0
    assert post['pets'] == ["pet1"]
    assert post['enabled'] is True
    assert client.get(f"/v1/posts/{post['id']}", headers=ana).get_json()['title'] == "First walk"


def test_publish_with_one_letter_title(client, signup):
    ana, _ = signup("Ana", "ana@x.com")

    response = client.post('/v1/publish', headers=ana, json={"title": "x"})

    assert response.status_code == 400
    assert response.get_json() == {"messages": [{"path": "title", "message": "At least 2 characters."}]}
    assert client.get('/v1/myPosts', headers=ana).get_json() == {"posts": []}


def test_feed_scenario(client, signup):
    ana, _ = signup("Ana", "ana@x.com")
    bruno, bruno_id = signup("Bruno", "bruno@x.com")
    client.post(f'/v1/users/{bruno_id}/follow', headers=ana)

    post = _publish(client, bruno, "Hello from Bruno")
    _publish(client, ana, "Ana's own post")

    feed = client.get('/v1/myFeed', headers=ana).get_json()['posts']
    assert [p['id'] for p in feed] == [post['id']]

    client.delete(f"/v1/{post['id']}/delete", headers=bruno)
    assert client.get('/v1/myFeed', headers=ana).get_json()['posts'] == []


def test_like_and_dislike(client, signup):
    ana, _ = signup("Ana", "ana@x.com")
    bruno, bruno_id = signup("Bruno", "bruno@x.com")
    post = _publish(client, ana, "Likeable")

    liked = client.post(f"/v1/{post['id']}/like", headers=bruno).get_json()
    assert liked['likes'] == [bruno_id]
    assert liked['like_count'] == 1

    disliked = client.post(f"/v1/{post['id']}/dislike", headers=bruno).get_json()
    assert disliked['likes'] == []
    assert disliked['like_count'] == 0


def test_popular_posts(client, signup):
    ana, _ = signup("Ana", "ana@x.com")
    bruno, _ = signup("Bruno", "bruno@x.com")
    popular = _publish(client, ana, "Popular")
    _publish(client, ana, "Quiet")
    client.post(f"/v1/{popular['id']}/like", headers=ana)
    client.post(f"/v1/{popular['id']}/like", headers=bruno)

    posts = client.get('/v1/popularPosts?likes=2', headers=ana).get_json()['posts']
    assert [p['id'] for p in posts] == [popular['id']]

    assert client.get('/v1/popularPosts?likes=-1', headers=ana).status_code == 400


def test_update_and_delete_only_own_posts(client, signup):
    ana, _ = signup("Ana", "ana@x.com")
    bruno, _ = signup("Bruno", "bruno@x.com")
    post = _publish(client, ana, "Mine")

    assert client.put(f"/v1/{post['id']}/update", headers=bruno, json={"title": "Stolen"}).status_code == 500
    assert client.delete(f"/v1/{post['id']}/delete", headers=bruno).status_code == 500

    updated = client.put(f"/v1/{post['id']}/update", headers=ana, json={"description": "Now with text"})
    assert updated.status_code == 200
    assert updated.get_json()['title'] == "Mine"
    assert updated.get_json()['description'] == "Now with text"

    deleted = client.delete(f"/v1/{post['id']}/delete", headers=ana)
    assert deleted.get_json()['enabled'] is False
    assert client.get('/v1/allPosts', headers=ana).get_json() == {"posts": []}


def test_all_posts_and_my_posts(client, signup):
    ana, _ = signup("Ana", "ana@x.com")
    bruno, _ = signup("Bruno", "bruno@x.com")
    _publish(client, ana, "From Ana")
    _publish(client, bruno, "From Bruno")

    assert len(client.get('/v1/allPosts', headers=ana).get_json()['posts']) == 2
    assert [p['title'] for p in client.get('/v1/myPosts', headers=ana).get_json()['posts']] == ["From Ana"]
