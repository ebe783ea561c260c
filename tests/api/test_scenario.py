"""
End-to-end walk through the API: register, look yourself up, post,
and like.
"""


def test_register_post_and_like(client):
    response = client.post(
        "/api/users",
        json={"name": "Ada", "email": "ada@x.com", "password": "secret1"},
    )
    assert response.status_code == 200
    headers = {"x-auth-token": response.json()["token"]}

    me = client.get("/api/auth", headers=headers)
    assert me.status_code == 200
    assert me.json()["name"] == "Ada"
    assert me.json()["email"] == "ada@x.com"

    post = client.post("/api/posts", json={"text": "hello"}, headers=headers)
    assert post.status_code == 200
    post_id = post.json()["id"]
    assert post.json()["user"] == me.json()["id"]
    assert post.json()["name"] == "Ada"

    liked = client.put(f"/api/posts/like/{post_id}", headers=headers)
    assert liked.status_code == 200
    assert len(liked.json()) == 1

    again = client.put(f"/api/posts/like/{post_id}", headers=headers)
    assert again.status_code == 409
    assert len(client.get(f"/api/posts/{post_id}").json()["likes"]) == 1

    unliked = client.put(f"/api/posts/unlike/{post_id}", headers=headers)
    assert unliked.status_code == 200
    assert unliked.json() == []

    login = client.post("/api/auth", json={"email": "ada@x.com", "password": "secret1"})
    assert login.status_code == 200
    assert client.get("/api/auth", headers={"x-auth-token": login.json()["token"]}).status_code == 200
