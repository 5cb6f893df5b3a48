"""
Users API tests, including the V1/V2 public projections.
"""

import uuid


class TestUsers:
    """Create, list, get and delete users."""

    def test_create_never_returns_password(self, client, create_user):
        user = create_user()

        assert "password" not in user
        assert user["username"] == "alice"
        uuid.UUID(user["id"])

    def test_duplicate_username_is_rejected(self, client, create_user):
        create_user()

        response = client.post(
            "/api/users",
            json={"name": "Other", "username": "alice", "password": "x"},
        )

        assert response.status_code == 400

    def test_list_includes_seeded_admin(self, client, create_user):
        create_user()

        usernames = {u["username"] for u in client.get("/api/users").json()}

        assert usernames == {"admin", "alice"}

    def test_get_missing_user_is_404(self, client):
        assert client.get(f"/api/users/{uuid.uuid4()}").status_code == 404

    def test_user_acronyms(self, client, create_user, create_acronym):
        alice = create_user()
        bob = create_user(username="bob", name="Bob")
        mine = create_acronym(alice["id"], short="OMG")
        create_acronym(bob["id"], short="LOL")

        response = client.get(f"/api/users/{alice['id']}/acronyms")

        assert [a["id"] for a in response.json()] == [mine["id"]]

    def test_delete_user_removes_acronyms(self, client, create_user, create_acronym):
        user = create_user()
        acronym = create_acronym(user["id"])

        assert client.delete(f"/api/users/{user['id']}").status_code == 204
        assert client.get(f"/api/users/{user['id']}").status_code == 404
        assert client.get(f"/api/acronyms/{acronym['id']}").status_code == 404

    def test_delete_missing_user_is_404(self, client):
        assert client.delete(f"/api/users/{uuid.uuid4()}").status_code == 404


class TestPublicProjections:
    """V1 omits twitter_url, V2 always carries it."""

    def test_v1_never_includes_twitter_url(self, client, create_user):
        user = create_user(twitter_url="https://twitter.com/alice")

        single = client.get(f"/api/users/{user['id']}").json()
        listed = client.get("/api/users").json()

        assert "twitter_url" not in single
        assert all("twitter_url" not in u for u in listed)

    def test_v2_includes_twitter_url(self, client, create_user):
        user = create_user(twitter_url="https://twitter.com/alice")

        body = client.get(f"/api/v2/users/{user['id']}").json()

        assert body["twitter_url"] == "https://twitter.com/alice"
        assert "password" not in body

    def test_v2_includes_null_twitter_url(self, client, create_user):
        create_user()

        listed = client.get("/api/v2/users").json()

        assert all("twitter_url" in u for u in listed)
        assert {u["username"]: u["twitter_url"] for u in listed} == {
            "admin": None,
            "alice": None,
        }

    def test_v2_missing_user_is_404(self, client):
        assert client.get(f"/api/v2/users/{uuid.uuid4()}").status_code == 404
