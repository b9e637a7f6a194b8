"""Tests for the signup and signin endpoints."""


class TestSignup:
    """Test POST /api/signup."""

    def test_signup_success(self, client):
        response = client.post(
            "/api/signup",
            data={"name": "Ana", "email": "ana@example.com", "password": "pw"},
        )

        assert response.status_code == 200
        assert response.text == "Signup successful\n"
        assert response.headers["content-type"].startswith("text/plain")

    def test_duplicate_email(self, client, registered_user):
        email, _, _ = registered_user

        response = client.post(
            "/api/signup",
            data={"name": "Someone", "email": email, "password": "other"},
        )

        assert response.status_code == 500
        assert response.text.startswith("Signup failed: ")
        assert "UNIQUE" in response.text

    def test_wrong_method(self, client):
        response = client.get("/api/signup")

        assert response.status_code == 405
        assert response.text == "Only POST allowed"


class TestSignin:
    """Test POST /api/signin."""

    def test_signin_returns_user_id(self, client, registered_user):
        email, password, user_id = registered_user

        response = client.post("/api/signin", data={"email": email, "password": password})

        assert response.status_code == 200
        assert response.text == f"Login successful. UserID: {user_id}"

    def test_wrong_password_and_unknown_email_look_the_same(self, client, registered_user):
        email, password, _ = registered_user

        wrong_password = client.post("/api/signin", data={"email": email, "password": "x"})
        unknown_email = client.post(
            "/api/signin", data={"email": "who@example.com", "password": password}
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.text == unknown_email.text == "Invalid credentials"

    def test_missing_fields_read_as_empty(self, client, registered_user):
        response = client.post("/api/signin", data={})

        assert response.status_code == 401

    def test_wrong_method(self, client):
        response = client.put("/api/signin", data={"email": "a", "password": "b"})

        assert response.status_code == 405
