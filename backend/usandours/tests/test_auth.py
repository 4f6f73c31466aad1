"""
Tests for authentication endpoints.
"""
from usandours.core.config import settings
from usandours.core.security import verify_session_token


def test_register_create_returns_secret_code(register):
    client, response = register("Alice", "alice@example.com", "create")

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["user"] == {"name": "Alice", "email": "alice@example.com"}
    assert len(data["secretCode"]) == 6
    assert data["secretCode"] == data["secretCode"].upper()
    assert settings.COOKIE_NAME in client.cookies

    identity = verify_session_token(data["access_token"])
    assert identity.email == "alice@example.com"
    assert identity.couple_id is not None


def test_register_join_has_no_secret_code(register):
    _, response = register("Alice", "alice@example.com", "create")
    code = response.json()["secretCode"]

    _, response = register("Bob", "bob@example.com", "join", secret_code=code)
    assert response.status_code == 201
    assert "secretCode" not in response.json()


def test_register_duplicate_email(register):
    register("Alice", "alice@example.com", "create")
    _, response = register("Alice Again", "alice@example.com", "create")

    assert response.status_code == 400
    assert response.json()["error"] == "User already exists"


def test_register_missing_fields(client):
    response = client.post("/auth/register", json={"email": "x@example.com", "action": "create"})
    assert response.status_code == 400


def test_register_invalid_action(register):
    _, response = register("Alice", "alice@example.com", "elope")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid action"


def test_register_join_requires_code(register):
    _, response = register("Bob", "bob@example.com", "join")
    assert response.status_code == 400
    assert response.json()["error"] == "Secret code required"


def test_register_join_unknown_code(register):
    _, response = register("Bob", "bob@example.com", "join", secret_code="ZZZZZZ")
    assert response.status_code == 404


def test_login(register, make_client):
    """Test user login."""
    register("Alice", "alice@example.com", "create")

    client = make_client()
    response = client.post(
        "/auth/login",
        json={"email": "alice@example.com", "password": "testpassword123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["name"] == "Alice"
    assert "access_token" in data
    assert settings.COOKIE_NAME in client.cookies


def test_login_email_is_case_insensitive(register, make_client):
    register("Alice", "alice@example.com", "create")

    response = make_client().post(
        "/auth/login",
        json={"email": "Alice@Example.com", "password": "testpassword123"}
    )
    assert response.status_code == 200


def test_login_wrong_password_is_invalid_credentials(register, make_client):
    register("Alice", "alice@example.com", "create")

    response = make_client().post(
        "/auth/login",
        json={"email": "alice@example.com", "password": "wrongpassword"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


def test_login_unknown_email_is_indistinguishable(client):
    """Test login with invalid credentials."""
    response = client.post(
        "/auth/login",
        json={"email": "nonexistent@example.com", "password": "wrongpassword"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


def test_me_with_cookie(register):
    client, _ = register("Alice", "alice@example.com", "create")

    response = client.get("/auth/me")
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == "alice@example.com"
    assert user["coupleId"] is not None
    assert user["googleConnected"] is False


def test_me_with_bearer_token(register, make_client):
    _, response = register("Alice", "alice@example.com", "create")
    token = response.json()["access_token"]

    response = make_client().get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Alice"


def test_me_requires_token(client):
    response = client.get("/auth/me")
    assert response.status_code == 401


def test_logout_clears_cookie(register):
    client, _ = register("Alice", "alice@example.com", "create")

    response = client.post("/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/auth/me").status_code == 401


def test_google_status_not_connected(register):
    client, _ = register("Alice", "alice@example.com", "create")

    response = client.get("/auth/google-status")
    assert response.status_code == 200
    assert response.json() == {
        "connected": False,
        "hasRefreshToken": False,
        "hasAccessToken": False,
        "googleEmail": "alice@example.com",
    }


def test_register_blank_name_is_missing(register):
    _, response = register("   ", "alice@example.com", "create")
    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"
