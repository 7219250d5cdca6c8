"""Tests for authentication endpoints and the session gate."""

REGISTER_PAYLOAD = {
    "username": "alice",
    "email": "alice@example.com",
    "password": "wonderland",
    "fullName": "Alice Liddell"
}


def test_register_creates_user_and_session(client):
    """Test registering logs the new user in."""
    response = client.post("/api/auth/register", json=REGISTER_PAYLOAD)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["user"]["username"] == "alice"
    assert data["user"]["full_name"] == "Alice Liddell"
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]

    me = client.get("/api/auth/me").json()
    assert me["authenticated"] is True
    assert me["username"] == "alice"
    assert me["userId"] == data["user"]["id"]


def test_register_short_password(client):
    """Test passwords shorter than 6 characters are rejected."""
    response = client.post(
        "/api/auth/register",
        json={**REGISTER_PAYLOAD, "password": "abc"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Password must be at least 6 characters long"


def test_register_missing_field(client):
    """Test registration without a full name fails."""
    payload = {k: v for k, v in REGISTER_PAYLOAD.items() if k != "fullName"}
    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert "error" in response.json()


def test_register_blank_field(client):
    """Test whitespace-only fields count as empty."""
    response = client.post(
        "/api/auth/register",
        json={**REGISTER_PAYLOAD, "username": "   "}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "All fields are required"


def test_register_duplicate_username(client):
    """Test the second registration with the same username fails."""
    client.post("/api/auth/register", json=REGISTER_PAYLOAD)
    response = client.post(
        "/api/auth/register",
        json={**REGISTER_PAYLOAD, "email": "other@example.com"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Username or email already exists"


def test_register_duplicate_email(client):
    """Test the email address must also be unique."""
    client.post("/api/auth/register", json=REGISTER_PAYLOAD)
    response = client.post(
        "/api/auth/register",
        json={**REGISTER_PAYLOAD, "username": "alice2"}
    )

    assert response.status_code == 400


def test_login_success(client):
    """Test logging in with correct credentials."""
    client.post("/api/auth/register", json=REGISTER_PAYLOAD)
    client.post("/api/auth/logout")

    response = client.post(
        "/api/auth/login",
        json={"username": "alice", "password": "wonderland"}
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Login successful"
    assert response.json()["user"]["email"] == "alice@example.com"
    assert client.get("/api/auth/me").json()["authenticated"] is True


def test_login_failures_are_indistinguishable(client):
    """Test wrong password and unknown user give the same 401."""
    client.post("/api/auth/register", json=REGISTER_PAYLOAD)
    client.post("/api/auth/logout")

    wrong_password = client.post(
        "/api/auth/login",
        json={"username": "alice", "password": "not-the-password"}
    )
    unknown_user = client.post(
        "/api/auth/login",
        json={"username": "nobody", "password": "wonderland"}
    )

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.json()["error"] == "Invalid username or password"


def test_logout_ends_session(auth_client):
    """Test logging out removes access to protected endpoints."""
    assert auth_client.get("/api/categories").status_code == 200

    response = auth_client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json()["message"] == "Logout successful"

    assert auth_client.get("/api/auth/me").json()["authenticated"] is False
    assert auth_client.get("/api/categories").status_code == 401


def test_logout_is_idempotent(client):
    """Test logging out without a session still succeeds."""
    assert client.post("/api/auth/logout").status_code == 200
    assert client.post("/api/auth/logout").status_code == 200


def test_me_anonymous(client):
    """Test /me reports an anonymous caller without failing."""
    response = client.get("/api/auth/me")

    assert response.status_code == 200
    assert response.json() == {"authenticated": False, "userId": None, "username": None}


def test_me_with_unknown_token(client):
    """Test a forged session cookie is treated as anonymous."""
    client.cookies.set("inventory_session", "forged-token")

    assert client.get("/api/auth/me").json()["authenticated"] is False
    assert client.get("/api/stats").status_code == 401


def test_protected_endpoints_require_session(client):
    """Test every domain endpoint answers 401 without a session."""
    for path in ("/api/categories", "/api/suppliers", "/api/products", "/api/stats"):
        response = client.get(path)
        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    response = client.post("/api/categories", json={"categoryName": "X", "description": "Y"})
    assert response.status_code == 401


def test_register_password_of_spaces(client):
    """Test a password made of spaces is non-empty and long enough."""
    response = client.post(
        "/api/auth/register",
        json={**REGISTER_PAYLOAD, "password": "      "}
    )

    assert response.status_code == 201


def test_login_with_padded_username(client):
    """Test surrounding whitespace is ignored in register and login alike."""
    client.post(
        "/api/auth/register",
        json={**REGISTER_PAYLOAD, "username": " alice "}
    )
    client.post("/api/auth/logout")

    response = client.post(
        "/api/auth/login",
        json={"username": " alice ", "password": "wonderland"}
    )

    assert response.status_code == 200
    assert response.json()["user"]["username"] == "alice"
