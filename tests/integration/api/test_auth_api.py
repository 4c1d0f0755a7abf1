import pytest

pytestmark = pytest.mark.integration


def test_health_endpoint(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["Strict-Transport-Security"].startswith("max-age=")


def test_register_then_login(client, password):
    body = {"email": "fresh@example.com", "password": password}
    response = client.post("/api/register", json=body)
    assert response.status_code == 200
    assert response.json() == {"email": "fresh@example.com"}
    assert "u" not in response.cookies

    again = client.post("/api/register", json=body)
    assert again.status_code == 200
    assert again.json() == {"email": "fresh@example.com"}

    login = client.post("/api/login", json=body)
    assert login.status_code == 200
    assert login.json()["token_type"] == "bearer"
    assert login.cookies.get("u") == login.json()["access_token"]


def test_register_weak_password(client):
    response = client.post("/api/register", json={"email": "weak@example.com", "password": "12345678"})
    assert response.status_code == 400
    assert response.json() == {"detail": "PW_TOO_SIMPLE"}


def test_login_failures_are_identical(client, make_user, password):
    make_user(email="known@example.com")
    wrong_password = client.post("/api/login", json={"email": "known@example.com", "password": "nope nope"})
    unknown_email = client.post("/api/login", json={"email": "unknown@example.com", "password": password})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Username or password is invalid"}


def test_cookie_authentication_and_logout(client, make_user, password):
    user = make_user()
    client.post("/api/login", json={"email": user.email, "password": password})

    assert client.get("/api/albums").status_code == 200

    response = client.post("/api/logout")
    assert response.status_code == 200
    client.cookies.clear()
    assert client.get("/api/albums").status_code == 401


def test_missing_or_bad_token(client):
    assert client.get("/api/albums").status_code == 401
    response = client.get("/api/albums", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_token_for_removed_user(client, db_session, make_user, login, password):
    user = make_user()
    headers = login(user.email, password)
    db_session.delete(user)
    db_session.commit()

    response = client.get("/api/albums", headers=headers)
    assert response.status_code == 401
    assert "u=" in response.headers["set-cookie"]


def test_password_reset_flow(client, make_user, emailer, password):
    user = make_user(email="reset@example.com")

    assert client.post("/api/password-reset", json={"email": "nobody@example.com"}).status_code == 200
    assert emailer.sent_messages == []

    assert client.post("/api/password-reset", json={"email": user.email}).status_code == 200
    (message,) = emailer.sent_messages
    token = message.split("'")[1]

    new_password = "Pq7&zR4!mN8@kW2#"
    response = client.post(f"/api/password-reset/{token}", json={"email": user.email, "password": new_password})
    assert response.json() == {"success": True}

    reused = client.post(f"/api/password-reset/{token}", json={"email": user.email, "password": new_password})
    assert reused.json() == {"success": False}

    assert client.post("/api/login", json={"email": user.email, "password": password}).status_code == 401
    assert client.post("/api/login", json={"email": user.email, "password": new_password}).status_code == 200
