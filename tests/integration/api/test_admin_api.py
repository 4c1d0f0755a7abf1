import pytest

pytestmark = pytest.mark.integration


def test_admin_routes_are_hidden_from_users(client, make_user, login, password):
    user = make_user()
    headers = login(user.email, password)
    assert client.get("/api/admin/dashboard", headers=headers).status_code == 404
    response = client.put(
        "/api/admin/users/subscription", json={"email": user.email, "expires": "2030-01-01"}, headers=headers
    )
    assert response.status_code == 404


def test_admin_dashboard_and_subscription(client, make_user, login, password):
    admin = make_user(admin=True)
    customer = make_user()
    headers = login(admin.email, password)

    dashboard = client.get("/api/admin/dashboard", headers=headers)
    assert dashboard.status_code == 200
    assert dashboard.json()["users"] == {"total": 2, "subscribed": 0}
    assert dashboard.json()["storage"]["bucket"] == "test-bucket"

    updated = client.put(
        "/api/admin/users/subscription", json={"email": customer.email, "expires": "2030-01-01"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json() == {"email": customer.email, "subscription_expires": "2030-01-01"}
    assert client.get("/api/admin/dashboard", headers=headers).json()["users"]["subscribed"] == 1
