"""
Authentication Test Suite
"""
from marquee.models.user import User


def register(client, email="new@example.com", password="Password123!", nickname=None):
    payload = {"email": email, "password": password}
    if nickname is not None:
        payload["nickname"] = nickname
    return client.post("/api/auth/register", json=payload)


def test_register_and_login(client):
    registered = register(client, nickname="Cinephile")
    assert registered.status_code == 201
    assert registered.json()["display_name"] == "Cinephile"
    assert registered.json()["roles"] == []

    login = client.post("/api/auth/login", json={"email": "new@example.com", "password": "Password123!"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "new@example.com"


def test_blank_nickname_falls_back_to_email(client):
    response = register(client, email="lonely.viewer@example.com", nickname="   ")
    assert response.status_code == 201
    assert response.json()["nickname"] is None
    assert response.json()["display_name"] == "lonely.viewer"


def test_duplicate_email_is_409(client):
    register(client)
    assert register(client).status_code == 409


def test_weak_password_is_422(client):
    assert register(client, password="password").status_code == 422


def test_wrong_password_is_401(client, db_session):
    register(client)
    response = client.post("/api/auth/login", json={"email": "new@example.com", "password": "Wrong123!"})
    assert response.status_code == 401


def test_inactive_user_cannot_login(client, db_session):
    register(client)
    user = db_session.query(User).filter(User.email == "new@example.com").first()
    user.is_active = False
    db_session.commit()

    response = client.post("/api/auth/login", json={"email": "new@example.com", "password": "Password123!"})
    assert response.status_code == 403


def test_admin_role(test_user, admin_user):
    assert admin_user.is_admin
    assert admin_user.is_in_role("Admin")
    assert not test_user.is_admin
