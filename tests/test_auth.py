from datetime import timedelta

from campus_wellness.core.security import create_access_token, hash_password, verify_password

NEW_USER = {
    "name": "Dana Reyes",
    "email": "dana@campus.edu",
    "password": "a-long-password",
    "campus": "North",
    "office_or_dept": "Registrar",
}


def register_and_login(client):
    assert client.post("/auth/register", json=NEW_USER).status_code == 201
    response = client.post("/auth/login", json={"email": NEW_USER["email"], "password": NEW_USER["password"]})
    assert response.status_code == 200
    return response.json()["access_token"]


def test_register_login_and_me(anonymous_client):
    token = register_and_login(anonymous_client)

    response = anonymous_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == NEW_USER["email"]
    assert body["role"] == "user"
    assert body["is_profile_complete"] is True
    assert body["has_completed_pre_assessment"] is False


def test_duplicate_email_rejected(anonymous_client):
    anonymous_client.post("/auth/register", json=NEW_USER)
    response = anonymous_client.post("/auth/register", json=NEW_USER)
    assert response.status_code == 400


def test_register_validates_input(anonymous_client):
    assert anonymous_client.post("/auth/register", json={**NEW_USER, "password": "short"}).status_code == 422
    assert anonymous_client.post("/auth/register", json={**NEW_USER, "campus": "Moon"}).status_code == 422


def test_wrong_password_rejected(anonymous_client):
    anonymous_client.post("/auth/register", json=NEW_USER)
    response = anonymous_client.post("/auth/login", json={"email": NEW_USER["email"], "password": "not-the-password"})
    assert response.status_code == 401


def test_chat_requires_token(anonymous_client):
    assert anonymous_client.get("/chat/sessions").status_code == 401


def test_invalid_and_expired_tokens_rejected(anonymous_client, user):
    expired = create_access_token({"sub": user.email}, expires_delta=timedelta(minutes=-1))

    for token in ("garbage", expired):
        response = anonymous_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401


def test_token_for_unknown_user_rejected(anonymous_client):
    token = create_access_token({"sub": "ghost@campus.edu"})
    response = anonymous_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_password_hashing():
    hashed = hash_password("correct-horse-battery")
    assert verify_password("correct-horse-battery", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("anything", None)


def test_long_passwords_hash_past_bcrypt_limit():
    password = "é" * 60  # 120 bytes
    assert verify_password(password, hash_password(password))
