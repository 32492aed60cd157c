from sqlalchemy import select

from skilltrade.models.time_credit import TimeCreditTransaction
from skilltrade.repositories.user_repository import UserRepository
from tests.conftest import PASSWORD


def _registration(email="new@skilltrade.io", **overrides):
    body = {
        "first_name": "Nina",
        "last_name": "Novak",
        "email": email,
        "password": PASSWORD,
        "confirm_password": PASSWORD,
    }
    body.update(overrides)
    return body


async def test_register_returns_user_tokens_and_bonus(client, session_maker):
    resp = await client.post("/api/auth/register", json=_registration())

    assert resp.status_code == 201
    body = resp.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"] and body["refresh_token"]
    user = body["user"]
    assert user["name"] == "Nina Novak"
    assert user["time_credits"] == 10
    # first + last name only
    assert user["profile_completion"] == 40
    assert "password_hash" not in user

    async with session_maker() as db:
        entries = (await db.execute(select(TimeCreditTransaction))).scalars().all()
    assert [(e.type, e.amount) for e in entries] == [("bonus", 10)]


async def test_register_duplicate_email_conflicts(client, register):
    await register("taken@skilltrade.io")

    resp = await client.post("/api/auth/register", json=_registration("Taken@skilltrade.io"))

    assert resp.status_code == 409
    assert resp.json()["error"] == "EMAIL_EXISTS"


async def test_register_rejects_weak_password(client):
    resp = await client.post(
        "/api/auth/register",
        json=_registration(password="alllowercase1", confirm_password="alllowercase1"),
    )

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"]


async def test_register_rejects_mismatched_passwords(client):
    resp = await client.post(
        "/api/auth/register",
        json=_registration(confirm_password="Different123"),
    )
    assert resp.status_code == 400


async def test_register_rejects_short_names(client):
    resp = await client.post("/api/auth/register", json=_registration(first_name="N"))
    assert resp.status_code == 400


async def test_register_rejects_names_that_are_short_once_trimmed(client):
    blank = await client.post("/api/auth/register", json=_registration(first_name="   "))
    padded = await client.post(
        "/api/auth/register",
        json=_registration("padded@skilltrade.io", last_name=" B "),
    )

    assert blank.status_code == 400
    assert padded.status_code == 400


async def test_register_trims_names(client):
    resp = await client.post(
        "/api/auth/register",
        json=_registration(first_name="  Nina ", last_name=" Novak  "),
    )

    assert resp.status_code == 201
    user = resp.json()["user"]
    assert user["first_name"] == "Nina"
    assert user["last_name"] == "Novak"
    assert user["name"] == "Nina Novak"


async def test_register_race_on_same_email_conflicts(client, register, monkeypatch):
    await register("race@skilltrade.io")

    async def not_taken(self, db, email):
        return False

    # Both requests passed the existence check; the unique index decides.
    monkeypatch.setattr(UserRepository, "email_exists", not_taken)
    resp = await client.post("/api/auth/register", json=_registration("race@skilltrade.io"))

    assert resp.status_code == 409
    assert resp.json()["error"] == "EMAIL_EXISTS"


async def test_login_success_is_case_insensitive_on_email(client, register):
    await register("casey@skilltrade.io")

    resp = await client.post(
        "/api/auth/login",
        json={"email": "CASEY@skilltrade.io", "password": PASSWORD},
    )

    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "casey@skilltrade.io"


async def test_login_wrong_password(client, register):
    await register("wrong@skilltrade.io")

    resp = await client.post(
        "/api/auth/login",
        json={"email": "wrong@skilltrade.io", "password": "Nope12345"},
    )

    assert resp.status_code == 401
    assert resp.json()["error"] == "INVALID_CREDENTIALS"


async def test_login_unknown_email(client):
    resp = await client.post(
        "/api/auth/login",
        json={"email": "ghost@skilltrade.io", "password": PASSWORD},
    )
    assert resp.status_code == 401


async def test_me_requires_token(client):
    resp = await client.get("/api/auth/me")

    assert resp.status_code == 401
    assert resp.json()["message"] == "Authentication required"


async def test_me_rejects_garbage_token(client):
    resp = await client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})

    assert resp.status_code == 401
    assert resp.json()["error"] == "INVALID_TOKEN"


async def test_me_returns_current_user(client, register):
    member = await register("me@skilltrade.io")

    resp = await client.get("/api/auth/me", headers=member.headers)

    assert resp.status_code == 200
    assert resp.json()["id"] == member.id


async def test_refresh_issues_new_pair(client, register):
    member = await register("refresh@skilltrade.io")

    resp = await client.post(
        "/api/auth/refresh",
        json={"refresh_token": member.body["refresh_token"]},
    )

    assert resp.status_code == 200
    new_headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}
    assert (await client.get("/api/auth/me", headers=new_headers)).status_code == 200


async def test_refresh_rejects_access_token(client, register):
    member = await register("wrongtype@skilltrade.io")

    resp = await client.post(
        "/api/auth/refresh",
        json={"refresh_token": member.body["access_token"]},
    )
    assert resp.status_code == 401


async def test_refresh_token_cannot_authenticate_requests(client, register):
    member = await register("refreshonly@skilltrade.io")
    headers = {"Authorization": f"Bearer {member.body['refresh_token']}"}

    assert (await client.get("/api/auth/me", headers=headers)).status_code == 401


async def test_logout(client):
    resp = await client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logged out successfully"}


async def test_deactivated_user_cannot_log_in_or_use_token(client, register):
    member = await register("leaving@skilltrade.io")

    assert (await client.delete("/api/profile", headers=member.headers)).status_code == 200

    login = await client.post(
        "/api/auth/login",
        json={"email": "leaving@skilltrade.io", "password": PASSWORD},
    )
    assert login.status_code == 401
    assert (await client.get("/api/auth/me", headers=member.headers)).status_code == 401
