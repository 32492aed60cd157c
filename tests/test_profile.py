from tests.conftest import PASSWORD


async def test_get_profile(client, register):
    member = await register("profile@skilltrade.io")

    resp = await client.get("/api/profile", headers=member.headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["email"] == "profile@skilltrade.io"
    assert body["skills_count"] == 0
    assert body["time_credits"] == 10


async def test_partial_update_recomputes_completion(client, register):
    member = await register("update@skilltrade.io", first_name="Uma", last_name="Ulrich")

    resp = await client.put(
        "/api/profile",
        json={"bio": "I teach pottery", "location": "Lisbon"},
        headers=member.headers,
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["bio"] == "I teach pottery"
    assert body["location"] == "Lisbon"
    # untouched
    assert body["first_name"] == "Uma"
    assert body["profile_completion"] == 70


async def test_update_accepts_empty_website_and_rejects_bad_url(client, register):
    member = await register("web@skilltrade.io")

    ok = await client.put("/api/profile", json={"website": ""}, headers=member.headers)
    assert ok.status_code == 200
    assert ok.json()["website"] == ""

    ok = await client.put(
        "/api/profile",
        json={"website": "https://example.org/me"},
        headers=member.headers,
    )
    assert ok.json()["website"] == "https://example.org/me"

    bad = await client.put("/api/profile", json={"website": "not a url"}, headers=member.headers)
    assert bad.status_code == 400


async def test_update_rejects_short_name(client, register):
    member = await register("short@skilltrade.io")

    resp = await client.put("/api/profile", json={"last_name": "X"}, headers=member.headers)
    assert resp.status_code == 400


async def test_change_password(client, register):
    member = await register("pw@skilltrade.io")

    wrong = await client.post(
        "/api/profile/change-password",
        json={"current_password": "Wrong1234", "new_password": "Another123"},
        headers=member.headers,
    )
    assert wrong.status_code == 400

    ok = await client.post(
        "/api/profile/change-password",
        json={"current_password": PASSWORD, "new_password": "Another123"},
        headers=member.headers,
    )
    assert ok.status_code == 200

    old = await client.post("/api/auth/login", json={"email": "pw@skilltrade.io", "password": PASSWORD})
    new = await client.post("/api/auth/login", json={"email": "pw@skilltrade.io", "password": "Another123"})
    assert old.status_code == 401
    assert new.status_code == 200


async def test_change_password_enforces_strength(client, register):
    member = await register("weak@skilltrade.io")

    resp = await client.post(
        "/api/profile/change-password",
        json={"current_password": PASSWORD, "new_password": "weakweak"},
        headers=member.headers,
    )
    assert resp.status_code == 400


async def test_update_trims_names_before_length_check(client, register):
    member = await register("trim@skilltrade.io")

    blank = await client.put("/api/profile", json={"first_name": "  "}, headers=member.headers)
    padded = await client.put("/api/profile", json={"last_name": " Q "}, headers=member.headers)
    ok = await client.put("/api/profile", json={"first_name": "  Uma "}, headers=member.headers)

    assert blank.status_code == 400
    assert padded.status_code == 400
    assert ok.status_code == 200
    assert ok.json()["first_name"] == "Uma"
    assert ok.json()["last_name"] == "User"


async def test_update_rejects_website_longer_than_column(client, register):
    member = await register("longweb@skilltrade.io")

    resp = await client.put(
        "/api/profile",
        json={"website": "https://example.org/" + "a" * 500},
        headers=member.headers,
    )

    assert resp.status_code == 400
    profile = (await client.get("/api/profile", headers=member.headers)).json()
    assert profile["website"] is None
