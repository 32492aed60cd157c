from uuid import uuid4

from sqlalchemy import select

from skilltrade.models.skill import Skill


async def test_add_skill_defaults_and_completion(client, register, add_skill):
    member = await register("skills@skilltrade.io")

    skill = await add_skill(member, "  Pottery  ")

    assert skill["name"] == "Pottery"
    assert skill["category"] == "General"
    assert skill["proficiency_level"] == 1
    profile = (await client.get("/api/profile", headers=member.headers)).json()
    assert profile["skills_count"] == 1
    assert profile["profile_completion"] == 60


async def test_add_skill_validates_input(client, register):
    member = await register("invalid@skilltrade.io")

    too_high = await client.post(
        "/api/skills",
        json={"name": "Chess", "type": "offering", "proficiency_level": 6},
        headers=member.headers,
    )
    blank = await client.post(
        "/api/skills",
        json={"name": "   ", "type": "offering"},
        headers=member.headers,
    )
    bad_type = await client.post(
        "/api/skills",
        json={"name": "Chess", "type": "teaching"},
        headers=member.headers,
    )

    assert too_high.status_code == 400
    assert blank.status_code == 400
    assert bad_type.status_code == 400


async def test_list_skills_split_by_type(client, register, add_skill):
    member = await register("list@skilltrade.io")
    await add_skill(member, "Guitar", "offering", category="Music", proficiency_level=4)
    await add_skill(member, "Spanish", "seeking")

    resp = await client.get("/api/skills", headers=member.headers)

    assert resp.status_code == 200
    body = resp.json()
    assert [s["name"] for s in body["offering"]] == ["Guitar"]
    assert body["offering"][0]["category"] == "Music"
    assert [s["name"] for s in body["seeking"]] == ["Spanish"]


async def test_bulk_replace(client, register, add_skill):
    member = await register("bulk@skilltrade.io")
    await add_skill(member, "Old skill")

    resp = await client.put(
        "/api/skills",
        json={"offering": ["Python", "SQL"], "seeking": ["Drawing"]},
        headers=member.headers,
    )

    assert resp.status_code == 200
    body = (await client.get("/api/skills", headers=member.headers)).json()
    assert sorted(s["name"] for s in body["offering"]) == ["Python", "SQL"]
    assert [s["name"] for s in body["seeking"]] == ["Drawing"]


async def test_bulk_replace_with_blank_name_changes_nothing(client, register, add_skill):
    member = await register("bulkbad@skilltrade.io")
    await add_skill(member, "Keep me")

    resp = await client.put(
        "/api/skills",
        json={"offering": ["Fine", " "], "seeking": []},
        headers=member.headers,
    )

    assert resp.status_code == 400
    body = (await client.get("/api/skills", headers=member.headers)).json()
    assert [s["name"] for s in body["offering"]] == ["Keep me"]


async def test_bulk_replace_rejects_names_longer_than_column(client, register, add_skill):
    member = await register("bulklong@skilltrade.io")
    await add_skill(member, "Keep me")
    long_name = "x" * 201

    single = await client.post(
        "/api/skills",
        json={"name": long_name, "type": "offering"},
        headers=member.headers,
    )
    bulk = await client.put(
        "/api/skills",
        json={"offering": [long_name], "seeking": []},
        headers=member.headers,
    )

    assert single.status_code == 400
    assert bulk.status_code == 400
    assert bulk.json()["error"] == "VALIDATION_ERROR"
    body = (await client.get("/api/skills", headers=member.headers)).json()
    assert [s["name"] for s in body["offering"]] == ["Keep me"]


async def test_bulk_replace_trims_names(client, register):
    member = await register("bulktrim@skilltrade.io")

    resp = await client.put(
        "/api/skills",
        json={"offering": ["  Knitting "], "seeking": ["Baking  "]},
        headers=member.headers,
    )

    assert resp.status_code == 200
    body = (await client.get("/api/skills", headers=member.headers)).json()
    assert [s["name"] for s in body["offering"]] == ["Knitting"]
    assert [s["name"] for s in body["seeking"]] == ["Baking"]


async def test_bulk_replace_to_empty_drops_completion(client, register, add_skill):
    member = await register("empty@skilltrade.io")
    await add_skill(member, "Knitting")

    await client.put("/api/skills", json={"offering": [], "seeking": []}, headers=member.headers)

    profile = (await client.get("/api/profile", headers=member.headers)).json()
    assert profile["skills_count"] == 0
    assert profile["profile_completion"] == 40


async def test_delete_own_skill(client, register, add_skill, session_maker):
    member = await register("del@skilltrade.io")
    skill = await add_skill(member, "Baking")

    resp = await client.delete(f"/api/skills/{skill['id']}", headers=member.headers)

    assert resp.status_code == 200
    async with session_maker() as db:
        assert (await db.execute(select(Skill))).scalars().all() == []


async def test_cannot_delete_someone_elses_skill(client, register, add_skill):
    owner = await register("owner@skilltrade.io")
    other = await register("other@skilltrade.io")
    skill = await add_skill(owner, "Sailing")

    resp = await client.delete(f"/api/skills/{skill['id']}", headers=other.headers)

    assert resp.status_code == 404
    assert resp.json()["error"] == "SKILL_NOT_FOUND"


async def test_delete_unknown_and_malformed_ids(client, register):
    member = await register("ids@skilltrade.io")

    missing = await client.delete(f"/api/skills/{uuid4()}", headers=member.headers)
    malformed = await client.delete("/api/skills/not-an-id", headers=member.headers)

    assert missing.status_code == 404
    assert malformed.status_code == 400
