from uuid import UUID, uuid4

from sqlalchemy import select

from skilltrade.models.match import Match
from skilltrade.models.user import User
from skilltrade.services.match_service import MatchService


async def _learner_and_teacher(register, add_skill):
    learner = await register("learner@skilltrade.io", first_name="Lena", last_name="Lund")
    teacher = await register("teacher@skilltrade.io", first_name="Theo", last_name="Tran")
    await add_skill(learner, "python", "seeking")
    await add_skill(teacher, "Python", "offering")
    await add_skill(teacher, "Chess", "seeking")
    return learner, teacher


async def test_candidates_match_seeking_names_case_insensitively(client, register, add_skill):
    learner, teacher = await _learner_and_teacher(register, add_skill)
    await register("bystander@skilltrade.io")

    resp = await client.get("/api/matches", headers=learner.headers)

    assert resp.status_code == 200
    candidates = resp.json()["matches"]
    assert [c["id"] for c in candidates] == [teacher.id]
    candidate = candidates[0]
    assert candidate["name"] == "Theo Tran"
    assert candidate["offering"] == ["Python"]
    assert candidate["seeking"] == ["Chess"]
    assert candidate["tags"] == ["Python"]
    assert candidate["bio"] == "Hi! I'm Theo, excited to share my skills."
    assert candidate["avatar"].startswith("/placeholder.svg")


async def test_swipe_on_self_or_unknown_user(client, register):
    member = await register("solo@skilltrade.io")

    self_swipe = await client.post(
        "/api/matches",
        json={"target_user_id": member.id, "action": "like"},
        headers=member.headers,
    )
    unknown = await client.post(
        "/api/matches",
        json={"target_user_id": str(uuid4()), "action": "like"},
        headers=member.headers,
    )
    bad_action = await client.post(
        "/api/matches",
        json={"target_user_id": str(uuid4()), "action": "superlike"},
        headers=member.headers,
    )

    assert self_swipe.status_code == 400
    assert unknown.status_code == 404
    assert bad_action.status_code == 400


async def test_mutual_like_accepts_existing_row(register, swipe, session_maker):
    alice = await register("a@skilltrade.io")
    bob = await register("b@skilltrade.io")

    first = await swipe(alice, bob)
    second = await swipe(bob, alice)

    assert first == {"is_match": False, "message": "Like recorded"}
    assert second == {"is_match": True, "message": "It's a match!"}

    async with session_maker() as db:
        rows = (await db.execute(select(Match))).scalars().all()
    assert len(rows) == 1
    assert rows[0].status == "accepted"


async def test_swiping_matched_user_again_reports_match(register, swipe, matched_pair):
    alice, bob = await matched_pair()

    again = await swipe(alice, bob, "pass")

    assert again["is_match"] is True
    assert again["message"] == "Already matched"


async def test_pass_hides_candidate(client, register, add_skill, swipe, session_maker):
    learner, teacher = await _learner_and_teacher(register, add_skill)

    result = await swipe(learner, teacher, "pass")

    assert result == {"is_match": False, "message": "Pass recorded"}
    resp = await client.get("/api/matches", headers=learner.headers)
    assert resp.json()["matches"] == []
    async with session_maker() as db:
        row = (await db.execute(select(Match))).scalar_one()
    assert row.status == "rejected"


async def test_liker_stays_visible_to_target(client, register, add_skill, swipe):
    learner, teacher = await _learner_and_teacher(register, add_skill)
    await add_skill(learner, "Chess", "offering")

    await swipe(learner, teacher)

    # learner already swiped, so teacher disappears for them
    assert (await client.get("/api/matches", headers=learner.headers)).json()["matches"] == []
    # but the learner is still offered to the teacher so the like can be returned
    for_teacher = (await client.get("/api/matches", headers=teacher.headers)).json()["matches"]
    assert [c["id"] for c in for_teacher] == [learner.id]


async def test_matched_users_drop_out_of_candidates(client, register, add_skill, swipe):
    learner, teacher = await _learner_and_teacher(register, add_skill)
    await add_skill(learner, "Chess", "offering")

    await swipe(learner, teacher)
    await swipe(teacher, learner)

    assert (await client.get("/api/matches", headers=learner.headers)).json()["matches"] == []
    assert (await client.get("/api/matches", headers=teacher.headers)).json()["matches"] == []


async def test_mutual_matches_list(client, matched_pair, register, swipe):
    alice, bob = await matched_pair()
    carol = await register("carol@skilltrade.io")
    await swipe(alice, carol)

    resp = await client.get("/api/matches/mutual", headers=alice.headers)

    assert resp.status_code == 200
    matches = resp.json()["matches"]
    assert len(matches) == 1
    assert matches[0]["user"]["id"] == bob.id
    assert matches[0]["user"]["name"] == "Bob Baker"
    assert matches[0]["matched_at"]

    for_bob = (await client.get("/api/matches/mutual", headers=bob.headers)).json()["matches"]
    assert [m["user"]["id"] for m in for_bob] == [alice.id]


async def test_candidate_limit_is_bounded(client, register):
    member = await register("limits@skilltrade.io")

    resp = await client.get("/api/matches?limit=0", headers=member.headers)
    assert resp.status_code == 400


async def test_like_that_loses_insert_race_is_still_recorded(register, swipe, session_maker, monkeypatch):
    alice = await register("racer@skilltrade.io")
    bob = await register("target@skilltrade.io")
    await swipe(alice, bob)

    service = MatchService()
    real_get_directed = service.match_repo.get_directed
    stale_reads = [None]

    async def get_directed(db, user1_id, user2_id):
        # The first lookup misses the row a concurrent request already wrote.
        if stale_reads:
            return stale_reads.pop()
        return await real_get_directed(db, user1_id, user2_id)

    monkeypatch.setattr(service.match_repo, "get_directed", get_directed)

    async with session_maker() as db:
        user = await db.get(User, UUID(alice.id))
        result = await service.swipe(db, user, target_user_id=UUID(bob.id), action="like")

    assert result.is_match is False
    assert result.message == "Like recorded"
    async with session_maker() as db:
        rows = (await db.execute(select(Match))).scalars().all()
    assert [(str(r.user1_id), r.status) for r in rows] == [(alice.id, "pending")]
