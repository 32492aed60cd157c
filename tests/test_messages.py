from uuid import uuid4

from sqlalchemy import select

from skilltrade.models.message import Message


async def _send(client, sender, receiver, content):
    return await client.post(
        "/api/messages",
        json={"receiver_id": receiver.id, "content": content},
        headers=sender.headers,
    )


async def test_sending_to_unmatched_user_is_forbidden(client, register):
    alice = await register("alice@skilltrade.io")
    bob = await register("bob@skilltrade.io")

    resp = await _send(client, alice, bob, "Hello?")

    assert resp.status_code == 403
    assert resp.json()["error"] == "NOT_MATCHED"


async def test_pending_like_does_not_unlock_messaging(client, register, swipe):
    alice = await register("alice@skilltrade.io")
    bob = await register("bob@skilltrade.io")
    await swipe(alice, bob)

    assert (await _send(client, alice, bob, "Hi")).status_code == 403


async def test_send_message_to_match(client, matched_pair):
    alice, bob = await matched_pair()

    resp = await _send(client, alice, bob, "Want to trade lessons?")

    assert resp.status_code == 201
    body = resp.json()
    assert body["sender_id"] == alice.id
    assert body["receiver_id"] == bob.id
    assert body["content"] == "Want to trade lessons?"
    assert body["is_read"] is False


async def test_send_message_validation(client, matched_pair):
    alice, bob = await matched_pair()

    assert (await _send(client, alice, bob, "")).status_code == 400
    assert (await _send(client, alice, bob, "x" * 1001)).status_code == 400
    assert (await _send(client, alice, alice, "me")).status_code == 400

    unknown = await client.post(
        "/api/messages",
        json={"receiver_id": str(uuid4()), "content": "anyone?"},
        headers=alice.headers,
    )
    assert unknown.status_code == 404


async def test_thread_is_chronological_and_marks_read(client, matched_pair, session_maker):
    alice, bob = await matched_pair()
    await _send(client, alice, bob, "first")
    await _send(client, bob, alice, "second")
    await _send(client, alice, bob, "third")

    resp = await client.get(f"/api/messages/{alice.id}", headers=bob.headers)

    assert resp.status_code == 200
    messages = resp.json()["messages"]
    assert [m["text"] for m in messages] == ["first", "second", "third"]
    assert [m["sender"] for m in messages] == ["them", "me", "them"]
    # status as it was before bob opened the thread
    assert [m["status"] for m in messages] == ["delivered", "delivered", "delivered"]

    async with session_maker() as db:
        rows = (await db.execute(select(Message))).scalars().all()
    read = {m.content: m.is_read for m in rows}
    assert read == {"first": True, "second": False, "third": True}

    # alice now sees her messages as read
    from_alice = (await client.get(f"/api/messages/{bob.id}", headers=alice.headers)).json()
    statuses = {m["text"]: m["status"] for m in from_alice["messages"]}
    assert statuses["first"] == "read"
    assert statuses["third"] == "read"


async def test_thread_pagination(client, matched_pair):
    alice, bob = await matched_pair()
    for i in range(5):
        await _send(client, alice, bob, f"msg {i}")

    page = (await client.get(f"/api/messages/{bob.id}?limit=2", headers=alice.headers)).json()

    assert [m["text"] for m in page["messages"]] == ["msg 3", "msg 4"]
    assert page["pagination"] == {"limit": 2, "offset": 0, "has_more": True}

    older = (
        await client.get(f"/api/messages/{bob.id}?limit=2&offset=4", headers=alice.headers)
    ).json()
    assert [m["text"] for m in older["messages"]] == ["msg 0"]
    assert older["pagination"]["has_more"] is False


async def test_conversation_list(client, matched_pair, register, swipe):
    alice, bob = await matched_pair()
    carol = await register("carol@skilltrade.io", first_name="Carol", last_name="Cole")
    await swipe(alice, carol)
    await swipe(carol, alice)

    await _send(client, bob, alice, "hi from bob")
    await _send(client, bob, alice, "are you there?")
    await _send(client, alice, carol, "hi carol")

    resp = await client.get("/api/messages", headers=alice.headers)

    assert resp.status_code == 200
    conversations = resp.json()["conversations"]
    assert [c["id"] for c in conversations] == [carol.id, bob.id]

    with_carol, with_bob = conversations
    assert with_carol["user"]["name"] == "Carol Cole"
    # carol signed up just now, which counts as recent activity
    assert with_carol["user"]["status"] == "online"
    assert with_carol["last_message"]["text"] == "hi carol"
    assert with_carol["unread_count"] == 0
    assert with_carol["last_message"]["is_read"] is True

    assert with_bob["last_message"]["text"] == "are you there?"
    assert with_bob["unread_count"] == 2
    assert with_bob["last_message"]["is_read"] is False


async def test_conversation_unread_clears_after_opening(client, matched_pair):
    alice, bob = await matched_pair()
    await _send(client, bob, alice, "ping")

    await client.get(f"/api/messages/{bob.id}", headers=alice.headers)

    conversations = (await client.get("/api/messages", headers=alice.headers)).json()["conversations"]
    assert conversations[0]["unread_count"] == 0


async def test_conversation_shows_latest_message_from_either_side(client, matched_pair, register, swipe):
    alice, bob = await matched_pair()
    dana = await register("dana@skilltrade.io", first_name="Dana", last_name="Diaz")
    await swipe(alice, dana)
    await swipe(dana, alice)

    await _send(client, bob, alice, "question for you")
    await _send(client, alice, dana, "hello dana")
    await _send(client, alice, bob, "here is my answer")
    await _send(client, dana, alice, "hey alice")

    conversations = (await client.get("/api/messages", headers=alice.headers)).json()["conversations"]

    assert [(c["id"], c["last_message"]["text"]) for c in conversations] == [
        (dana.id, "hey alice"),
        (bob.id, "here is my answer"),
    ]
    assert [c["unread_count"] for c in conversations] == [1, 1]
