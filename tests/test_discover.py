async def test_discover_lists_other_members_offerings(client, register, add_skill):
    me = await register("me@skilltrade.io")
    other = await register("other@skilltrade.io", first_name="Olga", last_name="Orr")
    await add_skill(me, "My own skill")
    await add_skill(other, "Welding", category="Crafts", proficiency_level=3)
    await add_skill(other, "Dutch", "seeking")

    resp = await client.get("/api/discover", headers=me.headers)

    assert resp.status_code == 200
    skills = resp.json()["skills"]
    assert [s["title"] for s in skills] == ["Welding"]
    skill = skills[0]
    assert skill["description"] == "Learn Welding from an experienced practitioner"
    assert skill["tags"] == ["Crafts", "Welding"]
    assert skill["proficiency_level"] == 3
    assert skill["user"]["name"] == "Olga Orr"
    assert skill["user"]["avatar"] == "/placeholder.svg?height=40&width=40"


async def test_discover_search_and_category(client, register, add_skill):
    me = await register("me@skilltrade.io")
    other = await register("other@skilltrade.io")
    await add_skill(other, "Watercolor", category="Art", description="Painting landscapes")
    await add_skill(other, "Python", category="Programming")

    by_name = (await client.get("/api/discover?q=PYTH", headers=me.headers)).json()["skills"]
    by_description = (await client.get("/api/discover?q=landscape", headers=me.headers)).json()["skills"]
    by_category = (await client.get("/api/discover?category=Art", headers=me.headers)).json()["skills"]

    assert [s["title"] for s in by_name] == ["Python"]
    assert [s["title"] for s in by_description] == ["Watercolor"]
    assert by_description[0]["description"] == "Painting landscapes"
    assert [s["title"] for s in by_category] == ["Watercolor"]


async def test_discover_pagination_newest_first(client, register, add_skill):
    me = await register("me@skilltrade.io")
    other = await register("other@skilltrade.io")
    for name in ("One", "Two", "Three"):
        await add_skill(other, name)

    first = (await client.get("/api/discover?limit=2", headers=me.headers)).json()
    second = (await client.get("/api/discover?limit=2&offset=2", headers=me.headers)).json()

    assert [s["title"] for s in first["skills"]] == ["Three", "Two"]
    assert first["pagination"]["has_more"] is True
    assert [s["title"] for s in second["skills"]] == ["One"]
    assert second["pagination"]["has_more"] is False


async def test_discover_hides_deactivated_members(client, register, add_skill):
    me = await register("me@skilltrade.io")
    gone = await register("gone@skilltrade.io")
    await add_skill(gone, "Juggling")
    await client.delete("/api/profile", headers=gone.headers)

    assert (await client.get("/api/discover", headers=me.headers)).json()["skills"] == []


async def test_discover_search_treats_wildcards_literally(client, register, add_skill):
    me = await register("me@skilltrade.io")
    other = await register("other@skilltrade.io")
    await add_skill(other, "Chess")
    await add_skill(other, "100% sourdough")
    await add_skill(other, "snake_case naming")

    percent = (await client.get("/api/discover", params={"q": "%"}, headers=me.headers)).json()
    underscore = (await client.get("/api/discover", params={"q": "_"}, headers=me.headers)).json()

    assert [s["title"] for s in percent["skills"]] == ["100% sourdough"]
    assert [s["title"] for s in underscore["skills"]] == ["snake_case naming"]
