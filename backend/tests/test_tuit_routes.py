"""
Tuiter Backend — Tuit Route Tests
===================================

What:  HTTP behaviour of the six tuit routes, end to end through FastAPI.

What we test:
    ✅ create → get → delete → get round trip with exact JSON bodies
    ✅ camelCase field names on the wire
    ✅ update status counts
    ✅ malformed payloads answer 422
    ✅ unknown ids answer null by default, 404 when strict
"""

import pytest


class TestTuitLifecycle:

    @pytest.mark.asyncio
    async def test_create_get_delete(self, test_client):
        response = await test_client.post("/users/u1/tuits", json={"text": "hello"})
        assert response.status_code == 200
        created = response.json()
        assert set(created) == {"id", "ownerId", "text"}
        assert created["ownerId"] == "u1"
        assert created["text"] == "hello"

        response = await test_client.get(f"/tuits/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

        response = await test_client.delete(f"/tuits/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"acknowledged": True, "deletedCount": 1}

        response = await test_client.get(f"/tuits/{created['id']}")
        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_list_all_and_by_user(self, test_client):
        await test_client.post("/users/u1/tuits", json={"text": "one"})
        await test_client.post("/users/u2/tuits", json={"text": "two"})

        everything = (await test_client.get("/tuits")).json()
        by_u1 = (await test_client.get("/users/u1/tuits")).json()
        by_nobody = (await test_client.get("/users/nobody/tuits")).json()

        assert sorted(t["text"] for t in everything) == ["one", "two"]
        assert [t["text"] for t in by_u1] == ["one"]
        assert by_nobody == []

    @pytest.mark.asyncio
    async def test_update(self, test_client):
        created = (await test_client.post("/users/u1/tuits", json={"text": "draft"})).json()

        response = await test_client.put(f"/tuits/{created['id']}", json={"text": "final"})

        assert response.status_code == 200
        assert response.json() == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 1}
        assert (await test_client.get(f"/tuits/{created['id']}")).json()["text"] == "final"

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, test_client):
        response = await test_client.put("/tuits/missing", json={"text": "x"})
        assert response.json() == {"acknowledged": True, "matchedCount": 0, "modifiedCount": 0}

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, test_client):
        response = await test_client.delete("/tuits/missing")
        assert response.status_code == 200
        assert response.json()["deletedCount"] == 0


class TestTuitValidation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {},
        {"text": ""},
        {"text": "x" * 281},
        {"text": "hi", "ownerId": "someone-else"},
    ])
    async def test_bad_create_body(self, test_client, body):
        response = await test_client.post("/users/u1/tuits", json=body)

        assert response.status_code == 422
        payload = response.json()
        assert payload["error"] == "validation_error"
        assert isinstance(payload["details"], list)
        assert payload["requestId"]
        assert (await test_client.get("/tuits")).json() == []

    @pytest.mark.asyncio
    async def test_null_text_on_update_rejected(self, test_client):
        created = (await test_client.post("/users/u1/tuits", json={"text": "keep"})).json()

        response = await test_client.put(f"/tuits/{created['id']}", json={"text": None})

        assert response.status_code == 422
        assert (await test_client.get(f"/tuits/{created['id']}")).json()["text"] == "keep"


class TestStrictNotFound:

    @pytest.mark.asyncio
    async def test_unknown_tuit_is_404(self, strict_client):
        response = await strict_client.get("/tuits/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_unknown_user_is_404(self, strict_client):
        response = await strict_client.get("/users/missing")
        assert response.status_code == 404


class TestListOrder:

    @pytest.mark.asyncio
    async def test_lists_follow_insertion_order(self, test_client):
        texts = ["first", "second", "third", "fourth"]
        for i, text in enumerate(texts):
            await test_client.post(f"/users/u{i % 2}/tuits", json={"text": text})

        everything = (await test_client.get("/tuits")).json()
        by_u0 = (await test_client.get("/users/u0/tuits")).json()
        by_u1 = (await test_client.get("/users/u1/tuits")).json()

        assert [t["text"] for t in everything] == texts
        assert [t["text"] for t in by_u0] == ["first", "third"]
        assert [t["text"] for t in by_u1] == ["second", "fourth"]

    @pytest.mark.asyncio
    async def test_update_does_not_reorder(self, test_client):
        first = (await test_client.post("/users/u1/tuits", json={"text": "a"})).json()
        await test_client.post("/users/u1/tuits", json={"text": "b"})

        await test_client.put(f"/tuits/{first['id']}", json={"text": "a2"})

        assert [t["text"] for t in (await test_client.get("/tuits")).json()] == ["a2", "b"]
