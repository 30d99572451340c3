# tests/test_concurrency.py
import asyncio
from concurrent.futures import ThreadPoolExecutor

import httpx
from fastapi.testclient import TestClient
from app.main import create_app

def _payload(i):
    return {"username": f"u{i}", "name": f"item-{i}", "category": "x", "price": i + 1, "description": "d"}

async def _create_task(app, i):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.post("/v1/products", json=_payload(i))

def test_concurrent_distinct_creates_all_succeed():
    app = create_app()

    async def run():
        return await asyncio.gather(*(_create_task(app, i) for i in range(20)))

    results = asyncio.run(run())
    assert [r.status_code for r in results] == [200] * 20

    client = TestClient(app)
    for i in range(20):
        r = client.get(f"/v1/products/item-{i}")
        assert r.status_code == 200
        assert r.json()["username"] == f"u{i}"

def test_concurrent_same_name_only_one_wins():
    app = create_app()
    client = TestClient(app)
    payload = {"username": "a", "name": "last", "category": "x", "price": 1, "description": "d"}

    with ThreadPoolExecutor(max_workers=8) as pool:
        statuses = list(pool.map(lambda _: client.post("/v1/products", json=payload).status_code, range(8)))

    assert statuses.count(200) == 1
    assert statuses.count(400) == 7
