# tests/test_products.py
from fastapi.testclient import TestClient
from app.main import create_app

WIDGET = {"username": "alice", "name": "widget", "category": "tools", "price": 100, "description": "a widget"}

def fresh_client():
    return TestClient(create_app())

def test_create_echoes_fields_and_stamps_created_at():
    client = fresh_client()
    r = client.post("/v1/products", json=WIDGET)
    assert r.status_code == 200
    body = r.json()
    for k, v in WIDGET.items():
        assert body[k] == v
    assert body["createdAt"]

def test_duplicate_name_is_rejected_and_original_kept():
    client = fresh_client()
    first = client.post("/v1/products", json=WIDGET).json()

    r = client.post("/v1/products", json={**WIDGET, "username": "bob", "price": 5})
    assert r.status_code == 400
    assert "widget" in r.json()["error"]

    stored = client.get("/v1/products/widget").json()
    assert stored == first

def test_get_unknown_is_404():
    client = fresh_client()
    r = client.get("/v1/products/unknown")
    assert r.status_code == 404
    assert r.json() == {"error": "can not found product unknown"}

def test_get_after_create_returns_same_record():
    client = fresh_client()
    created = client.post("/v1/products", json=WIDGET).json()
    r = client.get("/v1/products/widget")
    assert r.status_code == 200
    assert r.json() == created

def test_client_supplied_created_at_is_ignored():
    client = fresh_client()
    r = client.post("/v1/products", json={**WIDGET, "createdAt": "2000-01-01T00:00:00Z"})
    assert r.status_code == 200
    assert not r.json()["createdAt"].startswith("2000")

def test_missing_field_is_400():
    client = fresh_client()
    payload = {k: v for k, v in WIDGET.items() if k != "category"}
    r = client.post("/v1/products", json=payload)
    assert r.status_code == 400
    assert "category" in r.json()["error"]
    assert client.get("/v1/products/widget").status_code == 404

def test_empty_string_and_zero_price_are_400():
    client = fresh_client()
    assert client.post("/v1/products", json={**WIDGET, "description": ""}).status_code == 400
    r = client.post("/v1/products", json={**WIDGET, "price": 0})
    assert r.status_code == 400
    assert "price" in r.json()["error"]

def test_non_json_body_is_400():
    client = fresh_client()
    r = client.post("/v1/products", content=b"not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["error"].startswith("body: ")

def test_listeners_built_from_one_app_share_the_store():
    app = create_app()
    a, b = TestClient(app), TestClient(app, base_url="https://testserver")
    a.post("/v1/products", json=WIDGET)
    assert b.get("/v1/products/widget").status_code == 200

def test_string_price_is_400():
    client = fresh_client()
    r = client.post("/v1/products", json={**WIDGET, "price": "100"})
    assert r.status_code == 400
    assert "price" in r.json()["error"]
    assert client.get("/v1/products/widget").status_code == 404

def test_float_price_is_400():
    client = fresh_client()
    r = client.post("/v1/products", json={**WIDGET, "price": 100.0})
    assert r.status_code == 400
    assert "price" in r.json()["error"]

def test_separate_apps_do_not_share_products():
    first, second = fresh_client(), fresh_client()
    first.post("/v1/products", json=WIDGET)
    assert second.get("/v1/products/widget").status_code == 404
