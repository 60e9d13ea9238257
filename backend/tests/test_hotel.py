from app.config import settings


def test_get_hotel_returns_null_before_profile_exists(client):
    resp = client.get("/api/hotel")
    assert resp.status_code == 200
    assert resp.json() is None


def test_put_hotel_creates_then_updates_single_profile(client):
    payload = {
        "name": "Thendral Park Inn",
        "address": "12 Temple Road",
        "images": ["https://cdn.example.com/h1.png", "https://cdn.example.com/h2.png"],
    }
    created = client.put("/api/hotel", json=payload)
    assert created.status_code == 200, created.text
    hotel_id = created.json()["hotel_id"]
    assert created.json()["images"] == payload["images"]

    updated = client.put("/api/hotel", json={**payload, "phone": "+91 44 1234 5678", "images": []})
    assert updated.status_code == 200
    body = updated.json()
    assert body["hotel_id"] == hotel_id
    assert body["phone"] == "+91 44 1234 5678"
    assert body["images"] == []

    fetched = client.get("/api/hotel").json()
    assert fetched["hotel_id"] == hotel_id


def test_configured_hotel_id_wins_over_first_row(client, db, seed_hotel, monkeypatch):
    from app.models.hotel import Hotel

    other = Hotel(name="Second Property")
    db.add(other)
    db.commit()
    db.refresh(other)

    assert client.get("/api/hotel").json()["hotel_id"] == seed_hotel.hotel_id

    monkeypatch.setattr(settings, "HOTEL_ID", other.hotel_id)
    assert client.get("/api/hotel").json()["name"] == "Second Property"
