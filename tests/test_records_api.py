import pytest


def test_inventory_category_filter_scenario(client):
    res = client.get("/inventory", params={"category": "Safety"})
    assert res.status_code == 200
    body = res.json()
    assert body["count"] == 1
    assert body["data"][0]["item"] == "Life Jackets"


def test_vessel_id_filter_is_coerced(client):
    assert client.get("/crew", params={"vesselId": "1"}).json()["count"] == 2
    assert client.get("/crew", params={"vesselId": "2"}).json()["count"] == 0


def test_non_numeric_vessel_id_filter_matches_nothing(client):
    res = client.get("/bookings", params={"vesselId": "abc"})
    assert res.status_code == 200
    assert res.json() == {"success": True, "count": 0, "data": []}


def test_empty_filter_value_is_ignored(client):
    assert client.get("/maintenance", params={"status": ""}).json()["count"] == 1


def test_combined_filters(client):
    assert client.get("/crew", params={"vesselId": 1, "position": "Chef"}).json()["count"] == 1
    assert client.get("/maintenance", params={"vesselId": 1, "status": "completed"}).json()["count"] == 0


@pytest.mark.parametrize(
    "path, label",
    [
        ("/crew", "Crew member"),
        ("/maintenance", "Maintenance record"),
        ("/bookings", "Booking"),
        ("/inventory", "Inventory item"),
    ],
)
def test_not_found_names_the_entity(client, path, label):
    for res in (
        client.get(f"{path}/999"),
        client.put(f"{path}/999", json={}),
        client.delete(f"{path}/999"),
    ):
        assert res.status_code == 404
        assert res.json() == {"error": f"{label} not found"}


def test_create_unassigned_crew_member(client):
    res = client.post("/crew", json={"name": "Mia Torres", "position": "Deckhand"})
    assert res.status_code == 201
    data = res.json()["data"]
    assert data == {"id": 3, "name": "Mia Torres", "position": "Deckhand", "vesselId": None, "certifications": []}


def test_crew_update_merges_and_passes_extra_fields(client):
    res = client.put("/crew/2", json={"position": "Head Chef", "languages": ["en", "es"]})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["position"] == "Head Chef"
    assert data["languages"] == ["en", "es"]
    assert data["name"] == "Sarah Johnson"
    assert data["certifications"] == ["Culinary Arts"]


def test_crew_can_be_unassigned(client):
    data = client.put("/crew/1", json={"vesselId": None}).json()["data"]
    assert data["vesselId"] is None
    assert client.get("/crew", params={"vesselId": 1}).json()["count"] == 1


def test_create_maintenance_record(client):
    res = client.post("/maintenance", json={"vesselId": 2, "type": "Sail Repair", "scheduledDate": "2025-12-03"})
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["id"] == 2
    assert data["status"] == "pending"
    assert data["notes"] == ""


def test_create_maintenance_missing_fields(client):
    res = client.post("/maintenance", json={"vesselId": 2})
    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields: type, scheduledDate"}


def test_create_booking(client):
    payload = {"vesselId": 2, "clientName": "Jane Roe", "startDate": "2025-12-01", "endDate": "2025-12-05"}
    res = client.post("/bookings", json=payload)
    assert res.status_code == 201
    assert res.json()["data"] == {**payload, "id": 2, "status": "pending"}


def test_create_booking_with_reversed_dates(client):
    payload = {"vesselId": 2, "clientName": "Jane Roe", "startDate": "2025-12-05", "endDate": "2025-12-01"}
    res = client.post("/bookings", json=payload)
    assert res.status_code == 400
    assert res.json() == {"error": "endDate must not be before startDate"}


def test_update_booking_status(client):
    data = client.put("/bookings/1", json={"status": "completed"}).json()["data"]
    assert data["status"] == "completed"
    assert data["clientName"] == "John Doe"


def test_create_inventory_with_zero_quantity(client):
    res = client.post("/inventory", json={"vesselId": 2, "item": "Flares", "quantity": 0, "category": "Safety"})
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["quantity"] == 0
    assert data["unit"] == "units"
    assert client.get("/inventory", params={"category": "Safety"}).json()["count"] == 2


def test_create_inventory_invalid_quantity(client):
    res = client.post("/inventory", json={"vesselId": 2, "item": "Flares", "quantity": "a few"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid fields: quantity"}


def test_delete_inventory_item(client):
    res = client.delete("/inventory/2")
    assert res.status_code == 200
    assert res.json()["message"] == "Inventory item deleted successfully"
    assert [i["id"] for i in client.get("/inventory").json()["data"]] == [1]
    created = client.post("/inventory", json={"vesselId": 1, "item": "Rope", "quantity": 4}).json()["data"]
    assert created["id"] == 2


def test_inventory_rejects_infinite_quantity_and_boolean_vessel(client):
    res = client.post("/inventory", json={"vesselId": 1, "item": "Rope", "quantity": "inf"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid fields: quantity"}
    res = client.post("/inventory", json={"vesselId": False, "item": "Rope", "quantity": 3})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid fields: vesselId"}
    assert client.get("/inventory").json()["count"] == 2
