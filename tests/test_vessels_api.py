def test_list_vessels(client):
    res = client.get("/vessels")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert [v["name"] for v in body["data"]] == ["Ocean Serenity", "Wind Dancer"]


def test_list_vessels_with_filters(client):
    body = client.get("/vessels", params={"type": "Sailing Yacht"}).json()
    assert body["count"] == 1
    assert body["data"][0]["name"] == "Wind Dancer"
    body = client.get("/vessels", params={"status": "maintenance"}).json()
    assert body == {"success": True, "count": 0, "data": []}


def test_create_vessel_scenario(client):
    res = client.post("/vessels", json={"name": "Test", "type": "Motor", "length": 100, "capacity": 20})
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["id"] == 3
    assert data["status"] == "available"
    assert client.get("/vessels").json()["count"] == 3


def test_create_vessel_missing_fields(client):
    res = client.post("/vessels", json={"name": "Nameless"})
    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields: type, length, capacity"}
    assert client.get("/vessels").json()["count"] == 2


def test_create_vessel_without_body(client):
    res = client.post("/vessels")
    assert res.status_code == 400
    assert "error" in res.json()


def test_get_vessel_includes_dependents(client):
    res = client.get("/vessels/1")
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["name"] == "Ocean Serenity"
    assert [c["name"] for c in data["crew"]] == ["Captain John Smith", "Sarah Johnson"]
    assert len(data["maintenance"]) == 1
    assert len(data["bookings"]) == 1
    assert [i["item"] for i in data["inventory"]] == ["Life Jackets", "Fuel"]


def test_get_vessel_without_dependents_has_empty_lists(client):
    data = client.get("/vessels/2").json()["data"]
    assert data["crew"] == []
    assert data["maintenance"] == []
    assert data["bookings"] == []
    assert data["inventory"] == []


def test_get_missing_vessel(client):
    res = client.get("/vessels/99")
    assert res.status_code == 404
    assert res.json() == {"error": "Vessel not found"}


def test_non_integer_id_is_rejected(client):
    res = client.get("/vessels/abc")
    assert res.status_code == 400
    assert "vessel_id" in res.json()["error"]


def test_update_vessel_status_scenario(client):
    before = client.get("/vessels/2").json()["data"]
    res = client.put("/vessels/2", json={"status": "maintenance"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["status"] == "maintenance"
    for field in ("id", "name", "type", "length", "capacity"):
        assert data[field] == before[field]


def test_update_vessel_cannot_change_id(client):
    data = client.put("/vessels/1", json={"id": 50, "capacity": "14"}).json()["data"]
    assert data["id"] == 1
    assert data["capacity"] == 14
    assert client.get("/vessels/50").status_code == 404


def test_update_missing_vessel(client):
    res = client.put("/vessels/42", json={"status": "maintenance"})
    assert res.status_code == 404
    assert res.json() == {"error": "Vessel not found"}


def test_update_vessel_invalid_value(client):
    res = client.put("/vessels/1", json={"length": "very long"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid fields: length"}
    assert client.get("/vessels/1").json()["data"]["length"] == 85


def test_delete_vessel_keeps_dependents(client):
    res = client.delete("/vessels/1")
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Vessel deleted successfully"}
    assert client.get("/vessels/1").status_code == 404
    assert client.get("/crew", params={"vesselId": 1}).json()["count"] == 2


def test_delete_missing_vessel_is_idempotent_failure(client):
    for _ in range(2):
        res = client.delete("/vessels/77")
        assert res.status_code == 404
        assert res.json() == {"error": "Vessel not found"}
    assert client.get("/vessels").json()["count"] == 2


def test_routes_are_served_under_api_prefix(client):
    res = client.get("/api/vessels/1")
    assert res.status_code == 200
    assert res.json()["data"]["id"] == 1


def test_non_finite_length_does_not_reach_analytics(client):
    res = client.post("/vessels", json={"name": "Ghost", "type": "Motor", "length": "nan", "capacity": 4})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid fields: length"}
    overview = client.get("/analytics/fleet-overview").json()["data"]
    assert overview["totalVessels"] == 2
    assert overview["averageLength"] == 75


def test_boolean_length_is_rejected(client):
    res = client.post("/vessels", json={"name": "Flag", "type": "Motor", "length": True, "capacity": 4})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid fields: length"}


def test_malformed_json_body(client):
    res = client.post("/vessels", content='{"name": "Trunc', headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json() == {"error": "Request body must be valid JSON"}
