from unittest.mock import MagicMock

import pytest
import requests

from fleet_client import FleetAPIClient


def _response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.content = b"x" if payload is not None or text else b""
    response.text = text
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


def _client(response=None, side_effect=None, **kwargs):
    session = MagicMock()
    if side_effect is not None:
        session.request.side_effect = side_effect
    else:
        session.request.return_value = response
    return FleetAPIClient(base_url="http://fleet.test/api/", session=session, **kwargs), session


def test_list_records_sends_filters_and_unwraps():
    client, session = _client(_response(payload={"success": True, "count": 1, "data": [{"id": 1}]}))
    records, error = client.list_records("inventory", category="Safety", vesselId=None)
    assert error is None
    assert records == [{"id": 1}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://fleet.test/api/inventory"
    assert kwargs["params"] == {"category": "Safety"}
    assert "Authorization" not in kwargs["headers"]


def test_api_key_is_sent_as_bearer_token():
    client, session = _client(_response(payload={"success": True, "data": {"id": 3}}), api_key="secret")
    record, error = client.create_record("vessels", {"name": "Aurora"})
    assert error is None
    assert record == {"id": 3}
    kwargs = session.request.call_args.kwargs
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    assert kwargs["json"] == {"name": "Aurora"}


def test_http_error_reports_status_and_message():
    client, _ = _client(_response(404, payload={"error": "Vessel not found"}))
    record, error = client.get_record("vessels", 99)
    assert record is None
    assert error == {"status_code": 404, "message": "Vessel not found"}


def test_http_error_with_text_body():
    client, _ = _client(_response(502, text="Bad Gateway"))
    ok, error = client.delete_record("crew", 1)
    assert ok is False
    assert error == {"status_code": 502, "message": "Bad Gateway"}


def test_transport_failure_has_no_status():
    client, _ = _client(side_effect=requests.ConnectionError("refused"))
    records, error = client.list_records("vessels")
    assert records == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_delete_and_health():
    client, _ = _client(_response(payload={"success": True, "message": "Crew member deleted successfully"}))
    assert client.delete_record("crew", 1) == (True, None)
    client, _ = _client(_response(payload={"success": True, "data": {"ok": True, "ts": "now"}}))
    assert client.health() == (True, None)


def test_analytics_unwraps_report():
    client, session = _client(_response(payload={"success": True, "data": {"totalVessels": 2}}))
    report, error = client.analytics("fleet-overview")
    assert error is None
    assert report == {"totalVessels": 2}
    assert session.request.call_args.kwargs["url"] == "http://fleet.test/api/analytics/fleet-overview"


def test_unknown_entity_or_report_is_rejected_locally():
    client, session = _client(_response(payload={}))
    with pytest.raises(ValueError):
        client.list_records("yachts")
    with pytest.raises(ValueError):
        client.analytics("revenue")
    session.request.assert_not_called()
