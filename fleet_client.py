"""Fleet Management API client.

This module defines a small client wrapper around the REST API served
by ``fleet_manager_api``.  It uses the ``requests`` library internally
and exposes one method per operation:

* :meth:`FleetAPIClient.list_records` – list an entity kind, with equality filters.
* :meth:`FleetAPIClient.get_record` – fetch one record (vessels include dependents).
* :meth:`FleetAPIClient.create_record` / :meth:`FleetAPIClient.update_record` /
  :meth:`FleetAPIClient.delete_record` – write operations.
* :meth:`FleetAPIClient.analytics` – fetch one of the analytics reports.
* :meth:`FleetAPIClient.health` – liveness probe.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  Transport
failures are reported the same way and never raise.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
API behind a gateway.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

ENTITIES = ("vessels", "crew", "maintenance", "bookings", "inventory")

REPORTS = (
    "fleet-overview",
    "maintenance-insights",
    "booking-insights",
    "crew-utilization",
    "inventory-status",
    "dashboard",
)


class FleetAPIClient:
    """Client for interacting with the Fleet Management API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any prefix, e.g.
                ``http://localhost:8080/api``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _error_message(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        except ValueError as exc:
            logger.error("API returned a non-JSON body for %s %s", method, url)
            return None, {"status_code": None, "message": f"Invalid JSON response: {exc}"}

    @staticmethod
    def _check_entity(entity: str) -> None:
        if entity not in ENTITIES:
            raise ValueError(f"Unknown entity kind {entity!r}; expected one of {', '.join(ENTITIES)}")

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------
    def list_records(self, entity: str, **filters: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List records of ``entity``.

        Keyword arguments become equality filters, e.g.
        ``list_records("inventory", category="Safety")``.  Filters with
        a ``None`` value are not sent.
        """
        self._check_entity(entity)
        params = {key: value for key, value in filters.items() if value is not None}
        data, error = self._request("GET", f"/{entity}", params=params or None)
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("data"), list):
            return data["data"], None
        return [], None

    def get_record(self, entity: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        self._check_entity(entity)
        data, error = self._request("GET", f"/{entity}/{record_id}")
        if error:
            return None, error
        return _unwrap(data), None

    def create_record(self, entity: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        self._check_entity(entity)
        data, error = self._request("POST", f"/{entity}", json_body=payload)
        if error:
            return None, error
        return _unwrap(data), None

    def update_record(
        self, entity: str, record_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send a partial update; omitted fields keep their values."""
        self._check_entity(entity)
        data, error = self._request("PUT", f"/{entity}/{record_id}", json_body=payload)
        if error:
            return None, error
        return _unwrap(data), None

    def delete_record(self, entity: str, record_id: Any) -> Tuple[bool, Optional[Error]]:
        self._check_entity(entity)
        data, error = self._request("DELETE", f"/{entity}/{record_id}")
        if error:
            return False, error
        return bool(isinstance(data, dict) and data.get("success")), None

    # ------------------------------------------------------------------
    # Analytics and health
    # ------------------------------------------------------------------
    def analytics(self, report: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch an analytics report such as ``"dashboard"``."""
        if report not in REPORTS:
            raise ValueError(f"Unknown report {report!r}; expected one of {', '.join(REPORTS)}")
        data, error = self._request("GET", f"/analytics/{report}")
        if error:
            return None, error
        return _unwrap(data), None

    def health(self) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("GET", "/health")
        if error:
            return False, error
        payload = _unwrap(data) or {}
        return bool(payload.get("ok")), None


def _unwrap(data: Any) -> Optional[Dict[str, Any]]:
    """Return the ``data`` member of a response envelope."""
    if isinstance(data, dict) and "data" in data:
        return data["data"]
    return None


def _error_message(exc: requests.HTTPError) -> str:
    message = ""
    if exc.response is not None:
        try:
            err_json = exc.response.json()
        except ValueError:
            message = exc.response.text
        else:
            if isinstance(err_json, dict):
                message = err_json.get("error") or err_json.get("message") or err_json.get("detail") or ""
            if not message:
                message = str(err_json)
    return message or str(exc)
