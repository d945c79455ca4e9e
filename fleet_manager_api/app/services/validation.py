"""
Payload validation for every entity kind.

``validate_create`` and ``validate_update`` run the pydantic models
from ``schemas`` and turn their errors into a single domain
``ValidationError`` whose message lists the offending fields, e.g.
``Missing required fields: name, length; Invalid fields: capacity``.

Presence is explicit: a field is missing when it is absent, ``null``
or a blank string.  ``0`` is a supplied value like any other.  The
same rules apply whichever endpoint a payload arrives through.
"""

from typing import Any, Dict, List

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.db import BOOKINGS, CREW, INVENTORY, MAINTENANCE, VESSELS, Record
from ..core.errors import ValidationError
from ..schemas.booking import BookingCreate, BookingUpdate
from ..schemas.crew import CrewMemberCreate, CrewMemberUpdate
from ..schemas.inventory import InventoryItemCreate, InventoryItemUpdate
from ..schemas.maintenance import MaintenanceRecordCreate, MaintenanceRecordUpdate
from ..schemas.vessel import VesselCreate, VesselUpdate

CREATE_SCHEMAS = {
    VESSELS: VesselCreate,
    CREW: CrewMemberCreate,
    MAINTENANCE: MaintenanceRecordCreate,
    BOOKINGS: BookingCreate,
    INVENTORY: InventoryItemCreate,
}

UPDATE_SCHEMAS = {
    VESSELS: VesselUpdate,
    CREW: CrewMemberUpdate,
    MAINTENANCE: MaintenanceRecordUpdate,
    BOOKINGS: BookingUpdate,
    INVENTORY: InventoryItemUpdate,
}

# Fields an update may explicitly clear with ``null``.
NULLABLE_FIELDS = {
    CREW: {"vesselId"},
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _describe(exc: PydanticValidationError, *, report_missing: bool) -> str:
    missing: List[str] = []
    invalid: List[str] = []
    problems: List[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        if not loc:
            problems.append(error["msg"].removeprefix("Value error, "))
            continue
        name = str(loc[0])
        is_missing = error["type"] == "missing" or _is_blank(error.get("input"))
        bucket = missing if (is_missing and report_missing) else invalid
        if name not in bucket:
            bucket.append(name)

    parts = []
    if missing:
        parts.append("Missing required fields: " + ", ".join(missing))
    if invalid:
        parts.append("Invalid fields: " + ", ".join(invalid))
    parts.extend(problems)
    return "; ".join(parts)


def _run(schema: type, data: Dict[str, Any], *, report_missing: bool) -> BaseModel:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc, report_missing=report_missing)) from exc


def _require_object(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def validate_create(kind: str, payload: Any) -> Record:
    """Validate a creation payload and return the normalized record.

    Blank values are treated as absent, so optional fields fall back to
    their defaults and required ones are reported as missing.  Unknown
    fields and any client-supplied ``id`` are dropped.
    """
    data = {
        key: value
        for key, value in _require_object(payload).items()
        if key != "id" and not _is_blank(value)
    }
    model = _run(CREATE_SCHEMAS[kind], data, report_missing=True)
    return model.model_dump(mode="json", by_alias=True)


def validate_update(kind: str, payload: Any) -> Record:
    """Validate a partial update and return only the supplied fields.

    ``null`` values are ignored unless the field may be cleared (see
    ``NULLABLE_FIELDS``).  Dependent kinds keep unknown fields; vessels
    drop them.  ``id`` is never part of the result.
    """
    nullable = NULLABLE_FIELDS.get(kind, set())
    data = {
        key: value
        for key, value in _require_object(payload).items()
        if key != "id" and (value is not None or key in nullable)
    }
    model = _run(UPDATE_SCHEMAS[kind], data, report_missing=False)
    fields = model.model_dump(mode="json", by_alias=True, exclude_unset=True)
    fields.update(model.model_extra or {})
    fields.pop("id", None)
    return {key: value for key, value in fields.items() if value is not None or key in nullable}
