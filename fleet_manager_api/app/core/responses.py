"""
Uniform response envelope.

Every successful response has the shape ``{"success": true, "data":
...}``; list responses add ``count`` and acknowledgements carry a
``message`` instead of data.  Error bodies are produced by the
handlers in ``core.errors``.
"""

from typing import Any, Dict, List


def envelope(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def list_envelope(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"success": True, "count": len(records), "data": records}


def acknowledgement(message: str) -> Dict[str, Any]:
    return {"success": True, "message": message}
