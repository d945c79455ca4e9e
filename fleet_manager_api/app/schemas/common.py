"""
Shared building blocks for the entity schemas.

Records travel over the wire with camelCase keys (``vesselId``,
``scheduledDate``) while the models use snake_case attributes; the
alias generator maps between the two.  Leading and trailing
whitespace is stripped from strings so a blank name counts as
missing.

Numbers must be finite, and JSON booleans are never accepted where a
number or a vessel id is expected.
"""

from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator
from pydantic.alias_generators import to_camel


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("expected a number, got a boolean")
    return value


# Integral input stays an ``int`` (``"100"`` → ``100``), anything else
# parses as a float.
Number = Annotated[Union[int, float], BeforeValidator(_reject_bool)]

VesselId = Annotated[int, BeforeValidator(_reject_bool)]


class WireModel(BaseModel):
    """Base for create payloads: unknown fields are dropped."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
        "allow_inf_nan": False,
        "extra": "ignore",
    }


class PassThroughModel(WireModel):
    """Base for update payloads that keep unknown fields."""

    model_config = {**WireModel.model_config, "extra": "allow"}
