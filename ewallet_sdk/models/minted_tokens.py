from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    StrictFloat,
    StrictStr,
    field_validator,
)


class MintedTokenResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictStr
    symbol: StrictStr
    name: StrictStr
    subunit_to_unit: StrictFloat = Field(..., gt=0, allow_inf_nan=False)
    metadata: dict[str, JsonValue]
    encrypted_metadata: dict[str, JsonValue]
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def require_iso_string(cls, v: Any) -> Any:
        # Numbers would otherwise parse as Unix timestamps.
        if not isinstance(v, str):
            raise ValueError("timestamp must be an ISO-8601 string")
        return v


@dataclass(frozen=True, slots=True)
class MintedToken:
    """A token definition published by the platform.

    Only ``id`` takes part in equality and hashing; every other field is
    declared with ``compare=False`` so both stay derived from the same set.

    ``subunit_to_unit`` is the multiplier between the display unit and the
    smallest unit: with a value of 1000, sending 13 tokens means an amount
    of 13000.
    """

    id: str
    symbol: str = field(compare=False)
    name: str = field(compare=False)
    subunit_to_unit: float = field(compare=False)
    metadata: dict[str, JsonValue] = field(compare=False)
    encrypted_metadata: dict[str, JsonValue] = field(compare=False)
    created_at: datetime = field(compare=False)
    updated_at: datetime = field(compare=False)
