from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    StrictFloat,
    StrictInt,
    model_validator,
)

logger = logging.getLogger(__name__)


class TransactionRequestType(str, Enum):
    send = "send"
    receive = "receive"


class TransactionRequestCreateParams(BaseModel):
    """Parameters used to generate a transaction request.

    ``amount`` is expressed in the token's smallest unit. It has to be set
    either by the requester or, when ``allow_amount_override`` is true, by
    the consumer. ``address`` falls back to the primary address server-side
    when left out. ``consumption_lifetime`` is in milliseconds.

    Build values with :meth:`create`, which returns ``None`` instead of
    raising when neither an amount nor an override is given.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: TransactionRequestType
    minted_token_id: str = Field(..., alias="token_id")
    amount: StrictFloat | None = Field(None, gt=0, allow_inf_nan=False)
    address: str | None = None
    correlation_id: str | None = None
    require_confirmation: bool = False
    max_consumptions: StrictInt | None = Field(None, gt=0)
    consumption_lifetime: StrictInt | None = Field(None, ge=0)
    expiration_date: datetime | None = None
    allow_amount_override: bool = False
    metadata: dict[str, JsonValue] = Field(default_factory=dict)
    encrypted_metadata: dict[str, JsonValue] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_amount_or_override(self) -> TransactionRequestCreateParams:
        if not _has_amount_or_override(self.amount, self.allow_amount_override):
            raise ValueError("amount is required when allow_amount_override is false")
        return self

    @classmethod
    def create(
        cls,
        *,
        type: TransactionRequestType,
        minted_token_id: str,
        amount: float | None = None,
        address: str | None = None,
        correlation_id: str | None = None,
        require_confirmation: bool = False,
        max_consumptions: int | None = None,
        consumption_lifetime: int | None = None,
        expiration_date: datetime | None = None,
        allow_amount_override: bool = False,
        metadata: dict[str, JsonValue] | None = None,
        encrypted_metadata: dict[str, JsonValue] | None = None,
    ) -> TransactionRequestCreateParams | None:
        """Return the params, or ``None`` if no amount is given and it cannot be overridden."""
        if not _has_amount_or_override(amount, allow_amount_override):
            logger.debug(
                "Rejected transaction request params for token %s: no amount and no override.",
                minted_token_id,
            )
            return None
        return cls(
            type=type,
            minted_token_id=minted_token_id,
            amount=amount,
            address=address,
            correlation_id=correlation_id,
            require_confirmation=require_confirmation,
            max_consumptions=max_consumptions,
            consumption_lifetime=consumption_lifetime,
            expiration_date=expiration_date,
            allow_amount_override=allow_amount_override,
            metadata=metadata if metadata is not None else {},
            encrypted_metadata=encrypted_metadata if encrypted_metadata is not None else {},
        )


class TransactionRequestGetParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str


def _has_amount_or_override(amount: float | None, allow_amount_override: bool) -> bool:
    return allow_amount_override or amount is not None
