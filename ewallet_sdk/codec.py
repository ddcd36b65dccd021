from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, JsonValue, TypeAdapter, ValidationError

from ewallet_sdk.errors import DecodeError
from ewallet_sdk.models import MintedToken, MintedTokenResponse

logger = logging.getLogger(__name__)

_MINTED_TOKEN_LIST = TypeAdapter(list[MintedTokenResponse])


def decode_minted_token(payload: Mapping[str, Any]) -> MintedToken:
    try:
        response = MintedTokenResponse.model_validate(_as_dict(payload))
    except ValidationError as exc:
        raise _decode_error("minted token", exc) from exc
    return _to_minted_token(response)


def decode_minted_token_json(data: str | bytes) -> MintedToken:
    try:
        response = MintedTokenResponse.model_validate_json(data)
    except ValidationError as exc:
        raise _decode_error("minted token", exc) from exc
    return _to_minted_token(response)


def decode_minted_tokens(payloads: Iterable[Mapping[str, Any]]) -> list[MintedToken]:
    items = [_as_dict(payload) for payload in payloads]
    try:
        responses = _MINTED_TOKEN_LIST.validate_python(items)
    except ValidationError as exc:
        raise _decode_error("minted token list", exc) from exc
    return [_to_minted_token(response) for response in responses]


def encode_params(params: BaseModel) -> dict[str, JsonValue]:
    """Encode request params to their wire object.

    Every key is emitted, including optional ones left as ``None``: the
    server only applies its defaults to keys that are present and null.
    """
    return params.model_dump(
        mode="json", by_alias=True, exclude_none=False, exclude_unset=False
    )


def encode_params_json(params: BaseModel) -> bytes:
    return params.model_dump_json(
        by_alias=True, exclude_none=False, exclude_unset=False
    ).encode("utf-8")


def _decode_error(what: str, exc: ValidationError) -> DecodeError:
    errors = exc.errors(include_url=False)
    first = errors[0] if errors else {}
    key = ".".join(str(part) for part in first.get("loc", ())) or None
    logger.debug("Rejected %s payload at key %s.", what, key)
    if key is None:
        message = f"Invalid {what} payload: {first.get('msg', 'malformed document')}"
    else:
        message = f"Invalid {what} payload at '{key}': {first.get('msg')}"
    return DecodeError(message, key=key, errors=errors)


def _to_minted_token(response: MintedTokenResponse) -> MintedToken:
    return MintedToken(
        id=response.id,
        symbol=response.symbol,
        name=response.name,
        subunit_to_unit=float(response.subunit_to_unit),
        metadata=response.metadata,
        encrypted_metadata=response.encrypted_metadata,
        created_at=response.created_at,
        updated_at=response.updated_at,
    )


def _as_dict(payload: Any) -> Any:
    # Only non-dict mappings are copied; pydantic validates dicts directly.
    if isinstance(payload, Mapping) and not isinstance(payload, dict):
        return dict(payload)
    return payload
