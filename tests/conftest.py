import pytest


@pytest.fixture
def minted_token_payload() -> dict:
    return {
        "id": "tok_1",
        "symbol": "OMG",
        "name": "OmiseGO",
        "subunit_to_unit": 100,
        "metadata": {},
        "encrypted_metadata": {},
        "created_at": "2018-01-01T00:00:00Z",
        "updated_at": "2018-01-01T00:00:00Z",
    }


@pytest.fixture
def create_params_kwargs() -> dict:
    return {
        "type": "send",
        "minted_token_id": "tok_1",
        "amount": None,
        "address": None,
        "correlation_id": None,
        "require_confirmation": False,
        "max_consumptions": None,
        "consumption_lifetime": None,
        "expiration_date": None,
        "allow_amount_override": True,
    }
