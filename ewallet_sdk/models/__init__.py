from .minted_tokens import MintedToken, MintedTokenResponse
from .transaction_requests import (
    TransactionRequestCreateParams,
    TransactionRequestGetParams,
    TransactionRequestType,
)
