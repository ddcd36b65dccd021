from __future__ import annotations

from typing import Any


class EWalletSDKError(Exception):
    """Base class for errors raised by the SDK."""


class DecodeError(EWalletSDKError, ValueError):
    """A server payload is missing a required key or holds a mistyped value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.errors = errors or []
