"""Error types raised by SubShare."""

from __future__ import annotations


class SubShareError(Exception):
    """Base exception for the SubShare application."""


class ConfigMissing(SubShareError):
    """A required configuration value was not supplied at startup."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"missing required configuration value: {key}")


class BindFailure(SubShareError):
    """The HTTP server could not bind its listening socket."""

    def __init__(self, host: str, port: int, reason: str = ""):
        self.host = host
        self.port = port
        message = f"could not bind {host}:{port}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class StoreUnavailable(SubShareError):
    """The session backing store cannot serve requests."""


# Name used when a store failure surfaces as an HTTP 500.
InternalStoreError = StoreUnavailable


__all__ = [
    "SubShareError",
    "ConfigMissing",
    "BindFailure",
    "StoreUnavailable",
    "InternalStoreError",
]
