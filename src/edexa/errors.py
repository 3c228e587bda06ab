"""
Exception hierarchy for the eDexa SDK.

Resolution and transport failures derive from ``EdexaError`` so the CLI can
map them to exit codes.  Caller input failures (a missing value where a
string was required) are plain ``TypeError`` subclasses and keep the
"Cannot read properties of undefined" wording callers already match on.
"""

from __future__ import annotations

from typing import Any, Optional


class EdexaError(RuntimeError):
    exit_code: int = 1


class ResolutionError(EdexaError):
    exit_code = 2


class LookupFailedError(ResolutionError):
    """On-chain lookup failed in transport; ``__cause__`` holds the original."""

    exit_code = 3


class RpcError(EdexaError):
    exit_code = 4

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.data = data


class ContractError(EdexaError):
    exit_code = 5


class SignerError(EdexaError):
    exit_code = 6


class InvalidKeyError(SignerError, ValueError):
    pass


class MissingValueError(TypeError):
    pass


def missing_value(what: str) -> MissingValueError:
    """Build the error raised when a required string is ``None``."""
    return MissingValueError(f"Cannot read properties of undefined (reading '{what}')")


def require_str(value: Any, what: str) -> str:
    if value is None:
        raise missing_value(what)
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value
