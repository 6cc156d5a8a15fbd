"""HumanCode SDK — Python client for the HumanCode human-verification API."""

__version__ = "0.1.0"

from .client import HumanCodeClient, parse_envelope
from .crypto import canonicalize, new_nonce, sign_message, verify_signature
from .errors import ApiError, EncodingError, HumanCodeError, TransportError
from .types import (
    DEFAULT_BASE_URL,
    ClientConfig,
    Envelope,
    SessionIdResult,
    VerifyResult,
)

__all__ = [
    "HumanCodeClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "Envelope",
    "SessionIdResult",
    "VerifyResult",
    "parse_envelope",
    "HumanCodeError",
    "EncodingError",
    "TransportError",
    "ApiError",
    "canonicalize",
    "sign_message",
    "verify_signature",
    "new_nonce",
    "__version__",
]
