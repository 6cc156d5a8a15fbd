"""Signing utilities for the HumanCode SDK.

Handles canonical JSON request bodies, HMAC-SHA256 signatures and nonces.
The server verifies the signature against the exact body bytes it receives,
so the body must be serialized once and sent as-is.
"""
from __future__ import annotations

import hashlib
import hmac
import json
import uuid
from typing import Any

from .errors import EncodingError


# Characters the reference serializer always writes as \u escapes.
_ESCAPED_CHARS = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def canonicalize(fields: dict[str, Any]) -> bytes:
    """Produce the body bytes that get signed and sent.

    Keys are sorted, separators are compact, non-ASCII text stays raw UTF-8
    and ``<``, ``>``, ``&``, U+2028 and U+2029 are escaped.

    Raises:
        EncodingError: If a value is not JSON-serializable or the text
            cannot be encoded as UTF-8.
    """
    try:
        text = json.dumps(
            fields, sort_keys=True, separators=(",", ":"), ensure_ascii=False
        )
        for char, escaped in _ESCAPED_CHARS.items():
            text = text.replace(char, escaped)
        return text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"failed to marshal JSON: {exc}") from exc


def sign_message(message: bytes | str, app_key: str) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``message`` keyed by ``app_key``."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    digest = hmac.new(app_key.encode("utf-8"), message, hashlib.sha256)
    return digest.hexdigest()


def verify_signature(message: bytes | str, signature: str, app_key: str) -> bool:
    """Check a hex signature against ``message`` in constant time."""
    if not isinstance(signature, str):
        return False
    expected = sign_message(message, app_key)
    return hmac.compare_digest(expected.encode("ascii"), signature.lower().encode("utf-8"))


def new_nonce() -> str:
    """Generate a random nonce string."""
    return str(uuid.uuid4())
