"""HumanCode SDK client."""
from __future__ import annotations

import sys
import time
from typing import Any, Callable, TypeVar

import requests

from .crypto import canonicalize, new_nonce, sign_message, verify_signature
from .errors import ApiError, TransportError
from .types import ClientConfig, Envelope, SessionIdResult, VerifyResult

T = TypeVar("T")

_SESSION_ID_PATH = "/api/session/v2/get_id"
_VERIFY_PATH = "/api/vcode/v2/verify"
_AUTHENTICATION_PAGE = "/authentication/index.html"


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


class HumanCodeClient:
    """HumanCode human-verification API client.

    Example::

        client = HumanCodeClient(ClientConfig(app_id='...', app_key='...'))
        session = client.get_session_id()
        url = client.gen_registration_url(session.session_id, callback)
        # ...user completes the challenge and comes back with a vcode...
        human = client.verify(session.session_id, vcode)
        print(human.human_id)

    Args:
        config: Client configuration
        session: Optional ``requests.Session`` used for every POST. When
            omitted, each call goes through ``requests.post``.
    """

    def __init__(self, config: ClientConfig, *, session: requests.Session | None = None):
        if not config.base_url:
            raise ValueError("base_url is required")
        if not config.app_id:
            raise ValueError("app_id is required")
        if not config.app_key:
            raise ValueError("app_key is required")
        self._config = config
        self._http = session if session is not None else requests

    def get_config(self) -> ClientConfig:
        """Return the client configuration."""
        return self._config

    def sign(self, payload: bytes | str) -> str:
        """Sign a request body with the application key."""
        return sign_message(payload, self._config.app_key)

    def verify_sign(self, payload: bytes | str, signature: str) -> bool:
        """True if ``signature`` is the application's signature of ``payload``."""
        return verify_signature(payload, signature, self._config.app_key)

    def get_session_id(self, nonce_str: str | None = None) -> SessionIdResult:
        """Request a new verification session ID.

        A random nonce is generated when ``nonce_str`` is not given.

        Raises:
            EncodingError: The body could not be serialized.
            TransportError: The HTTP request failed.
            ApiError: The API answered with an error status or non-zero code.
        """
        body = {
            "timestamp": str(_now_millis()),
            "nonce_str": nonce_str if nonce_str is not None else new_nonce(),
        }
        envelope = self._post(_SESSION_ID_PATH, body, _parse_session_id_result)
        return envelope.result

    def verify(
        self,
        session_id: str,
        vcode: str,
        nonce_str: str | None = None,
    ) -> VerifyResult:
        """Verify the code a user obtained from the challenge page.

        Returns the verified subject's human ID. Raises the same errors as
        get_session_id().
        """
        body = {
            "session_id": session_id,
            "vcode": vcode,
            "timestamp": str(_now_millis()),
            "nonce_str": nonce_str if nonce_str is not None else new_nonce(),
        }
        envelope = self._post(_VERIFY_PATH, body, _parse_verify_result)
        return envelope.result

    def gen_registration_url(self, session_id: str, callback_url: str) -> str:
        """Build the challenge page URL for registering a new human.

        Inputs are inserted verbatim; callers must URL-encode them.
        """
        return (
            f"{self._config.base_url}{_AUTHENTICATION_PAGE}"
            f"?session_id={session_id}&callback_url={callback_url}"
            f"&ts={_now_millis()}#/"
        )

    def gen_verification_url(
        self, session_id: str, human_id: str, callback_url: str
    ) -> str:
        """Build the challenge page URL for verifying a known human."""
        return (
            f"{self._config.base_url}{_AUTHENTICATION_PAGE}"
            f"?session_id={session_id}&human_id={human_id}"
            f"&callback_url={callback_url}&ts={_now_millis()}#/"
        )

    def _post(
        self,
        path: str,
        body: dict[str, str],
        parse_result: Callable[[dict[str, Any]], T],
    ) -> Envelope[T]:
        # Sign and send the very same bytes
        payload = canonicalize(body)
        sign = self.sign(payload)
        url = (
            f"{self._config.base_url.rstrip('/')}{path}"
            f"?app_id={self._config.app_id}&sign={sign}"
        )

        if self._config.debug:
            print(f"[humancode] POST {url} body={payload.decode('utf-8')}", file=sys.stderr)

        try:
            resp = self._http.post(
                url,
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=self._config.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"request failed: {exc}") from exc

        if self._config.debug:
            print(f"[humancode] {resp.status_code} {resp.text}", file=sys.stderr)

        try:
            raw = resp.json()
        except ValueError:
            raw = None

        if resp.status_code >= 400:
            if isinstance(raw, dict):
                code = raw.get("code") or 0
                msg = raw.get("msg") or f"HTTP {resp.status_code}"
            else:
                code, msg = 0, f"HTTP {resp.status_code}"
            raise ApiError(code, msg, resp.status_code)

        if not isinstance(raw, dict):
            raise TransportError(
                f"request failed: invalid response body (HTTP {resp.status_code})"
            )

        envelope = parse_envelope(raw, parse_result)
        if not envelope.ok:
            raise ApiError(envelope.code, envelope.msg, resp.status_code)
        return envelope


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------


def parse_envelope(
    raw: dict[str, Any],
    parse_result: Callable[[dict[str, Any]], T],
) -> Envelope[T]:
    """Parse a raw API response dict into an Envelope.

    The result is only parsed for successful envelopes, and must be a JSON
    object or null there.
    """
    code = raw.get("code") or 0
    msg = raw.get("msg") or ""
    result = None
    if code == 0:
        raw_result = raw.get("result")
        if raw_result is not None and not isinstance(raw_result, dict):
            raise TransportError(
                "request failed: invalid response body (result is not an object)"
            )
        result = parse_result(raw_result or {})
    return Envelope(code=code, msg=msg, result=result)


def _parse_session_id_result(raw: dict[str, Any]) -> SessionIdResult:
    return SessionIdResult(session_id=raw.get("session_id", ""))


def _parse_verify_result(raw: dict[str, Any]) -> VerifyResult:
    return VerifyResult(human_id=raw.get("human_id", ""))
