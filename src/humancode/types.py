"""Dataclasses for HumanCode SDK configuration and response types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")

DEFAULT_BASE_URL = "https://humancodeai.com"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for a HumanCodeClient.

    Args:
        app_id: Application ID issued by HumanCode
        app_key: Application secret used to sign request bodies
        base_url: HumanCode API base URL
        debug: Print each request and response to stderr
        timeout: Request timeout in seconds (None leaves it to requests)
    """
    app_id: str
    app_key: str
    base_url: str = DEFAULT_BASE_URL
    debug: bool = False
    timeout: float | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ClientConfig:
        """Build a config from application settings.

        Accepts snake_case (``app_id``) or camelCase (``appId``) keys.
        """
        def pick(snake: str, camel: str, default: Any = None) -> Any:
            if snake in mapping:
                return mapping[snake]
            return mapping.get(camel, default)

        app_id = pick("app_id", "appId")
        app_key = pick("app_key", "appKey")
        if not app_id:
            raise ValueError("app_id is required")
        if not app_key:
            raise ValueError("app_key is required")

        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=pick("base_url", "baseUrl", DEFAULT_BASE_URL),
            debug=bool(mapping.get("debug", False)),
            timeout=mapping.get("timeout"),
        )


@dataclass
class Envelope(Generic[T]):
    """Uniform ``{code, msg, result}`` wrapper around every API response."""
    code: int
    msg: str
    result: T | None = None

    @property
    def ok(self) -> bool:
        """True if the API reported success."""
        return self.code == 0


@dataclass
class SessionIdResult:
    """Result of a get_session_id() call."""
    session_id: str


@dataclass
class VerifyResult:
    """Result of a verify() call."""
    human_id: str
