"""
Auth handler utilities for github_client.
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from ..types import RequestContext
from ..config import AuthConfig

logger = logging.getLogger(__name__)
LOG_PREFIX = "[AUTH]"


def _mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 10 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 10:
        return "*" * len(val)
    return val[:10] + "*" * (len(val) - 10)


class AuthHandler(ABC):
    """Auth handler interface."""

    @abstractmethod
    def get_header(self, context: RequestContext) -> Optional[Dict[str, str]]:
        """Get auth header for request."""
        ...


class BearerAuthHandler(AuthHandler):
    """Bearer token auth handler."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        get_api_key_for_request: Optional[
            Callable[[RequestContext], Optional[str]]
        ] = None,
    ):
        self._api_key = api_key
        self._get_api_key_for_request = get_api_key_for_request

    def get_header(self, context: RequestContext) -> Optional[Dict[str, str]]:
        key = None
        if self._get_api_key_for_request:
            key = self._get_api_key_for_request(context)
        if not key:
            key = self._api_key
        if not key:
            return None
        logger.debug(f"{LOG_PREFIX} BearerAuthHandler.get_header: token={_mask_value(key)}")
        return {"Authorization": f"Bearer {key}"}


class CustomAuthHandler(AuthHandler):
    """Fixed header name with a precomputed or per-request value."""

    def __init__(
        self,
        header_name: str,
        api_key: Optional[str] = None,
        get_api_key_for_request: Optional[
            Callable[[RequestContext], Optional[str]]
        ] = None,
    ):
        self._header_name = header_name
        self._api_key = api_key
        self._get_api_key_for_request = get_api_key_for_request

    def get_header(self, context: RequestContext) -> Optional[Dict[str, str]]:
        key = None
        if self._get_api_key_for_request:
            key = self._get_api_key_for_request(context)
        if not key:
            key = self._api_key
        if not key:
            return None
        logger.debug(
            f"{LOG_PREFIX} CustomAuthHandler.get_header: header_name={self._header_name}, "
            f"value={_mask_value(key)}"
        )
        return {self._header_name: key}


def create_auth_handler(config: AuthConfig) -> AuthHandler:
    """Create auth handler from config."""
    raw_key = config.raw_api_key.get_secret_value() if config.raw_api_key else None

    logger.debug(
        f"{LOG_PREFIX} create_auth_handler: type={config.type}, "
        f"raw_api_key={_mask_value(raw_key)}, username={_mask_value(config.username)}"
    )

    t = config.type

    if t == "basic_token":
        return CustomAuthHandler(
            header_name="Authorization",
            api_key="Basic " + config.api_key,
            get_api_key_for_request=config.get_api_key_for_request,
        )

    if t == "custom":
        return CustomAuthHandler(
            config.header_name or "Authorization",
            raw_key,
            config.get_api_key_for_request,
        )

    return BearerAuthHandler(raw_key, config.get_api_key_for_request)
