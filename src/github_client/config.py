"""
Configuration models and validation for github_client.
"""
import base64
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator

from .errors import ConfigurationError
from .types import AuthType, RequestContext

logger = logging.getLogger(__name__)
LOG_PREFIX = "[CONFIG]"

# Constants
DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_API_VERSION = "2022-11-28"
DEFAULT_ACCEPT = "application/vnd.github+json"
DEFAULT_TIMEOUT_CONNECT = 5.0
DEFAULT_TIMEOUT_READ = 30.0
DEFAULT_TIMEOUT_WRITE = 10.0

# Settings load_config reads, with the environment variables checked for each
# (first non-empty wins). GH_TOKEN is the gh CLI name.
ENV_KEYS: Dict[str, List[str]] = {
    "token": ["GITHUB_TOKEN", "GH_TOKEN"],
    "base_url": ["GITHUB_API_URL"],
    "timeout": ["GITHUB_TIMEOUT"],
}

class TimeoutConfig(BaseModel):
    """Timeout configuration."""
    connect: float = DEFAULT_TIMEOUT_CONNECT
    read: float = DEFAULT_TIMEOUT_READ
    write: float = DEFAULT_TIMEOUT_WRITE
    pool: Optional[float] = None

class AuthConfig(BaseModel):
    """Authentication configuration."""
    type: AuthType
    raw_api_key: Optional[SecretStr] = None
    username: Optional[str] = None
    header_name: Optional[str] = None

    # Callback for dynamic key resolution
    get_api_key_for_request: Optional[Callable[[RequestContext], Optional[str]]] = None

    @property
    def api_key(self) -> str:
        """
        Get the computed API key ready for the header.
        - For basic_token: Returns the base64 encoded `username:token`
        - For bearer/custom: Returns the raw key
        """
        if not self.raw_api_key:
            return ""
        if self.type == "basic_token":
            pair = f"{self.username}:{self.raw_api_key.get_secret_value()}"
            return base64.b64encode(pair.encode()).decode()
        return self.raw_api_key.get_secret_value()

    @model_validator(mode='after')
    def validate_auth_config(self) -> 'AuthConfig':
        """Validate that required fields are present for the selected auth type."""
        t = self.type
        has_key = bool(self.raw_api_key)

        if t == "bearer" and not has_key:
            raise ValueError("bearer requires 'raw_api_key'")

        if t == "basic_token" and not (self.username and has_key):
            raise ValueError("basic_token requires 'username' and 'raw_api_key'")

        if t == "custom" and not (self.header_name and has_key):
            raise ValueError("custom requires 'header_name' and 'raw_api_key'")

        return self

class ClientConfig(BaseModel):
    """Client configuration."""
    model_config = {"arbitrary_types_allowed": True}

    base_url: str = DEFAULT_BASE_URL
    auth: Optional[AuthConfig] = None
    timeout: Optional[Union[float, TimeoutConfig]] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    api_version: str = DEFAULT_API_VERSION

    # Optional pre-configured client (httpx)
    httpx_client: Any = None

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

def normalize_timeout(timeout: Optional[Union[float, TimeoutConfig]]) -> TimeoutConfig:
    """Normalize timeout to TimeoutConfig object."""
    if timeout is None:
        return TimeoutConfig()
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=float(timeout), read=float(timeout), write=float(timeout))
    return timeout

@dataclass
class ResolvedConfig:
    """Fully resolved configuration ready for usage."""
    base_url: str
    auth: Optional[AuthConfig]
    timeout: TimeoutConfig
    headers: Dict[str, str]

def resolve_config(config: ClientConfig) -> ResolvedConfig:
    """Apply defaults and return resolved config."""
    headers = {
        "Accept": DEFAULT_ACCEPT,
        "X-GitHub-Api-Version": config.api_version,
    }
    headers.update(config.headers)
    return ResolvedConfig(
        base_url=config.base_url,
        auth=config.auth,
        timeout=normalize_timeout(config.timeout),
        headers=headers,
    )

def _lookup(name: str, arg: Any, config: Optional[Dict[str, Any]]) -> Tuple[Any, str]:
    """Value for a load_config setting and where it came from: argument, env var, config dict."""
    if arg is not None:
        return arg, "argument"
    for key in ENV_KEYS[name]:
        val = os.getenv(key)
        if val:
            return val, key
    if config and config.get(name) is not None:
        return config[name], f"config['{name}']"
    return None, "default"

def load_config(
    token: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    config: Optional[Dict[str, Any]] = None,
    env_file: Optional[str] = None,
) -> ClientConfig:
    """
    Build a ClientConfig from arguments, environment, a config dict and defaults.

    If env_file is given it is loaded with python-dotenv first; variables
    already present in the environment win.
    """
    if env_file:
        loaded = load_dotenv(env_file)
        logger.debug(f"{LOG_PREFIX} load_config: env_file={env_file} loaded={loaded}")

    resolved_token, _ = _lookup("token", token, config)
    resolved_url, _ = _lookup("base_url", base_url, config)
    raw_timeout, timeout_source = _lookup("timeout", timeout, config)
    try:
        resolved_timeout = float(raw_timeout) if raw_timeout is not None else DEFAULT_TIMEOUT_READ
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"timeout from {timeout_source} is not a number: {raw_timeout!r}") from e

    auth = None
    if resolved_token:
        auth = AuthConfig(type="bearer", raw_api_key=resolved_token)
    else:
        logger.warning(f"{LOG_PREFIX} load_config: no token found in {ENV_KEYS['token']}, requests are anonymous")

    try:
        return ClientConfig(base_url=resolved_url or DEFAULT_BASE_URL, auth=auth, timeout=resolved_timeout)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
