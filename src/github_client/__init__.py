"""
GitHub Client - typed request builders over an async HTTP transport
"""

__version__ = "0.1.0"

from .config import ClientConfig, AuthConfig, TimeoutConfig, load_config
from .types import AuthType, FetchResponse, Transport
from .client import GitHubClient
from .auth.auth_handler import AuthHandler, create_auth_handler
from .errors import GitHubClientError, GitHubApiError, ResponseDeserializationError, ConfigurationError
from .models import Author, PullRequest, PullRequestRef
from .api.pulls import PullRequestHandler, CreatePullRequestBuilder, CreatePullRequestPayload

__all__ = [
    "ClientConfig", "AuthConfig", "TimeoutConfig", "load_config", "AuthType",
    "FetchResponse", "Transport",
    "GitHubClient",
    "AuthHandler", "create_auth_handler",
    "GitHubClientError", "GitHubApiError", "ResponseDeserializationError", "ConfigurationError",
    "Author", "PullRequest", "PullRequestRef",
    "PullRequestHandler", "CreatePullRequestBuilder", "CreatePullRequestPayload",
]
