"""
Exceptions raised by the transport. The request builders add none of their own.
"""
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

class GitHubClientError(Exception):
    """Base exception for github_client failures."""
    pass

class ConfigurationError(GitHubClientError, ValueError):
    """Raised when client configuration cannot be resolved."""
    pass

class GitHubApiError(GitHubClientError):
    """Raised when the API answers with a non-2xx status."""
    def __init__(
        self,
        status_code: int,
        message: str,
        documentation_url: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(f"GitHub API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.documentation_url = documentation_url
        self.errors = errors or []

    @classmethod
    def from_response(cls, status_code: int, status_text: str, data: Any) -> "GitHubApiError":
        """Build from a response body, which may be a JSON object or plain text."""
        if isinstance(data, dict):
            return cls(
                status_code,
                data.get("message") or status_text,
                documentation_url=data.get("documentation_url"),
                errors=data.get("errors"),
            )
        return cls(status_code, str(data) if data else status_text)

class ResponseDeserializationError(GitHubClientError):
    """Raised when a 2xx body does not match the expected entity shape."""
    def __init__(self, model_name: str, cause: ValidationError):
        msg = f"Response could not be parsed as {model_name}: {cause.error_count()} validation error(s)"
        super().__init__(msg)
        self.model_name = model_name
        self.cause = cause
