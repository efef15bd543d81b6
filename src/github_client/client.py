"""
High-level GitHubClient implementation.
"""
import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from .api.pulls import PullRequestHandler
from .config import ClientConfig
from .core.base_client import BaseClient, LOG_PREFIX
from .errors import GitHubApiError, ResponseDeserializationError
from .types import FetchResponse, HttpMethod, RequestOptions, T

logger = logging.getLogger(__name__)

class GitHubClient(BaseClient):
    """
    HTTP client for the GitHub REST API.

    Satisfies the Transport protocol: typed calls return parsed entities and
    raise GitHubApiError / ResponseDeserializationError on failure. Network
    errors from httpx propagate unchanged.
    """

    @classmethod
    def create(cls, config: Optional[ClientConfig] = None) -> "GitHubClient":
        """Factory method to create a client."""
        return cls(config or ClientConfig())

    def pulls(self, owner: str, repo: str) -> PullRequestHandler:
        """Handler for the pull request endpoints of one repository."""
        return PullRequestHandler(self, owner, repo)

    async def send_json(
        self,
        method: HttpMethod,
        path: str,
        payload: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> FetchResponse:
        """Execute a request and return the raw response without status checks."""
        options: RequestOptions = {
            "method": method,
            "url": path,
            "headers": headers or {},
            "params": params or {},
        }
        if payload is not None:
            options["json"] = payload
        if timeout is not None:
            options["timeout"] = timeout
        return await self.request(options)

    async def get_json(
        self,
        path: str,
        model: Type[T],
        params: Optional[Dict[str, Any]] = None,
    ) -> T:
        """GET a resource and parse it as model."""
        response = await self.send_json("GET", path, params=params)
        return self._parse(response, model)

    async def post(self, path: str, payload: Any, model: Type[T]) -> T:
        """POST a JSON payload and parse the created resource as model."""
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(exclude_none=True)
        response = await self.send_json("POST", path, payload)
        return self._parse(response, model)

    def _parse(self, response: FetchResponse, model: Type[T]) -> T:
        if not response.ok:
            error = GitHubApiError.from_response(response.status, response.status_text, response.data)
            logger.error(f"{LOG_PREFIX} {error} ({response.url})")
            raise error
        try:
            return model.model_validate(response.data)
        except ValidationError as e:
            logger.error(f"{LOG_PREFIX} Unexpected response shape for {model.__name__}: {e}")
            raise ResponseDeserializationError(model.__name__, e) from e
