"""
Core type definitions for github_client.
"""
from typing import Any, Dict, Literal, Optional, Protocol, Type, TypedDict, TypeVar, Union, runtime_checkable
from dataclasses import dataclass

# HTTP Methods
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# Authentication Types
AuthType = Literal[
    "bearer",
    "basic_token",
    "custom",
]

T = TypeVar("T")

@dataclass
class FetchResponse:
    """Standardized response object."""
    status: int
    status_text: str
    headers: Dict[str, str]
    url: str
    data: Any = None  # Parsed JSON or Text
    ok: bool = False

class RequestOptions(TypedDict, total=False):
    """Options for making a request."""
    method: HttpMethod
    url: str  # Path relative to base_url
    headers: Dict[str, str]
    params: Dict[str, Any]  # Query parameters
    json: Any
    timeout: Union[float, None]

class RequestContext(TypedDict):
    """Context passed to auth callbacks."""
    method: str
    url: str
    headers: Dict[str, str]
    body: Any

@runtime_checkable
class Transport(Protocol):
    """
    Anything able to POST a JSON body to a path and parse the reply.

    GitHubClient is the production implementation; tests substitute fakes.
    """
    async def post(self, path: str, payload: Any, model: Type[T]) -> T: ...

    async def get_json(self, path: str, model: Type[T], params: Optional[Dict[str, Any]] = None) -> T: ...
