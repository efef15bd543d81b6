"""
Transport core: one httpx.AsyncClient per GitHubClient, GitHub headers and
auth applied to every request.
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..config import ClientConfig, resolve_config, ResolvedConfig
from ..auth.auth_handler import create_auth_handler, AuthHandler
from ..types import FetchResponse, RequestContext, RequestOptions

logger = logging.getLogger(__name__)

LOG_PREFIX = "[GitHubClient]"
MAX_LOGGED_PAYLOAD = 2000

def _format_payload(payload: Any) -> str:
    """Compact JSON rendering of a request payload for debug logs."""
    if payload is None:
        return "<empty>"
    text = json.dumps(payload, sort_keys=True, default=str)
    if len(text) > MAX_LOGGED_PAYLOAD:
        return text[:MAX_LOGGED_PAYLOAD] + f"... ({len(text)} chars)"
    return text

def _decode_body(response: httpx.Response) -> Any:
    """JSON body if there is one, the raw text for error pages, None for 204s."""
    if not response.content:
        return None
    try:
        return response.json()
    except json.JSONDecodeError:
        return response.text

class BaseClient:
    """
    Owns (or borrows) the httpx.AsyncClient used to reach the API.

    An httpx_client passed in ClientConfig is used as-is and never closed
    here; the Accept/API-version/config headers are still sent because they
    are merged into each request rather than baked into the client.
    """
    def __init__(self, config: ClientConfig):
        self._config: ResolvedConfig = resolve_config(config)
        self._client: Optional[httpx.AsyncClient] = config.httpx_client
        self._borrowed = self._client is not None
        self._auth_handler: Optional[AuthHandler] = None
        if self._config.auth:
            self._auth_handler = create_auth_handler(self._config.auth)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def _open(self) -> httpx.AsyncClient:
        if self._client is None:
            t = self._config.timeout
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=httpx.Timeout(connect=t.connect, read=t.read, write=t.write, pool=t.pool),
                follow_redirects=True,
            )
            logger.debug(f"{LOG_PREFIX} opened connection pool for {self._config.base_url}")
        return self._client

    async def connect(self) -> None:
        self._open()

    async def close(self) -> None:
        if self._client is not None and not self._borrowed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BaseClient":
        self._open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _request_headers(self, method: str, url: str, options: RequestOptions) -> Dict[str, str]:
        headers = {**self._config.headers, **options.get("headers", {})}
        if "json" in options:
            headers.setdefault("Content-Type", "application/json")
        if self._auth_handler:
            context: RequestContext = {
                "method": method,
                "url": f"{self._config.base_url}{url}",
                "headers": headers,
                "body": options.get("json"),
            }
            headers.update(self._auth_handler.get_header(context) or {})
        return headers

    async def request(self, options: RequestOptions) -> FetchResponse:
        """Execute a request; the status code is not checked here."""
        client = self._open()
        url = options.get("url", "")
        method = options.get("method", "GET")
        headers = self._request_headers(method, url, options)

        logger.debug(f"{LOG_PREFIX} Request: {method} {url}")
        if "json" in options:
            logger.debug(f"{LOG_PREFIX} Payload: {_format_payload(options['json'])}")

        try:
            response = await client.request(
                method=method,
                url=url,
                headers=headers,
                params=options.get("params") or None,
                json=options.get("json"),
                timeout=options.get("timeout", httpx.USE_CLIENT_DEFAULT),
            )
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {method} {url}: {e}")
            raise

        logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {method} {url}")
        return FetchResponse(
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
            url=str(response.url),
            data=_decode_body(response),
            ok=response.is_success,
        )
