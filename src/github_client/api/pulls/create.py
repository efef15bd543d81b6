"""
Builder for the "create a pull request" call.

    pr = await (
        client.pulls("owner", "repo")
        .create("title", "head", "base")
        .body("hello world!")
        .send()
    )
"""
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from ...models import PullRequest

if TYPE_CHECKING:
    from . import PullRequestHandler

logger = logging.getLogger(__name__)
LOG_PREFIX = "[PULLS]"


class CreatePullRequestPayload(BaseModel):
    """Immutable request body. None means the field is left out of the JSON."""
    model_config = ConfigDict(frozen=True)

    title: str
    head: str
    base: str
    body: Optional[str] = None
    draft: Optional[bool] = None
    maintainer_can_modify: Optional[bool] = None

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CreatePullRequestBuilder:
    """
    Fluent builder for a new pull request.

    Required arguments:
    - title: The title of the new pull request.
    - head: The branch holding the changes. For cross-repository pull
      requests in the same network use `username:branch`.
    - base: The branch the changes are pulled into. It must exist in the
      target repository.

    Branch names are not checked here; the server rejects invalid ones.
    """

    def __init__(self, handler: "PullRequestHandler", title: Any, head: Any, base: Any):
        self._handler = handler
        self._title = str(title)
        self._head = str(head)
        self._base = str(base)
        self._body: Optional[str] = None
        self._draft: Optional[bool] = None
        self._maintainer_can_modify: Optional[bool] = None
        self._sent = False

    def body(self, body: Optional[Any]) -> "CreatePullRequestBuilder":
        """The contents of the pull request. None clears it."""
        self._body = None if body is None else str(body)
        return self

    def draft(self, draft: Optional[bool]) -> "CreatePullRequestBuilder":
        """Whether the pull request is opened as a draft. None clears it."""
        self._draft = draft
        return self

    def maintainer_can_modify(self, maintainer_can_modify: Optional[bool]) -> "CreatePullRequestBuilder":
        """Whether maintainers of the base repository may push to head. None clears it."""
        self._maintainer_can_modify = maintainer_can_modify
        return self

    @property
    def path(self) -> str:
        return f"/repos/{self._handler.owner}/{self._handler.repo}/pulls"

    @property
    def sent(self) -> bool:
        return self._sent

    def build(self) -> CreatePullRequestPayload:
        """Snapshot of the current state."""
        return CreatePullRequestPayload(
            title=self._title,
            head=self._head,
            base=self._base,
            body=self._body,
            draft=self._draft,
            maintainer_can_modify=self._maintainer_can_modify,
        )

    def to_payload(self) -> Dict[str, Any]:
        return self.build().to_wire()

    async def send(self) -> PullRequest:
        """Send the request and return the created pull request."""
        if self._sent:
            # Not idempotent: the server usually answers 422 the second time.
            logger.warning(f"{LOG_PREFIX} send() called again for {self.path} head={self._head}")
        self._sent = True
        logger.debug(f"{LOG_PREFIX} create: {self.path} head={self._head} base={self._base}")
        return await self._handler.client.post(self.path, self.to_payload(), PullRequest)
