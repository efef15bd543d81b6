"""
Pull request endpoints for one repository.
"""
from typing import Any

from ...models import PullRequest
from ...types import Transport
from .create import CreatePullRequestBuilder, CreatePullRequestPayload


class PullRequestHandler:
    """Owner/repo context for pull request calls. Does not own the transport."""

    def __init__(self, client: Transport, owner: str, repo: str):
        self.client = client
        self.owner = owner
        self.repo = repo

    def create(self, title: Any, head: Any, base: Any) -> CreatePullRequestBuilder:
        """Start building a new pull request from head into base."""
        return CreatePullRequestBuilder(self, title, head, base)

    async def get(self, number: int) -> PullRequest:
        return await self.client.get_json(f"/repos/{self.owner}/{self.repo}/pulls/{number}", PullRequest)


__all__ = ["PullRequestHandler", "CreatePullRequestBuilder", "CreatePullRequestPayload"]
