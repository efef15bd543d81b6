"""
Pull request entity as returned by the REST API.

Only the fields callers commonly read are declared; anything else in the
response is ignored.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: str
    id: int
    html_url: Optional[str] = None


class PullRequestRef(BaseModel):
    """A head or base reference."""
    model_config = ConfigDict(extra="ignore")

    ref: str
    sha: str
    label: Optional[str] = None
    user: Optional[Author] = None


class PullRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    number: int
    url: str
    html_url: str
    state: str
    title: str
    head: PullRequestRef
    base: PullRequestRef
    node_id: Optional[str] = None
    body: Optional[str] = None
    draft: Optional[bool] = None
    locked: bool = False
    merged: Optional[bool] = None
    maintainer_can_modify: Optional[bool] = None
    user: Optional[Author] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
