from .pull_request import Author, PullRequest, PullRequestRef

__all__ = ["Author", "PullRequest", "PullRequestRef"]
