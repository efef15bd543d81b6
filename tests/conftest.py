import pytest


def make_pull_request_json(**overrides):
    data = {
        "url": "https://api.github.com/repos/rust-lang/rust/pulls/1347",
        "id": 1,
        "node_id": "MDExOlB1bGxSZXF1ZXN0MQ==",
        "html_url": "https://github.com/rust-lang/rust/pull/1347",
        "number": 1347,
        "state": "open",
        "locked": False,
        "title": "test-pr",
        "user": {"login": "octocat", "id": 1, "html_url": "https://github.com/octocat"},
        "body": "testing...",
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2011-01-26T19:01:12Z",
        "head": {"label": "octocat:master", "ref": "master", "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e"},
        "base": {"label": "rust-lang:branch", "ref": "branch", "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e"},
        "draft": True,
        "merged": False,
        "maintainer_can_modify": True,
        "comments": 0,
    }
    data.update(overrides)
    return data


@pytest.fixture
def pull_request_json():
    return make_pull_request_json()
