"""
Tests for config and auth handlers.
"""
import base64
import pytest
from pydantic import ValidationError, SecretStr
from github_client.config import AuthConfig, ClientConfig, TimeoutConfig, resolve_config, load_config
from github_client.auth.auth_handler import create_auth_handler, BearerAuthHandler, CustomAuthHandler
from github_client.errors import ConfigurationError

CONTEXT = {"method": "GET", "url": "https://api.github.com/user", "headers": {}, "body": None}

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("GITHUB_TOKEN", "GH_TOKEN", "GITHUB_API_URL", "GITHUB_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)

def test_auth_config_validation_bearer():
    config = AuthConfig(type="bearer", raw_api_key=SecretStr("token"))
    assert config.api_key == "token"

    with pytest.raises(ValidationError) as exc:
        AuthConfig(type="bearer")
    assert "bearer requires 'raw_api_key'" in str(exc.value)

def test_auth_config_validation_basic_token():
    with pytest.raises(ValidationError) as exc:
        AuthConfig(type="basic_token", raw_api_key=SecretStr("token"))
    assert "basic_token requires 'username' and 'raw_api_key'" in str(exc.value)

def test_auth_config_validation_custom():
    with pytest.raises(ValidationError) as exc:
        AuthConfig(type="custom", raw_api_key=SecretStr("token"))
    assert "custom requires 'header_name' and 'raw_api_key'" in str(exc.value)

def test_basic_token_handler():
    config = AuthConfig(type="basic_token", username="octocat", raw_api_key=SecretStr("token"))
    handler = create_auth_handler(config)

    expected = base64.b64encode(b"octocat:token").decode()
    assert isinstance(handler, CustomAuthHandler)
    assert handler.get_header(CONTEXT) == {"Authorization": f"Basic {expected}"}

def test_bearer_handler_per_request_key():
    config = AuthConfig(
        type="bearer",
        raw_api_key=SecretStr("static"),
        get_api_key_for_request=lambda ctx: "dynamic" if ctx["method"] == "POST" else None,
    )
    handler = create_auth_handler(config)

    assert isinstance(handler, BearerAuthHandler)
    assert handler.get_header(CONTEXT) == {"Authorization": "Bearer static"}
    assert handler.get_header({**CONTEXT, "method": "POST"}) == {"Authorization": "Bearer dynamic"}

def test_client_config_base_url():
    assert ClientConfig().base_url == "https://api.github.com"
    assert ClientConfig(base_url="https://ghe.example.com/api/v3/").base_url == "https://ghe.example.com/api/v3"

    with pytest.raises(ValidationError):
        ClientConfig(base_url="ftp://example.com")

def test_resolve_config_headers_and_timeout():
    resolved = resolve_config(ClientConfig(timeout=3, headers={"User-Agent": "tests"}))

    assert resolved.headers["Accept"] == "application/vnd.github+json"
    assert resolved.headers["X-GitHub-Api-Version"] == "2022-11-28"
    assert resolved.headers["User-Agent"] == "tests"
    assert resolved.timeout == TimeoutConfig(connect=3.0, read=3.0, write=3.0)

def test_resolve_config_header_override():
    resolved = resolve_config(ClientConfig(api_version="2026-03-10", headers={"Accept": "application/json"}))

    assert resolved.headers["Accept"] == "application/json"
    assert resolved.headers["X-GitHub-Api-Version"] == "2026-03-10"

def test_load_config_defaults():
    config = load_config()

    assert config.base_url == "https://api.github.com"
    assert config.auth is None
    assert config.timeout == 30.0

def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("GH_TOKEN", "gh-token")
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")
    monkeypatch.setenv("GITHUB_TIMEOUT", "12.5")

    config = load_config()

    assert config.auth.api_key == "gh-token"
    assert config.base_url == "https://ghe.example.com/api/v3"
    assert config.timeout == 12.5

def test_load_config_priority(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")

    config = load_config(token="arg-token", config={"base_url": "https://dict.example.com"})

    assert config.auth.api_key == "arg-token"
    assert config.base_url == "https://dict.example.com"

def test_load_config_invalid_timeout(monkeypatch):
    monkeypatch.setenv("GITHUB_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError) as exc:
        load_config()
    assert "GITHUB_TIMEOUT" in str(exc.value)

def test_load_config_skips_empty_env(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "")
    monkeypatch.setenv("GH_TOKEN", "gh-token")
    assert load_config().auth.api_key == "gh-token"

def test_load_config_dict_timeout():
    assert load_config(config={"timeout": "7"}).timeout == 7.0

def test_load_config_invalid_url():
    with pytest.raises(ConfigurationError):
        load_config(base_url="api.github.com")

def test_load_config_env_file(tmp_path, monkeypatch):
    # registers GITHUB_TOKEN for restore, since load_dotenv writes os.environ
    monkeypatch.setenv("GITHUB_TOKEN", "")
    monkeypatch.delenv("GITHUB_TOKEN")
    env_file = tmp_path / ".env"
    env_file.write_text("GITHUB_TOKEN=file-token\n")

    config = load_config(env_file=str(env_file))

    assert config.auth.api_key == "file-token"
