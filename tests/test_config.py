import os
from pathlib import Path

import pytest

from src.civic_mcp.config import Config, PROJECT_ROOT
from src.civic_mcp.exceptions import ConfigurationError

ENV_VARS = ["CLIENT_ID", "PORT", "HOST", "LOG_LEVEL", "LOG_FILE", "PUBLIC_DIR"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # load_dotenv writes straight into os.environ; keep that inside the test
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for name in ENV_VARS:
        os.environ.pop(name, None)


def test_defaults():
    config = Config()

    assert config.client_id is None
    assert config.port == 3000
    assert config.scopes == ["openid", "profile", "email"]
    assert config.public_dir == PROJECT_ROOT / "public"


def test_from_yaml(tmp_path):
    path = tmp_path / "app_config.yaml"
    path.write_text(
        "server:\n"
        "  port: 4000\n"
        "  public_dir: static\n"
        "auth:\n"
        "  client_id: yaml-client\n"
        "  scopes: [openid]\n"
        "log:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )

    config = Config.from_yaml(path)

    assert config.port == 4000
    assert config.client_id == "yaml-client"
    assert config.scopes == ["openid"]
    assert config.log_level == "DEBUG"
    assert config.public_dir == PROJECT_ROOT / "static"
    assert config.auth_endpoint == "https://auth.civic.com"


def test_from_yaml_missing_file(tmp_path):
    assert Config.from_yaml(tmp_path / "nope.yaml") == Config()


def test_empty_client_id_in_yaml_is_none(tmp_path):
    path = tmp_path / "app_config.yaml"
    path.write_text('auth:\n  client_id: ""\n', encoding="utf-8")

    assert Config.from_yaml(path).client_id is None


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CLIENT_ID", "env-client")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_FILE", "")
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path))

    config = Config.from_env(Config(port=4000, client_id="yaml-client"))

    assert config.client_id == "env-client"
    assert config.port == 8080
    assert config.log_file is None
    assert config.public_dir == Path(tmp_path)


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ConfigurationError, match="PORT"):
        Config.from_env()


def test_load_reads_env_local_before_env(tmp_path):
    (tmp_path / ".env.local").write_text("CLIENT_ID=from-local\n", encoding="utf-8")
    (tmp_path / ".env").write_text("CLIENT_ID=from-env\nPORT=5050\n", encoding="utf-8")

    config = Config.load(config_path=tmp_path / "missing.yaml", env_dir=tmp_path)

    assert config.client_id == "from-local"
    assert config.port == 5050


def test_missing_client_id_is_not_fatal(tmp_path):
    config = Config.load(config_path=tmp_path / "missing.yaml", env_dir=tmp_path)

    assert config.client_id is None
