"""Unit tests for config.py"""

import pytest

from gbmigrate.config import Settings, load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Isolate from any config.yaml in the working directory."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults(monkeypatch):
    """Defaults apply when no config.yaml, env var, or CLI override exists."""
    monkeypatch.delenv("GBMIGRATE_CONTENT_DIR", raising=False)
    settings = load_config()
    assert settings.content_dir == "content"
    assert settings.weight_base == -100
    assert settings.weight_step == 10
    assert [c.target_dir for c in settings.conversions] == ["dcs", "node"]


def test_load_config_uses_env_content_dir(monkeypatch):
    monkeypatch.setenv("GBMIGRATE_CONTENT_DIR", "site")
    assert load_config().content_dir == "site"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """GBMIGRATE_WEIGHT_BASE takes precedence over config.yaml and is coerced to int."""
    (tmp_path / "config.yaml").write_text("weight_base: 0\n")
    monkeypatch.setenv("GBMIGRATE_WEIGHT_BASE", "-50")
    assert load_config().weight_base == -50


def test_load_config_env_bool(monkeypatch):
    monkeypatch.setenv("GBMIGRATE_SKIP_REFRESH", "true")
    assert load_config().skip_refresh is True


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("GBMIGRATE_CONTENT_DIR", "env")
    assert load_config(overrides={"content_dir": "cli"}).content_dir == "cli"
    assert load_config(overrides={"content_dir": None}).content_dir == "env"


def test_load_config_yaml_tables(tmp_path):
    """Sections, link titles and conversions can be configured in config.yaml."""
    (tmp_path / "config.yaml").write_text(
        "conversions:\n"
        "  - source_dir: src/docs\n"
        "    target_dir: docs\n"
        "sections:\n"
        "  docs/intro: {title: Intro, weight: 5}\n"
        "link_titles:\n"
        "  https://x.test: X\n"
    )
    settings = load_config()
    assert settings.conversions[0].worktree is None
    assert settings.sections["docs/intro"].weight == 5
    assert settings.link_titles == {"https://x.test": "X"}


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_settings_rejects_zero_step():
    with pytest.raises(ValueError):
        Settings(weight_step=0)


def test_settings_rejects_unknown_log_level():
    with pytest.raises(ValueError):
        Settings(log_level="LOUD")
