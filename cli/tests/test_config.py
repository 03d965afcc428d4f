from __future__ import annotations

import os
import stat

import pytest

from mgs_cli import config


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in (
        config.ENV_REGION,
        config.ENV_AWS_REGION,
        config.ENV_ACCESS_KEY_ID,
        config.ENV_SECRET_ACCESS_KEY,
        config.ENV_SESSION_TOKEN,
    ):
        monkeypatch.delenv(name, raising=False)


def test_load_config_defaults_when_missing() -> None:
    cfg = config.load_config()

    assert cfg.region == ""
    assert cfg.endpoint is None
    assert cfg.timeout_s == config.DEFAULT_TIMEOUT_S


def test_save_and_load_config(tmp_path) -> None:
    cfg = config.AppConfig(
        region="us-east-1",
        endpoint=None,
        timeout_s=5.0,
        profiles={"gov": config.ProfileConfig(region="us-gov-west-1")},
    )

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")
    loaded = config.load_config()

    assert path.endswith("config.toml")
    assert "endpoint" not in contents
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
    assert loaded.region == "us-east-1"
    assert loaded.timeout_s == 5.0
    assert loaded.profiles["gov"].region == "us-gov-west-1"
    assert loaded.profiles["gov"].endpoint is None


def test_from_toml_ignores_bad_values() -> None:
    cfg = config.from_toml({"region": "  ", "timeout_s": "soon", "profiles": {"x": "not-a-table"}})

    assert cfg.region == ""
    assert cfg.timeout_s == config.DEFAULT_TIMEOUT_S
    assert cfg.profiles == {}


def test_apply_profile_overrides_defaults() -> None:
    cfg = config.AppConfig(
        region="us-east-1",
        endpoint="gw.example.test",
        profiles={"cn": config.ProfileConfig(region="cn-north-1", timeout_s=30.0)},
    )

    effective = config.apply_profile(cfg, "cn")

    assert effective.region == "cn-north-1"
    assert effective.endpoint == "gw.example.test"
    assert effective.timeout_s == 30.0
    assert config.apply_profile(cfg, "missing") is cfg


def test_resolve_region_precedence(monkeypatch) -> None:
    cfg = config.AppConfig(region="us-east-1")

    assert config.resolve_region(cfg) == "us-east-1"
    monkeypatch.setenv(config.ENV_AWS_REGION, "eu-west-1")
    assert config.resolve_region(cfg) == "eu-west-1"
    monkeypatch.setenv(config.ENV_REGION, "ap-south-1")
    assert config.resolve_region(cfg) == "ap-south-1"
    assert config.resolve_region(cfg, "sa-east-1") == "sa-east-1"


def test_load_credentials_from_env(monkeypatch) -> None:
    assert config.load_credentials() is None

    monkeypatch.setenv(config.ENV_ACCESS_KEY_ID, "AKID")
    monkeypatch.setenv(config.ENV_SECRET_ACCESS_KEY, "SECRET")
    assert config.load_credentials() == config.Credentials("AKID", "SECRET", None)

    monkeypatch.setenv(config.ENV_SESSION_TOKEN, "SESSION")
    assert config.load_credentials().token == "SESSION"
