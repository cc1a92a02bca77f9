"""
tests/test_config.py — Config Loader Tests
===========================================
"""

from __future__ import annotations

import pytest

from karmabot.config import load_config
from karmabot.engine.ranking import Granularity


def test_loads_required_and_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("bot_name: karmabot\nbot_prefix: '!'\napi_port: 8080\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.bot_name == "karmabot"
    assert cfg.api_port == 8080
    assert cfg.default_rank_size == 5
    assert cfg.max_rank_size == 25
    assert cfg.self_karma_chance == 0.15
    assert cfg.series_granularity == "week"


def test_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "bot_name: kb\nbot_prefix: '?'\napi_port: 1\n"
        "default_rank_size: 3\nmax_rank_size: 10\nself_karma_chance: 0.5\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert (cfg.default_rank_size, cfg.max_rank_size, cfg.self_karma_chance) == (3, 10, 0.5)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_missing_required_key(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("bot_name: karmabot\n", encoding="utf-8")
    with pytest.raises(KeyError):
        load_config(path)


def test_api_host_defaults_to_localhost(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("bot_name: kb\nbot_prefix: '!'\napi_port: 9000\n", encoding="utf-8")
    cfg = load_config(path)
    assert (cfg.api_host, cfg.api_port) == ("127.0.0.1", 9000)


def test_granularity_is_parsed(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "bot_name: kb\nbot_prefix: '!'\napi_port: 1\nseries_granularity: month\n",
        encoding="utf-8",
    )
    assert load_config(path).series_granularity is Granularity.MONTH


def test_invalid_granularity_fails_at_load(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "bot_name: kb\nbot_prefix: '!'\napi_port: 1\nseries_granularity: hour\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_config(path)


def test_api_entry_point_serves_configured_port(monkeypatch, cfg):
    import karmabot.api.__main__ as api_entry

    served = {}
    monkeypatch.setattr(api_entry, "load_dotenv", lambda: None)
    monkeypatch.setattr(api_entry, "load_config", lambda: cfg)
    monkeypatch.setattr(
        api_entry.uvicorn, "run", lambda app, **kwargs: served.update(app=app, **kwargs)
    )

    api_entry.main()

    assert served == {"app": "karmabot.api.main:app", "host": "127.0.0.1", "port": 8000}
