from pathlib import Path
import logging
import textwrap

import pytest

from gamestore.config.loader import load_config
from gamestore.errors import ConfigError
from gamestore.observers.console import ConsoleSubscriber
from gamestore.observers.factory import build_publisher
from gamestore.observers.jsonfile import JsonFileSubscriber
from gamestore.observers.logger import LoggerSubscriber


def _write(tmp_path: Path, text: str) -> Path:
    f = tmp_path / "store.yaml"
    f.write_text(textwrap.dedent(text))
    return f


def test_load_config_minimal_ok(tmp_path: Path):
    cfg = load_config(_write(tmp_path, "store: steam-eu\n"))
    assert cfg.store == "steam-eu"
    assert cfg.isolate_errors is False
    assert cfg.logging.level == "INFO"
    assert cfg.subscribers == []


def test_load_config_full_with_env_expansion(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("DISCOUNT_DIR", str(tmp_path / "out"))
    cfg = load_config(_write(tmp_path, """
        store: gog
        isolate_errors: true
        logging:
          level: debug
        subscribers:
          - kind: console
          - kind: logger
            level: warning
          - kind: jsonfile
            path: ${DISCOUNT_DIR}/discounts.jsonl
    """))
    assert cfg.isolate_errors is True
    assert cfg.logging.level == "DEBUG"
    assert [s.kind for s in cfg.subscribers] == ["console", "logger", "jsonfile"]
    assert cfg.subscribers[1].level == "WARNING"
    assert cfg.subscribers[2].path == f"{tmp_path / 'out'}/discounts.jsonl"


def test_jsonfile_requires_path(tmp_path: Path):
    with pytest.raises(ConfigError, match="requires 'path'"):
        load_config(_write(tmp_path, """
            store: gog
            subscribers:
              - kind: jsonfile
        """))


@pytest.mark.parametrize("text", [
    "subscribers: []\n",                               # store missing
    "store: s\nsubscribers:\n  - kind: webhook\n",     # unknown kind
    "store: s\nlogging:\n  level: LOUD\n",             # bad level
    "- just\n- a list\n",                              # not a mapping
    "store: [unclosed\n",                              # broken yaml
])
def test_invalid_configs_raise_config_error(tmp_path: Path, text):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))


def test_missing_file_raises_config_error(tmp_path: Path):
    with pytest.raises(ConfigError, match="Cannot read config"):
        load_config(tmp_path / "nope.yaml")


def test_build_publisher_from_config(tmp_path: Path):
    cfg = load_config(_write(tmp_path, f"""
        store: gog
        isolate_errors: true
        subscribers:
          - kind: console
          - kind: logger
            level: DEBUG
          - kind: jsonfile
            path: {tmp_path}/d.jsonl
    """))
    logger = logging.getLogger("discounts.test.factory")
    pub = build_publisher(cfg, logger)
    console, log_sub, json_sub = pub.subscribers
    assert isinstance(console, ConsoleSubscriber)
    assert isinstance(log_sub, LoggerSubscriber)
    assert log_sub.logger is logger
    assert log_sub.level == logging.DEBUG
    assert isinstance(json_sub, JsonFileSubscriber)
    assert json_sub.path == tmp_path / "d.jsonl"
    assert pub.isolate_errors is True
