from pathlib import Path

import pytest

from searchpro.config import SearchProConfig, load_config
from searchpro.errors import InvalidConfiguration

ENV_KEYS = [
    "SEARCHPRO_DEBOUNCE_MS",
    "SEARCHPRO_CACHE_SIZE",
    "SEARCHPRO_COMMIT_ENABLED",
    "SEARCHPRO_DATA_FILE",
    "SEARCHPRO_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    cfg = load_config()
    assert cfg.debounce_ms == 300
    assert cfg.cache_size == 10
    assert cfg.commit_enabled is True
    assert cfg.data_file is None
    assert cfg.log_level == "INFO"
    assert cfg.debounce_seconds == pytest.approx(0.3)


def test_env_overrides(clean_env, tmp_path):
    clean_env.setenv("SEARCHPRO_DEBOUNCE_MS", " 150 ")
    clean_env.setenv("SEARCHPRO_CACHE_SIZE", "25")
    clean_env.setenv("SEARCHPRO_COMMIT_ENABLED", "off")
    clean_env.setenv("SEARCHPRO_DATA_FILE", str(tmp_path / "data.json"))
    clean_env.setenv("SEARCHPRO_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.debounce_ms == 150
    assert cfg.cache_size == 25
    assert cfg.commit_enabled is False
    assert cfg.data_file == tmp_path / "data.json"
    assert cfg.log_level == "DEBUG"


def test_bad_values_fall_back(clean_env):
    clean_env.setenv("SEARCHPRO_DEBOUNCE_MS", "soon")
    clean_env.setenv("SEARCHPRO_CACHE_SIZE", "")
    clean_env.setenv("SEARCHPRO_COMMIT_ENABLED", "maybe")
    clean_env.setenv("SEARCHPRO_LOG_LEVEL", "loud")
    cfg = load_config()
    assert cfg.debounce_ms == 300
    assert cfg.cache_size == 10
    assert cfg.commit_enabled is True
    assert cfg.log_level == "INFO"


def test_validate_accepts_defaults():
    cfg = SearchProConfig()
    assert cfg.validate() is cfg


@pytest.mark.parametrize(
    "kwargs",
    [{"debounce_ms": -5}, {"cache_size": 0}, {"log_level": "VERBOSE"}],
)
def test_validate_rejects(kwargs):
    with pytest.raises(InvalidConfiguration):
        SearchProConfig(**kwargs).validate()


def test_config_is_frozen():
    cfg = SearchProConfig(log_dir=Path("x"))
    with pytest.raises(AttributeError):
        cfg.cache_size = 3
