import pytest
from pathlib import Path
from src.common.config import ConfigManager
from src.common.exceptions import ConfigurationError

def test_load_default_profile():
    cfg = ConfigManager().load()
    assert list(cfg.providers.enabled) == ["caltrans"]
    assert cfg.providers.cache_ttl_seconds == 60
    assert cfg.api.max_limit == 100

def test_overrides_are_applied():
    cfg = ConfigManager().load(overrides=["providers.cache_ttl_seconds=5", "api.max_limit=10"])
    assert cfg.providers.cache_ttl_seconds == 5
    assert cfg.api.max_limit == 10

def test_missing_profile(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(config_dir=tmp_path).load("nope")

def test_invalid_timeout_rejected():
    with pytest.raises(ConfigurationError):
        ConfigManager().load(overrides=["providers.request_timeout_seconds=0"])

def test_wrong_type_rejected(tmp_path):
    (tmp_path / "config.yaml").write_text("api:\n  max_limit: lots\n")
    with pytest.raises(ConfigurationError):
        ConfigManager(config_dir=tmp_path).load()

def test_default_needs_no_yaml():
    cfg = ConfigManager(config_dir=Path("/nonexistent")).default()
    assert cfg.server.port == 8000
