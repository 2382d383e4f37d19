from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import Optional

from conf.config_models import AppConfig
from ..exceptions import ConfigurationError

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "conf"

class ConfigManager:
    """Centralizes loading and validation of the service configuration"""

    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR):
        self.config_dir = Path(config_dir)

    def load(self, name: str = "config", overrides: Optional[list] = None) -> DictConfig:
        """Loads a YAML profile on top of the typed defaults."""
        config_path = self.config_dir / f"{name}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        return self.merge(OmegaConf.load(config_path), overrides)

    def merge(self, cfg, overrides: Optional[list] = None) -> DictConfig:
        """Validates an already loaded config (e.g. from Hydra) against AppConfig."""
        schema = OmegaConf.structured(AppConfig)
        try:
            merged = OmegaConf.merge(schema, cfg, OmegaConf.from_dotlist(overrides or []))
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        if merged.providers.cache_ttl_seconds < 0:
            raise ConfigurationError("providers.cache_ttl_seconds must be >= 0")
        if merged.providers.request_timeout_seconds <= 0:
            raise ConfigurationError("providers.request_timeout_seconds must be > 0")
        if merged.api.max_limit < 1:
            raise ConfigurationError("api.max_limit must be >= 1")

        return merged

    def default(self) -> DictConfig:
        """Typed defaults, no YAML involved."""
        return OmegaConf.structured(AppConfig)
