from dataclasses import dataclass, field
from typing import Optional, Dict, List

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

@dataclass
class ProvidersConfig:
    enabled: List[str] = field(default_factory=lambda: ["caltrans"])
    cache_ttl_seconds: float = 60.0
    request_timeout_seconds: float = 10.0
    base_urls: Dict[str, str] = field(default_factory=dict)

@dataclass
class ApiConfig:
    max_limit: int = 100

@dataclass
class AppConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    providers: ProvidersConfig = field(default_factory=ProvidersConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    log_level: Optional[str] = "INFO"
