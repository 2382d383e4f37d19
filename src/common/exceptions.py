from typing import Optional


class CameraServiceError(Exception):
    """Base exception for all camera service errors."""
    pass


class ProviderError(CameraServiceError):
    """Raised when an upstream camera feed cannot be fetched or decoded."""

    def __init__(self, message: str, provider: str = "unknown", region: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.region = region


class InvalidQueryError(CameraServiceError):
    """Raised when client input cannot be turned into a camera query."""

    def __init__(self, message: str, code: str = "INVALID_QUERY"):
        super().__init__(message)
        self.code = code


class ConfigurationError(CameraServiceError):
    """Raised when configuration is invalid."""
    pass
