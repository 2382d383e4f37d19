from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from .camera import Camera


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamerasResponse(_ApiModel):
    """Body of GET /cameras."""
    cameras: List[Camera]
    total: int = Field(..., ge=0, description="Matching cameras before pagination")
    sources: List[str] = Field(default_factory=list, description="Providers present in the result")
    offset: int = Field(0, ge=0)
    has_more: bool = False


class CameraResponse(_ApiModel):
    """Body of GET /cameras/{id}."""
    camera: Camera


class ErrorResponse(_ApiModel):
    error: str
    code: str


class CamerasMessage(_ApiModel):
    """One provider's batch in the NDJSON stream."""
    type: Literal["cameras"] = "cameras"
    provider: str
    cameras: List[Camera]


class DoneMessage(_ApiModel):
    """Terminal NDJSON stream message."""
    type: Literal["done"] = "done"
    total: int = Field(..., ge=0)


class ProviderStatus(_ApiModel):
    slug: str
    display_name: str
    metrics: dict = Field(default_factory=dict)


class HealthResponse(_ApiModel):
    status: str = "ok"
    providers: List[ProviderStatus] = Field(default_factory=list)
