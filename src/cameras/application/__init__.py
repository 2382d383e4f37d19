"""
Application module initialization.
"""
from .aggregator import CameraAggregator, StreamMessage

__all__ = ["CameraAggregator", "StreamMessage"]
