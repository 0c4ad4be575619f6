"""Configuration for the RadarCol dashboard backend."""
from .api_config import ApiConfig

__all__ = ["ApiConfig"]
