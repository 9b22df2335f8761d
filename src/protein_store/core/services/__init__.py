"""Services operating on domain models."""

from .map_service import MapSettings, TopDownMapService
from .sample_data import build_sample_protein

__all__ = [
    "MapSettings",
    "TopDownMapService",
    "build_sample_protein",
]
