"""In-memory protein structure store with distance, neighbor and map queries."""

from .core.domain.models.atom import Atom
from .core.domain.models.protein import Protein
from .core.domain.models.result import ErrorKind, Result
from .core.services.map_service import MapSettings, TopDownMapService
from .infrastructure.repositories.protein_repository import (
    TextProteinRepository,
    load_from_file,
    save_to_file,
)

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Protein",
    "ErrorKind",
    "Result",
    "MapSettings",
    "TopDownMapService",
    "TextProteinRepository",
    "load_from_file",
    "save_to_file",
]
