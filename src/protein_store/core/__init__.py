"""Core domain models, interfaces and services for protein structure queries."""

from .domain.models.atom import Atom
from .domain.models.protein import Protein
from .domain.models.result import ErrorKind, Result
from .interfaces.repository import Repository
from .services.map_service import MapSettings, TopDownMapService
from .services.sample_data import build_sample_protein

__all__ = [
    "Atom",
    "Protein",
    "ErrorKind",
    "Result",
    "Repository",
    "MapSettings",
    "TopDownMapService",
    "build_sample_protein",
]
