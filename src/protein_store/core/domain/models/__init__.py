"""Domain model classes."""

from .atom import Atom
from .protein import Protein
from .result import ErrorKind, Result

__all__ = [
    "Atom",
    "Protein",
    "ErrorKind",
    "Result",
]
