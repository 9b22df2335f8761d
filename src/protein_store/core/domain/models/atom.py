#!/usr/bin/env python3
# src/protein_store/core/domain/models/atom.py

"""
Domain model representing an atom in a protein structure.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Atom:
    """Represents a named atom with Cartesian coordinates (Angstroms)."""

    name: str
    x: float
    y: float
    z: float

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        """Coordinates as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)
