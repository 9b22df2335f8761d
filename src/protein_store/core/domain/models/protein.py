#!/usr/bin/env python3
# src/protein_store/core/domain/models/protein.py

"""
Domain model representing a protein as an ordered collection of atoms.
"""

import logging
from typing import List, Tuple

import numpy as np

from .atom import Atom
from .result import ErrorKind, Result

logger = logging.getLogger(__name__)


class Protein:
    """
    Named, append-only sequence of atoms.

    Atoms are addressed by their insertion index, which never changes for
    the lifetime of the instance.
    """

    def __init__(self, name: str):
        """
        Initialize an empty protein.

        Args:
            name: Protein identifier
        """
        self.name = name
        self._atoms: List[Atom] = []

    def __len__(self) -> int:
        return len(self._atoms)

    def __repr__(self) -> str:
        return f"Protein(name={self.name!r}, atoms={len(self._atoms)})"

    @property
    def atoms(self) -> Tuple[Atom, ...]:
        """Read-only view of the atoms in index order."""
        return tuple(self._atoms)

    def add_atom(self, name: str, x: float, y: float, z: float) -> int:
        """
        Append a new atom.

        Args:
            name: Atom label (e.g. "CA")
            x: X coordinate
            y: Y coordinate
            z: Z coordinate

        Returns:
            Index of the new atom
        """
        self._atoms.append(Atom(name, float(x), float(y), float(z)))
        return len(self._atoms) - 1

    def is_valid_index(self, index: int) -> bool:
        """Check whether index addresses an atom (negative indices never do)."""
        return 0 <= index < len(self._atoms)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self._atoms:
            return np.empty((0, 3))
        return np.array([atom.coordinates for atom in self._atoms], dtype=float)

    def calculate_distance(self, i: int, j: int) -> Result[float]:
        """
        Euclidean distance between the atoms at positions i and j.

        Args:
            i: Index of the first atom
            j: Index of the second atom

        Returns:
            Result holding the distance, or an INVALID_INDEX failure
        """
        for index in (i, j):
            if not self.is_valid_index(index):
                return self._invalid_index(index)

        delta = np.subtract(self._atoms[j].coordinates, self._atoms[i].coordinates)
        return Result.success(float(np.linalg.norm(delta)))

    def distances_from(self, reference_index: int) -> Result[List[Tuple[int, float]]]:
        """
        Distances from one atom to every other atom.

        Args:
            reference_index: Index of the reference atom

        Returns:
            Result holding (index, distance) pairs in index order, excluding
            the reference itself
        """
        if not self.is_valid_index(reference_index):
            return self._invalid_index(reference_index)

        coords = self.get_coordinates()
        distances = np.linalg.norm(coords - coords[reference_index], axis=1)
        return Result.success(
            [
                (index, float(distance))
                for index, distance in enumerate(distances)
                if index != reference_index
            ]
        )

    def find_nearby_atoms(
        self, reference_index: int, max_distance: float
    ) -> Result[List[int]]:
        """
        Indices of atoms within max_distance of the reference atom.

        Args:
            reference_index: Index of the reference atom
            max_distance: Inclusive search radius

        Returns:
            Result holding ascending indices, never including the reference
        """
        distances = self.distances_from(reference_index)
        if not distances.ok:
            return Result.failure(distances.error, distances.message)

        nearby = [
            index
            for index, distance in distances.value
            if 0.0 <= distance <= max_distance
        ]
        logger.debug(
            "Found %d atoms within %.2f of atom %d",
            len(nearby),
            max_distance,
            reference_index,
        )
        return Result.success(nearby)

    def distance_matrix(self) -> np.ndarray:
        """Pairwise distance matrix of shape (n_atoms, n_atoms)."""
        coords = self.get_coordinates()
        diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
        return np.sqrt(np.sum(diff**2, axis=-1))

    def _invalid_index(self, index: int) -> Result:
        message = f"Atom index {index} out of range for {len(self._atoms)} atoms"
        logger.warning(message)
        return Result.failure(ErrorKind.INVALID_INDEX, message)
