# src/protein_store/core/services/map_service.py
"""Service for projecting atoms onto a coarse top-down character grid."""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..domain.models.protein import Protein

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapSettings:
    """Grid size and glyphs for the top-down map."""

    width: int = 50
    height: int = 20
    background: str = "."
    marker: str = "*"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Map dimensions must be positive, got {self.width}x{self.height}"
            )
        if len(self.background) != 1 or len(self.marker) != 1:
            raise ValueError("Map glyphs must be single characters")


def scale_to_grid(values: np.ndarray, size: int) -> np.ndarray:
    """
    Rescale values linearly onto integer cells [0, size - 1].

    A zero-range axis maps every value to the midpoint cell.

    Args:
        values: 1D array of coordinates along one axis
        size: Number of cells along that axis

    Returns:
        Integer array of cell indices, truncated toward zero
    """
    low = values.min()
    span = values.max() - low
    if span == 0:
        return np.full(values.shape, (size - 1) // 2, dtype=int)
    return ((values - low) / span * (size - 1)).astype(int)


class TopDownMapService:
    """Renders the X-Y projection of a protein as rows of glyphs."""

    def __init__(self, settings: Optional[MapSettings] = None):
        """Initialize service with grid settings."""
        self._settings = settings or MapSettings()

    def render(self, protein: Protein) -> Optional[List[str]]:
        """
        Render the top-down map.

        Args:
            protein: Protein to project

        Returns:
            Grid rows (row 0 holds the minimum Y), or None if the protein
            has no atoms
        """
        if len(protein) == 0:
            logger.info("Protein %s has no atoms to map", protein.name)
            return None

        width, height = self._settings.width, self._settings.height
        coords = protein.get_coordinates()
        columns = scale_to_grid(coords[:, 0], width)
        rows = scale_to_grid(coords[:, 1], height)

        grid = [[self._settings.background] * width for _ in range(height)]
        for column, row in zip(columns, rows):
            if 0 <= column < width and 0 <= row < height:
                grid[row][column] = self._settings.marker

        return ["".join(row) for row in grid]
