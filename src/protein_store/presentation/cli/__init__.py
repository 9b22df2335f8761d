"""Command-line interface modules."""

from .visualize_protein import main as visualize_protein_main

__all__ = [
    "visualize_protein_main",
]
