"""Infrastructure implementations of core interfaces."""

from .repositories.protein_repository import (
    TextProteinRepository,
    load_from_file,
    save_to_file,
)

__all__ = [
    "TextProteinRepository",
    "load_from_file",
    "save_to_file",
]
