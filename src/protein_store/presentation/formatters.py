"""Text formatting for console output."""

from typing import List, Optional, Sequence, Tuple

from ..core.domain.models.protein import Protein

NO_ATOMS_MESSAGE = "No atoms to display."


def format_atom_table(protein: Protein) -> List[str]:
    """Header with name and atom count, then one line per atom."""
    lines = [f"Protein: {protein.name} ({len(protein)} atoms)"]
    for index, atom in enumerate(protein.atoms):
        lines.append(
            f"  [{index}] {atom.name:<4} ({atom.x:.2f}, {atom.y:.2f}, {atom.z:.2f})"
        )
    return lines


def format_distances(
    protein: Protein, reference_index: int, distances: Sequence[Tuple[int, float]]
) -> List[str]:
    atoms = protein.atoms
    reference = atoms[reference_index]
    lines = [f"Distances from atom {reference_index} ({reference.name}):"]
    for index, distance in distances:
        lines.append(f"  to [{index}] {atoms[index].name:<4} {distance:.3f} A")
    return lines


def format_nearby(
    protein: Protein, reference_index: int, radius: float, indices: Sequence[int]
) -> List[str]:
    atoms = protein.atoms
    lines = [f"Atoms within {radius:.2f} A of atom {reference_index}:"]
    if not indices:
        lines.append("  (none)")
    for index in indices:
        lines.append(f"  [{index}] {atoms[index].name}")
    return lines


def format_map(protein: Protein, rows: Optional[List[str]]) -> List[str]:
    """Map block, or the no-atoms message when there is no grid."""
    if rows is None:
        return [NO_ATOMS_MESSAGE]
    return [f"Top-down map (X-Y) of {protein.name}:"] + rows
