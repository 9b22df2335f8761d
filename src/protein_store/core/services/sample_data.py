"""Built-in sample structure used by the demonstration."""

from ..domain.models.protein import Protein

SAMPLE_PROTEIN_NAME = "SampleProtein"

# Backbone and side-chain atoms of a single residue, in Angstroms.
SAMPLE_ATOMS = [
    ("N", 0.0, 0.0, 0.0),
    ("CA", 1.458, 0.0, 0.0),
    ("C", 2.009, 1.420, 0.0),
    ("O", 1.251, 2.390, 0.0),
    ("CB", 1.988, -0.773, -1.199),
    ("CG", 3.510, -0.900, -1.250),
    ("CD", 6.200, 3.100, 2.400),
]


def build_sample_protein(name: str = SAMPLE_PROTEIN_NAME) -> Protein:
    """Create the sample protein with its seven atoms."""
    protein = Protein(name)
    for atom_name, x, y, z in SAMPLE_ATOMS:
        protein.add_atom(atom_name, x, y, z)
    return protein
