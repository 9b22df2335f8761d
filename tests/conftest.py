import tempfile

import pytest

from protein_store.core.domain.models.protein import Protein
from protein_store.core.services.sample_data import build_sample_protein


@pytest.fixture
def output_dir():
    with tempfile.TemporaryDirectory() as tmpdirname:
        yield tmpdirname


@pytest.fixture
def sample_protein() -> Protein:
    """The built-in seven atom protein."""
    return build_sample_protein()


@pytest.fixture
def two_atom_protein() -> Protein:
    protein = Protein("Dimer")
    protein.add_atom("CA", 1.0, 2.0, 3.0)
    protein.add_atom("CB", 4.0, 5.0, 6.0)
    return protein
