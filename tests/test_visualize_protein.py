import logging
import os

import pytest

from protein_store.core.domain.models.protein import Protein
from protein_store.core.domain.models.result import ErrorKind
from protein_store.core.services.map_service import MapSettings
from protein_store.infrastructure.repositories.protein_repository import save_to_file
from protein_store.presentation import formatters
from protein_store.presentation.cli.visualize_protein import (
    main,
    run_demonstration,
    setup_parser,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("protein_store")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestFormatters:
    """Tests for console formatting."""

    def test_atom_table(self, two_atom_protein):
        """Test header and two-decimal atom lines."""
        assert formatters.format_atom_table(two_atom_protein) == [
            "Protein: Dimer (2 atoms)",
            "  [0] CA   (1.00, 2.00, 3.00)",
            "  [1] CB   (4.00, 5.00, 6.00)",
        ]

    def test_distances(self, two_atom_protein):
        """Test the distance listing."""
        lines = formatters.format_distances(two_atom_protein, 0, [(1, 27 ** 0.5)])
        assert lines == ["Distances from atom 0 (CA):", "  to [1] CB   5.196 A"]

    def test_nearby_none(self, two_atom_protein):
        """Test the neighbor listing with no matches."""
        lines = formatters.format_nearby(two_atom_protein, 0, 1.0, [])
        assert lines[-1] == "  (none)"

    def test_map_without_atoms(self):
        """Test the no-atoms message in place of a grid."""
        assert formatters.format_map(Protein("Empty"), None) == [
            formatters.NO_ATOMS_MESSAGE
        ]


class TestRunDemonstration:
    """Tests for the demonstration sequence."""

    def test_happy_path(self, output_dir, sample_protein):
        """Test the full sequence on the sample protein."""
        lines = []
        path = os.path.join(output_dir, "protein_data.txt")
        report = run_demonstration(sample_protein, output_path=path, echo=lines.append)

        assert report.distances.ok
        assert report.nearby.value == [1, 2, 3, 4, 5]
        assert report.saved.ok
        assert report.reloaded.ok
        assert report.reloaded.value.atoms == sample_protein.atoms
        assert os.path.exists(path)

        output = "\n".join(lines)
        assert "Protein: SampleProtein (7 atoms)" in output
        assert "Top-down map (X-Y) of SampleProtein:" in output
        assert "Reloaded protein:" in output

    def test_empty_protein_continues(self, output_dir):
        """Test that an empty protein runs to completion."""
        lines = []
        path = os.path.join(output_dir, "empty.txt")
        report = run_demonstration(Protein("Empty"), output_path=path, echo=lines.append)

        assert report.distances.error is ErrorKind.INVALID_INDEX
        assert report.nearby.error is ErrorKind.INVALID_INDEX
        assert formatters.NO_ATOMS_MESSAGE in lines
        assert not any(line.startswith("Top-down map") for line in lines)
        assert report.reloaded.ok

    def test_save_failure_continues(self, output_dir, sample_protein):
        """Test that a failed save does not stop the run."""
        lines = []
        path = os.path.join(output_dir, "missing", "protein.txt")
        report = run_demonstration(sample_protein, output_path=path, echo=lines.append)

        assert report.saved.error is ErrorKind.IO_FAILURE
        assert not report.reloaded.ok
        assert any(line.startswith("Save failed") for line in lines)

    def test_unsaveable_names_continue(self, output_dir):
        """Test that names the file format cannot hold do not stop the run."""
        protein = Protein("bad\udc80name")
        protein.add_atom("", 1.0, 2.0, 3.0)
        lines = []
        path = os.path.join(output_dir, "bad.txt")

        report = run_demonstration(protein, output_path=path, echo=lines.append)

        assert not report.saved.ok
        assert not report.reloaded.ok
        assert any(line.startswith("Save failed") for line in lines)
        assert not os.path.exists(path)

    def test_custom_map_size(self, output_dir, sample_protein):
        """Test that map settings reach the rendered grid."""
        lines = []
        run_demonstration(
            sample_protein,
            output_path=os.path.join(output_dir, "p.txt"),
            map_settings=MapSettings(width=10, height=4),
            echo=lines.append,
        )
        start = lines.index("Top-down map (X-Y) of SampleProtein:")
        assert all(len(row) == 10 for row in lines[start + 1 : start + 5])


class TestMain:
    """Tests for the command-line entry point."""

    def test_defaults(self):
        """Test default argument values."""
        args = setup_parser().parse_args([])
        assert args.input is None
        assert args.output == "protein_data.txt"
        assert args.reference == 0
        assert args.radius == 5.0
        assert (args.map_width, args.map_height) == (50, 20)

    @pytest.mark.parametrize(
        "argv", [["--map-width", "0"], ["--radius", "-1"], ["--reference", "x"]]
    )
    def test_rejects_bad_arguments(self, argv):
        """Test that invalid arguments exit with code 2."""
        with pytest.raises(SystemExit) as exc_info:
            setup_parser().parse_args(argv)
        assert exc_info.value.code == 2

    def test_runs_sample(self, output_dir, capsys):
        """Test running the built-in sample from main."""
        path = os.path.join(output_dir, "out.txt")
        assert main(["--output", path]) == 0

        captured = capsys.readouterr()
        assert "Protein: SampleProtein (7 atoms)" in captured.out
        assert os.path.exists(path)

    def test_loads_input_file(self, output_dir, two_atom_protein, capsys):
        """Test loading a protein with --input."""
        source = os.path.join(output_dir, "in.txt")
        save_to_file(two_atom_protein, source)

        assert main(["--input", source, "--output", os.path.join(output_dir, "out.txt")]) == 0
        assert "Protein: Dimer (2 atoms)" in capsys.readouterr().out

    def test_unreadable_input_falls_back_to_sample(self, output_dir, capsys):
        """Test fallback to the sample when --input cannot be read."""
        argv = [
            "--input",
            os.path.join(output_dir, "missing.txt"),
            "--output",
            os.path.join(output_dir, "out.txt"),
        ]
        assert main(argv) == 0

        out = capsys.readouterr().out
        assert "Could not load" in out
        assert "Protein: SampleProtein (7 atoms)" in out

    def test_out_of_range_reference_still_exits_cleanly(self, output_dir, capsys):
        """Test that a bad reference index still exits 0."""
        argv = ["--reference", "99", "--output", os.path.join(output_dir, "out.txt")]
        assert main(argv) == 0
        assert "Distances not computed" in capsys.readouterr().out

    def test_log_file(self, output_dir):
        """Test that --log-file receives the log."""
        log_path = os.path.join(output_dir, "run.log")
        argv = ["--log-file", log_path, "--output", os.path.join(output_dir, "out.txt")]
        assert main(argv) == 0

        logging.getLogger("protein_store").handlers[-1].flush()
        with open(log_path) as f:
            assert "Saved protein SampleProtein" in f.read()
