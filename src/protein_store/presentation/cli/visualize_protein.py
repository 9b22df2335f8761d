"""Command-line interface for the protein store demonstration."""

import argparse
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ...core.domain.models.protein import Protein
from ...core.domain.models.result import Result
from ...core.services.map_service import MapSettings, TopDownMapService
from ...core.services.sample_data import build_sample_protein
from ...core.utils.helpers import non_negative_float, non_negative_int, positive_int
from ...core.utils.logging_setup import setup_logging
from ...infrastructure.repositories.protein_repository import (
    load_from_file,
    save_to_file,
)
from .. import formatters

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "protein_data.txt"


@dataclass
class DemoReport:
    """Outcome of each fallible step of a demonstration run."""

    protein: Protein
    distances: Result
    nearby: Result
    saved: Result
    reloaded: Result


def _emit(echo: Callable[[str], None], lines: List[str]) -> None:
    for line in lines:
        echo(line)
    echo("")


def run_demonstration(
    protein: Protein,
    output_path: str = DEFAULT_OUTPUT,
    reference_index: int = 0,
    radius: float = 5.0,
    map_settings: Optional[MapSettings] = None,
    echo: Callable[[str], None] = print,
) -> DemoReport:
    """
    Print atoms, distances, neighbors and map, then save and reload.

    Every failure is reported through echo and the returned report; none
    of them stop the sequence.

    Args:
        protein: Structure to demonstrate on
        output_path: File the protein is saved to and reloaded from
        reference_index: Atom used for distance and neighbor queries
        radius: Neighbor search radius
        map_settings: Grid settings for the top-down map
        echo: Line sink, print by default

    Returns:
        DemoReport with the result of every fallible step
    """
    _emit(echo, formatters.format_atom_table(protein))

    distances = protein.distances_from(reference_index)
    if distances.ok:
        _emit(echo, formatters.format_distances(protein, reference_index, distances.value))
    else:
        _emit(echo, [f"Distances not computed: {distances.message}"])

    nearby = protein.find_nearby_atoms(reference_index, radius)
    if nearby.ok:
        _emit(echo, formatters.format_nearby(protein, reference_index, radius, nearby.value))
    else:
        _emit(echo, [f"Nearby atoms not computed: {nearby.message}"])

    rows = TopDownMapService(map_settings).render(protein)
    _emit(echo, formatters.format_map(protein, rows))

    saved = save_to_file(protein, output_path)
    if saved.ok:
        echo(f"Saved to {saved.value}")
        reloaded = load_from_file(output_path)
    else:
        echo(f"Save failed: {saved.message}")
        reloaded = Result.failure(saved.error, "nothing saved to reload")

    if reloaded.ok:
        echo("Reloaded protein:")
        _emit(echo, formatters.format_atom_table(reloaded.value))
    else:
        echo(f"Reload failed: {reloaded.message}")

    return DemoReport(protein, distances, nearby, saved, reloaded)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Inspect a small protein structure: distances, neighbors and a top-down map"
    )
    parser.add_argument(
        "--input", help="Protein text file to load instead of the built-in sample"
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT,
        help="File to save the protein to (default: %(default)s)",
    )
    parser.add_argument(
        "--reference",
        type=non_negative_int,
        default=0,
        help="Reference atom index for distance queries",
    )
    parser.add_argument(
        "--radius",
        type=non_negative_float,
        default=5.0,
        help="Neighbor search radius (Angstroms)",
    )
    parser.add_argument("--map-width", type=positive_int, default=50)
    parser.add_argument("--map-height", type=positive_int, default=20)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the protein visualizer CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    protein = None
    if args.input:
        loaded = load_from_file(args.input)
        if loaded.ok:
            protein = loaded.value
        else:
            print(f"Could not load {args.input}: {loaded.message}")
            logger.warning("Falling back to the built-in sample protein")
    if protein is None:
        protein = build_sample_protein()

    run_demonstration(
        protein,
        output_path=args.output,
        reference_index=args.reference,
        radius=args.radius,
        map_settings=MapSettings(width=args.map_width, height=args.map_height),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
