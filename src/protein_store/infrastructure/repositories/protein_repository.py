# src/protein_store/infrastructure/repositories/protein_repository.py
"""Repository implementation for the line-oriented protein text format."""

import logging
from typing import Iterable, Optional

from ...core.interfaces.repository import Repository
from ...core.domain.models.protein import Protein
from ...core.domain.models.result import ErrorKind, Result

logger = logging.getLogger(__name__)

PROTEIN_RECORD = "PROTEIN"
ATOM_COUNT_RECORD = "ATOM_COUNT"
ATOM_RECORD = "ATOM"
ENCODING = "utf-8"


class TextProteinRepository(Repository[Protein]):
    """
    Reads and writes proteins as plain text, one record per line:

        PROTEIN <name>
        ATOM_COUNT <n>
        ATOM <name> <x> <y> <z>

    The reader is lenient: lines with an unknown leading token are skipped,
    as are ATOM lines that appear before any PROTEIN line. ATOM_COUNT is
    informational and never bounds parsing.
    """

    def save(self, entity: Protein, path: str) -> Result[str]:
        """
        Write a protein to path.

        Nothing is written when a name cannot be represented in the format.

        Args:
            entity: Protein to serialize
            path: Destination file

        Returns:
            Result holding the path, a PARSE_FAILURE for an unrepresentable
            name, or an IO_FAILURE
        """
        problem = self.find_unrepresentable_name(entity)
        if problem:
            message = f"Cannot save protein to {path}: {problem}"
            logger.error(message)
            return Result.failure(ErrorKind.PARSE_FAILURE, message)

        content = "".join(line + "\n" for line in self.format_lines(entity))
        try:
            # Encode before opening so a bad character leaves no truncated file
            data = content.encode(ENCODING)
            with open(path, "wb") as f:
                f.write(data)
        except (OSError, UnicodeError) as e:
            message = f"Could not save protein to {path}: {e}"
            logger.error(message)
            return Result.failure(ErrorKind.IO_FAILURE, message)

        logger.info("Saved protein %s (%d atoms) to %s", entity.name, len(entity), path)
        return Result.success(path)

    def load(self, path: str) -> Result[Protein]:
        """
        Read a protein from path.

        Args:
            path: Source file

        Returns:
            Result holding a new Protein, or an IO_FAILURE / PARSE_FAILURE.
            Atoms parsed before a failing line are discarded.
        """
        try:
            with open(path, "r", encoding=ENCODING) as f:
                protein = self.parse_lines(f)
        except OSError as e:
            message = f"Could not read protein from {path}: {e}"
            logger.error(message)
            return Result.failure(ErrorKind.IO_FAILURE, message)
        except ValueError as e:
            message = f"Malformed protein file {path}: {e}"
            logger.error(message)
            return Result.failure(ErrorKind.PARSE_FAILURE, message)

        logger.info("Loaded protein %s (%d atoms) from %s", protein.name, len(protein), path)
        return Result.success(protein)

    @staticmethod
    def find_unrepresentable_name(protein: Protein) -> Optional[str]:
        """
        Describe the first name that would not survive a reload, if any.

        Protein names may hold inner spaces but no line breaks or edge
        whitespace; atom names must be a single whitespace-free token.
        """
        name = protein.name
        if not name or name != name.strip() or name.splitlines() != [name]:
            return f"protein name {name!r} must be non-empty, on one line, without edge whitespace"
        for index, atom in enumerate(protein.atoms):
            if atom.name.split() != [atom.name]:
                return f"atom {index} name {atom.name!r} must be one non-empty token"
        return None

    @staticmethod
    def format_lines(protein: Protein) -> Iterable[str]:
        """Yield the text records for a protein."""
        yield f"{PROTEIN_RECORD} {protein.name}"
        yield f"{ATOM_COUNT_RECORD} {len(protein)}"
        for atom in protein.atoms:
            # repr keeps the shortest text that round-trips exactly
            yield f"{ATOM_RECORD} {atom.name} {atom.x!r} {atom.y!r} {atom.z!r}"

    @staticmethod
    def parse_lines(lines: Iterable[str]) -> Protein:
        """
        Build a protein from text records.

        Raises:
            ValueError: If a record is malformed or no PROTEIN record exists
        """
        protein: Optional[Protein] = None
        declared_count: Optional[str] = None

        for line_num, line in enumerate(lines, start=1):
            parts = line.split()
            if not parts:
                continue
            record_type = parts[0]

            if record_type == PROTEIN_RECORD:
                name = line.strip()[len(PROTEIN_RECORD):].strip()
                if not name:
                    raise ValueError(f"line {line_num}: PROTEIN record has no name")
                if protein is not None:
                    logger.warning(
                        "line %d: new PROTEIN record replaces %s", line_num, protein.name
                    )
                protein = Protein(name)
                declared_count = None
            elif record_type == ATOM_COUNT_RECORD:
                declared_count = parts[1] if len(parts) > 1 else None
            elif record_type == ATOM_RECORD:
                if protein is None:
                    logger.debug("line %d: ATOM before PROTEIN ignored", line_num)
                    continue
                if len(parts) < 5:
                    raise ValueError(f"line {line_num}: ATOM record needs 4 fields")
                try:
                    x, y, z = (float(value) for value in parts[2:5])
                except ValueError:
                    raise ValueError(f"line {line_num}: bad coordinate in {line.strip()!r}")
                protein.add_atom(parts[1], x, y, z)
            else:
                logger.debug("line %d: unknown record %s ignored", line_num, record_type)

        if protein is None:
            raise ValueError("no PROTEIN record found")

        if declared_count is not None and declared_count != str(len(protein)):
            logger.warning(
                "ATOM_COUNT %s does not match %d atoms read", declared_count, len(protein)
            )
        return protein


_default_repository = TextProteinRepository()


def save_to_file(protein: Protein, path: str) -> Result[str]:
    """Save a protein in the text format."""
    return _default_repository.save(protein, path)


def load_from_file(path: str) -> Result[Protein]:
    """Load a protein from the text format."""
    return _default_repository.load(path)
