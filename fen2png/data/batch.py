"""
Batch rendering from a CSV file of (FEN, output path) pairs.

Each record is rendered independently: a record that fails to decode or
write is logged and reported, and the batch moves on to the next one.
"""

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from tqdm import tqdm

from fen2png.exceptions import FENError
from fen2png.pipeline import DiagramRenderer

logger = logging.getLogger(__name__)


class BatchFileError(ValueError):
    """The batch file is not a two-column CSV."""


@dataclass(frozen=True)
class BatchRecord:
    """One line of a batch file."""

    fen: str
    output: str
    line: int = 0


@dataclass
class BatchReport:
    """Outcome of a batch run."""

    succeeded: List[BatchRecord] = field(default_factory=list)
    failed: List[Tuple[BatchRecord, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed


def read_batch_file(path: Path) -> List[BatchRecord]:
    """
    Read a two-column CSV batch file.

    Args:
        path: CSV file with lines of the form <fen>,<output-file>

    Returns:
        Records in file order (blank lines skipped)

    Raises:
        FileNotFoundError: If the file doesn't exist
        BatchFileError: If a line does not have exactly two columns
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Batch file not found: {path}")

    records: List[BatchRecord] = []
    with path.open(newline="") as f:
        reader = csv.reader(f)
        for row in reader:
            if not row:
                continue
            if len(row) != 2:
                raise BatchFileError(
                    f"{path}:{reader.line_num}: expected 2 columns, got {len(row)}"
                )
            records.append(BatchRecord(fen=row[0], output=row[1], line=reader.line_num))

    logger.info(f"Read {len(records)} records from {path}")
    return records


class BatchRenderer:
    """Render a sequence of batch records with a shared DiagramRenderer."""

    def __init__(self, renderer: DiagramRenderer, progress: bool = True):
        self.renderer = renderer
        self.progress = progress

    def run(self, records: Iterable[BatchRecord]) -> BatchReport:
        """
        Render every record, isolating failures.

        Returns:
            BatchReport listing successes and (record, error message) failures
        """
        report = BatchReport()
        records = list(records)

        for record in tqdm(records, desc="Rendering diagrams", disable=not self.progress):
            try:
                self.renderer.render_to(record.fen, record.output)
            except (FENError, OSError) as e:
                logger.error(f"Line {record.line}: {record.fen!r}: {e}")
                report.failed.append((record, str(e)))
                continue
            report.succeeded.append(record)

        logger.info(f"Batch complete: {len(report.succeeded)}/{report.total} diagrams rendered")
        return report
