"""Parse PMD's ``-f csv`` report into flat result records.

PMD writes one row per violation with a fixed column order::

    "Problem","Package","File","Priority","Line","Description","Rule set","Rule"

Output captured from a stream is often cut mid-row, so a failed parse is
retried once with the last line dropped.
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass

from lintmap.languages.java.detectors.pmd_errors import PMDResultsError

logger = logging.getLogger(__name__)

PMD_COLUMNS: tuple[str, ...] = (
    "problem",
    "package",
    "file",
    "priority",
    "line",
    "description",
    "rule_set",
    "rule",
)

_HEADER_FIRST_CELL = "Problem"


@dataclass(frozen=True)
class PmdResult:
    problem: str
    package: str
    file: str
    priority: str
    line: str
    description: str
    rule_set: str
    rule: str


def _row_to_result(row: list[str]) -> PmdResult:
    # Ragged rows: pad short ones, ignore trailing extras.
    cells = list(row[: len(PMD_COLUMNS)])
    cells.extend([""] * (len(PMD_COLUMNS) - len(cells)))
    return PmdResult(*cells)


def _parse(csv_text: str) -> list[PmdResult]:
    results: list[PmdResult] = []
    reader = csv.reader(io.StringIO(csv_text), strict=True)
    for row in reader:
        if not row or all(not cell.strip() for cell in row):
            continue
        if row[0] == _HEADER_FIRST_CELL:
            continue
        results.append(_row_to_result(row))
    return results


def _drop_last_line(csv_text: str) -> str:
    lines = csv_text.rstrip("\r\n").split("\n")
    return "\n".join(lines[:-1])


def parse_pmd_csv(csv_text: str) -> list[PmdResult]:
    """Parse PMD CSV output into records, one per violation row.

    On failure the last line is presumed truncated: it is dropped and the
    parse retried once. A second failure raises PMDResultsError.
    """
    try:
        return _parse(csv_text)
    except csv.Error as exc:
        logger.debug("pmd csv: parse failed, retrying without last line: %s", exc)

    try:
        results = _parse(_drop_last_line(csv_text))
    except csv.Error as exc:
        logger.debug("pmd csv: parse failed after recovery: %s", exc)
        raise PMDResultsError() from exc

    logger.warning("Failed to read all PMD problems!")
    return results


__all__ = ["PMD_COLUMNS", "PmdResult", "parse_pmd_csv"]
