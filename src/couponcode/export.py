"""
Tabular export of generated codes.

export_rows builds the header-plus-rows table a spreadsheet or CSV sink
expects. Header and yes/no labels are passed in by the caller, which owns
their wording and translation. write_csv is the sink used by the command
line.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .log import log

DEFAULT_EXPORT_NAME = "coupons"

Row = List[str]
CodeWithUsage = Tuple[str, bool]

_logger = logging.getLogger(__name__)


def export_rows(
    codes: Iterable[Union[str, CodeWithUsage]],
    code_label: str,
    used_label: Optional[str] = None,
    yes_label: str = "Yes",
    no_label: str = "No",
) -> List[Row]:
    """
    Build export rows for a batch of codes.

    Args:
        codes: Codes in output order. When used_label is given each item is
            a (code, used) pair; a bare code string counts as unused.
        code_label: Header for the code column
        used_label: Header for the used column; omit for a single column
        yes_label: Cell text for used codes
        no_label: Cell text for unused codes

    Returns:
        Header row followed by one row per code
    """
    if used_label is None:
        rows = [[code_label]]
        rows.extend([code] for code in codes)
        return rows

    rows = [[code_label, used_label]]
    for item in codes:
        code, used = (item, False) if isinstance(item, str) else item
        rows.append([code, yes_label if used else no_label])
    return rows


def export_path(filename: Optional[str], suffix: str = ".csv") -> Path:
    """Resolve the output file, falling back to "coupons" for blank names."""
    name = (filename or "").strip() or DEFAULT_EXPORT_NAME
    path = Path(name)
    if path.suffix.lower() != suffix:
        path = path.with_name(path.name + suffix)
    return path


def write_csv(rows: Sequence[Row], filename: Optional[str] = None) -> Path:
    """
    Write rows to a CSV file.

    Args:
        rows: Rows from export_rows, header first
        filename: Destination; blank names fall back to "coupons.csv"

    Returns:
        Path of the written file
    """
    path = export_path(filename)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    log(_logger, "info", "Exported codes", path=path, rows=max(len(rows) - 1, 0))
    return path
