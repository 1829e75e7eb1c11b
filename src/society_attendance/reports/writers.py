from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence

import pandas as pd

logger = logging.getLogger(__name__)


def write_tsv(path: Path, rows: Iterable[Sequence[str]]) -> Path:
    """Header-less, tab separated, one row per line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, delimiter="\t", lineterminator="\n")
        writer.writerows(rows)
    logger.info("Wrote %s", path)
    return path


def write_excel(
    path: Path,
    sheets: Mapping[str, list[dict]],
    *,
    columns: Optional[Mapping[str, Sequence[str]]] = None,
) -> Path:
    """One sheet per entry; `columns` keeps the header row on empty sheets."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    columns = columns or {}
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet_name, rows in sheets.items():
            frame = pd.DataFrame(rows, columns=list(columns[sheet_name]) if sheet_name in columns else None)
            frame.to_excel(writer, index=False, sheet_name=sheet_name)
    logger.info("Wrote %s", path)
    return path


def write_json(path: Path, document) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(document, f, ensure_ascii=False, indent=2)
    logger.info("Wrote %s", path)
    return path
