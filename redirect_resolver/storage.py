"""CSV and summary storage utilities for batch resolution."""

from __future__ import annotations

import csv
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional

OUTPUT_COLUMNS = [
    "url",
    "final_url",
    "redirected",
    "hops",
    "error_kind",
    "error_message",
    "last_checked_utc_iso",
]

URL_COLUMNS = ("url", "link", "website")


@dataclass
class ResultRow:
    url: str
    final_url: Optional[str] = None
    hops: List[str] = field(default_factory=list)
    error_kind: Optional[str] = None
    error_message: Optional[str] = None
    last_checked_utc_iso: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def redirected(self) -> bool:
        return self.final_url is not None and self.final_url != self.url

    def to_dict(self) -> Dict[str, str]:
        return {
            "url": self.url,
            "final_url": self.final_url or "",
            "redirected": str(self.redirected).lower(),
            "hops": "|".join(self.hops),
            "error_kind": self.error_kind or "",
            "error_message": self.error_message or "",
            "last_checked_utc_iso": self.last_checked_utc_iso,
        }


def read_input_urls(path: Path) -> List[str]:
    """Read URLs from the first recognised URL column of a CSV file."""

    with path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        fieldnames = {name.strip().lower(): name for name in reader.fieldnames or []}
        column = next((fieldnames[name] for name in URL_COLUMNS if name in fieldnames), None)
        if column is None:
            raise ValueError(f"{path} has no url column (expected one of {', '.join(URL_COLUMNS)})")
        return [row[column].strip() for row in reader if (row.get(column) or "").strip()]


def write_output_csv(path: Path, rows: Iterable[ResultRow]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=OUTPUT_COLUMNS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row.to_dict())


def write_summary_json(path: Path, summary: Dict[str, int]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, indent=2, sort_keys=True))


__all__ = [
    "OUTPUT_COLUMNS",
    "ResultRow",
    "read_input_urls",
    "write_output_csv",
    "write_summary_json",
]
