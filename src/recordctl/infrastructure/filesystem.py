"""Filesystem operations for record files and inspected text files.

Pure serialization lives in :mod:`recordctl.domain.schema` (correct
dependency direction: infrastructure -> domain). This module handles actual
file I/O and path resolution.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from recordctl.domain.schema import FieldValue, serialize_records

CSV_SUFFIX = ".csv"


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def normalize_csv_name(name: str) -> str:
    """Append ``.csv`` unless *name* already ends with it (any case).

    Examples:
        >>> normalize_csv_name("mydata")
        'mydata.csv'
        >>> normalize_csv_name("MyData.CSV")
        'MyData.CSV'
    """
    name = name.strip()
    if name.lower().endswith(CSV_SUFFIX):
        return name
    return f"{name}{CSV_SUFFIX}"


def resolve_output_path(file_name: str, output_dir: Path) -> Path:
    """Resolve the target path for a record file inside *output_dir*."""
    return output_dir / normalize_csv_name(file_name)


def resolve_start_dir(base: Path, start_dir: str) -> Path | None:
    """Return ``base / start_dir`` if it is an existing directory, else None."""
    candidate = base / start_dir
    if candidate.is_dir():
        return candidate
    return None


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WriteOutcome:
    bytes_written: int
    created_dir: Path | None = None


def write_records(path: Path, records: Iterable[Sequence[FieldValue]]) -> WriteOutcome:
    """Write *records* as CSV lines, truncating any existing file.

    Creates the parent directory (and its missing ancestors) when needed;
    ``created_dir`` is set only in that case.
    """
    created = None if path.parent.is_dir() else path.parent
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = serialize_records(records).encode("utf-8")
    path.write_bytes(payload)
    return WriteOutcome(bytes_written=len(payload), created_dir=created)


def iter_lines(path: Path) -> Iterator[str]:
    """Yield the lines of a UTF-8 text file lazily, newlines stripped.

    The file stays open only while the iterator is being consumed.
    """
    with path.open(encoding="utf-8") as fh:
        for line in fh:
            yield line.rstrip("\r\n")
