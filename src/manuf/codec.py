# noqa: D401
"""CSV encoding and decoding of OUI records.

Persisted layout::

    Registry,Assignment,Organization Name,Organization Address
    MA-L,001122,Example Corp,123 Main St

The same layout is served by every IEEE listing and by the consolidated
mirror, so one decoder handles both network and disk input.
"""

from __future__ import annotations

import contextlib
import csv
import io
from pathlib import Path
from typing import Iterable, TextIO, Union

from .errors import ParseError, StorageError
from .logging import get_logger
from .records import Record, Records, Registry

logger = get_logger(__name__)

HEADER = ["Registry", "Assignment", "Organization Name", "Organization Address"]
HEADER_MARKER = HEADER[0]

PathLike = Union[str, Path]


def encode(records: Iterable[Record]) -> bytes:
    """Serialize records, header first, in the given order."""

    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)
    for record in records:
        writer.writerow(record.csv_row())
    return buffer.getvalue().encode("utf-8")


def read_records(stream: TextIO) -> Records:
    """Parse records from a text stream.

    The first row is skipped when its first field is ``Registry``. Every
    other row, including later ones that happen to look like a header, is
    treated as data.

    Raises:
        ParseError: On malformed CSV, a wrong column count, an unknown
            registry or a failing read
    """

    records: Records = []
    reader = csv.reader(stream, strict=True)
    first = True
    try:
        for row in reader:
            if not row:
                continue
            if first:
                first = False
                if row[0] == HEADER_MARKER:
                    continue
            if len(row) != len(HEADER):
                raise ParseError(
                    f"expected {len(HEADER)} fields, got {len(row)}",
                    line=reader.line_num,
                )
            registry = Registry.parse(row[0])
            if registry is None:
                raise ParseError(f"unknown registry {row[0]!r}", line=reader.line_num)
            records.append(
                Record(
                    registry=registry,
                    assignment=row[1],
                    organization_name=row[2],
                    organization_address=row[3].strip(),
                )
            )
    except (csv.Error, OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"failed to read CSV records: {exc}", line=reader.line_num) from exc
    return records


def decode(data: bytes) -> Records:
    """Parse records from raw CSV bytes (UTF-8, optional BOM)."""

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"CSV data is not valid UTF-8: {exc}") from exc
    return read_records(io.StringIO(text, newline=""))


def write_file(records: Iterable[Record], path: PathLike) -> Path:
    """Persist records to ``path``, replacing any previous content.

    The payload goes to a sibling temp file first and is moved into place
    only once fully written, so a failed write leaves the old file intact.

    Raises:
        StorageError: If the directory or file cannot be created or written
    """

    path = Path(path)
    payload = encode(records)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_bytes(payload)
        tmp_path.replace(path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise StorageError(f"failed to write records: {exc}", path=str(path)) from exc
    logger.debug("Records written", path=str(path), size_bytes=len(payload))
    return path


def read_file(path: PathLike) -> Records:
    """Load records previously stored with :func:`write_file`.

    Raises:
        StorageError: If the file cannot be opened
        ParseError: If its content is malformed
    """

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as fh:
            return read_records(fh)
    except OSError as exc:
        raise StorageError(f"failed to open file for reading: {exc}", path=str(path)) from exc


__all__ = [
    "HEADER",
    "decode",
    "encode",
    "read_file",
    "read_records",
    "write_file",
]
