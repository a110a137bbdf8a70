# storefront/adapters/persistence/csv_file.py
"""
Append-only CSV file shared by the flat-file repositories.

Format
======
- First line is a header naming the fields (e.g. ``id,sku,qty``).
- One comma-separated record per line, ``\\n`` terminated, UTF-8.
- Fields holding a comma, a quote or a line break are quoted and embedded
  quotes are doubled (``csv.QUOTE_MINIMAL``).

Concurrency
===========
Every read and write goes through ``CsvFile.lock``, a single
``asyncio.Lock`` per file. Callers hold it for the whole operation, so an
append is never interleaved with another append and no reader sees a
half-written record.

Cancellation
============
A cancelled append leaves the file as it was: if the write was already
handed to the worker thread it is allowed to land and the file is then
truncated back to its previous length before ``CancelledError`` propagates.
"""

from __future__ import annotations

import asyncio
import csv
import io
import os
from pathlib import Path
from typing import List, Sequence

import aiofiles
import aiofiles.os
import structlog

from storefront.core.domain.exceptions import StorageUnavailableError

logger = structlog.get_logger()


def encode_record(fields: Sequence[object]) -> str:
    """Renders one record as a single CSV line, newline included."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(fields)
    return buf.getvalue()


def decode_records(content: str) -> List[List[str]]:
    """Parses file content into records, header included."""
    return list(csv.reader(io.StringIO(content)))


class CsvFile:
    """
    A header-prefixed, append-only CSV file guarded by one lock.
    """

    def __init__(self, path: str | os.PathLike, header: Sequence[str]):
        self.path = Path(path)
        self.header = list(header)
        self.lock = asyncio.Lock()
        self._ensure_exists()

    def _ensure_exists(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists() or self.path.stat().st_size == 0:
                self.path.write_text(encode_record(self.header), encoding="utf-8", newline="")
                logger.info("csv_store_created", path=str(self.path))
        except OSError as e:
            raise StorageUnavailableError(str(self.path), str(e)) from e

    # --- Operations (caller must hold `lock`) ---

    async def read_records(self) -> List[List[str]]:
        """
        Returns every data record, header excluded.
        Records with fewer fields than the header are skipped.
        """
        self._assert_locked()
        async with aiofiles.open(self.path, mode="r", encoding="utf-8", newline="") as f:
            content = await f.read()

        records = decode_records(content)[1:]
        return [r for r in records if len(r) >= len(self.header)]

    async def append_record(self, fields: Sequence[object]) -> None:
        """Appends one record in a single write."""
        self._assert_locked()
        line = encode_record(fields)
        offset = (await aiofiles.os.stat(self.path)).st_size

        append = asyncio.ensure_future(self._write(line))
        try:
            await asyncio.shield(append)
        except asyncio.CancelledError:
            # Write already in flight: let it land, then roll it back.
            await asyncio.wait({append})
            await asyncio.to_thread(os.truncate, self.path, offset)
            logger.info("csv_append_rolled_back", path=str(self.path))
            raise

    async def _write(self, line: str) -> None:
        async with aiofiles.open(self.path, mode="a", encoding="utf-8", newline="") as f:
            await f.write(line)

    def is_accessible(self) -> bool:
        return self.path.is_file() and os.access(self.path, os.R_OK | os.W_OK)

    def _assert_locked(self) -> None:
        if not self.lock.locked():
            raise RuntimeError(f"CSV store {self.path} accessed without holding its lock")
