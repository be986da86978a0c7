"""CollectService — interactive record collection and CSV persistence.

Runs a :class:`~recordctl.domain.session.RecordSession` over the person
schema, then writes the collected records to a user-named ``.csv`` file.

INVARIANT: A failed save never alters the records collected in memory.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from recordctl.domain.prompting import InputExhausted, prompt
from recordctl.domain.schema import FieldValue, RecordSchema, person_schema
from recordctl.domain.session import RecordSession
from recordctl.domain.validators import not_blank
from recordctl.infrastructure.filesystem import resolve_output_path, write_records
from recordctl.services.base import BaseService
from recordctl.services.result import ServiceResult

if TYPE_CHECKING:
    from recordctl.domain.prompting import InputSource, OutputSink

logger = logging.getLogger(__name__)

FILE_NAME_PROMPT = "Enter the name for the CSV file (e.g., mydata)"


class CollectService(BaseService):
    """Collect validated records and save them as CSV."""

    @property
    def schema(self) -> RecordSchema:
        return person_schema(self._settings.birth_year_range)

    def collect(self, source: InputSource, sink: OutputSink) -> ServiceResult:
        """Run one session until the user declines to continue."""
        op = "collect_records"
        schema = self.schema
        session = RecordSession(schema, source, sink)
        try:
            records = session.run()
        except InputExhausted as exc:
            return _exhausted(op, exc, discarded=len(session.records))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(records),
                "fields": schema.names,
                "records": [list(r) for r in records],
            },
        )

    def save(
        self,
        records: Sequence[Sequence[FieldValue]],
        file_name: str,
        *,
        output_dir: Path | None = None,
    ) -> ServiceResult:
        """Write *records* to ``<output_dir>/<file_name>.csv``.

        The file is truncated if it exists.  Missing parent directories are
        created.
        """
        op = "save_records"
        if not records:
            return ServiceResult.failure(
                op, "NO_RECORDS", "No records were entered. Nothing was saved."
            )
        if not file_name.strip():
            return ServiceResult.failure(op, "INVALID_NAME", "File name must not be blank.")

        path = resolve_output_path(file_name, output_dir or self._settings.output_dir)
        warnings = [f"Overwrote existing file: {path.name}"] if path.is_file() else []
        try:
            outcome = write_records(path, records)
        except PermissionError as exc:
            logger.warning("Permission denied writing %s", path)
            return ServiceResult.failure(
                op,
                "PERMISSION_DENIED",
                f"Permission denied to create directory or write file: {exc}",
                path=str(path),
            )
        except OSError as exc:
            logger.warning("Write failed for %s: %s", path, exc)
            return ServiceResult.failure(
                op,
                "WRITE_FAILED",
                f"An I/O error occurred while writing the file: {exc}",
                path=str(path),
            )

        logger.debug("Saved %d record(s) to %s", len(records), path)
        data: dict[str, Any] = {
            "path": str(path.absolute()),
            "file_name": path.name,
            "count": len(records),
            "bytes": outcome.bytes_written,
        }
        if outcome.created_dir is not None:
            logger.info("Created directory %s", outcome.created_dir)
            data["created_dir"] = str(outcome.created_dir.absolute())
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=warnings,
        )

    def collect_and_save(
        self,
        source: InputSource,
        sink: OutputSink,
        *,
        file_name: str | None = None,
        output_dir: Path | None = None,
    ) -> ServiceResult:
        """Full collect flow: session, file-name prompt (unless given), save."""
        sink.write_line("--- Data Collection for CSV File ---")
        collected = self.collect(source, sink)
        if not collected.ok:
            return collected

        records = collected.data["records"]
        sink.write_line("")
        sink.write_line("--- Data Collection Complete ---")

        if file_name is None:
            try:
                file_name = prompt(FILE_NAME_PROMPT, not_blank, source, sink)
            except InputExhausted as exc:
                return _exhausted("save_records", exc, discarded=len(records))

        return self.save(records, file_name, output_dir=output_dir)


def _exhausted(op: str, exc: InputExhausted, *, discarded: int) -> ServiceResult:
    logger.warning("Input ended while waiting for %r", exc.prompt)
    return ServiceResult.failure(
        op,
        "INPUT_EXHAUSTED",
        f"Input ended while waiting for: {exc.prompt or 'input'}",
        prompt=exc.prompt,
        discarded_records=discarded,
    )
