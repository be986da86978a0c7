"""Record session — drives the prompt loop across a schema until the user stops.

State machine::

    COLLECTING_FIELD(0) -> ... -> COLLECTING_FIELD(n-1) -> ASKING_CONTINUE
    ASKING_CONTINUE --Y--> COLLECTING_FIELD(0)
    ASKING_CONTINUE --N--> DONE

INVARIANT: Fields are collected strictly in schema order. No field is skipped
and no accepted value is revisited.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from recordctl.domain.prompting import prompt
from recordctl.domain.schema import Record, to_csv_line
from recordctl.domain.validators import yes_no

if TYPE_CHECKING:
    from recordctl.domain.prompting import InputSource, OutputSink
    from recordctl.domain.schema import FieldValue, RecordSchema

logger = logging.getLogger(__name__)

CONTINUE_PROMPT = "Do you want to add another record? (Y/N)"


class SessionPhase(StrEnum):
    COLLECTING_FIELD = "collecting_field"
    ASKING_CONTINUE = "asking_continue"
    DONE = "done"


class RecordSession:
    """Collects records for one schema from one input source.

    The session exclusively owns its record list; callers get a tuple
    snapshot through :attr:`records`.
    """

    def __init__(
        self,
        schema: RecordSchema,
        source: InputSource,
        sink: OutputSink,
        *,
        continue_prompt: str = CONTINUE_PROMPT,
    ) -> None:
        self._schema = schema
        self._source = source
        self._sink = sink
        self._continue_prompt = continue_prompt
        self._records: list[Record] = []
        self.phase = SessionPhase.COLLECTING_FIELD
        self.field_index = 0

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def collect_record(self) -> Record:
        """Prompt for every field in schema order and return the finished record."""
        if self.phase is SessionPhase.DONE:
            msg = "Session is finished; start a new one to collect more records"
            raise RuntimeError(msg)
        values: list[FieldValue] = []
        for index, spec in enumerate(self._schema.fields):
            self.phase = SessionPhase.COLLECTING_FIELD
            self.field_index = index
            values.append(prompt(spec.display_prompt, spec.validate_raw, self._source, self._sink))
        return tuple(values)

    def ask_continue(self) -> bool:
        self.phase = SessionPhase.ASKING_CONTINUE
        return prompt(self._continue_prompt, yes_no, self._source, self._sink)

    def run(self) -> list[Record]:
        """Collect records until the user answers "N" to the continuation prompt.

        Returns the full ordered record list.  ``InputExhausted`` propagates;
        records completed before it remain available via :attr:`records`.
        """
        if self.phase is SessionPhase.DONE:
            msg = "Session already finished"
            raise RuntimeError(msg)
        while True:
            self._sink.write_line("")
            self._sink.write_line("--- Enter New Record ---")
            record = self.collect_record()
            self._records.append(record)
            logger.debug("Record %d added", len(self._records))
            self._sink.write_line(f"Record added: {to_csv_line(record)}")
            if not self.ask_continue():
                break
            self.field_index = 0
        self.phase = SessionPhase.DONE
        return list(self._records)
