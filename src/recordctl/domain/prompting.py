"""The prompt loop — retry-until-valid interactive input.

:func:`prompt` shows a prompt, reads one line, validates it, and either
returns the accepted value or reports the rejection and asks again.  There
is no iteration cap: the loop ends only on accepted input or when the input
source runs dry (:class:`InputExhausted`).

Input and output are injected as :class:`InputSource` / :class:`OutputSink`
so tests can drive the loop with a scripted ``io.StringIO``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import IO, Protocol, TypeVar

from recordctl.domain.validators import Accepted, Verdict

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InputExhausted(EOFError):
    """The input source has no more lines.

    Attributes:
        prompt: The prompt that was waiting for an answer, when known.
    """

    def __init__(self, message: str = "Input exhausted", *, prompt: str | None = None) -> None:
        super().__init__(message)
        self.prompt = prompt


class InputSource(Protocol):
    def read_line(self) -> str:
        """Block until one line is available; raise InputExhausted at EOF."""
        ...


class OutputSink(Protocol):
    def write_prompt(self, text: str) -> None: ...

    def write_line(self, text: str) -> None: ...


class StreamInput:
    """InputSource over any text stream (``sys.stdin``, ``io.StringIO``, a file)."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def read_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise InputExhausted
        return line.rstrip("\r\n")


def prompt(
    prompt_text: str,
    validator: Callable[[str], Verdict[T]],
    source: InputSource,
    sink: OutputSink,
) -> T:
    """Ask *prompt_text* until *validator* accepts a line, then return its value.

    Writes exactly one rejection message to *sink* per rejected line.

    Raises:
        InputExhausted: *source* ran out of lines before a valid answer.
    """
    attempts = 0
    while True:
        sink.write_prompt(f"{prompt_text}: ")
        try:
            raw = source.read_line()
        except InputExhausted as exc:
            if exc.prompt is None:
                exc.prompt = prompt_text
            raise
        attempts += 1
        verdict = validator(raw)
        if isinstance(verdict, Accepted):
            logger.debug("Accepted %r after %d attempt(s)", prompt_text, attempts)
            return verdict.value
        sink.write_line(verdict.reason)
