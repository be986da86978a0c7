"""Line, word, and character tallies for a stream of text lines."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class TextStats:
    lines: int = 0
    words: int = 0
    characters: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"lines": self.lines, "words": self.words, "characters": self.characters}


def count_words(line: str) -> int:
    """Whitespace-delimited tokens; runs of whitespace never yield empty words."""
    return len(line.split())


def tally(
    lines: Iterable[str],
    *,
    echo: Callable[[str], None] | None = None,
) -> TextStats:
    """Consume *lines* once, counting as they stream.

    Trailing newline characters are stripped before counting, so
    ``characters`` is the sum of line lengths without terminators.
    Each stripped line is passed to *echo* before it is counted.
    """
    n_lines = n_words = n_chars = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if echo is not None:
            echo(line)
        n_lines += 1
        n_words += count_words(line)
        n_chars += len(line)
    return TextStats(lines=n_lines, words=n_words, characters=n_chars)
