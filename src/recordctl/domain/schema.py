"""Field specifications, record schemas, and CSV line serialization.

A :class:`RecordSchema` is an ordered tuple of :class:`FieldSpec`.  The
order is fixed at construction and determines both the prompting order and
the column order of every serialized record.

INVARIANT: A record has exactly one value per field, in schema order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Self

from pydantic import BaseModel, model_validator

from recordctl.domain.validators import (
    ValidatorKind,
    Verdict,
    matches_pattern,
    not_blank,
    ranged_int,
    yes_no,
)

FieldValue = str | int
Record = tuple[FieldValue, ...]

ID_NUMBER_PATTERN = r"^\d{6}$"
EMAIL_PATTERN = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,6}$"
DEFAULT_BIRTH_YEAR_RANGE = (1900, 2025)


class FieldSpec(BaseModel):
    """Static description of one datum to collect."""

    model_config = {"frozen": True}

    name: str
    prompt: str
    kind: ValidatorKind = ValidatorKind.NOT_BLANK
    pattern: str | None = None
    low: int | None = None
    high: int | None = None

    @model_validator(mode="after")
    def _check_parameters(self) -> Self:
        if self.kind is ValidatorKind.PATTERN and not self.pattern:
            msg = f"Field {self.name!r}: pattern validator requires a pattern"
            raise ValueError(msg)
        if self.kind is ValidatorKind.RANGED_INT:
            if self.low is None or self.high is None:
                msg = f"Field {self.name!r}: ranged_int validator requires low and high"
                raise ValueError(msg)
            if self.low > self.high:
                msg = f"Field {self.name!r}: low ({self.low}) exceeds high ({self.high})"
                raise ValueError(msg)
        return self

    @property
    def display_prompt(self) -> str:
        """Prompt text as shown to the user (ranged fields show their bounds)."""
        if self.kind is ValidatorKind.RANGED_INT:
            return f"{self.prompt} [{self.low} - {self.high}]"
        if self.kind is ValidatorKind.YES_NO:
            return f"{self.prompt} (Y/N)"
        return self.prompt

    def validate_raw(self, raw: str) -> Verdict[Any]:
        """Run this field's validator on one line of raw input."""
        match self.kind:
            case ValidatorKind.NOT_BLANK:
                return not_blank(raw)
            case ValidatorKind.PATTERN:
                assert self.pattern is not None
                return matches_pattern(raw, self.pattern)
            case ValidatorKind.RANGED_INT:
                assert self.low is not None and self.high is not None
                return ranged_int(raw, self.low, self.high)
            case ValidatorKind.YES_NO:
                return yes_no(raw)
        msg = f"Unknown validator kind: {self.kind!r}"
        raise ValueError(msg)


class RecordSchema(BaseModel):
    """Ordered, non-empty sequence of uniquely named field specifications."""

    model_config = {"frozen": True}

    fields: tuple[FieldSpec, ...]

    @model_validator(mode="after")
    def _check_fields(self) -> Self:
        if not self.fields:
            msg = "A record schema needs at least one field"
            raise ValueError(msg)
        names = [f.name for f in self.fields]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            msg = f"Duplicate field names: {', '.join(dupes)}"
            raise ValueError(msg)
        return self

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    def __len__(self) -> int:
        return len(self.fields)


def person_schema(
    birth_year_range: tuple[int, int] = DEFAULT_BIRTH_YEAR_RANGE,
) -> RecordSchema:
    """The five-field person schema: first/last name, ID, email, birth year."""
    low, high = birth_year_range
    return RecordSchema(
        fields=(
            FieldSpec(name="firstName", prompt="Enter First Name"),
            FieldSpec(name="lastName", prompt="Enter Last Name"),
            FieldSpec(
                name="idNumber",
                prompt="Enter ID Number (6 digits, e.g., 000001)",
                kind=ValidatorKind.PATTERN,
                pattern=ID_NUMBER_PATTERN,
            ),
            FieldSpec(
                name="email",
                prompt="Enter Email (e.g., user@example.com)",
                kind=ValidatorKind.PATTERN,
                pattern=EMAIL_PATTERN,
            ),
            FieldSpec(
                name="yearOfBirth",
                prompt="Enter Year of Birth (e.g., 1978)",
                kind=ValidatorKind.RANGED_INT,
                low=low,
                high=high,
            ),
        )
    )


def to_csv_line(record: Sequence[FieldValue]) -> str:
    """Comma-join *record* without quoting or escaping.

    Embedded commas are not escaped, so a value containing a comma will
    split into extra columns when read back.
    """
    return ",".join(str(value) for value in record)


def serialize_records(records: Iterable[Sequence[FieldValue]]) -> str:
    """One CSV line per record, each followed by ``\\n``."""
    return "".join(f"{to_csv_line(record)}\n" for record in records)
