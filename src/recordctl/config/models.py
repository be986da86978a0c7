"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, recordctl.toml only contains
overrides. No config file is needed at all for the stock behavior.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, model_validator

# --- recordctl.toml sections ---


class CollectConfig(BaseModel):
    """[collect] section."""

    model_config = {"frozen": True}

    output_dir: str = "src"
    birth_year_min: int = 1900
    birth_year_max: int = 2025

    @model_validator(mode="after")
    def _check_years(self) -> Self:
        if self.birth_year_min > self.birth_year_max:
            msg = (
                f"birth_year_min ({self.birth_year_min}) "
                f"exceeds birth_year_max ({self.birth_year_max})"
            )
            raise ValueError(msg)
        return self


class InspectConfig(BaseModel):
    """[inspect] section."""

    model_config = {"frozen": True}

    start_dir: str = "src"
    echo: bool = True
