"""Outcome models for restore and save operations."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RestoreOutcome(BaseModel):
    """Terminal state of the restore fallback resolver.

    ``matched_key`` is the exact key string that hit, or ``""`` when every
    attempt missed.
    """

    hit: bool = False
    matched_key: str = ""
    attempts: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def miss_has_no_key(self) -> Self:
        if not self.hit and self.matched_key:
            msg = "matched_key must be empty when nothing hit"
            raise ValueError(msg)
        return self


class SaveReport(BaseModel):
    """Per-path results of a save operation.

    Missing paths and failed saves are collected rather than raised so a
    multi-path save can partially succeed.
    """

    saved: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return bool(self.saved) and not self.failed
