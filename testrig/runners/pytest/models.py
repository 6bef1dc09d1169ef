"""Pydantic models for pytest-json-report output."""

from pydantic import BaseModel, Field


class CallInfo(BaseModel):
    """Call phase of a test."""

    longrepr: str | None = None


class ReportedTest(BaseModel):
    """A single collected test."""

    nodeid: str
    outcome: str
    call: CallInfo | None = None


class Summary(BaseModel):
    """Outcome counters."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0


class PytestReport(BaseModel):
    """Top-level pytest-json-report document."""

    duration: float = 0.0
    summary: Summary = Field(default_factory=Summary)
    tests: list[ReportedTest] = Field(default_factory=list)
