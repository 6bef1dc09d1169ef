"""Pydantic models for the vitest JSON reporter output."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Report(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AssertionResult(_Report):
    """A single test inside a test file."""

    status: str
    title: str = ""
    full_name: str | None = Field(default=None, alias="fullName")
    failure_messages: list[str] = Field(default_factory=list, alias="failureMessages")

    @field_validator("failure_messages", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class FileResult(_Report):
    """Results for one test file."""

    name: str = ""
    start_time: float | None = Field(default=None, alias="startTime")
    end_time: float | None = Field(default=None, alias="endTime")
    assertion_results: list[AssertionResult] = Field(
        default_factory=list, alias="assertionResults"
    )


class VitestReport(_Report):
    """Top-level vitest report."""

    num_total_tests: int = Field(default=0, alias="numTotalTests")
    num_passed_tests: int = Field(default=0, alias="numPassedTests")
    num_failed_tests: int = Field(default=0, alias="numFailedTests")
    num_pending_tests: int = Field(default=0, alias="numPendingTests")
    test_results: list[FileResult] = Field(default_factory=list, alias="testResults")
