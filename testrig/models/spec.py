"""Models for component specifications loaded from *.spec.yaml files."""

from collections.abc import Sequence

from pydantic import Field, field_validator

from testrig.models.base import Model


class Subcomponent(Model):
    """A file-level unit inside a component."""

    name: str = Field(..., description="Subcomponent name")
    file: str = Field(..., description="Source file of the subcomponent")
    type: str = Field(default="module", description="Kind of subcomponent")


class ComponentSpec(Model):
    """Declared unit of testable work.

    Dependencies may name components that are not part of the loaded set;
    those references are ignored when ordering work.
    """

    component: str = Field(..., min_length=1, description="Unique component name")
    dependencies: Sequence[str] = Field(
        default_factory=list, description="Components this one depends on"
    )
    files: Sequence[str] = Field(
        default_factory=list, description="Test files associated with the component"
    )
    description: str | None = Field(default=None, description="Free-form summary")
    subcomponents: Sequence[Subcomponent] = Field(default_factory=list)

    @field_validator("dependencies", "files", "subcomponents", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value
