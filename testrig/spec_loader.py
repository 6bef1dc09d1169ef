"""Load component specifications from a specs directory."""

import asyncio
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from testrig.errors import SpecLoadError
from testrig.models.spec import ComponentSpec

log = logging.getLogger(__name__)

SPEC_FILE_PATTERN = "*.spec.yaml"


async def load_component_specs(specs_dir: Path) -> list[ComponentSpec]:
    """Load every component spec found in ``specs_dir``.

    Files are read in name order so the returned list, and everything
    derived from it, is stable across runs.

    Args:
        specs_dir: Directory holding ``<component>.spec.yaml`` documents

    Returns:
        Parsed component specs, one per document

    Raises:
        SpecLoadError: If the directory is missing, or a document is
            unreadable, malformed or lacks a component name

    """
    if not specs_dir.is_dir():
        raise SpecLoadError(f"Specs directory not found: {specs_dir}")

    spec_files = sorted(specs_dir.glob(SPEC_FILE_PATTERN))
    log.debug("Found %d spec file(s) in %s", len(spec_files), specs_dir)

    specs: list[ComponentSpec] = []
    seen: set[str] = set()
    for spec_file in spec_files:
        spec = await load_component_spec(spec_file)
        if spec.component in seen:
            log.warning(
                "Duplicate component %s in %s, first definition wins",
                spec.component,
                spec_file,
            )
        seen.add(spec.component)
        specs.append(spec)

    return specs


async def load_component_spec(spec_file: Path) -> ComponentSpec:
    """Parse a single spec document."""
    try:
        content = await asyncio.to_thread(spec_file.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SpecLoadError(f"Cannot read spec file {spec_file}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SpecLoadError(f"Invalid YAML in {spec_file}: {e}") from e

    if not isinstance(data, dict):
        raise SpecLoadError(f"Spec file {spec_file} is not a mapping")

    if not data.get("component"):
        raise SpecLoadError(f"Spec file {spec_file} has no component name")

    try:
        return ComponentSpec.model_validate(data)
    except ValidationError as e:
        raise SpecLoadError(f"Invalid component spec schema in {spec_file}: {e}") from e
