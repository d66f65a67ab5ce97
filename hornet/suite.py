"""Loading suite definition files and assembling the benchmark model.

Usage:
    from hornet.suite import load_suite

    suite = load_suite("suites/default/suite.yaml")
    suite.codec.decode("et=dom")
    print(suite.codec.current())
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from hornet.benchmarks.registry import BenchmarkRegistry
from hornet.benchmarks.selection import SelectionCodec
from hornet.benchmarks.tags import TagIndex
from hornet.models.suite_models import SuiteDefinition
from hornet.utils.logger import Logger


class SuiteLoadError(Exception):
    """Raised when a suite file cannot be read or is invalid."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to load suite {path}: {reason}")


@dataclass
class Suite:
    """A loaded suite: definition, registry, tags and selection codec."""

    definition: SuiteDefinition
    registry: BenchmarkRegistry
    tags: TagIndex
    codec: SelectionCodec
    base_dir: Path

    @property
    def version(self) -> str:
        return self.definition.version

    @classmethod
    def build(cls, definition: SuiteDefinition, base_dir: str | Path = ".") -> "Suite":
        """Assemble registry, tags and codec from a validated definition.

        Raises:
            BenchmarkRegistryError: If the definition is inconsistent.
            MalformedBenchmarkPathError: If a benchmark id cannot be derived.
        """
        registry = BenchmarkRegistry(definition.benchmarks)
        tags = TagIndex(registry, definition.tags)
        return cls(
            definition=definition,
            registry=registry,
            tags=tags,
            codec=SelectionCodec(registry, tags),
            base_dir=Path(base_dir),
        )


def _read_data(path: Path) -> Any:
    content = path.read_text()
    if path.suffix in (".yaml", ".yml"):
        return yaml.safe_load(content)
    return json.loads(content)


def load_suite(path: str | Path) -> Suite:
    """Load a JSON or YAML suite file.

    Benchmark paths in the file are resolved against the file's directory.

    Raises:
        SuiteLoadError: If the file is missing, unparsable or invalid.
        BenchmarkRegistryError: If the definitions are inconsistent.
    """
    path = Path(path)
    if not path.is_file():
        raise SuiteLoadError(path, "file not found")

    try:
        data = _read_data(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise SuiteLoadError(path, str(e)) from e

    if not isinstance(data, dict):
        raise SuiteLoadError(path, "top level must be a mapping")

    try:
        definition = SuiteDefinition.model_validate(data)
    except ValidationError as e:
        raise SuiteLoadError(path, str(e)) from e

    suite = Suite.build(definition, base_dir=path.parent)
    Logger.component("suite").debug(
        f"Loaded suite '{suite.version}' with {len(suite.registry)} benchmarks "
        f"and {len(suite.tags)} tags from {path}"
    )
    return suite
