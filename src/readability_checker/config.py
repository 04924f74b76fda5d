from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

import yaml


@dataclass(slots=True)
class IssueThresholds:
    """Limits above which each readability issue is reported."""

    max_average_sentence_length: float = 20.0
    max_words_per_paragraph: float = 100.0
    max_passive_voice_matches: int = 1
    max_complex_words: int = 2
    max_jargon_matches: int = 0


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for readability analysis."""

    min_characters: int = 1
    thresholds: IssueThresholds = field(default_factory=IssueThresholds)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


# Config keys that hold a nested section, mapped to the dataclass they build.
SECTIONS: dict[str, type[IssueThresholds]] = {"thresholds": IssueThresholds}


def _known_fields(cls: type, data: Mapping[str, Any]) -> dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


def _section(name: str, value: Any) -> IssueThresholds:
    section_cls = SECTIONS[name]
    if isinstance(value, section_cls):
        return value
    if not isinstance(value, Mapping):
        raise ValueError(f"Configuration section '{name}' must be a mapping.")
    return section_cls(**_known_fields(section_cls, value))


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return ReadabilityConfig()
    kwargs = _known_fields(ReadabilityConfig, data)
    for name in SECTIONS.keys() & kwargs.keys():
        kwargs[name] = _section(name, kwargs[name])
    return ReadabilityConfig(**kwargs)


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file; an empty file yields the defaults."""
    with Path(path).open(encoding="utf-8") as handle:
        parsed = yaml.safe_load(handle)
    if parsed is None:
        return ReadabilityConfig()
    if not isinstance(parsed, Mapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Return defaults when no path is given, otherwise the parsed YAML file."""
    return ReadabilityConfig() if path is None else config_from_yaml(path)
