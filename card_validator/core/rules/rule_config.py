"""
Rule configuration management.

Resolves caller overrides against the built-in defaults, loads overrides
from YAML/JSON files and provides a fluent builder for programmatic use.
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from card_validator.core.models import StatRange, ValidatorConfig
from card_validator.core.models.validator_config import default_rules, default_stat_ranges
from card_validator.observability import get_logger

logger = get_logger(__name__)

# Each config section may be spelled camelCase (as in card tooling) or snake_case
SECTION_KEYS = {
    "rules": ("rules",),
    "stat_ranges": ("statRanges", "stat_ranges"),
    "element_mappings": ("elementMappings", "element_mappings"),
    "strict_mode": ("strictMode", "strict_mode"),
    "report_format": ("reportFormat", "report_format"),
}


def _section(overrides: Mapping[str, Any], field: str) -> Any:
    for key in SECTION_KEYS[field]:
        if key in overrides:
            return overrides[key]
    return None


def merge_rules(defaults: dict[str, bool], overrides: Mapping[str, Any] | None) -> dict[str, bool]:
    """Overlay rule flags; rules not mentioned keep their default."""
    merged = dict(defaults)
    for rule_name, enabled in (overrides or {}).items():
        merged[rule_name] = bool(enabled)
    return merged


def merge_stat_ranges(
    defaults: dict[str, StatRange],
    overrides: Mapping[str, Any] | None,
) -> dict[str, StatRange]:
    """
    Overlay stat bounds per stat and per bound.

    Stats not mentioned keep their default bounds. A stat override giving only
    "min" or only "max" keeps the default for the other bound. New stats are
    appended after the defaults.
    """
    merged = dict(defaults)
    for stat, bounds in (overrides or {}).items():
        if isinstance(bounds, StatRange):
            update = bounds.model_dump(exclude_unset=True)
        else:
            update = {key: value for key, value in dict(bounds).items() if key in ("min", "max")}
        base = merged.get(stat, StatRange())
        merged[stat] = StatRange(**{**base.model_dump(), **update})
    return merged


def merge_element_mappings(overrides: Mapping[str, Any] | None) -> dict[str, list[str]]:
    """Element mappings have no defaults; keyword order is kept as given."""
    merged: dict[str, list[str]] = {}
    for element, keywords in (overrides or {}).items():
        if isinstance(keywords, str):
            keywords = [keywords]
        merged[element] = list(keywords)
    return merged


def resolve_config(overrides: Mapping[str, Any] | ValidatorConfig | None = None) -> ValidatorConfig:
    """
    Produce a complete configuration from partial caller overrides.

    Args:
        overrides: Partial configuration with any of rules, statRanges,
                   elementMappings, strictMode, reportFormat. A ValidatorConfig
                   is taken as already resolved.

    Returns:
        Fully resolved ValidatorConfig

    Note: the configuration itself is not validated; inverted bounds and
    unknown stat or rule names are accepted as given.
    """
    if isinstance(overrides, ValidatorConfig):
        return overrides

    overrides = overrides or {}
    fields: dict[str, Any] = {
        "rules": merge_rules(default_rules(), _section(overrides, "rules")),
        "stat_ranges": merge_stat_ranges(default_stat_ranges(), _section(overrides, "stat_ranges")),
        "element_mappings": merge_element_mappings(_section(overrides, "element_mappings")),
    }

    strict_mode = _section(overrides, "strict_mode")
    if strict_mode is not None:
        fields["strict_mode"] = bool(strict_mode)

    report_format = _section(overrides, "report_format")
    if report_format is not None:
        fields["report_format"] = report_format

    return ValidatorConfig(**fields)


class RuleConfigLoader:
    """
    Loads configuration overrides from YAML or JSON files.

    Expected YAML format:
    ```yaml
    rules:
      costBalance: false

    statRanges:
      cost: {min: 0, max: 12}
      speed: {min: 1, max: 5}

    elementMappings:
      fire: [dragon, flame, inferno]
      water: [tide, wave]

    strictMode: true
    reportFormat: json
    ```
    """

    SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML or JSON configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Validator configuration file not found: {config_path}")

        if self.config_path.suffix.lower() not in self.SUPPORTED_SUFFIXES:
            raise ValueError(
                f"Unsupported configuration format '{self.config_path.suffix}'. "
                f"Expected one of: {', '.join(self.SUPPORTED_SUFFIXES)}"
            )

    def load_overrides(self) -> dict[str, Any]:
        """
        Parse the configuration file.

        Returns:
            The raw overrides mapping (empty for an empty file)

        Raises:
            ValueError: If the document is malformed or not a mapping
        """
        with open(self.config_path) as f:
            try:
                if self.config_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                raise ValueError(f"Invalid configuration file {self.config_path}: {e}")

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ValueError("Configuration file must contain a mapping at the top level")

        logger.debug(f"Loaded configuration overrides from {self.config_path}", extra={"sections": list(data)})
        return data

    def load_config(self) -> ValidatorConfig:
        """Load the file and resolve it against the defaults."""
        return resolve_config(self.load_overrides())


class RuleConfigBuilder:
    """
    Programmatically build configuration overrides (for testing or embedding).
    """

    def __init__(self):
        """Initialize empty overrides."""
        self.overrides: dict[str, Any] = {}

    def enable(self, *rule_names: str) -> "RuleConfigBuilder":
        """Switch the named rules on."""
        rules = self.overrides.setdefault("rules", {})
        for rule_name in rule_names:
            rules[rule_name] = True
        return self

    def disable(self, *rule_names: str) -> "RuleConfigBuilder":
        """Switch the named rules off."""
        rules = self.overrides.setdefault("rules", {})
        for rule_name in rule_names:
            rules[rule_name] = False
        return self

    def with_stat_range(
        self,
        stat: str,
        min_value: float | None = None,
        max_value: float | None = None
    ) -> "RuleConfigBuilder":
        """Set one or both bounds for a stat."""
        bounds = {}
        if min_value is not None:
            bounds["min"] = min_value
        if max_value is not None:
            bounds["max"] = max_value

        self.overrides.setdefault("statRanges", {})[stat] = bounds
        return self

    def with_element_keywords(self, element: str, keywords: Iterable[str]) -> "RuleConfigBuilder":
        """Map name keywords to an element category."""
        self.overrides.setdefault("elementMappings", {})[element] = list(keywords)
        return self

    def strict(self, enabled: bool = True) -> "RuleConfigBuilder":
        self.overrides["strictMode"] = enabled
        return self

    def report_format(self, report_format: str) -> "RuleConfigBuilder":
        self.overrides["reportFormat"] = report_format
        return self

    def build(self) -> dict[str, Any]:
        """Build and return the overrides mapping."""
        return self.overrides

    def resolve(self) -> ValidatorConfig:
        """Build the overrides and resolve them against the defaults."""
        return resolve_config(self.overrides)
