"""
ValidatorConfig model holding the fully resolved engine configuration.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DUPLICATE_CHECK = "duplicateCheck"
STAT_RANGES = "statRanges"
ELEMENT_CONSISTENCY = "elementConsistency"
COST_BALANCE = "costBalance"
ABILITY_REFERENCES = "abilityReferences"

BUILTIN_RULES = (
    ELEMENT_CONSISTENCY,
    STAT_RANGES,
    ABILITY_REFERENCES,
    DUPLICATE_CHECK,
    COST_BALANCE,
)


class StatRange(BaseModel):
    """
    Inclusive bounds for one numeric stat. An unset bound is not checked.
    """

    model_config = ConfigDict(frozen=True)

    min: int | float | None = None
    max: int | float | None = None


def default_rules() -> dict[str, bool]:
    return {rule_name: True for rule_name in BUILTIN_RULES}


def default_stat_ranges() -> dict[str, StatRange]:
    return {
        "cost": StatRange(min=1, max=10),
        "atk": StatRange(min=0, max=10),
        "def": StatRange(min=0, max=10),
        "hp": StatRange(min=1, max=20),
    }


class ValidatorConfig(BaseModel):
    """
    Complete configuration for one RuleEngine.

    Built by resolve_config(), which merges caller overrides over the
    defaults field by field. Constructing this model directly replaces
    each given field wholesale.

    Attributes:
        rules: Rule name -> enabled flag
        stat_ranges: Stat name -> inclusive bounds, in check order
        element_mappings: Element category -> lowercase name keywords
        strict_mode: Treat any finding as a failing result (CLI exit status)
        report_format: Default output format for reports
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    rules: dict[str, bool] = Field(default_factory=default_rules)
    stat_ranges: dict[str, StatRange] = Field(default_factory=default_stat_ranges)
    element_mappings: dict[str, list[str]] = Field(default_factory=dict)
    strict_mode: bool = False
    report_format: Literal["console", "json", "csv"] = "console"

    def is_enabled(self, rule_name: str) -> bool:
        """Return True when the named rule is switched on."""
        return bool(self.rules.get(rule_name, False))
