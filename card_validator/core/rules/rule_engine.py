"""
Rule engine for orchestrating card validation rules.

The rule engine resolves its configuration once, runs the enabled built-in
rules and then every registered custom rule, and returns one ordered list
of findings.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from card_validator.core.models import Card, Finding, ValidatorConfig
from card_validator.core.models.validator_config import (
    COST_BALANCE,
    DUPLICATE_CHECK,
    ELEMENT_CONSISTENCY,
    STAT_RANGES,
)
from card_validator.core.validators import (
    AbilityReferenceValidator,
    BaseValidator,
    CostBalanceValidator,
    CustomValidator,
    DuplicateValidator,
    ElementConsistencyValidator,
    StatRangeValidator,
)
from card_validator.core.validators.custom_validator import Predicate
from card_validator.observability import get_logger, log_operation

from .rule_config import resolve_config

logger = get_logger(__name__)


class RuleEngine:
    """
    Orchestrates validation rules over a card collection.

    Built-in rules run in a fixed order, each over the whole collection,
    followed by custom rules evaluated card by card in registration order.
    The engine keeps no state between runs apart from the custom rule list.
    """

    # Run order of the automatic pass; ability references need extra input
    VALIDATOR_REGISTRY: dict[str, type[BaseValidator]] = {
        DUPLICATE_CHECK: DuplicateValidator,
        STAT_RANGES: StatRangeValidator,
        ELEMENT_CONSISTENCY: ElementConsistencyValidator,
        COST_BALANCE: CostBalanceValidator,
    }

    def __init__(self, config: Mapping[str, Any] | ValidatorConfig | None = None):
        """
        Initialize the rule engine.

        Args:
            config: Partial overrides merged over the defaults, containing any of:
                    - rules: Dict[str, bool]
                    - statRanges: Dict[str, {min, max}]
                    - elementMappings: Dict[str, List[str]]
                    - strictMode: bool
                    - reportFormat: str (console, json, csv)
        """
        self.config = resolve_config(config)
        self.validators: list[BaseValidator] = []
        self.custom_rules: list[CustomValidator] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Instantiate the enabled built-in rules in run order."""
        for rule_name, validator_class in self.VALIDATOR_REGISTRY.items():
            if not self.config.is_enabled(rule_name):
                logger.debug(f"Rule disabled: {rule_name}")
                continue
            self.validators.append(validator_class(self.config))

    @staticmethod
    def _as_cards(cards: Iterable[Card | Mapping[str, Any]]) -> list[Card]:
        return [card if isinstance(card, Card) else Card.model_validate(card) for card in cards]

    def add_rule(self, name: str, predicate: Predicate) -> None:
        """
        Register a custom rule evaluated on every card after the built-in rules.

        Rules are kept in registration order; names are not deduplicated and
        there is no way to remove a rule.

        Args:
            name: Rule name (for logging and summaries)
            predicate: Callable taking a Card and returning a Finding or None
        """
        self.custom_rules.append(CustomValidator(name, predicate))
        logger.debug(f"Registered custom rule: {name}", extra={"custom_rule_count": len(self.custom_rules)})

    def validate(self, cards: Iterable[Card | Mapping[str, Any]]) -> list[Finding]:
        """
        Run every enabled built-in rule and every custom rule.

        Args:
            cards: Card models or plain mappings in card-data shape

        Returns:
            Findings in rule order, then card order within each rule

        Raises:
            Exception: Whatever a custom rule predicate raises; the run is
                       aborted and no findings are returned
        """
        cards = self._as_cards(cards)
        results: list[Finding] = []

        with log_operation("Validating cards", logger=logger, card_count=len(cards)):
            for validator in self.validators:
                findings = validator.validate(cards)
                logger.debug(
                    f"Rule {validator.rule_type} produced {len(findings)} findings",
                    extra={"rule": validator.rule_type, "finding_count": len(findings)},
                )
                results.extend(findings)

            for card in cards:
                for rule in self.custom_rules:
                    try:
                        finding = rule.check(card)
                    except Exception:
                        logger.error(
                            f"Custom rule '{rule.name}' failed on card {card.display_id!r}",
                            extra={"rule": rule.name, "card_id": card.display_id},
                        )
                        raise
                    if finding is not None:
                        results.append(finding)

        return results

    def validate_abilities(
        self,
        cards: Iterable[Card | Mapping[str, Any]],
        abilities: Iterable[Any],
    ) -> list[Finding]:
        """
        Check card ability references against the ability master data.

        Not part of validate(); callers run it when they have the ability list.

        Args:
            cards: Card models or plain mappings
            abilities: Ability records exposing an "id" attribute or key

        Returns:
            One error finding per card with an unknown ability reference
        """
        validator = AbilityReferenceValidator(self.config, abilities)
        findings = validator.validate(self._as_cards(cards))
        logger.debug(
            f"Rule {validator.rule_type} produced {len(findings)} findings",
            extra={"rule": validator.rule_type, "finding_count": len(findings)},
        )
        return findings

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of the loaded rules.

        Returns:
            Dictionary with built-in rules, custom rules and checked stats
        """
        return {
            "builtin_rules": [validator.rule_type for validator in self.validators],
            "custom_rules": [rule.name for rule in self.custom_rules],
            "checked_stats": list(self.config.stat_ranges),
        }
