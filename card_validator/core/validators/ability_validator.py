"""
AbilityReferenceValidator - checks card ability references against master data.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from card_validator.core.models import Card, Finding, Severity, ValidatorConfig
from card_validator.core.models.validator_config import ABILITY_REFERENCES

from .base_validator import BaseValidator, hashable_key


class AbilityReferenceValidator(BaseValidator):
    """
    Flags cards whose ability_id is not present in the ability list.

    Parameters:
    - abilities: Ability records, each exposing an "id" as attribute or key

    Identifiers are compared as supplied: 7 and "7" are different abilities.

    Cards without an ability reference are not checked.
    """

    def __init__(self, config: ValidatorConfig, abilities: Iterable[Any]):
        super().__init__(config)
        self.ability_ids = {hashable_key(self._ability_id(ability)) for ability in abilities}

    @staticmethod
    def _ability_id(ability: Any) -> Any:
        if isinstance(ability, Mapping):
            return ability.get("id")
        return getattr(ability, "id", None)

    def validate(self, cards: Sequence[Card]) -> list[Finding]:
        results: list[Finding] = []

        for card in cards:
            if card.ability_id and hashable_key(card.ability_id) not in self.ability_ids:
                results.append(self.finding(
                    card,
                    Severity.ERROR,
                    f"Unknown ability ID: {card.ability_id}",
                    "Check ability ID exists in ability master data",
                ))

        return results

    @property
    def rule_type(self) -> str:
        return ABILITY_REFERENCES
