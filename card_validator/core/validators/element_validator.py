"""
ElementConsistencyValidator - compares a card's element with themes in its name.
"""

from collections.abc import Sequence

from card_validator.core.models import Card, Finding, Severity
from card_validator.core.models.validator_config import ELEMENT_CONSISTENCY

from .base_validator import BaseValidator


class ElementConsistencyValidator(BaseValidator):
    """
    Warns when a card's name contains a keyword mapped to an element
    category other than the card's declared element.

    Matching is a case-insensitive substring test. Within one category only
    the first matching keyword is considered; a name that matches several
    categories is checked against each of them. Cards without a declared
    element are never flagged.
    """

    def validate(self, cards: Sequence[Card]) -> list[Finding]:
        results: list[Finding] = []
        mappings = self.config.element_mappings

        for card in cards:
            name_lower = card.display_name.lower()

            for element, keywords in mappings.items():
                for keyword in keywords:
                    if keyword.lower() not in name_lower:
                        continue

                    if card.element and card.element != element:
                        results.append(self.finding(
                            card,
                            Severity.WARNING,
                            f'Element "{card.element}" may not match theme (contains "{keyword}")',
                            f'Consider changing element to "{element}"',
                        ))
                    break

        return results

    @property
    def rule_type(self) -> str:
        return ELEMENT_CONSISTENCY
