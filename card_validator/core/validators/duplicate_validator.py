"""
DuplicateValidator - detects repeated card identifiers and names.
"""

from collections.abc import Hashable, Sequence

from card_validator.core.models import Card, Finding, Severity
from card_validator.core.models.validator_config import DUPLICATE_CHECK

from .base_validator import BaseValidator, hashable_key


class DuplicateValidator(BaseValidator):
    """
    Flags every card whose identifier or name was already seen earlier in
    the collection.

    The finding is attributed to the later card; the first occurrence is
    never flagged. A repeated identifier is an error, a repeated name a
    warning, and one card can produce both (identifier first). Values are
    compared as supplied, so 1 and "1" are different identifiers.
    """

    def validate(self, cards: Sequence[Card]) -> list[Finding]:
        results: list[Finding] = []
        seen_ids: dict[Hashable, Card] = {}
        seen_names: dict[Hashable, Card] = {}

        for card in cards:
            id_key = hashable_key(card.id)
            if id_key in seen_ids:
                results.append(self.finding(
                    card,
                    Severity.ERROR,
                    f"Duplicate card ID found: {card.display_id}",
                    "Assign unique IDs to all cards",
                ))
            else:
                seen_ids[id_key] = card

            name_key = hashable_key(card.name)
            if name_key in seen_names:
                results.append(self.finding(
                    card,
                    Severity.WARNING,
                    f"Duplicate card name found: {card.display_name}",
                    "Consider using unique names for clarity",
                ))
            else:
                seen_names[name_key] = card

        return results

    @property
    def rule_type(self) -> str:
        return DUPLICATE_CHECK
