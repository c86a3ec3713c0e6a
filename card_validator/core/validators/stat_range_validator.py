"""
StatRangeValidator - validates numeric card stats are within configured bounds.
"""

from collections.abc import Sequence

from card_validator.core.models import Card, Finding, Severity
from card_validator.core.models.validator_config import STAT_RANGES

from .base_validator import BaseValidator, display_number, is_number


class StatRangeValidator(BaseValidator):
    """
    Checks every stat named in config.stat_ranges against its inclusive
    [min, max] bounds.

    A stat the card does not carry (absent or None) is skipped; zero is a
    real value and is checked. Stats are visited in configuration order.
    """

    def validate(self, cards: Sequence[Card]) -> list[Finding]:
        results: list[Finding] = []

        for card in cards:
            for stat, bounds in self.config.stat_ranges.items():
                value = card.stat(stat)
                # Absent stats are not violations; text values cannot be compared
                if not is_number(value):
                    continue

                shown = display_number(value)

                # Both checks run, so inverted bounds can report twice
                if bounds.min is not None and value < bounds.min:
                    minimum = display_number(bounds.min)
                    results.append(self.finding(
                        card,
                        Severity.ERROR,
                        f"{stat} ({shown}) is below minimum ({minimum})",
                        f"Increase {stat} to at least {minimum}",
                    ))

                if bounds.max is not None and value > bounds.max:
                    maximum = display_number(bounds.max)
                    results.append(self.finding(
                        card,
                        Severity.ERROR,
                        f"{stat} ({shown}) exceeds maximum ({maximum})",
                        f"Reduce {stat} to at most {maximum}",
                    ))

        return results

    @property
    def rule_type(self) -> str:
        return STAT_RANGES
