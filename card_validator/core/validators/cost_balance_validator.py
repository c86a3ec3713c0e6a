"""
CostBalanceValidator - heuristic check of unit stats against their cost.
"""

import math
from collections.abc import Sequence

from card_validator.core.models import Card, Finding, Severity
from card_validator.core.models.validator_config import COST_BALANCE

from .base_validator import BaseValidator, display_number, is_number


class CostBalanceValidator(BaseValidator):
    """
    Compares a unit's total stats (atk + def + hp) with its cost.

    Only cards of kind "UNIT" are analysed. Missing or non-numeric stats
    and cost count as 0. Expected total lies between cost * 2 and cost * 4:
    - above the range: warning, suggests ceil(total / 3) as the new cost
    - below the range: info, only for cost > 1
    """

    UNIT_KIND = "UNIT"
    MIN_RATIO = 2
    MAX_RATIO = 4
    SUGGESTED_RATIO = 3

    @staticmethod
    def _stat_value(value):
        return value if is_number(value) else 0

    def validate(self, cards: Sequence[Card]) -> list[Finding]:
        results: list[Finding] = []

        for card in cards:
            if card.kind != self.UNIT_KIND:
                continue

            cost = self._stat_value(card.cost)
            total_stats = sum(self._stat_value(value) for value in (card.atk, card.def_, card.hp))

            expected_min = cost * self.MIN_RATIO
            expected_max = cost * self.MAX_RATIO

            if total_stats > expected_max:
                results.append(self.finding(
                    card,
                    Severity.WARNING,
                    f"May be undercosted: {display_number(total_stats)} total stats for cost {display_number(cost)}",
                    f"Consider increasing cost to {math.ceil(total_stats / self.SUGGESTED_RATIO)}",
                ))

            # A cost-1 card would almost always trip this, so it is exempt
            if total_stats < expected_min and cost > 1:
                results.append(self.finding(
                    card,
                    Severity.INFO,
                    f"May be overcosted: {display_number(total_stats)} total stats for cost {display_number(cost)}",
                    "Consider decreasing cost or adding abilities",
                ))

        return results

    @property
    def rule_type(self) -> str:
        return COST_BALANCE
