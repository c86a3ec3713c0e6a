"""
Base validator interface for all built-in card rules.

All built-in rules inherit from BaseValidator and implement validate().
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from typing import Any

from card_validator.core.models import Card, Finding, Severity, ValidatorConfig


def is_number(value: Any) -> bool:
    """True for real numeric values; booleans and text are not stats."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def hashable_key(value: Any) -> Hashable:
    """Key for set/dict lookups; unhashable values compare by their repr."""
    return value if isinstance(value, Hashable) else repr(value)


def display_number(value: Any) -> Any:
    """Render whole floats without a trailing ".0" in messages."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class BaseValidator(ABC):
    """
    Abstract base class for built-in rules.

    Each rule scans the whole card collection once and returns its findings
    in card order. Rules never raise for bad data; every detected problem
    becomes a Finding.
    """

    def __init__(self, config: ValidatorConfig):
        """
        Initialize validator.

        Args:
            config: Resolved validator configuration
        """
        self.config = config

    @abstractmethod
    def validate(self, cards: Sequence[Card]) -> list[Finding]:
        """
        Scan the card collection.

        Args:
            cards: Cards in input order

        Returns:
            Findings produced by this rule, in card order
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule name reported on findings and used in config."""
        pass

    def finding(
        self,
        card: Card,
        severity: Severity,
        message: str,
        suggestion: str | None = None,
    ) -> Finding:
        """Build a finding for this rule."""
        return Finding.for_card(card, self.rule_type, severity, message, suggestion)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule={self.rule_type})"
