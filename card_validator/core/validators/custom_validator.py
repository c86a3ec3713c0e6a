"""
CustomValidator - wraps a caller-supplied per-card predicate.
"""

from collections.abc import Callable, Mapping
from typing import Any

from card_validator.core.models import Card, Finding

Predicate = Callable[[Card], Finding | Mapping[str, Any] | None]


class CustomValidator:
    """
    A named rule registered at runtime.

    The predicate signature should be:
        def my_rule(card: Card) -> Finding | None:
            if not ok:
                return Finding.for_card(card, "myRule", Severity.WARNING, "...")
            return None

    A mapping in the Finding shape ({cardId, cardName, rule, severity,
    message, suggestion?}) is accepted in place of a Finding. Exceptions
    raised by the predicate are not caught here.
    """

    def __init__(self, name: str, predicate: Predicate):
        if not callable(predicate):
            raise ValueError(f"Rule '{name}' predicate must be callable")

        self.name = name
        self.predicate = predicate

    def check(self, card: Card) -> Finding | None:
        """
        Run the predicate on one card.

        Args:
            card: The card to check

        Returns:
            The predicate's finding, or None when it reported nothing
        """
        result = self.predicate(card)
        if not result:
            return None
        if isinstance(result, Finding):
            return result
        return Finding.model_validate(dict(result))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
