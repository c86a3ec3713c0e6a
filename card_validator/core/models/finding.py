"""
Finding model representing one validation outcome for one card (ephemeral).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .card import Card


class Severity(str, Enum):
    """Importance of a finding. Declaration order is the display order."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Finding(BaseModel):
    """
    One structured validation output.

    Findings are created by exactly one rule invocation and never merged or
    deduplicated. The serialised shape uses camelCase keys:
    {cardId, cardName, rule, severity, message, suggestion?}.

    Attributes:
        card_id: Identifier of the offending card ("" when the card has none)
        card_name: Name of the offending card ("" when the card has none)
        rule: Name of the rule that produced the finding
        severity: error, warning or info
        message: Human-readable description of the issue
        suggestion: Optional remediation hint
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "cardId": "C002",
                "cardName": "Fire Dragon",
                "rule": "duplicateCheck",
                "severity": "error",
                "message": "Duplicate card ID found: C002",
                "suggestion": "Assign unique IDs to all cards",
            }
        },
    )

    card_id: str = ""
    card_name: str = ""
    rule: str
    severity: Severity
    message: str
    suggestion: str | None = None

    @classmethod
    def for_card(
        cls,
        card: Card,
        rule: str,
        severity: Severity,
        message: str,
        suggestion: str | None = None,
    ) -> "Finding":
        """Build a finding attributed to the given card."""
        return cls(
            card_id=card.display_id,
            card_name=card.display_name,
            rule=rule,
            severity=severity,
            message=message,
            suggestion=suggestion,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the external camelCase shape, omitting an absent suggestion."""
        data = self.model_dump(by_alias=True, mode="json")
        if self.suggestion is None:
            data.pop("suggestion")
        return data
