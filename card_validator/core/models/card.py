"""
Card model representing one trading card record supplied for validation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Card(BaseModel):
    """
    A single card record (immutable for the engine's purposes).

    Only the shape is read here; field values are never type-checked. Unknown keys
    are kept as extras so that any named numeric field can be range-checked.

    Attributes:
        id: Card identifier (expected unique, not enforced)
        name: Display name (expected unique, not enforced)
        kind: Category tag, "UNIT" marks the primary unit type
        element: Thematic element tag
        cost, atk, def_, hp: Numeric stats, any subset may be absent
        ability_id: Reference into the ability master data
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "C001",
                "name": "Fire Dragon",
                "kind": "UNIT",
                "element": "fire",
                "cost": 5,
                "atk": 6,
                "def": 4,
                "hp": 8,
                "abilityId": "A010",
            }
        },
    )

    # Values are kept as supplied; rules decide what they can compare
    id: Any = None
    name: Any = None
    kind: Any = None
    element: Any = None
    cost: Any = None
    atk: Any = None
    def_: Any = Field(None, alias="def")
    hp: Any = None
    ability_id: Any = Field(None, alias="abilityId")

    def stat(self, name: str) -> Any:
        """
        Look up a field by its external name.

        Args:
            name: Field name as it appears in card data ("def", "abilityId", or an extra key)

        Returns:
            The field value, or None when the card does not carry it
        """
        for field_name, info in type(self).model_fields.items():
            if (info.alias or field_name) == name:
                return getattr(self, field_name)
        return (self.model_extra or {}).get(name)

    @property
    def display_id(self) -> str:
        return str(self.id) if self.id is not None else ""

    @property
    def display_name(self) -> str:
        return str(self.name) if self.name is not None else ""
