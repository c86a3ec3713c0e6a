"""
Ability model representing one entry of the ability master data.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Ability(BaseModel):
    """
    An ability record. Only the identifier is read by the validator.

    The identifier keeps its supplied type so that it compares equal to
    card ability references read from the same kind of source.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Any = Field(...)
