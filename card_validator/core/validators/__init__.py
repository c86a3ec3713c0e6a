"""
Validation rule implementations.

Provides the built-in card rules (duplicates, stat ranges, element theme,
cost balance, ability references) and the wrapper for caller-supplied rules.
"""

from .ability_validator import AbilityReferenceValidator
from .base_validator import BaseValidator
from .cost_balance_validator import CostBalanceValidator
from .custom_validator import CustomValidator
from .duplicate_validator import DuplicateValidator
from .element_validator import ElementConsistencyValidator
from .stat_range_validator import StatRangeValidator

__all__ = [
    "BaseValidator",
    "DuplicateValidator",
    "StatRangeValidator",
    "ElementConsistencyValidator",
    "CostBalanceValidator",
    "AbilityReferenceValidator",
    "CustomValidator",
]
