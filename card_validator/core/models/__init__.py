"""
Core data models for the card validator.

All models use Pydantic for parsing and immutability.
"""

from .ability import Ability
from .card import Card
from .finding import Finding, Severity
from .validator_config import StatRange, ValidatorConfig

__all__ = [
    "Ability",
    "Card",
    "Finding",
    "Severity",
    "StatRange",
    "ValidatorConfig",
]
