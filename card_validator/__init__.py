"""
card-validator: consistency checks for trading card game data.
"""

from card_validator.core.models import Ability, Card, Finding, Severity, StatRange, ValidatorConfig
from card_validator.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine, resolve_config

__version__ = "1.0.0"

__all__ = [
    "Ability",
    "Card",
    "Finding",
    "Severity",
    "StatRange",
    "ValidatorConfig",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "resolve_config",
]
