"""
Rule engine and configuration management.
"""

from .rule_config import RuleConfigBuilder, RuleConfigLoader, resolve_config
from .rule_engine import RuleEngine

__all__ = [
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "resolve_config",
]
