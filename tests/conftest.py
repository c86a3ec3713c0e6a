"""
Pytest configuration and fixtures for card-validator tests

This module provides shared card fixtures for the unit tests.
"""
import pytest

from card_validator.core.models import Card
from card_validator.core.rules import RuleEngine


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the filesystem"
    )
    config.addinivalue_line(
        "markers", "cli: Tests that drive the command-line interface"
    )


# =======================
# CARD FIXTURES
# =======================

@pytest.fixture
def balanced_unit() -> Card:
    """A UNIT card that passes every default rule"""
    return Card.model_validate({
        "id": "C001",
        "name": "Ember Scout",
        "kind": "UNIT",
        "element": "fire",
        "cost": 2,
        "atk": 2,
        "def": 2,
        "hp": 3,
    })


@pytest.fixture
def sample_cards(balanced_unit) -> list[Card]:
    """
    A small card set with one problem per built-in rule

    - C002 repeats C001's id (duplicateCheck error)
    - C003 has cost 0 (statRanges error)
    - C004 is a dragon declared as water (elementConsistency warning)
    - C005 is an undercosted UNIT (costBalance warning)
    """
    return [
        balanced_unit,
        Card.model_validate({"id": "C001", "name": "Ash Walker", "kind": "UNIT", "cost": 3, "atk": 2, "def": 2, "hp": 4}),
        Card.model_validate({"id": "C003", "name": "Free Spell", "kind": "SPELL", "cost": 0}),
        Card.model_validate({"id": "C004", "name": "Fire Dragon", "kind": "SPELL", "element": "water", "cost": 4}),
        Card.model_validate({"id": "C005", "name": "Titan", "kind": "UNIT", "cost": 2, "atk": 5, "def": 5, "hp": 5}),
    ]


@pytest.fixture
def element_config() -> dict:
    """Overrides mapping dragon names to the fire element"""
    return {"elementMappings": {"fire": ["dragon", "flame"], "water": ["tide"]}}


@pytest.fixture
def engine(element_config) -> RuleEngine:
    """Engine with default rules and element mappings"""
    return RuleEngine(element_config)
