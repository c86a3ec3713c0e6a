"""
Unit tests for the rule engine.

Includes property-based testing with hypothesis for run-level guarantees.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from card_validator.core.models import Card, Finding, Severity
from card_validator.core.rules import RuleConfigBuilder, RuleEngine

ALL_RULES = ("duplicateCheck", "statRanges", "elementConsistency", "costBalance", "abilityReferences")

card_strategy = st.builds(
    Card,
    id=st.sampled_from(["C1", "C2", "C3", None]),
    name=st.sampled_from(["Fire Dragon", "Tide Caller", "Imp", None]),
    kind=st.sampled_from(["UNIT", "SPELL", None]),
    element=st.sampled_from(["fire", "water", None]),
    cost=st.one_of(st.none(), st.integers(min_value=-2, max_value=14)),
    atk=st.one_of(st.none(), st.integers(min_value=-2, max_value=14)),
    hp=st.one_of(st.none(), st.integers(min_value=-2, max_value=24)),
)


class TestRuleEngine:
    """Tests for RuleEngine"""

    def test_validate_runs_rules_in_fixed_order(self, engine, sample_cards):
        """Test findings are grouped by rule in the documented order"""
        findings = engine.validate(sample_cards)

        assert [f.rule for f in findings] == [
            "duplicateCheck",
            "statRanges",
            "elementConsistency",
            "costBalance",
        ]
        assert [f.card_id for f in findings] == ["C001", "C003", "C004", "C005"]

    def test_validate_accepts_mappings(self, engine):
        """Test plain dicts are converted to cards"""
        findings = engine.validate([
            {"id": "C1", "name": "Imp", "cost": 0},
            {"id": "C1", "name": "Ogre", "cost": 1},
        ])

        assert [f.rule for f in findings] == ["duplicateCheck", "statRanges"]

    def test_clean_cards_produce_nothing(self, engine, balanced_unit):
        """Test a valid collection yields no findings"""
        assert engine.validate([balanced_unit]) == []

    def test_disabled_rule_skipped(self, sample_cards):
        """Test a disabled rule contributes nothing"""
        engine = RuleEngine({"rules": {"duplicateCheck": False}})
        findings = engine.validate(sample_cards)

        assert "duplicateCheck" not in {f.rule for f in findings}
        assert "statRanges" in {f.rule for f in findings}

    def test_ability_references_not_automatic(self):
        """Test validate() never checks ability references"""
        engine = RuleEngine()
        card = Card.model_validate({"id": "C1", "abilityId": "missing"})
        assert engine.validate([card]) == []

    def test_validate_abilities(self):
        """Test the separate ability entry point"""
        engine = RuleEngine()
        cards = [
            {"id": "C1", "abilityId": "a2"},
            {"id": "C2", "abilityId": "a1"},
            {"id": "C3"},
        ]
        findings = engine.validate_abilities(cards, [{"id": "a1"}])

        assert len(findings) == 1
        assert findings[0].card_id == "C1"
        assert findings[0].rule == "abilityReferences"

    def test_text_stats_do_not_abort_run(self, engine, sample_cards):
        """Test a card with a text stat is validated alongside normal cards"""
        cards = [*sample_cards, {"id": "C006", "name": "Mist", "kind": "UNIT", "cost": 1, "hp": "lots"}]
        findings = engine.validate(cards)

        assert [f.card_id for f in findings] == ["C001", "C003", "C004", "C005"]

    def test_numeric_ability_ids_match(self):
        """Test numeric ability references match numeric master-data ids"""
        findings = RuleEngine().validate_abilities(
            [{"id": "C1", "abilityId": 7}, {"id": "C2", "abilityId": 8}],
            [{"id": 7}],
        )

        assert [f.card_id for f in findings] == ["C2"]

    def test_idempotent(self, engine, sample_cards):
        """Test repeated runs yield identical sequences"""
        assert engine.validate(sample_cards) == engine.validate(sample_cards)

    def test_get_rule_summary(self):
        """Test the summary lists enabled built-ins and custom rules"""
        engine = RuleEngine({"rules": {"costBalance": False}, "statRanges": {"speed": {"max": 5}}})
        engine.add_rule("noImps", lambda card: None)

        assert engine.get_rule_summary() == {
            "builtin_rules": ["duplicateCheck", "statRanges", "elementConsistency"],
            "custom_rules": ["noImps"],
            "checked_stats": ["cost", "atk", "def", "hp", "speed"],
        }

    @settings(max_examples=50)
    @given(st.lists(card_strategy, max_size=8))
    def test_property_all_rules_disabled(self, cards):
        """Property test: with every rule off the result is empty"""
        engine = RuleEngine(RuleConfigBuilder().disable(*ALL_RULES).build())
        assert engine.validate(cards) == []

    @settings(max_examples=50)
    @given(st.lists(card_strategy, max_size=8))
    def test_property_idempotent(self, cards):
        """Property test: validate is a pure function of its inputs"""
        engine = RuleEngine({"elementMappings": {"fire": ["dragon"], "water": ["tide"]}})
        assert engine.validate(cards) == engine.validate(cards)


class TestCustomRules:
    """Tests for the custom rule registry"""

    @staticmethod
    def name_rule(rule_name):
        def predicate(card):
            return Finding.for_card(card, rule_name, Severity.INFO, f"checked by {rule_name}")
        return predicate

    def test_custom_rules_after_builtins(self, sample_cards):
        """Test custom findings follow all built-in findings"""
        engine = RuleEngine()
        engine.add_rule("always", self.name_rule("always"))
        findings = engine.validate(sample_cards)

        builtin_count = len(RuleEngine().validate(sample_cards))
        assert all(f.rule != "always" for f in findings[:builtin_count])
        assert [f.card_id for f in findings[builtin_count:]] == [c.display_id for c in sample_cards]

    def test_card_major_registration_order(self):
        """Test rules run per card, in registration order"""
        engine = RuleEngine(RuleConfigBuilder().disable(*ALL_RULES).build())
        engine.add_rule("first", self.name_rule("first"))
        engine.add_rule("second", self.name_rule("second"))

        findings = engine.validate([Card(id="A"), Card(id="B")])

        assert [(f.card_id, f.rule) for f in findings] == [
            ("A", "first"),
            ("A", "second"),
            ("B", "first"),
            ("B", "second"),
        ]

    def test_none_result_contributes_nothing(self):
        """Test a predicate returning None adds no finding"""
        engine = RuleEngine(RuleConfigBuilder().disable(*ALL_RULES).build())
        engine.add_rule("expensive", lambda card: (
            Finding.for_card(card, "expensive", Severity.WARNING, "cost above 8")
            if (card.cost or 0) > 8 else None
        ))

        findings = engine.validate([Card(id="A", cost=3), Card(id="B", cost=9)])

        assert [f.card_id for f in findings] == ["B"]

    def test_same_name_registered_twice(self):
        """Test rules are not deduplicated by name"""
        engine = RuleEngine(RuleConfigBuilder().disable(*ALL_RULES).build())
        engine.add_rule("dup", self.name_rule("dup"))
        engine.add_rule("dup", self.name_rule("dup"))

        assert len(engine.validate([Card(id="A")])) == 2

    def test_rules_persist_across_runs(self):
        """Test registered rules apply to every later run"""
        engine = RuleEngine(RuleConfigBuilder().disable(*ALL_RULES).build())
        engine.add_rule("always", self.name_rule("always"))

        assert len(engine.validate([Card(id="A")])) == 1
        assert len(engine.validate([Card(id="B")])) == 1

    def test_add_rule_rejects_non_callable(self):
        """Test a non-callable predicate is refused at registration"""
        with pytest.raises(ValueError):
            RuleEngine().add_rule("broken", None)

    def test_failing_rule_aborts_run(self, sample_cards):
        """Test a raising predicate propagates and no findings are returned"""
        engine = RuleEngine()
        engine.add_rule("ok", self.name_rule("ok"))

        def explode(card):
            if card.id == "C004":
                raise KeyError("missing lore")
            return None

        engine.add_rule("explode", explode)

        with pytest.raises(KeyError, match="missing lore"):
            engine.validate(sample_cards)
