"""
Unit tests for card and ability file readers.
"""

import json

import pytest

from card_validator.readers import FileReader, load_abilities, load_cards


class TestLoadCards:
    """Tests for load_cards"""

    def test_json_list(self, tmp_path):
        """Test a JSON list of cards"""
        path = tmp_path / "cards.json"
        path.write_text(json.dumps([{"id": "C1", "name": "Imp", "def": 2}]))

        cards = load_cards(path)

        assert len(cards) == 1
        assert cards[0].def_ == 2

    def test_yaml_cards_key(self, tmp_path):
        """Test a YAML mapping with a cards list"""
        path = tmp_path / "cards.yaml"
        path.write_text(
            "cards:\n"
            "  - id: C1\n"
            "    name: Fire Dragon\n"
            "    kind: UNIT\n"
            "    cost: 5\n"
            "  - id: C2\n"
            "    name: Tide Caller\n"
        )

        cards = load_cards(path)

        assert [card.id for card in cards] == ["C1", "C2"]
        assert cards[0].cost == 5

    def test_csv_conversion(self, tmp_path):
        """Test CSV cells: empty is absent, numbers are converted, text columns stay text"""
        path = tmp_path / "cards.csv"
        path.write_text(
            "id,name,kind,cost,atk,def,hp,abilityId,speed\n"
            "001,Imp,UNIT,1,1,,2,A1,1.5\n"
        )

        card = load_cards(path)[0]

        assert card.id == "001"
        assert card.cost == 1
        assert card.def_ is None
        assert card.ability_id == "A1"
        assert card.stat("speed") == 1.5

    def test_explicit_format(self, tmp_path):
        """Test the format argument overrides the suffix"""
        path = tmp_path / "cards.txt"
        path.write_text(json.dumps([{"id": "C1"}]))

        assert load_cards(path, file_format="json")[0].id == "C1"

    def test_unknown_suffix(self, tmp_path):
        """Test an unknown suffix cannot be inferred"""
        path = tmp_path / "cards.txt"
        path.write_text("")

        with pytest.raises(ValueError, match="Cannot infer"):
            load_cards(path)

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            load_cards(tmp_path / "nope.json")

    def test_document_without_list(self, tmp_path):
        """Test a mapping without the collection key is rejected"""
        path = tmp_path / "cards.json"
        path.write_text(json.dumps({"abilities": []}))

        with pytest.raises(ValueError, match="'cards' list"):
            load_cards(path)

    def test_malformed_json(self, tmp_path):
        """Test broken JSON is reported as ValueError"""
        path = tmp_path / "cards.json"
        path.write_text("[{")

        with pytest.raises(ValueError, match="Invalid json"):
            load_cards(path)


class TestLoadAbilities:
    """Tests for load_abilities"""

    def test_abilities_key(self, tmp_path):
        """Test a JSON mapping with an abilities list"""
        path = tmp_path / "abilities.json"
        path.write_text(json.dumps({"abilities": [{"id": "A1", "name": "Burn"}]}))

        abilities = load_abilities(path)

        assert [ability.id for ability in abilities] == ["A1"]


class TestFileReader:
    """Tests for FileReader"""

    def test_unsupported_format(self, tmp_path):
        """Test an explicit unknown format is rejected"""
        path = tmp_path / "cards.json"
        path.write_text("[]")

        with pytest.raises(ValueError, match="Unsupported file format"):
            FileReader().read(path, "cards", file_format="parquet")
