"""
Generic file reader for card data in multiple formats (JSON, YAML, CSV).
"""

import csv
import json
from pathlib import Path
from typing import Any

import yaml

from card_validator.core.models import Ability, Card
from card_validator.observability import get_logger

logger = get_logger(__name__)


class FileReader:
    """
    Reads lists of records from JSON, YAML or CSV files.

    JSON and YAML documents hold either a list of records or a mapping with
    the list under a collection key ("cards", "abilities"). CSV rows become
    records; empty cells are treated as absent and numeric cells outside the
    text columns are converted to numbers.
    """

    FORMATS_BY_SUFFIX = {
        ".json": "json",
        ".yaml": "yaml",
        ".yml": "yaml",
        ".csv": "csv",
    }

    TEXT_COLUMNS = frozenset({"id", "name", "kind", "element", "abilityId"})

    def read(
        self,
        file_path: str | Path,
        collection_key: str,
        file_format: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Read a file into a list of record mappings.

        Args:
            file_path: Path to file
            collection_key: Key holding the list in mapping-shaped documents
            file_format: Format (json, yaml, csv); inferred from the suffix when None

        Returns:
            List of records

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the format is unsupported or the document malformed
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        file_format = (file_format or self._infer_format(path)).lower()

        if file_format == "csv":
            records = self._read_csv(path)
        elif file_format in ("json", "yaml"):
            records = self._read_document(path, file_format, collection_key)
        else:
            raise ValueError(f"Unsupported file format: {file_format}")

        logger.info(f"Read {len(records)} records from {path}", extra={"format": file_format})
        return records

    def _infer_format(self, path: Path) -> str:
        file_format = self.FORMATS_BY_SUFFIX.get(path.suffix.lower())
        if file_format is None:
            raise ValueError(f"Cannot infer file format from suffix '{path.suffix}'")
        return file_format

    def _read_document(self, path: Path, file_format: str, collection_key: str) -> list[dict[str, Any]]:
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f) if file_format == "json" else yaml.safe_load(f)
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                raise ValueError(f"Invalid {file_format} document {path}: {e}")

        if isinstance(data, dict):
            data = data.get(collection_key)

        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a list of records or a '{collection_key}' list")

        return data

    def _read_csv(self, path: Path) -> list[dict[str, Any]]:
        with open(path, newline="", encoding="utf-8") as f:
            return [self._convert_row(row) for row in csv.DictReader(f)]

    def _convert_row(self, row: dict[str, str]) -> dict[str, Any]:
        record: dict[str, Any] = {}
        for column, value in row.items():
            if column is None or value is None or value.strip() == "":
                continue
            value = value.strip()
            record[column] = value if column in self.TEXT_COLUMNS else self._to_number(value)
        return record

    @staticmethod
    def _to_number(value: str) -> Any:
        for number_type in (int, float):
            try:
                return number_type(value)
            except ValueError:
                continue
        return value


def load_cards(file_path: str | Path, file_format: str | None = None) -> list[Card]:
    """Read card records from a file."""
    records = FileReader().read(file_path, "cards", file_format)
    return [Card.model_validate(record) for record in records]


def load_abilities(file_path: str | Path, file_format: str | None = None) -> list[Ability]:
    """Read ability master data from a file."""
    records = FileReader().read(file_path, "abilities", file_format)
    return [Ability.model_validate(record) for record in records]
