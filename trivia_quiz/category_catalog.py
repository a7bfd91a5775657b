"""
Category catalog: loading and lookup of the provider's category table.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .models import Category

UNKNOWN_CATEGORY = "Unknown Category"

DEFAULT_CATEGORY_FILE = Path(__file__).parent / "data" / "categories.json"


class CategoryCatalog:
    """Loads the fixed category table from JSON and resolves category ids."""

    def __init__(self, category_file: Optional[Path] = None):
        """
        Initialize the catalog.

        Args:
            category_file: Path to the categories JSON file, defaults to the packaged table
        """
        self.category_file = Path(category_file) if category_file else DEFAULT_CATEGORY_FILE
        self.logger = logging.getLogger(__name__)
        self.categories: List[Category] = []
        self.load_errors: List[str] = []
        self.fallback_created = False

    def load(self) -> List[Category]:
        """
        Load the category table with error handling.

        Returns:
            Ordered list of Category entries
        """
        self.categories = []
        self.load_errors.clear()
        self.fallback_created = False

        data = self._load_file()
        if data is None:
            return self._create_fallback_catalog()

        if not self.validate_catalog_structure(data):
            self.load_errors.append(f"{self.category_file.name}: invalid category structure")
            return self._create_fallback_catalog()

        self.categories = [
            Category(id=entry["id"], name=entry["name"])
            for entry in data["categories"]
        ]
        self.logger.info(f"Loaded {len(self.categories)} categories from {self.category_file}")
        return self.categories

    def _load_file(self) -> Optional[dict]:
        try:
            with open(self.category_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"Invalid JSON in {self.category_file}: {e}")
            self.load_errors.append(f"{self.category_file.name}: invalid JSON")
        except FileNotFoundError:
            self.logger.error(f"Category file not found: {self.category_file}")
            self.load_errors.append(f"{self.category_file.name}: file not found")
        except OSError as e:
            self.logger.error(f"Failed to read category file {self.category_file}: {e}")
            self.load_errors.append(f"{self.category_file.name}: {e}")
        return None

    def validate_catalog_structure(self, data: dict) -> bool:
        """
        Validate that JSON data has the expected category structure.

        Expected structure:
        {
            "version": int,
            "categories": [
                {"name": str, "id": int}
            ]
        }

        Args:
            data: Parsed JSON data to validate

        Returns:
            True if structure is valid, False otherwise
        """
        if not isinstance(data, dict):
            self.logger.error("Category data must be a JSON object")
            return False

        entries = data.get("categories")
        if not isinstance(entries, list) or not entries:
            self.logger.error("'categories' must be a non-empty array")
            return False

        seen_ids = set()
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict):
                self.logger.error(f"Category {i} must be an object")
                return False

            if not isinstance(entry.get("name"), str) or not entry["name"].strip():
                self.logger.error(f"Category {i} 'name' must be a non-empty string")
                return False

            category_id = entry.get("id")
            if not isinstance(category_id, int) or isinstance(category_id, bool):
                self.logger.error(f"Category {i} 'id' must be an integer")
                return False

            if category_id in seen_ids:
                self.logger.error(f"Category {i} has duplicate id {category_id}")
                return False
            seen_ids.add(category_id)

        return True

    def _create_fallback_catalog(self) -> List[Category]:
        """
        Fall back to a single General Knowledge entry when the table cannot be loaded.

        Returns:
            List with the fallback category
        """
        self.categories = [Category(id=9, name="General Knowledge")]
        self.fallback_created = True
        self.logger.warning("Created fallback category table due to loading failures")
        return self.categories

    def get_categories(self) -> List[Category]:
        """Return the loaded table, loading it on first use."""
        if not self.categories:
            self.load()
        return list(self.categories)

    def get_category_name(self, category_id: int) -> str:
        """
        Resolve a category id to its display name.

        Args:
            category_id: Provider category identifier

        Returns:
            Display name, or "Unknown Category" when the id is not in the table
        """
        for category in self.get_categories():
            if category.id == category_id:
                return category.name
        self.logger.warning(f"Category id {category_id} not found in table")
        return UNKNOWN_CATEGORY

    def as_choices(self) -> Dict[str, int]:
        """Map display names to ids in table order."""
        return {category.name: category.id for category in self.get_categories()}

    def get_load_errors(self) -> List[str]:
        return self.load_errors.copy()

    def is_fallback_active(self) -> bool:
        return self.fallback_created
