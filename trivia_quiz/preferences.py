"""
Interactive prompts that collect the player's quiz preferences.
"""
import logging
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .category_catalog import CategoryCatalog
from .config_manager import ConfigManager
from .models import Category, Difficulty


def check_question_count(raw: str) -> Dict[str, Any]:
    """
    Validate a question count typed by the user.

    Args:
        raw: Text entered at the prompt

    Returns:
        Dictionary with success status, parsed value, error message, and user-friendly message
    """
    text = (raw or "").strip()
    try:
        value = int(text)
    except ValueError:
        return {
            'success': False,
            'value': None,
            'error': f"Question count must be a whole number, got '{text}'",
            'user_message': f"Please enter a number not {text or '(empty)'}"
        }

    if value < ConfigManager.MIN_QUESTION_COUNT or value > ConfigManager.MAX_QUESTION_COUNT:
        return {
            'success': False,
            'value': value,
            'error': f"Question count {value} out of range",
            'user_message': (
                f"Please enter a number between {ConfigManager.MIN_QUESTION_COUNT} "
                f"and {ConfigManager.MAX_QUESTION_COUNT}"
            )
        }

    return {
        'success': True,
        'value': value,
        'message': f"Question count set to {value}",
        'user_message': f"✅ {value} question{'s' if value != 1 else ''} selected"
    }


class PreferenceCollector:
    """Collects name, category, difficulty and question count from the terminal."""

    def __init__(self, catalog: CategoryCatalog, console: Optional[Console] = None):
        self.catalog = catalog
        self.console = console or Console()
        self.logger = logging.getLogger(__name__)

    def select_option(self, choices: List[str], message: str) -> str:
        """
        Present a numbered single-select list and return the chosen entry.

        Args:
            choices: Options in display order
            message: Prompt shown below the list

        Returns:
            The selected option text
        """
        for number, choice in enumerate(choices, start=1):
            self.console.print(f"  {number}) {choice}", markup=False, highlight=False)

        selected = Prompt.ask(
            f"  {message}",
            choices=[str(number) for number in range(1, len(choices) + 1)],
            show_choices=False,
            console=self.console
        )
        return choices[int(selected) - 1]

    def collect_user_name(self) -> str:
        """Ask for the player's name; any text, including empty, is accepted."""
        return Prompt.ask("Enter your name", default="", show_default=False, console=self.console)

    def collect_category(self) -> Category:
        """
        Ask the player to pick a category from the table.

        Returns:
            Category with the provider id and its display name
        """
        choices = self.catalog.as_choices()
        self.console.print("[bold]Select your category[/bold]")
        name = self.select_option(list(choices), "Answer")
        category_id = choices[name]
        category = Category(id=category_id, name=self.catalog.get_category_name(category_id))
        self.logger.info(f"Category selected: {category.name} ({category.id})")
        return category

    def collect_difficulty(self) -> Difficulty:
        """Ask for one of the three difficulty levels."""
        labels = [level.label for level in Difficulty]
        self.console.print("[bold]Select difficulty[/bold]")
        label = self.select_option(labels, "Answer")
        return Difficulty(label.lower())

    def collect_question_count(self) -> int:
        """
        Ask for the number of questions, re-prompting until the value is valid.

        Returns:
            Question count within the configured bounds
        """
        while True:
            raw = Prompt.ask(
                f"Enter number of questions (Max {ConfigManager.MAX_QUESTION_COUNT})",
                console=self.console
            )
            result = check_question_count(raw)
            if result['success']:
                return result['value']
            self.logger.debug(result['error'])
            self.console.print(f"[red]{escape(result['user_message'])}[/red]")
