"""
Scorecard computation and rendering.
"""
from typing import List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from .models import QuizSession

PASS_THRESHOLD = 50
PASS_LABEL = "Champion"
FAIL_LABEL = "Loser"

TITLE = "Your Scorecard"
RULE = "-" * 38


def compute_percentage(correct: int, total: int) -> int:
    """
    Percentage of correct answers, rounded down.

    Raises:
        ValueError: If total is less than 1
    """
    if total < 1:
        raise ValueError(f"Total questions must be at least 1, got {total}")
    return (correct * 100) // total


def classify(percentage: int) -> str:
    return PASS_LABEL if percentage >= PASS_THRESHOLD else FAIL_LABEL


class Scorecard:
    """Builds and prints the end-of-quiz summary."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build_rows(self, session: QuizSession) -> List[Tuple[str, str]]:
        total = session.total_questions
        percentage = compute_percentage(session.correct_count, total)
        category = session.category.name if session.category else ""
        difficulty = session.difficulty.value if session.difficulty else ""
        return [
            ("Name", session.user_name),
            ("Category", category),
            ("Difficulty", difficulty),
            ("Total MCQs", str(total)),
            ("Correct Answers", f"{session.correct_count} out of {total}"),
            ("Percentage", f"{percentage}% out of 100%"),
        ]

    def render(self, session: QuizSession) -> str:
        """
        Plain-text scorecard.

        Returns:
            Title, classification banner and labeled rows separated by rules
        """
        label = classify(compute_percentage(session.correct_count, session.total_questions))
        lines = [TITLE.center(len(RULE)), f"Scorecard of a {label}:", RULE]
        for name, value in self.build_rows(session):
            lines.append(f" {name}: {value}")
            lines.append(RULE)
        return "\n".join(lines)

    def show(self, session: QuizSession) -> None:
        label = classify(compute_percentage(session.correct_count, session.total_questions))
        self.console.print()
        self.console.print(f"[bold white on red]{TITLE.center(len(RULE))}[/]")
        self.console.print(f"      Scorecard of a {label}:")
        self.console.print(f"[bright_white]{RULE}[/]")
        for name, value in self.build_rows(session):
            self.console.print(
                f"[rgb(255,142,133)] {name}: [/][bright_white]{escape(value)}[/]"
            )
            self.console.print(f"[bright_white]{RULE}[/]")
