"""
Quiz engine core logic: choice assembly, answer checking and the question loop.
"""
import logging
import random
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .models import Question, QuizSession, SessionState
from .preferences import PreferenceCollector

logger = logging.getLogger(__name__)


class QuizEngine:
    """Administers the fetched questions one at a time and tallies the score."""

    def __init__(
        self,
        collector: PreferenceCollector,
        console: Optional[Console] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the engine.

        Args:
            collector: Prompt helper used to read each answer
            console: Output console, defaults to the collector's console
            rng: Random source for answer placement
        """
        self.collector = collector
        self.console = console or collector.console
        self.rng = rng or random.Random()

    def build_choices(self, question: Question) -> List[str]:
        """
        Insert the correct answer at a random position among the incorrect ones.

        Any position from first to last is equally likely, whatever the
        number of incorrect answers.

        Args:
            question: Question to build the choice list for

        Returns:
            New list holding every answer exactly once
        """
        choices = list(question.incorrect_answers)
        position = self.rng.randint(0, len(choices))
        choices.insert(position, question.correct_answer)
        return choices

    @staticmethod
    def check_answer(question: Question, answer: str) -> bool:
        return answer == question.correct_answer

    def ask_question(self, question: Question, number: int, total: int) -> bool:
        """
        Present one question and read the player's answer.

        Returns:
            True if the answer was correct
        """
        self.console.print()
        self.console.print(f"[bold white on rgb(112,92,1)] Question {number}/{total}: [/]")
        self.console.print(escape(question.prompt))

        choices = self.build_choices(question)
        answer = self.collector.select_option(choices, "Choose Correct Option")
        is_correct = self.check_answer(question, answer)
        logger.debug(f"Question {number}/{total} answered, correct={is_correct}")
        return is_correct

    def run_quiz(self, session: QuizSession) -> int:
        """
        Ask every question of the session in order.

        Args:
            session: Session with fetched questions

        Returns:
            Final number of correct answers

        Raises:
            ValueError: If the session has no questions
        """
        if not session.questions:
            raise ValueError("Cannot run a quiz without questions")

        session.state = SessionState.ACTIVE
        total = session.total_questions
        for number, question in enumerate(session.questions, start=1):
            if self.ask_question(question, number, total):
                session.correct_count += 1

        session.state = SessionState.COMPLETED
        logger.info(f"Quiz completed: {session.correct_count}/{total} correct")
        return session.correct_count
