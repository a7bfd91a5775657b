"""
Quiz controller: sequences preference collection, fetching, the quiz and the scorecard.
"""
import logging
import time
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .category_catalog import CategoryCatalog
from .config_manager import ConfigManager
from .models import QuizSession, SessionState
from .preferences import PreferenceCollector
from .question_provider import QuestionProvider
from .quiz_engine import QuizEngine
from .scorecard import Scorecard

PACING_DELAY = 1.0

BANNER_TITLE = "Quiz"
BANNER_SUBTITLE = "You can choose number of MCQs, Category and difficulty level"


class QuizControllerError(Exception):
    """Base exception for quiz controller errors."""
    pass


class QuestionFetchError(QuizControllerError):
    """Raised when the question batch could not be retrieved."""
    pass


class QuizController:
    """
    Orchestrates one quiz run from the banner to the scorecard.

    The run is strictly sequential. Collaborators can be injected so the
    flow can be driven without a terminal or network.
    """

    def __init__(
        self,
        config_manager: ConfigManager,
        catalog: Optional[CategoryCatalog] = None,
        provider: Optional[QuestionProvider] = None,
        console: Optional[Console] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.logger = logging.getLogger(__name__)
        self.config_manager = config_manager
        self.console = console or Console()
        self.catalog = catalog or CategoryCatalog()
        self.provider = provider or QuestionProvider(config_manager.get_quiz_settings())
        self.collector = PreferenceCollector(self.catalog, self.console)
        self.quiz_engine = QuizEngine(self.collector, self.console)
        self.scorecard = Scorecard(self.console)
        self.sleep = sleep
        self.session = QuizSession()

    def show_banner(self) -> None:
        self.console.print(Panel.fit(
            f"[bold cyan]{BANNER_TITLE}[/bold cyan]\n{BANNER_SUBTITLE}",
            border_style="cyan"
        ))

    def report_catalog_problems(self) -> None:
        """Warn the player when the category table could not be loaded."""
        self.catalog.get_categories()
        if not self.catalog.is_fallback_active():
            return

        self.logger.warning(f"Category table unavailable: {self.catalog.get_load_errors()}")
        self.console.print("[yellow]⚠️ Category list could not be loaded, only a default category is available.[/yellow]")
        for error in self.catalog.get_load_errors():
            self.console.print(f"[yellow]  • {escape(error)}[/yellow]")

    def collect_preferences(self) -> QuizSession:
        """Fill the session with the player's choices."""
        session = self.session
        session.state = SessionState.COLLECTING
        session.user_name = self.collector.collect_user_name()
        self.report_catalog_problems()
        session.category = self.collector.collect_category()
        session.difficulty = self.collector.collect_difficulty()
        session.requested_count = self.collector.collect_question_count()
        self.logger.info(
            f"Preferences: category={session.category.id}, "
            f"difficulty={session.difficulty.value}, count={session.requested_count}"
        )
        return session

    def load_questions(self) -> None:
        """
        Fetch the question batch for the collected preferences.

        Raises:
            QuestionFetchError: If the provider returned nothing usable
        """
        session = self.session
        session.state = SessionState.LOADING
        with self.console.status("Loading MCQs..."):
            questions = self.provider.fetch_questions(
                session.requested_count,
                session.category.id,
                session.difficulty
            )
            self.sleep(PACING_DELAY)

        if not questions:
            session.state = SessionState.ERROR
            raise QuestionFetchError(self.provider.last_error or "No questions received")

        if len(questions) != session.requested_count:
            self.logger.warning(
                f"Requested {session.requested_count} questions, received {len(questions)}"
            )
        session.questions = questions
        self.console.print("[green]✔ MCQs Loaded[/green]")

    def run(self) -> int:
        """
        Run a complete quiz.

        Returns:
            Process exit status: 0 when the scorecard was shown, 1 on fetch failure
        """
        self.show_banner()
        self.sleep(PACING_DELAY)

        self.collect_preferences()

        try:
            self.load_questions()
        except QuestionFetchError as e:
            self.logger.error(f"Aborting quiz: {e}")
            self.console.print(f"[red]❌ Error during fetching questions: {escape(str(e))}[/red]")
            self.console.print("Please check your connection and try again.")
            return 1

        self.quiz_engine.run_quiz(self.session)
        self.scorecard.show(self.session)
        return 0
