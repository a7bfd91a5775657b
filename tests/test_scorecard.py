"""
Unit tests for scorecard computation and rendering.
"""
import unittest

from trivia_quiz.models import Category, Difficulty, QuizSession
from trivia_quiz.scorecard import (
    FAIL_LABEL, PASS_LABEL, PASS_THRESHOLD, Scorecard, classify, compute_percentage
)
from tests.test_fixtures import TestFixtures


class TestScoreMath(unittest.TestCase):
    """Test cases for percentage and classification."""

    def test_compute_percentage_examples(self):
        self.assertEqual(compute_percentage(5, 10), 50)
        self.assertEqual(compute_percentage(0, 1), 0)
        self.assertEqual(compute_percentage(10, 10), 100)

    def test_compute_percentage_floors(self):
        """Fractions are rounded down, never up."""
        self.assertEqual(compute_percentage(1, 3), 33)
        self.assertEqual(compute_percentage(2, 3), 66)
        self.assertEqual(compute_percentage(49, 50), 98)

    def test_compute_percentage_zero_total(self):
        """A zero total fails explicitly."""
        with self.assertRaises(ValueError):
            compute_percentage(0, 0)
        with self.assertRaises(ValueError):
            compute_percentage(3, -1)

    def test_classify_boundary(self):
        """Exactly 50 passes, 49 fails."""
        self.assertEqual(PASS_THRESHOLD, 50)
        self.assertEqual(classify(50), PASS_LABEL)
        self.assertEqual(classify(49), FAIL_LABEL)
        self.assertEqual(classify(100), "Champion")
        self.assertEqual(classify(0), "Loser")


class TestScorecard(unittest.TestCase):
    """Test cases for the rendered scorecard."""

    def setUp(self):
        self.console = TestFixtures.create_console()
        self.scorecard = Scorecard(self.console)

    def test_build_rows_order(self):
        """Rows appear in a fixed order."""
        session = TestFixtures.create_sample_session(correct_count=3)

        rows = self.scorecard.build_rows(session)

        self.assertEqual(
            [name for name, _ in rows],
            ["Name", "Category", "Difficulty", "Total MCQs", "Correct Answers", "Percentage"]
        )
        self.assertEqual(dict(rows)["Correct Answers"], "3 out of 5")
        self.assertEqual(dict(rows)["Percentage"], "60% out of 100%")

    def test_render_perfect_score(self):
        session = TestFixtures.create_sample_session(correct_count=5)

        text = self.scorecard.render(session)

        self.assertIn("Your Scorecard", text)
        self.assertIn("Scorecard of a Champion:", text)
        self.assertIn("Name: Sam", text)
        self.assertIn("Category: General Knowledge", text)
        self.assertIn("Difficulty: easy", text)
        self.assertIn("Total MCQs: 5", text)
        self.assertIn("Correct Answers: 5 out of 5", text)
        self.assertIn("Percentage: 100% out of 100%", text)

    def test_render_failing_score(self):
        session = TestFixtures.create_sample_session(correct_count=1, question_count=3)

        text = self.scorecard.render(session)

        self.assertIn("Scorecard of a Loser:", text)
        self.assertIn("Percentage: 33% out of 100%", text)

    def test_render_is_deterministic(self):
        session = TestFixtures.create_sample_session(correct_count=2)

        self.assertEqual(self.scorecard.render(session), self.scorecard.render(session))

    def test_render_empty_name(self):
        session = QuizSession(
            user_name="",
            category=Category(id=21, name="Sports"),
            difficulty=Difficulty.HARD,
            questions=TestFixtures.create_sample_questions(2),
            correct_count=0
        )

        text = self.scorecard.render(session)

        self.assertIn(" Name: \n", text)
        self.assertIn("Difficulty: hard", text)

    def test_show_prints_rows(self):
        """The styled output carries the same rows."""
        session = TestFixtures.create_sample_session(correct_count=5)

        self.scorecard.show(session)

        output = TestFixtures.console_output(self.console)
        self.assertIn("Scorecard of a Champion:", output)
        self.assertIn("Correct Answers: 5 out of 5", output)
        self.assertIn("Percentage: 100% out of 100%", output)

    def test_show_escapes_markup_in_name(self):
        session = TestFixtures.create_sample_session(correct_count=5)
        session.user_name = "[bold]Sam[/bold]"

        self.scorecard.show(session)

        self.assertIn("Name: [bold]Sam[/bold]", TestFixtures.console_output(self.console))


if __name__ == '__main__':
    unittest.main()
