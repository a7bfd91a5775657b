"""
HTTP client for the Open Trivia DB question provider.
"""
import html
import logging
from typing import Any, Dict, List, Optional

import requests

from .models import Difficulty, Question, QuestionType, QuizSettings

# Open Trivia DB response codes
RESPONSE_CODES = {
    0: "Success",
    1: "No results: not enough questions for this query",
    2: "Invalid parameter",
    3: "Session token not found",
    4: "Session token exhausted",
    5: "Rate limit exceeded",
}


class QuestionProvider:
    """Fetches one batch of multiple-choice questions per call."""

    QUESTION_TYPE = QuestionType.MULTIPLE.value

    def __init__(self, settings: Optional[QuizSettings] = None):
        """
        Initialize the provider client.

        Args:
            settings: Endpoint and timeout settings, defaults used when omitted
        """
        self.settings = settings or QuizSettings()
        self.logger = logging.getLogger(__name__)
        self.last_error: Optional[str] = None

    def fetch_questions(
        self,
        count: int,
        category_id: int,
        difficulty: Difficulty
    ) -> Optional[List[Question]]:
        """
        Fetch a batch of questions with a single request.

        Errors are logged and reported through ``last_error``; they are never raised.

        Args:
            count: Number of questions to request
            category_id: Provider category identifier
            difficulty: Requested difficulty level

        Returns:
            List of Question objects, or None if the request failed
        """
        self.last_error = None
        params = {
            "amount": count,
            "category": category_id,
            "difficulty": difficulty.value,
            "type": self.QUESTION_TYPE,
        }

        try:
            resp = requests.get(
                self.settings.api_url,
                params=params,
                timeout=self.settings.request_timeout
            )
            resp.raise_for_status()
        except requests.Timeout:
            return self._fail(f"Request timed out after {self.settings.request_timeout}s")
        except requests.RequestException as e:
            return self._fail(f"Network error: {e}")

        try:
            payload = resp.json()
        except ValueError as e:
            return self._fail(f"Invalid JSON in response: {e}")

        return self._parse_payload(payload)

    def _parse_payload(self, payload: Any) -> Optional[List[Question]]:
        if not isinstance(payload, dict):
            return self._fail("Response must be a JSON object")

        response_code = payload.get("response_code", 0)
        if response_code != 0:
            reason = RESPONSE_CODES.get(response_code, "Unknown provider error")
            return self._fail(f"Provider returned code {response_code}: {reason}")

        results = payload.get("results")
        if not isinstance(results, list):
            return self._fail("Response is missing the 'results' array")
        if not results:
            return self._fail("Provider returned no questions")

        try:
            questions = [self.parse_question(item) for item in results]
        except (KeyError, TypeError, ValueError) as e:
            return self._fail(f"Malformed question record: {e}")

        self.logger.info(f"Fetched {len(questions)} questions")
        return questions

    @staticmethod
    def parse_question(data: Dict[str, Any]) -> Question:
        """
        Build a Question from one provider record, decoding HTML entities.

        Raises:
            KeyError, TypeError, ValueError: if the record is malformed
        """
        incorrect = data["incorrect_answers"]
        if not isinstance(incorrect, list):
            raise TypeError("'incorrect_answers' must be an array")

        return Question(
            kind=QuestionType(data.get("type", QuestionType.MULTIPLE.value)),
            difficulty=Difficulty(data["difficulty"]),
            category=QuestionProvider._decode_text(data.get("category", ""), "category"),
            prompt=QuestionProvider._decode_text(data["question"], "question"),
            correct_answer=QuestionProvider._decode_text(data["correct_answer"], "correct_answer"),
            incorrect_answers=tuple(
                QuestionProvider._decode_text(answer, "incorrect_answers")
                for answer in incorrect
            )
        )

    @staticmethod
    def _decode_text(value: Any, field_name: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"'{field_name}' must be a string, got {type(value).__name__}")
        return html.unescape(value)

    def _fail(self, message: str) -> None:
        self.last_error = message
        self.logger.error(f"Error during fetching questions: {message}")
        return None
