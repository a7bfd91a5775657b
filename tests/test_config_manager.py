"""
Unit tests for ConfigManager class.
"""
import logging
import unittest

from trivia_quiz.config_manager import ConfigManager
from trivia_quiz.models import QuizSettings


class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager functionality."""

    def setUp(self):
        """Set up test fixtures before each test method."""
        self.config_manager = ConfigManager()

        # Suppress logging during tests
        logging.disable(logging.CRITICAL)

    def tearDown(self):
        """Clean up after each test method."""
        logging.disable(logging.NOTSET)

    def test_initialization_with_defaults(self):
        """Test that ConfigManager initializes with correct default values."""
        settings = self.config_manager.get_quiz_settings()

        self.assertIsInstance(settings, QuizSettings)
        self.assertEqual(settings.api_url, "https://opentdb.com/api.php")
        self.assertEqual(settings.request_timeout, 10)

    def test_question_count_bounds(self):
        """Test the question count limits used by the prompts."""
        self.assertEqual(ConfigManager.MIN_QUESTION_COUNT, 1)
        self.assertEqual(ConfigManager.MAX_QUESTION_COUNT, 50)

    def test_get_quiz_settings_returns_copy(self):
        """Test that callers cannot mutate the stored settings."""
        settings = self.config_manager.get_quiz_settings()
        settings.request_timeout = 99

        self.assertEqual(self.config_manager.get_request_timeout(), 10)

    def test_set_api_url_valid(self):
        """Test setting a valid provider URL."""
        result = self.config_manager.set_api_url("http://localhost:8000/api.php")

        self.assertTrue(result['success'])
        self.assertEqual(self.config_manager.get_api_url(), "http://localhost:8000/api.php")

    def test_set_api_url_invalid(self):
        """Test setting invalid provider URLs."""
        for value in ["", "ftp://example.com", "opentdb.com/api.php", 42, None]:
            result = self.config_manager.set_api_url(value)
            self.assertFalse(result['success'], value)
            self.assertIn('user_message', result)

        self.assertEqual(self.config_manager.get_api_url(), ConfigManager.DEFAULT_API_URL)

    def test_set_request_timeout_valid_values(self):
        """Test setting valid timeout values including the bounds."""
        for value in [1, 30, 60]:
            result = self.config_manager.set_request_timeout(value)
            self.assertTrue(result['success'])
            self.assertEqual(self.config_manager.get_request_timeout(), value)

    def test_set_request_timeout_invalid_values(self):
        """Test setting invalid timeout values."""
        for value in [0, -5, 61, "10", 2.5, True]:
            result = self.config_manager.set_request_timeout(value)
            self.assertFalse(result['success'], value)

        self.assertEqual(self.config_manager.get_request_timeout(), 10)

    def test_load_from_dict_applies_values(self):
        """Test applying a parsed config.json."""
        rejected = self.config_manager.load_from_dict({
            "api": {"url": "https://example.com/api.php", "timeout": 5}
        })

        self.assertEqual(rejected, [])
        self.assertEqual(self.config_manager.get_api_url(), "https://example.com/api.php")
        self.assertEqual(self.config_manager.get_request_timeout(), 5)

    def test_load_from_dict_keeps_defaults_for_invalid_values(self):
        """Test that rejected values are reported and defaults kept."""
        rejected = self.config_manager.load_from_dict({
            "api": {"url": "not-a-url", "timeout": 500}
        })

        self.assertEqual(len(rejected), 2)
        self.assertEqual(self.config_manager.get_api_url(), ConfigManager.DEFAULT_API_URL)
        self.assertEqual(self.config_manager.get_request_timeout(), ConfigManager.DEFAULT_REQUEST_TIMEOUT)

    def test_load_from_dict_empty_and_bad_section(self):
        """Test empty configs and a non-object api section."""
        self.assertEqual(self.config_manager.load_from_dict(None), [])
        self.assertEqual(self.config_manager.load_from_dict({}), [])
        self.assertEqual(len(self.config_manager.load_from_dict({"api": "oops"})), 1)

    def test_reset_to_defaults(self):
        """Test resetting settings to defaults."""
        self.config_manager.set_api_url("https://example.com/api.php")
        self.config_manager.set_request_timeout(30)

        self.config_manager.reset_to_defaults()

        self.assertEqual(self.config_manager.get_api_url(), ConfigManager.DEFAULT_API_URL)
        self.assertEqual(self.config_manager.get_request_timeout(), ConfigManager.DEFAULT_REQUEST_TIMEOUT)

    def test_validate_settings(self):
        """Test validation of valid and corrupted settings."""
        validation = self.config_manager.validate_settings()
        self.assertTrue(validation['valid'])
        self.assertEqual(validation['issues'], [])

        # Corrupt settings directly
        self.config_manager._settings.request_timeout = 0
        self.config_manager._settings.api_url = "nowhere"

        validation = self.config_manager.validate_settings()
        self.assertFalse(validation['valid'])
        self.assertEqual(len(validation['issues']), 2)

    def test_get_settings_summary(self):
        """Test settings summary generation."""
        summary = self.config_manager.get_settings_summary()

        self.assertIn("https://opentdb.com/api.php", summary)
        self.assertIn("10 seconds", summary)
        self.assertIn("1-50", summary)


if __name__ == '__main__':
    unittest.main()
