"""
Configuration manager for trivia quiz settings and parameters.
"""
import logging
from typing import Optional, Dict, Any, List

from .models import QuizSettings


class ConfigManager:
    """Manages provider settings and quiz input limits."""

    # Default configuration values
    DEFAULT_API_URL = "https://opentdb.com/api.php"
    DEFAULT_REQUEST_TIMEOUT = 10

    # Validation limits
    MIN_REQUEST_TIMEOUT = 1
    MAX_REQUEST_TIMEOUT = 60
    MIN_QUESTION_COUNT = 1
    MAX_QUESTION_COUNT = 50

    def __init__(self):
        """Initialize ConfigManager with default settings."""
        self.logger = logging.getLogger(__name__)
        self._settings = QuizSettings(
            api_url=self.DEFAULT_API_URL,
            request_timeout=self.DEFAULT_REQUEST_TIMEOUT
        )

    def get_quiz_settings(self) -> QuizSettings:
        """
        Get a copy of the current settings.

        Returns:
            QuizSettings object with current configuration
        """
        return QuizSettings(
            api_url=self._settings.api_url,
            request_timeout=self._settings.request_timeout
        )

    def set_api_url(self, url: str) -> Dict[str, Any]:
        """
        Set the question provider endpoint.

        Args:
            url: Absolute http(s) URL of the provider API

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if not isinstance(url, str):
            error_msg = f"API URL must be a string, got {type(url).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid input: Expected a URL, got {type(url).__name__}"
            }

        url = url.strip()
        if not url.startswith(("http://", "https://")):
            error_msg = f"API URL must start with http:// or https://, got '{url}'"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid URL: {url or '(empty)'}"
            }

        self._settings.api_url = url
        self.logger.info(f"API URL set to {url}")
        return {
            'success': True,
            'message': f"API URL set to {url}",
            'user_message': f"✅ Questions will be fetched from {url}"
        }

    def get_api_url(self) -> str:
        return self._settings.api_url

    def set_request_timeout(self, timeout: int) -> Dict[str, Any]:
        """
        Set the network timeout for the question request.

        Args:
            timeout: Timeout in seconds

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        # bool is an int subclass
        if not isinstance(timeout, int) or isinstance(timeout, bool):
            error_msg = f"Request timeout must be an integer, got {type(timeout).__name__}"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Invalid input: Expected a number, got {type(timeout).__name__}"
            }

        if timeout < self.MIN_REQUEST_TIMEOUT:
            error_msg = f"Request timeout must be at least {self.MIN_REQUEST_TIMEOUT} seconds"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Timeout too short: Minimum is {self.MIN_REQUEST_TIMEOUT} seconds"
            }

        if timeout > self.MAX_REQUEST_TIMEOUT:
            error_msg = f"Request timeout cannot exceed {self.MAX_REQUEST_TIMEOUT} seconds"
            self.logger.error(error_msg)
            return {
                'success': False,
                'error': error_msg,
                'user_message': f"❌ Timeout too long: Maximum is {self.MAX_REQUEST_TIMEOUT} seconds"
            }

        self._settings.request_timeout = timeout
        self.logger.info(f"Request timeout set to {timeout} seconds")
        return {
            'success': True,
            'message': f"Request timeout set to {timeout} seconds",
            'user_message': f"✅ Request timeout set to {timeout} seconds"
        }

    def get_request_timeout(self) -> int:
        return self._settings.request_timeout

    def load_from_dict(self, config: Optional[Dict[str, Any]]) -> List[str]:
        """
        Apply settings from a parsed configuration file.

        Invalid values are logged and skipped, keeping the previous value.

        Args:
            config: Parsed config.json content, or None

        Returns:
            List of user-friendly messages for rejected values
        """
        rejected = []
        if not config:
            return rejected

        api_config = config.get('api', {})
        if not isinstance(api_config, dict):
            self.logger.warning("Ignoring 'api' section: expected an object")
            return ["❌ Configuration Issue: 'api' section must be an object"]

        if 'url' in api_config:
            result = self.set_api_url(api_config['url'])
            if not result['success']:
                rejected.append(result['user_message'])

        if 'timeout' in api_config:
            result = self.set_request_timeout(api_config['timeout'])
            if not result['success']:
                rejected.append(result['user_message'])

        if rejected:
            self.logger.warning(f"Rejected {len(rejected)} configuration value(s), defaults kept")
        return rejected

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values."""
        self._settings = QuizSettings(
            api_url=self.DEFAULT_API_URL,
            request_timeout=self.DEFAULT_REQUEST_TIMEOUT
        )
        self.logger.info("All settings reset to default values")

    def validate_settings(self) -> Dict[str, Any]:
        """
        Validate current settings and return validation results.

        Returns:
            Dictionary with validation results and any issues found
        """
        validation_result = {
            "valid": True,
            "issues": []
        }

        if (not isinstance(self._settings.api_url, str) or
            not self._settings.api_url.startswith(("http://", "https://"))):
            validation_result["valid"] = False
            validation_result["issues"].append(
                f"Invalid API URL: {self._settings.api_url}"
            )

        if (not isinstance(self._settings.request_timeout, int) or
            self._settings.request_timeout < self.MIN_REQUEST_TIMEOUT or
            self._settings.request_timeout > self.MAX_REQUEST_TIMEOUT):
            validation_result["valid"] = False
            validation_result["issues"].append(
                f"Invalid request timeout: {self._settings.request_timeout}"
            )

        return validation_result

    def get_settings_summary(self) -> str:
        """
        Get a formatted summary of current settings.

        Returns:
            Human-readable string describing current settings
        """
        return (
            f"Quiz Settings:\n"
            f"• Provider: {self._settings.api_url}\n"
            f"• Timeout: {self._settings.request_timeout} seconds\n"
            f"• Questions: {self.MIN_QUESTION_COUNT}-{self.MAX_QUESTION_COUNT} per quiz"
        )
