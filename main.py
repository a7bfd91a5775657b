#!/usr/bin/env python3
"""
Trivia Quiz - Main Entry Point

This script runs the interactive trivia quiz. Questions are fetched from the
Open Trivia DB; an optional config.json in the working directory adjusts the
provider endpoint, request timeout and logging.

Usage:
    python main.py

Environment Variables:
    TRIVIA_QUIZ_API_URL: Question provider endpoint (overrides config.json)
"""

import json
import logging
import os
import sys
from pathlib import Path

from trivia_quiz.config_manager import ConfigManager
from trivia_quiz.quiz_controller import QuizController

CONFIG_PATH = Path("config.json")


def load_config(config_path=CONFIG_PATH):
    """Load configuration from config.json, or an empty config if it is absent."""
    if not config_path.exists():
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        print(f"❌ Error: Invalid JSON in {config_path}: {e}")
        sys.exit(1)
    except OSError as e:
        print(f"❌ Error loading {config_path}: {e}")
        sys.exit(1)

    if not isinstance(config, dict):
        print(f"❌ Error: {config_path} must contain a JSON object")
        sys.exit(1)
    return config


def setup_logging_from_config(config):
    """Set up logging based on configuration."""
    log_config = config.get('logging', {})
    log_level = getattr(logging, str(log_config.get('level', 'WARNING')).upper(), logging.WARNING)
    log_directory = Path(log_config.get('log_directory', './logs/'))

    log_directory.mkdir(parents=True, exist_ok=True)

    # File only, the console is reserved for the quiz
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_directory / "quiz.log", encoding='utf-8')
        ]
    )


def build_config_manager(config):
    """Create the ConfigManager from config.json and the environment."""
    config_manager = ConfigManager()
    for message in config_manager.load_from_dict(config):
        print(message)

    # Environment variable takes precedence
    api_url = os.getenv('TRIVIA_QUIZ_API_URL')
    if api_url:
        result = config_manager.set_api_url(api_url)
        if not result['success']:
            print(result['user_message'])

    validation = config_manager.validate_settings()
    if not validation['valid']:
        for issue in validation['issues']:
            print(f"❌ Configuration Issue: {issue}")
        config_manager.reset_to_defaults()

    logging.getLogger(__name__).info(config_manager.get_settings_summary())
    return config_manager


def main():
    """Run one quiz and return the process exit status."""
    try:
        config = load_config()
        setup_logging_from_config(config)
        config_manager = build_config_manager(config)
        return QuizController(config_manager).run()
    except (KeyboardInterrupt, EOFError):
        print("\n👋 Quiz stopped by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
