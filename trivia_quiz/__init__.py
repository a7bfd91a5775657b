"""
Interactive command-line trivia quiz backed by the Open Trivia DB.
"""

__version__ = "1.0.0"
