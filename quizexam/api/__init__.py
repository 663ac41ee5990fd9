"""
Quiz service API client.
"""

from .client import QuizBankClient

__all__ = ["QuizBankClient"]
