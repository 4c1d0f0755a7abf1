"""
Messaging package initializer.

Provides the emailers used for password resets.
"""

from .emailer import Emailer, LogOnlyEmailer, ResendEmailer, init_emailer

__all__ = [
    "Emailer",
    "LogOnlyEmailer",
    "ResendEmailer",
    "init_emailer",
]
