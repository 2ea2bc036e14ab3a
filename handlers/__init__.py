"""
Handlers Package
================
Session state and side effects for the intake form.

This package contains:
- state_manager: Session-scoped language state
- submission_handler: Submission records and reporting
"""

from .state_manager import (
    LanguageState,
    LanguageScopeError,
    ConfigurationError,
    provide_language_state,
    lookup_language_state,
    use_language,
)
from .submission_handler import SubmissionRecord, collect_submission, handle_submission

__all__ = [
    'LanguageState',
    'LanguageScopeError',
    'ConfigurationError',
    'provide_language_state',
    'lookup_language_state',
    'use_language',
    'SubmissionRecord',
    'collect_submission',
    'handle_submission',
]
