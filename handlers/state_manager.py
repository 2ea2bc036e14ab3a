"""
State Manager - Session-Scoped Language State
==============================================

The active display language lives in one ``LanguageState`` object that
the application root places in the Streamlit session. Components receive
it explicitly or look it up from the session:

- ``provide_language_state``: create the scope at mount (default ``ar``)
- ``lookup_language_state``: result-typed access, never raises
- ``use_language``: access that fails loudly outside the scope
- ``reset_language_state``: drop the scope (unmount / reload)

The state is discarded with the session, so a reload starts again from
the configured default.
"""

import streamlit as st
from dataclasses import dataclass
from typing import Any, Callable, List, MutableMapping, Optional
import logging

from templates.form_schema import SUPPORTED_LANGUAGES, TEXT_DIRECTIONS

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DEFAULT_LANGUAGE = "ar"
LANGUAGE_STATE_KEY = "language_state"

LanguageListener = Callable[[str, str], None]


class ConfigurationError(RuntimeError):
    """Programming error in how the application is wired together"""


class LanguageScopeError(ConfigurationError):
    """Language state accessed before the application root provided it"""

    def __init__(self, message: str = "use_language must be called within a language state scope"):
        super().__init__(message)


class LanguageState:
    """
    Current display language with change notification.

    Only ``ar`` and ``en`` are accepted. Listeners are called with
    ``(old, new)`` after a real change; setting the active language again
    is a no-op.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self._check(language)
        self._language = language
        self._listeners: List[LanguageListener] = []

    @staticmethod
    def _check(language: str):
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language {language!r}; expected one of {', '.join(SUPPORTED_LANGUAGES)}"
            )

    @property
    def language(self) -> str:
        return self._language

    @property
    def direction(self) -> str:
        return TEXT_DIRECTIONS[self._language]

    @property
    def is_arabic(self) -> bool:
        return self._language == "ar"

    def set_language(self, language: str):
        """Switch the active language and notify listeners"""
        self._check(language)
        old = self._language
        if language == old:
            return
        self._language = language
        for listener in list(self._listeners):
            listener(old, language)

    def toggle(self):
        """Flip between the two supported languages"""
        self.set_language("en" if self._language == "ar" else "ar")

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __repr__(self) -> str:
        return f"LanguageState(language={self._language!r})"


@dataclass
class LanguageLookup:
    """Result of looking up the language state in a session"""
    state: Optional[LanguageState] = None
    error: Optional[ConfigurationError] = None

    @property
    def ok(self) -> bool:
        return self.state is not None

    def unwrap(self) -> LanguageState:
        if self.state is None:
            raise self.error or LanguageScopeError()
        return self.state


def _session(session: Optional[MutableMapping[str, Any]]) -> MutableMapping[str, Any]:
    return st.session_state if session is None else session


def _log_language_change(old: str, new: str):
    logger.info(f"Display language changed: {old} -> {new}")


def provide_language_state(
    session: Optional[MutableMapping[str, Any]] = None,
    default: str = DEFAULT_LANGUAGE
) -> LanguageState:
    """
    Open the language scope for this session.

    Creates the state on first call (application mount) and returns the
    existing one on every rerun after that.

    Args:
        session: Session mapping, Streamlit's session state by default
        default: Initial language for a new session

    Returns:
        The session's LanguageState
    """
    scope = _session(session)
    state = scope.get(LANGUAGE_STATE_KEY)
    if not isinstance(state, LanguageState):
        state = LanguageState(default)
        state.subscribe(_log_language_change)
        scope[LANGUAGE_STATE_KEY] = state
        logger.info(f"Language state created with default {default!r}")
    return state


def lookup_language_state(session: Optional[MutableMapping[str, Any]] = None) -> LanguageLookup:
    """Find the session's language state without raising"""
    state = _session(session).get(LANGUAGE_STATE_KEY)
    if isinstance(state, LanguageState):
        return LanguageLookup(state=state)
    return LanguageLookup(error=LanguageScopeError())


def use_language(session: Optional[MutableMapping[str, Any]] = None) -> LanguageState:
    """
    Get the session's language state.

    Raises:
        LanguageScopeError: provide_language_state was never called
    """
    return lookup_language_state(session).unwrap()


def reset_language_state(session: Optional[MutableMapping[str, Any]] = None):
    """Close the language scope; the next provide starts from the default"""
    scope = _session(session)
    if LANGUAGE_STATE_KEY in scope:
        del scope[LANGUAGE_STATE_KEY]
