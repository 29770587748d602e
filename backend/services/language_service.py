import logging
from typing import Callable

from config import settings
from models.language import Language

logger = logging.getLogger(__name__)

Listener = Callable[[Language], None]


class LanguageState:
    """Current UI language with explicit change notifications."""

    def __init__(self, language: Language | str = Language.AZ):
        self._language = Language(language)
        self._listeners: list[Listener] = []

    @property
    def language(self) -> Language:
        return self._language

    def set(self, language: Language | str) -> None:
        language = Language(language)
        if language == self._language:
            return
        self._language = language
        logger.info("Language changed to %s", language.value)
        for listener in list(self._listeners):
            listener(language)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


language_state = LanguageState(settings.default_language)
