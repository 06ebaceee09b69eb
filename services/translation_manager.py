# -*- coding: utf-8 -*-
"""
Translation Manager.

Every user-facing message of the engine (validation errors, API error texts,
notices, step titles) goes through tr(). Catalogs live in
services/translations/<code>.py; Arabic is the default and English is the
fallback for keys a catalog does not define.
"""

from typing import Callable, Dict, List

from utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_LANGUAGE = "en"
RTL_LANGUAGES = ("ar",)


def _load_catalogs() -> Dict[str, Dict[str, str]]:
    from services.translations.ar import AR_TRANSLATIONS
    from services.translations.en import EN_TRANSLATIONS
    return {"ar": AR_TRANSLATIONS, "en": EN_TRANSLATIONS}


class TranslationManager:
    """Process-wide message catalog (singleton)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            from app.config import Config
            instance = super().__new__(cls)
            instance._catalogs = _load_catalogs()
            instance._listeners: List[Callable[[str], None]] = []
            instance._language = Config.DEFAULT_LANGUAGE
            if instance._language not in instance._catalogs:
                logger.warning(f"Unknown default language '{instance._language}', using 'ar'")
                instance._language = "ar"
            cls._instance = instance
        return cls._instance

    @property
    def languages(self) -> List[str]:
        return sorted(self._catalogs)

    def on_language_changed(self, callback: Callable[[str], None]):
        """Register a callback invoked with the new language code."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[str], None]):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def set_language(self, lang_code: str):
        if lang_code not in self._catalogs:
            logger.warning(f"Unsupported language '{lang_code}', keeping '{self._language}'")
            return
        if lang_code == self._language:
            return

        self._language = lang_code
        logger.info(f"Language changed to: {lang_code}")
        for callback in list(self._listeners):
            try:
                callback(lang_code)
            except Exception as e:
                logger.error(f"Language change callback error: {e}", exc_info=True)

    def get_language(self) -> str:
        return self._language

    def has_key(self, key: str) -> bool:
        return any(key in catalog for catalog in self._catalogs.values())

    def tr(self, key: str, **kwargs) -> str:
        """
        Translate a message key in the current language.

        Args:
            key: Catalog key, e.g. "error.api.server"
            **kwargs: Values for the {placeholders} of the message

        Returns:
            The formatted message, the fallback language's message when the
            current catalog lacks the key, or the key itself.
        """
        message = self._catalogs[self._language].get(key)
        if message is None:
            message = self._catalogs[FALLBACK_LANGUAGE].get(key)
        if message is None:
            logger.debug(f"Missing translation key: {key}")
            return key
        if not kwargs:
            return message
        try:
            return message.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning(f"Could not format '{key}' with {sorted(kwargs)}: {e}")
            return message

    def is_rtl(self) -> bool:
        return self._language in RTL_LANGUAGES


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def is_rtl() -> bool:
    return _translator.is_rtl()
