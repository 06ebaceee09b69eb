# -*- coding: utf-8 -*-
"""
Tests for the Translation Manager.

Tests cover:
- Language switching and listeners
- English fallback and raw keys
- Placeholder formatting
"""

from services.translation_manager import (
    TranslationManager, get_language, is_rtl, set_language, tr,
)


class TestLanguageSwitching:
    """Test changing the current language."""

    def test_default_is_arabic(self):
        """Test the test session runs in Arabic."""
        assert get_language() == "ar"
        assert is_rtl() is True

    def test_switch_to_english(self):
        """Test messages follow the language."""
        set_language("en")
        assert get_language() == "en"
        assert is_rtl() is False
        assert tr("error.api.server") == "A server error occurred. Please try again later."

    def test_unsupported_language_ignored(self):
        """Test an unknown code keeps the current language."""
        set_language("fr")
        assert get_language() == "ar"

    def test_listeners(self):
        """Test callbacks run once per actual change."""
        manager = TranslationManager()
        seen = []
        manager.on_language_changed(seen.append)
        try:
            set_language("en")
            set_language("en")
            set_language("ar")
        finally:
            manager.remove_listener(seen.append)

        assert seen == ["en", "ar"]

    def test_failing_listener_does_not_block(self):
        """Test a raising callback does not stop the switch."""
        manager = TranslationManager()

        def broken(code):
            raise RuntimeError("listener failed")

        manager.on_language_changed(broken)
        try:
            set_language("en")
        finally:
            manager.remove_listener(broken)

        assert get_language() == "en"


class TestTranslate:
    """Test message lookup."""

    def test_singleton(self):
        """Test every construction returns the same manager."""
        assert TranslationManager() is TranslationManager()
        assert TranslationManager().languages == ["ar", "en"]

    def test_unknown_key_returned(self):
        """Test a missing key comes back unchanged."""
        assert tr("no.such.key") == "no.such.key"
        assert TranslationManager().has_key("no.such.key") is False

    def test_placeholders(self):
        """Test keyword values are formatted in."""
        message = tr("lookup.company.too_short", count=3)
        assert "3" in message
        assert "{count}" not in message

    def test_missing_placeholder_value(self):
        """Test a message is still returned when a value is missing."""
        message = tr("lookup.company.too_short", other=1)
        assert message == TranslationManager()._catalogs["ar"]["lookup.company.too_short"]
