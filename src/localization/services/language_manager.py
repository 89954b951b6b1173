"""
Language manager for validation error message translations.

Resolves a translation key for a culture using lazily built, cached
Language tables and a fallback chain:

1. Exact culture (runtime overlay, then built-in table)
2. Neutral parent culture, if no table exists for the exact culture
3. English fallback table
4. Empty string
"""

import logging

from src.localization.core.config import LocalizationConfig, get_settings
from src.localization.core.culture import (
    get_current_culture,
    is_neutral_culture,
    normalize_culture,
    parent_culture,
)
from src.localization.languages import LanguageFactory
from src.localization.models.language import GenericLanguage, InvalidArgumentError, Language

FALLBACK_CULTURE = "en"

logger = logging.getLogger(__name__)


class LanguageManager:
    """
    Thread-safe registry of language tables.

    Built-in tables are created on first use and cached in a dict that is
    only ever written through ``dict.setdefault``, an atomic get-or-insert.
    Two threads that miss on the same culture may both build a table; the
    first one installed wins and the other is discarded. This is only
    correct because factory constructors are pure.

    Examples:
        >>> manager = LanguageManager()
        >>> manager.get_string("NotEmptyMessage", "en")
        "'{PropertyName}' must not be empty."
        >>> manager.get_string("NotEmptyMessage", "zz-ZZ") == manager.get_string("NotEmptyMessage", "en")
        True
        >>> manager.add_translation("xx", "Greeting", "Hi")
        >>> manager.get_string("Greeting", "xx")
        'Hi'
    """

    def __init__(
        self,
        factory: LanguageFactory | None = None,
        enabled: bool = True,
        culture: str | None = None,
    ):
        """
        Initialize the manager.

        Args:
            factory: Built-in table factory (defaults to the packaged languages)
            enabled: Whether culture resolution is enabled
            culture: Default culture used when get_string() is given none

        Raises:
            ValueError: If the factory cannot build the fallback table
        """
        self._factory = factory or LanguageFactory.builtin()

        fallback = self._factory.create(FALLBACK_CULTURE)
        if fallback is None:
            raise ValueError(f"Language factory has no '{FALLBACK_CULTURE}' fallback table")
        self._fallback: Language = fallback

        self._languages: dict[str, Language] = {FALLBACK_CULTURE: fallback}
        self._overlays: dict[str, GenericLanguage] = {}

        self.enabled = enabled
        self._culture: str | None = None
        self.culture = culture

    @classmethod
    def from_settings(
        cls, config: LocalizationConfig | None = None, factory: LanguageFactory | None = None
    ) -> "LanguageManager":
        """
        Create a manager from the ``localization`` settings section.

        Args:
            config: Settings section; defaults to the loaded application settings
            factory: Built-in table factory
        """
        if config is None:
            config = get_settings().localization
        return cls(factory=factory, enabled=config.enabled, culture=config.culture)

    @property
    def culture(self) -> str | None:
        """Default culture for all lookups. If None, the ambient culture is used."""
        return self._culture

    @culture.setter
    def culture(self, value: str | None) -> None:
        self._culture = normalize_culture(value) or None

    @property
    def fallback(self) -> Language:
        return self._fallback

    @property
    def supported_cultures(self) -> list[str]:
        """Cultures with a built-in table or a registered overlay."""
        return sorted(set(self._factory.supported_cultures) | set(self._overlays))

    def get_string(self, key: str, culture: str | None = None) -> str:
        """
        Get the translation for a key.

        Args:
            key: Translation key, e.g. "NotEmptyMessage"
            culture: Culture code. Defaults to ``culture``, then the ambient culture.

        Returns:
            The translated message, or "" if no table in the chain has one
        """
        if not key:
            return ""

        if not self.enabled:
            return self._fallback.get_translation(key) or ""

        resolved = normalize_culture(culture or self._culture or get_current_culture())
        languages = self._resolve_languages(resolved)

        for language in languages:
            value = language.get_translation(key)
            if value:
                return value

        # Selected culture is missing this key; fall back to English
        if not any(language is self._fallback for language in languages):
            return self._fallback.get_translation(key) or ""

        return ""

    def add_translation(self, culture: str, key: str, message: str) -> None:
        """
        Register a translation in the runtime overlay for a culture.

        Built-in tables are never modified. For a culture with a built-in
        table the overlay takes precedence key by key.

        Raises:
            InvalidArgumentError: If culture, key or message is empty
        """
        if not culture or not normalize_culture(culture):
            raise InvalidArgumentError("culture")
        if not key:
            raise InvalidArgumentError("key")
        if not message:
            raise InvalidArgumentError("message")

        culture = normalize_culture(culture)
        overlays = self._overlays

        overlay = overlays.get(culture)
        if overlay is None:
            overlay = overlays.setdefault(culture, GenericLanguage(culture=culture))
            logger.info(f"Registered translation overlay for culture '{culture}'")

        overlay.translate(key, message)

    def clear(self) -> None:
        """Remove all cached tables and overlays except the fallback table."""
        self._languages = {FALLBACK_CULTURE: self._fallback}
        self._overlays = {}
        logger.info("Language cache cleared")

    def get_supported_translation_keys(self) -> set[str]:
        """Keys defined by the fallback table, which every culture is expected to cover."""
        return set(self._fallback.get_supported_keys())

    def _resolve_languages(self, culture: str) -> list[Language]:
        languages = self._get_languages(culture)

        # No table for a specific culture; try its neutral parent instead
        if not languages and culture and not is_neutral_culture(culture):
            languages = self._get_languages(parent_culture(culture))

        return languages

    def _get_languages(self, culture: str) -> list[Language]:
        """Overlay and built-in table for exactly this culture, overlay first."""
        if not culture:
            return []

        languages: list[Language] = []

        overlay = self._overlays.get(culture)
        if overlay is not None:
            languages.append(overlay)

        builtin = self._get_or_add(culture)
        if builtin is not None:
            languages.append(builtin)

        return languages

    def _get_or_add(self, culture: str) -> Language | None:
        cache = self._languages

        language = cache.get(culture)
        if language is not None:
            return language

        try:
            candidate = self._factory.create(culture)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to build language table for '{culture}': {e}")
            return None

        if candidate is None:
            return None

        language = cache.setdefault(culture, candidate)
        if language is candidate:
            logger.debug(f"Built language table for '{culture}' ({len(candidate)} keys)")
        else:
            logger.debug(f"Discarded duplicate language table for '{culture}'")
        return language
