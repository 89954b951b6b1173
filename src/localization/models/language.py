"""
Language tables for error message translations.

A Language maps translation keys (e.g. "NotEmptyMessage") to localized
message templates for a single culture. Built-in tables are immutable once
constructed; GenericLanguage is the mutable overlay used for translations
registered at runtime.
"""

import json
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


class InvalidArgumentError(ValueError):
    """Raised when a translation is registered with an empty culture, key or message."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"'{argument}' must not be empty")


class Language(BaseModel):
    """
    Translations for a single culture.

    Examples:
        >>> english = Language(culture="en", translations={"NotNullMessage": "'{PropertyName}' must not be empty."})
        >>> english.get_translation("NotNullMessage")
        "'{PropertyName}' must not be empty."
        >>> english.get_translation("Unknown") is None
        True
    """

    model_config = ConfigDict(frozen=True)

    culture: str = Field(..., min_length=1, description="Culture code, e.g. 'fr' or 'pt-BR'")
    translations: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Translation key to message template",
    )

    @field_validator("translations")
    @classmethod
    def validate_translations(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        for key, message in v.items():
            if not key:
                raise ValueError("Translation keys must not be empty")
            if not message:
                raise ValueError(f"Translation for '{key}' must not be empty")
        # Read-only view over a private copy of the input
        return MappingProxyType(dict(v))

    def get_translation(self, key: str) -> str | None:
        """Get the message for a key, or None if this table has no translation."""
        return self.translations.get(key)

    def get_supported_keys(self) -> frozenset[str]:
        """Keys this table provides a translation for."""
        return frozenset(self.translations)

    def missing_keys(self, reference: Iterable[str]) -> set[str]:
        """Keys from a reference key set that this table does not translate."""
        return {key for key in reference if not self.translations.get(key)}

    def __contains__(self, key: object) -> bool:
        return key in self.translations

    def __len__(self) -> int:
        return len(self.translations)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(culture='{self.culture}', keys={len(self)})"


class GenericLanguage(Language):
    """
    Mutable overlay table populated at runtime.

    Used for cultures without a built-in table, or to override single keys of
    a built-in culture without touching the built-in table itself.
    """

    model_config = ConfigDict(frozen=False)

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def translate(self, key: str, message: str) -> None:
        """Insert or overwrite the message for a key."""
        if not key:
            raise InvalidArgumentError("key")
        if not message:
            raise InvalidArgumentError("message")

        with self._lock:
            # Readers never take the lock; publish a new dict instead of mutating in place
            updated = dict(self.translations)
            updated[key] = message
            self.translations = updated


def load_language(culture: str, data_dir: Path | str) -> Language:
    """
    Load a built-in language table from ``<data_dir>/<culture>.json``.

    The file holds a flat JSON object of translation key to message. Loading
    has no side effects, so calling it twice yields equal tables.

    Raises:
        FileNotFoundError: If no file exists for the culture
        ValueError: If the file is not valid JSON or not a flat string mapping
    """
    path = Path(data_dir) / f"{culture}.json"

    if not path.exists():
        raise FileNotFoundError(f"Language file not found: {path.absolute()}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Language file {path} must contain a JSON object")

    return Language(culture=culture, translations=data)
