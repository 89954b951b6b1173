"""
Built-in language tables.

The factory dispatches a culture code to a constructor for its built-in
Language table. Tables are stored as JSON files in the ``data/`` directory
next to this module, one file per culture.
"""

from collections.abc import Callable, Iterator, Mapping
from functools import partial
from pathlib import Path

from src.localization.core.culture import normalize_culture
from src.localization.models.language import Language, load_language

DATA_DIR = Path(__file__).parent / "data"

BUILTIN_CULTURES = ("en", "de", "es", "fr", "it", "nl", "pt", "pt-BR", "ru")

LanguageConstructor = Callable[[], Language]


class LanguageFactory:
    """
    Maps culture codes to constructors of built-in Language tables.

    Constructors must be pure: calling one twice yields equal tables with no
    side effects. LanguageManager relies on this when two threads race to
    build the same culture.

    Examples:
        >>> factory = LanguageFactory.builtin()
        >>> factory.create("fr").culture
        'fr'
        >>> factory.create("zz") is None
        True
    """

    def __init__(self, constructors: Mapping[str, LanguageConstructor] | None = None):
        self._constructors: dict[str, LanguageConstructor] = {}
        for culture, constructor in (constructors or {}).items():
            self.register(culture, constructor)

    @classmethod
    def builtin(cls, data_dir: Path | str | None = None) -> "LanguageFactory":
        """Create a factory for the packaged cultures."""
        data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        return cls({culture: partial(load_language, culture, data_dir) for culture in BUILTIN_CULTURES})

    def register(self, culture: str, constructor: LanguageConstructor) -> None:
        """Add or replace the constructor for a culture."""
        culture = normalize_culture(culture)
        if not culture:
            raise ValueError("Culture must not be empty")
        self._constructors[culture] = constructor

    def create(self, culture: str) -> Language | None:
        """Build the table for a culture, or None if the culture is unknown."""
        constructor = self._constructors.get(normalize_culture(culture))
        if constructor is None:
            return None
        return constructor()

    @property
    def supported_cultures(self) -> list[str]:
        return sorted(self._constructors)

    def __contains__(self, culture: object) -> bool:
        return isinstance(culture, str) and normalize_culture(culture) in self._constructors

    def __iter__(self) -> Iterator[str]:
        return iter(self.supported_cultures)
