"""
Culture code helpers.

Culture codes follow the ``language[-Script][-REGION]`` convention
(e.g. "en", "fr-FR", "zh-Hans-CN"). Parent/neutral relationships are
derived from the code string itself, so the fallback chain does not
depend on the platform's locale database.

The ambient culture is stored in a ContextVar, which makes it local to
the current thread or asyncio task.
"""

import locale
import os
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

CULTURE_SEPARATOR = "-"
INVARIANT_CULTURE = ""

LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")

_POSIX_CULTURES = {"C", "POSIX"}

_current_culture: ContextVar[str | None] = ContextVar("current_culture", default=None)


def normalize_culture(code: str | None) -> str:
    """
    Normalize a culture code to its canonical form.

    Examples:
        >>> normalize_culture("pt_br")
        'pt-BR'
        >>> normalize_culture("zh-hans-cn")
        'zh-Hans-CN'
        >>> normalize_culture("fr_FR.UTF-8")
        'fr-FR'
        >>> normalize_culture(None)
        ''
    """
    if not code:
        return INVARIANT_CULTURE

    code = code.strip().split(".")[0].split("@")[0]
    if not code or code in _POSIX_CULTURES:
        return INVARIANT_CULTURE

    parts = [part for part in code.replace("_", CULTURE_SEPARATOR).split(CULTURE_SEPARATOR) if part]
    if not parts:
        return INVARIANT_CULTURE

    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        elif (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit()):
            normalized.append(part.upper())
        else:
            normalized.append(part)
    return CULTURE_SEPARATOR.join(normalized)


def is_neutral_culture(code: str | None) -> bool:
    """True when the culture has a language part and no region/script part."""
    normalized = normalize_culture(code)
    return bool(normalized) and CULTURE_SEPARATOR not in normalized


def parent_culture(code: str | None) -> str:
    """
    Get the parent culture by dropping the last subtag.

    Examples:
        >>> parent_culture("fr-FR")
        'fr'
        >>> parent_culture("fr")
        ''
    """
    normalized = normalize_culture(code)
    if CULTURE_SEPARATOR not in normalized:
        return INVARIANT_CULTURE
    return normalized.rsplit(CULTURE_SEPARATOR, 1)[0]


def get_system_culture() -> str:
    """
    Culture of the running process, or the invariant culture if unset.

    Environment variables are checked in gettext order before the locale
    module, which only reports a language once setlocale() has been called.
    """
    for name in LOCALE_ENV_VARS:
        # LANGUAGE is a colon-separated priority list
        value = os.environ.get(name, "").split(":")[0]
        culture = normalize_culture(value)
        if culture:
            return culture

    try:
        language_code = locale.getlocale(locale.LC_MESSAGES)[0]
    except AttributeError:
        # LC_MESSAGES is unavailable on Windows
        try:
            language_code = locale.getlocale()[0]
        except ValueError:
            return INVARIANT_CULTURE
    except ValueError:
        return INVARIANT_CULTURE
    return normalize_culture(language_code)


def get_current_culture() -> str:
    """Get the ambient culture for the current context."""
    culture = _current_culture.get()
    if culture is None:
        return get_system_culture()
    return culture


def set_current_culture(code: str | None) -> Token:
    """
    Set the ambient culture for the current context.

    Returns:
        Token to pass to reset_current_culture()
    """
    return _current_culture.set(None if code is None else normalize_culture(code))


def reset_current_culture(token: Token) -> None:
    """Restore the ambient culture that was active before set_current_culture()."""
    _current_culture.reset(token)


@contextmanager
def use_culture(code: str | None) -> Iterator[str]:
    """
    Temporarily switch the ambient culture.

    Examples:
        >>> with use_culture("de-DE"):
        ...     get_current_culture()
        'de-DE'
    """
    token = set_current_culture(code)
    try:
        yield get_current_culture()
    finally:
        reset_current_culture(token)
