"""Translation lookup and message formatting services."""

from src.localization.services.language_manager import FALLBACK_CULTURE, LanguageManager
from src.localization.services.message_formatter import MessageFormatter, format_message

__all__ = [
    "FALLBACK_CULTURE",
    "LanguageManager",
    "MessageFormatter",
    "format_message",
]
