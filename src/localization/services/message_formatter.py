"""
Validation message formatting.

Message templates contain ``{Name}`` placeholders, e.g.
"'{PropertyName}' must be greater than '{ComparisonValue}'."
"""

import re
from typing import Any

from src.localization.services.language_manager import LanguageManager

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class MessageFormatter:
    """
    Builds a validation message by replacing placeholders with argument values.

    Placeholders without a value are left as they are.

    Examples:
        >>> formatter = MessageFormatter().append_property_name("Surname")
        >>> formatter.build_message("'{PropertyName}' must not be empty.")
        "'Surname' must not be empty."
    """

    PROPERTY_NAME = "PropertyName"
    PROPERTY_VALUE = "PropertyValue"

    def __init__(self) -> None:
        self.placeholder_values: dict[str, Any] = {}

    def append_argument(self, name: str, value: Any) -> "MessageFormatter":
        self.placeholder_values[name] = value
        return self

    def append_property_name(self, name: str) -> "MessageFormatter":
        return self.append_argument(self.PROPERTY_NAME, name)

    def append_property_value(self, value: Any) -> "MessageFormatter":
        return self.append_argument(self.PROPERTY_VALUE, value)

    def build_message(self, template: str) -> str:
        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in self.placeholder_values:
                return match.group(0)
            value = self.placeholder_values[name]
            return "" if value is None else str(value)

        return PLACEHOLDER_PATTERN.sub(replace, template)


def format_message(
    manager: LanguageManager, key: str, culture: str | None = None, **arguments: Any
) -> str:
    """
    Look up a message template and fill in its placeholders.

    Examples:
        >>> format_message(LanguageManager(), "GreaterThanMessage", "en", PropertyName="Age", ComparisonValue=18)
        "'Age' must be greater than '18'."
    """
    template = manager.get_string(key, culture)
    if not template:
        return ""

    formatter = MessageFormatter()
    for name, value in arguments.items():
        formatter.append_argument(name, value)
    return formatter.build_message(template)
