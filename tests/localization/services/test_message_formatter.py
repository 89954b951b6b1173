"""Tests for MessageFormatter and format_message."""

from src.localization.services.message_formatter import MessageFormatter, format_message


class TestMessageFormatter:
    """Test placeholder replacement."""

    def test_property_name(self):
        formatter = MessageFormatter().append_property_name("Surname")
        assert formatter.build_message("'{PropertyName}' must not be empty.") == "'Surname' must not be empty."

    def test_multiple_arguments(self):
        formatter = (
            MessageFormatter()
            .append_property_name("Age")
            .append_argument("From", 18)
            .append_argument("To", 65)
            .append_property_value(70)
        )
        message = formatter.build_message(
            "'{PropertyName}' must be between {From} and {To}. You entered {PropertyValue}."
        )
        assert message == "'Age' must be between 18 and 65. You entered 70."

    def test_unknown_placeholder_left_intact(self):
        formatter = MessageFormatter().append_property_name("Name")
        assert formatter.build_message("{PropertyName} {Unknown}") == "Name {Unknown}"

    def test_none_value_renders_empty(self):
        formatter = MessageFormatter().append_property_value(None)
        assert formatter.build_message("[{PropertyValue}]") == "[]"

    def test_repeated_placeholder(self):
        formatter = MessageFormatter().append_argument("X", "a")
        assert formatter.build_message("{X}{X}") == "aa"

    def test_later_value_wins(self):
        formatter = MessageFormatter().append_argument("X", "a").append_argument("X", "b")
        assert formatter.build_message("{X}") == "b"

    def test_template_without_placeholders(self):
        assert MessageFormatter().build_message("Plain text.") == "Plain text."


class TestFormatMessage:
    """Test formatting messages looked up from a LanguageManager."""

    def test_english(self, manager):
        message = format_message(manager, "GreaterThanMessage", "en", PropertyName="Age", ComparisonValue=18)
        assert message == "'Age' must be greater than '18'."

    def test_french_specific_culture(self, manager):
        message = format_message(manager, "NotEmptyMessage", "fr-FR", PropertyName="Nom")
        assert message == "'Nom' ne doit pas être vide."

    def test_overlay_translation(self, manager):
        manager.add_translation("xx", "NotEmptyMessage", "{PropertyName}!!")
        assert format_message(manager, "NotEmptyMessage", "xx", PropertyName="Nom") == "Nom!!"

    def test_unknown_key(self, manager):
        assert format_message(manager, "ThisKeyDoesNotExist", "en", PropertyName="Nom") == ""
