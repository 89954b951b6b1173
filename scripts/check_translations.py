#!/usr/bin/env python3
"""
Report translation coverage of the built-in language tables.

Usage:
    python scripts/check_translations.py [--strict] [culture ...]

Each culture is compared against the English fallback table. With --strict
the script exits with status 1 when any culture is missing keys.
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.localization.core.config import get_settings  # noqa: E402
from src.localization.core.logging_setup import configure_logging  # noqa: E402
from src.localization.languages import LanguageFactory  # noqa: E402
from src.localization.services.language_manager import FALLBACK_CULTURE  # noqa: E402

logger = logging.getLogger("check_translations")


def coverage_report(factory: LanguageFactory, cultures: list[str] | None = None) -> dict[str, set[str]]:
    """Missing keys per culture, relative to the fallback table."""
    fallback = factory.create(FALLBACK_CULTURE)
    if fallback is None:
        raise ValueError(f"No '{FALLBACK_CULTURE}' table available")

    reference = fallback.get_supported_keys()
    report: dict[str, set[str]] = {}

    for culture in cultures or factory.supported_cultures:
        language = factory.create(culture)
        if language is None:
            raise ValueError(f"Unknown culture: {culture}")
        report[culture] = language.missing_keys(reference)

    return report


def main(argv: list[str]) -> int:
    strict = "--strict" in argv
    cultures = [arg for arg in argv if not arg.startswith("--")]

    configure_logging(get_settings().logging)

    factory = LanguageFactory.builtin()
    try:
        report = coverage_report(factory, cultures or None)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    total = len(factory.create(FALLBACK_CULTURE) or [])

    for culture, missing in report.items():
        translated = total - len(missing)
        print(f"{culture:8} {translated:3}/{total} keys")
        for key in sorted(missing):
            print(f"           missing: {key}")

    incomplete_count = sum(1 for missing in report.values() if missing)
    logger.info(f"Checked {len(report)} cultures, {incomplete_count} incomplete")

    return 1 if strict and incomplete_count else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
