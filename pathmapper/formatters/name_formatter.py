"""
Package path formatters - per-language rendering of package segments.

Each target language lays out generated packages differently on disk: Ruby
and Python use lower_underscore directories, C# and PHP use UpperCamel, and
Java, Node.js and Go keep the segment as written.
"""
from abc import ABC, abstractmethod
from typing import Dict, List
import logging

from ..models.naming import Name

logger = logging.getLogger(__name__)


class NameFormatter(ABC):
    """Formats a normalized Name as one piece of a package file path."""

    @abstractmethod
    def package_file_path_piece(self, name: Name) -> str:
        pass


class LowerUnderscoreNameFormatter(NameFormatter):
    def package_file_path_piece(self, name: Name) -> str:
        return name.to_lower_underscore()


class UpperCamelNameFormatter(NameFormatter):
    def package_file_path_piece(self, name: Name) -> str:
        return name.to_upper_camel()


class OriginalNameFormatter(NameFormatter):
    def package_file_path_piece(self, name: Name) -> str:
        return name.to_original()


class RubyNameFormatter(LowerUnderscoreNameFormatter):
    pass


class PythonNameFormatter(LowerUnderscoreNameFormatter):
    pass


class CSharpNameFormatter(UpperCamelNameFormatter):
    pass


class PhpNameFormatter(UpperCamelNameFormatter):
    pass


class JavaNameFormatter(OriginalNameFormatter):
    pass


class NodeJSNameFormatter(OriginalNameFormatter):
    pass


class GoNameFormatter(OriginalNameFormatter):
    pass


_FORMATTERS: Dict[str, type] = {
    'csharp': CSharpNameFormatter,
    'go': GoNameFormatter,
    'java': JavaNameFormatter,
    'nodejs': NodeJSNameFormatter,
    'php': PhpNameFormatter,
    'python': PythonNameFormatter,
    'ruby': RubyNameFormatter,
}


def supported_languages() -> List[str]:
    return sorted(_FORMATTERS)


def get_name_formatter(language: str) -> NameFormatter:
    """
    Look up the package path formatter for a target language.

    Args:
        language: Language key, case-insensitive (e.g. "ruby", "CSharp")

    Returns:
        A new formatter instance

    Raises:
        ValueError: If no formatter is registered for the language
    """
    key = (language or '').strip().lower()
    formatter_class = _FORMATTERS.get(key)
    if formatter_class is None:
        raise ValueError(
            f"Unsupported formatter language: {language!r} "
            f"(supported: {', '.join(supported_languages())})"
        )
    logger.debug(f"Using {formatter_class.__name__} for language '{key}'")
    return formatter_class()
