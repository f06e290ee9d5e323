"""
Naming convention utilities for the Doctrine entity generator.

This module provides the pure string transforms used while emitting PHP:
table and join-column names, namespace segments, property names and
accessor names.
"""

import logging
import re

import inflect


logger = logging.getLogger(__name__)

# Initialize inflect engine for pluralization
p = inflect.engine()

_WORD_SEPARATORS = re.compile(r"[\s_\-]+")


def to_snake_case(name: str) -> str:
    """
    Convert CamelCase or PascalCase to snake_case.

    Args:
        name: The string to convert to snake_case

    Returns:
        The converted snake_case string

    Example:
        >>> to_snake_case("OrderLine")
        'order_line'
        >>> to_snake_case("XMLHttpRequest")
        'xml_http_request'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    name = re.sub("__([A-Z])", r"_\1", name)
    name = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def to_upper_camel_case(name: str) -> str:
    """
    Convert a free-form model name to UpperCamelCase.

    Words are separated by whitespace, underscores or hyphens; each word gets
    an upper-case initial and keeps the rest of its letters.

    Example:
        >>> to_upper_camel_case("online shop")
        'OnlineShop'
        >>> to_upper_camel_case("customer_care")
        'CustomerCare'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    return "".join(capitalize(word) for word in _WORD_SEPARATORS.split(name) if word)


def lower_first_letter(name: str) -> str:
    """Lower-case the first character: ``'OrderLine'`` -> ``'orderLine'``."""
    return name[:1].lower() + name[1:]


def capitalize(name: str) -> str:
    """Upper-case the first character only: ``'firstName'`` -> ``'FirstName'``."""
    return name[:1].upper() + name[1:]


def pluralize(word: str) -> str:
    """
    Pluralize a word using inflect.

    Falls back to appending 's' when inflect gives no answer.
    """
    if not isinstance(word, str) or not word:
        return ""

    try:
        plural = p.plural(word)
        if plural:
            return plural
        return word + "s"
    except Exception as e:
        logger.error(f"Inflect pluralization failed for '{word}': {e}. Falling back to adding 's'.")
        return word + "s"
