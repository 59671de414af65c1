"""
Layout preview.

Renders the shape of a code with X placeholders, e.g. for a settings page:

    >>> preview({"prefix": "promo", "separator": "-", "parts": 2, "part_length": 6})
    'PROMO-XXXXXX-XXXXXX'

Only the mapping passed in is consulted; stored defaults are not applied.
"""

from typing import Any, Mapping

from .config import read_source
from .errors import InvalidConfiguration

PLACEHOLDER = "X"


def preview(config: Mapping[str, Any]) -> str:
    """
    Render a placeholder code for a layout.

    Args:
        config: Mapping with mandatory separator, parts and part_length
            (or partLength), and an optional prefix

    Returns:
        Placeholder code string

    Raises:
        InvalidConfiguration: If separator, parts or part_length is missing
            or empty
    """
    values = read_source(config)
    prefix = values.get("prefix")
    separator = values.get("separator")
    parts = values.get("parts")
    part_length = values.get("part_length")

    if not separator or not parts or not part_length:
        raise InvalidConfiguration(
            "separator, parts and part_length are mandatory and cannot be empty"
        )

    try:
        parts = int(parts)
        part_length = int(part_length)
    except (TypeError, ValueError):
        raise InvalidConfiguration(
            "parts and part_length must be integers"
        ) from None
    if parts < 1 or part_length < 1:
        raise InvalidConfiguration("parts and part_length must be positive")

    groups = [PLACEHOLDER * part_length] * parts
    code = str(separator).join(groups)
    if prefix:
        return str(prefix).upper() + str(separator) + code
    return code
