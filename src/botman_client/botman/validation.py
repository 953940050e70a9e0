"""
Required-field validation for Bot Manager requests.
"""

from typing import Any

from .exceptions import ValidationError

BLANK_REASON = "cannot be blank"


def is_blank(value: Any) -> bool:
    """
    Check whether a value counts as missing.

    None, zero, and empty strings, bytes or collections are blank.

    Examples:
        >>> is_blank(0)
        True
        >>> is_blank("AAAA_81230")
        False
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict)):
        return len(value) == 0
    return False


def check_required(fields: dict[str, Any]) -> None:
    """
    Validate that every named field has a value.

    Args:
        fields: Mapping of API field name to the value to check

    Raises:
        ValidationError: Listing every blank field
    """
    errors = {name: BLANK_REASON for name, value in fields.items() if is_blank(value)}
    if errors:
        raise ValidationError(errors)
