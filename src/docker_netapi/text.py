"""
Text parameters shared by all option models

Options accept text either as ``str`` or as raw ``bytes`` (for values read
straight off a socket or file). Both are hashable, so either can key the
filter, label and driver-option maps.
"""

from typing import Any, TypeVar, Union

TextT = TypeVar('TextT', str, bytes)

Text = Union[str, bytes]

TRUE_STR = 'true'
FALSE_STR = 'false'


def as_str(value: Text) -> str:
    """
    Get string view of a text parameter

    Args:
        value: str or UTF-8 encoded bytes

    Returns:
        The value as str

    Raises:
        UnicodeDecodeError: bytes are not valid UTF-8
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode('utf-8')
    return value


def bool_str(flag: bool) -> str:
    """Boolean as the daemon spells it in query strings"""
    return TRUE_STR if flag else FALSE_STR


def textify(value: Any) -> Any:
    """
    Replace bytes keys and values in a nested structure with str

    Raises:
        ValueError: two keys of one map decode to the same str
    """
    if isinstance(value, dict):
        result = {}
        for k, v in value.items():
            key = textify(k)
            if key in result:
                raise ValueError(f"Duplicate key after decoding: {key!r}")
            result[key] = textify(v)
        return result
    if isinstance(value, (list, tuple)):
        return [textify(v) for v in value]
    if isinstance(value, (bytes, bytearray, memoryview)):
        return as_str(value)
    return value
