"""
Attribute list parsing for HLS tags.

HLS attribute lists are comma separated KEY=VALUE pairs where a quoted value
may itself contain commas, so a plain str.split(',') is not enough.
"""

from typing import Dict, List, Optional


def split_attributes(attr_str: str) -> List[str]:
    """
    Split an attribute list into its top-level comma separated segments.

    Commas inside double quotes do not split. Quote characters are kept in
    the segment text, each segment is trimmed and empty segments are dropped.
    An unbalanced quote runs to the end of the input.

    Args:
        attr_str: Text after the tag's colon

    Returns:
        List of raw segment strings

    Example:
        >>> split_attributes('A=1,B="x,y",C=3')
        ['A=1', 'B="x,y"', 'C=3']
    """
    parts = []
    current = []
    in_quotes = False

    for ch in attr_str:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == ',' and not in_quotes:
            parts.append(''.join(current))
            current = []
            continue
        current.append(ch)
    parts.append(''.join(current))

    return [part.strip() for part in parts if part.strip()]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_attributes(attr_str: str) -> Dict[str, str]:
    """
    Parse an attribute list into a key -> value mapping.

    Segments without '=' are dropped. One layer of surrounding double quotes
    is removed from values. Later duplicate keys overwrite earlier ones.

    Args:
        attr_str: Text after the tag's colon

    Returns:
        Dictionary of attribute names to unquoted values

    Example:
        >>> parse_attributes('BANDWIDTH=1280000,CODECS="avc1.77.30,mp4a.40.2"')
        {'BANDWIDTH': '1280000', 'CODECS': 'avc1.77.30,mp4a.40.2'}
    """
    attributes = {}
    for part in split_attributes(attr_str):
        key, sep, value = part.partition('=')
        if not sep:
            continue
        attributes[key.strip()] = _unquote(value.strip())
    return attributes


def extract_attribute_value(attr_str: str, name: str) -> Optional[str]:
    """
    Find the value of a single attribute, first occurrence wins.

    A quoted value is read up to the next double quote with no escape
    handling; an unterminated quoted value is treated as missing.

    Args:
        attr_str: Text after the tag's colon
        name: Attribute name, e.g. "URI"

    Returns:
        The value, or None if absent or empty
    """
    for part in split_attributes(attr_str):
        key, sep, value = part.partition('=')
        if not sep or key.strip() != name:
            continue
        value = value.strip()
        if value.startswith('"'):
            end = value.find('"', 1)
            if end == -1:
                return None
            value = value[1:end]
        return value or None
    return None
