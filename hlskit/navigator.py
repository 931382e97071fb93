"""
Navigable item extraction for manifest browsing.

Maps line numbers of a manifest to the URI a user can follow from that line:
plain URI lines, plus the URI attribute of I-frame stream and rendition tags.
"""

import logging
from typing import Dict

from .attributes import extract_attribute_value

logger = logging.getLogger(__name__)

# Tags whose URI attribute points at another playlist
URI_BEARING_TAGS = ('#EXT-X-I-FRAME-STREAM-INF:', '#EXT-X-MEDIA:')


def extract_uri_from_tag(line: str) -> str:
    """Get the URI attribute of a navigable tag line, or "" if there is none."""
    for prefix in URI_BEARING_TAGS:
        if line.startswith(prefix):
            return extract_attribute_value(line[len(prefix):], 'URI') or ''
    return ''


def extract_navigable_items(text: str) -> Dict[int, str]:
    """
    Build a line number -> target URI mapping for a manifest.

    Args:
        text: Full manifest text

    Returns:
        Dictionary ordered by line number; lines with nothing to follow are absent

    Example:
        >>> extract_navigable_items('#EXTM3U\\n#EXT-X-MEDIA:TYPE=AUDIO,URI="a/x.m3u8"\\nv/x.m3u8')
        {2: 'a/x.m3u8', 3: 'v/x.m3u8'}
    """
    items = {}
    for i, raw in enumerate(text.split('\n')):
        line = raw.strip()
        if not line:
            continue
        if not line.startswith('#'):
            items[i + 1] = line
            continue
        uri = extract_uri_from_tag(line)
        if uri:
            items[i + 1] = uri

    logger.debug(f"Found {len(items)} navigable items")
    return items
