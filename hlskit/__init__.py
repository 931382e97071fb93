"""
HLSKit - HLS Manifest Parsing Toolkit

A library for turning HTTP Live Streaming (M3U8) playlists into a structured,
navigable model.

Features:
- Parse master and media playlists from URLs, local files or raw bytes
- Quote-aware parsing of tag attribute lists
- Carry EXT-X-KEY and EXT-X-MAP state forward onto media segments
- Resolve relative variant and segment URIs against the manifest location
- Map manifest lines to the URIs they reference for interactive browsing

Example usage:
    >>> from hlskit import ManifestParser, extract_navigable_items
    >>>
    >>> parser = ManifestParser()
    >>> manifest = parser.parse_from_url("https://example.com/live/master.m3u8")
    >>> for variant in manifest.variants:
    ...     print(variant.bandwidth, parser.resolve(variant.uri))
    >>>
    >>> items = extract_navigable_items(manifest.raw_text)
"""

import logging

__version__ = "0.1.0"
__author__ = "HLSKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Attribute list parsing
from .attributes import split_attributes, parse_attributes, extract_attribute_value

# Manifest parsing
from .parser import (
    ManifestParser,
    parse_from_bytes,
    parse_tag,
    classify_lines,
    get_line_type,
    is_master_manifest,
)

# URL resolution
from .resolver import URLResolver, base_ref_for_url, base_ref_for_path, base_ref_for_source

# Navigation
from .navigator import extract_navigable_items

# Source acquisition
from .source import (
    fetch_manifest_text,
    read_manifest_file,
    ManifestSourceError,
    ManifestIOError,
    NetworkError,
    HTTPStatusError,
)

# Data models
from .models import (
    Manifest,
    ManifestType,
    LineType,
    ClassifiedLine,
    Variant,
    Segment,
    Key,
    Map,
    Tag,
    FetchConfig,
    MediaSummary,
)

# Presentation helpers
from .utils import (
    format_bandwidth,
    format_duration,
    is_encrypted,
    summarize_media,
    manifest_to_dict,
    manifest_to_json,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Attribute parsing
    "split_attributes",
    "parse_attributes",
    "extract_attribute_value",

    # Manifest parsing
    "ManifestParser",
    "parse_from_bytes",
    "parse_tag",
    "classify_lines",
    "get_line_type",
    "is_master_manifest",

    # URL resolution
    "URLResolver",
    "base_ref_for_url",
    "base_ref_for_path",
    "base_ref_for_source",

    # Navigation
    "extract_navigable_items",

    # Source acquisition
    "fetch_manifest_text",
    "read_manifest_file",
    "ManifestSourceError",
    "ManifestIOError",
    "NetworkError",
    "HTTPStatusError",

    # Models
    "Manifest",
    "ManifestType",
    "LineType",
    "ClassifiedLine",
    "Variant",
    "Segment",
    "Key",
    "Map",
    "Tag",
    "FetchConfig",
    "MediaSummary",

    # Utility functions
    "format_bandwidth",
    "format_duration",
    "is_encrypted",
    "summarize_media",
    "manifest_to_dict",
    "manifest_to_json",
]
