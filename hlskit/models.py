"""
Data models for HLSKit.

Defines the core data structures produced by the manifest parser. All models
are frozen: a refreshed manifest is a new value, never an edited one.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


class ManifestType(str, Enum):
    """Kind of HLS playlist."""
    MASTER = "master"
    MEDIA = "media"


class LineType(str, Enum):
    """Classification of a single manifest line."""
    TAG = "tag"
    URI = "uri"
    COMMENT = "comment"
    EMPTY = "empty"


@dataclass(frozen=True)
class ClassifiedLine:
    """A trimmed manifest line with its 1-based line number."""
    number: int
    content: str
    kind: LineType


@dataclass(frozen=True)
class Key:
    """Encryption key information from EXT-X-KEY."""
    method: str
    uri: Optional[str] = None
    iv: Optional[str] = None
    key_format: Optional[str] = None


@dataclass(frozen=True)
class Map:
    """Initialization segment information from EXT-X-MAP."""
    uri: str
    byte_range: Optional[str] = None


def _freeze_attributes(entry) -> None:
    # read-only view over a private copy
    object.__setattr__(entry, "attributes", MappingProxyType(dict(entry.attributes)))


@dataclass(frozen=True)
class Tag:
    """An #EXT directive line."""
    name: str
    raw_value: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    line_number: int = 0

    def __post_init__(self):
        _freeze_attributes(self)


@dataclass(frozen=True)
class Variant:
    """A variant stream referenced from a master manifest."""
    uri: str
    bandwidth: int = 0  # bits per second
    resolution: Optional[str] = None  # "WxH"
    codecs: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        _freeze_attributes(self)


@dataclass(frozen=True)
class Segment:
    """A media segment referenced from a media manifest."""
    uri: str
    duration: float
    sequence: int
    byte_range: Optional[str] = None  # "length[@offset]"
    key: Optional[Key] = None
    map: Optional[Map] = None


@dataclass(frozen=True)
class Manifest:
    """A parsed HLS manifest."""
    kind: ManifestType
    source_identifier: str
    raw_text: str
    base_ref: str
    lines: Tuple[ClassifiedLine, ...] = ()
    variants: Tuple[Variant, ...] = ()
    segments: Tuple[Segment, ...] = ()
    tags: Tuple[Tag, ...] = ()
    target_duration: Optional[int] = None
    version: int = 0
    media_sequence: Optional[int] = None

    @property
    def is_master(self) -> bool:
        return self.kind == ManifestType.MASTER


@dataclass
class FetchConfig:
    """Configuration for loading a manifest from a URL or local path."""
    source: str
    timeout: int = 30
    verify_ssl: bool = True
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class MediaSummary:
    """Aggregate figures for a media manifest."""
    version: int
    target_duration: Optional[int]
    media_sequence: Optional[int]
    segment_count: int
    total_duration: float
    encrypted_segments: int
    base_ref: str
