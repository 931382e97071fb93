"""
HLS manifest parser for HLSKit.

Turns raw M3U8 text into a Manifest. Lines are classified first, then folded
through a builder for either a master or a media playlist. Every #EXT line is
recorded as a Tag, whether or not a builder handler consumed it.

Malformed content never raises: unparsable numbers degrade to defaults and
attribute segments without '=' are dropped, so a mostly well-formed manifest
still yields a usable model.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple, Union

from .attributes import parse_attributes
from .models import (
    ClassifiedLine,
    FetchConfig,
    Key,
    LineType,
    Manifest,
    ManifestType,
    Map,
    Segment,
    Tag,
    Variant,
)
from .resolver import URLResolver, base_ref_for_source, is_http_url
from .source import fetch_manifest_text, read_manifest_file

logger = logging.getLogger(__name__)

MASTER_MARKERS = ('#EXT-X-STREAM-INF', '#EXT-X-I-FRAME-STREAM-INF')

# ASCII decimal digits only, no "_" separators
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def get_line_type(line: str) -> LineType:
    """
    Determine the type of a trimmed manifest line.

    Example:
        >>> get_line_type("#EXT-X-VERSION:3")
        <LineType.TAG: 'tag'>
    """
    if not line:
        return LineType.EMPTY
    if line.startswith('#EXT'):
        return LineType.TAG
    if line.startswith('#'):
        return LineType.COMMENT
    return LineType.URI


def classify_lines(text: str) -> Tuple[ClassifiedLine, ...]:
    """Split text into trimmed, numbered and classified lines."""
    lines = []
    for i, raw in enumerate(text.split('\n')):
        content = raw.strip()
        lines.append(ClassifiedLine(number=i + 1, content=content, kind=get_line_type(content)))
    return tuple(lines)


def parse_tag(line: str, line_number: int) -> Tag:
    """
    Parse an #EXT line into a Tag.

    Args:
        line: Trimmed line starting with '#EXT'
        line_number: 1-based line number

    Returns:
        Tag with the name (without '#'), the raw value after the first colon
        and the parsed attribute list

    Example:
        >>> dict(parse_tag('#EXT-X-MAP:URI="init.mp4"', 5).attributes)
        {'URI': 'init.mp4'}
    """
    body = line[1:] if line.startswith('#') else line
    name, sep, value = body.partition(':')
    if not sep:
        return Tag(name=name, line_number=line_number)
    return Tag(
        name=name,
        raw_value=value,
        attributes=parse_attributes(value),
        line_number=line_number,
    )


def is_master_manifest(text: str) -> bool:
    """
    Check if text is a master playlist.

    This is a plain substring search, so a comment mentioning one of the
    markers is enough to classify the document as master.
    """
    return any(marker in text for marker in MASTER_MARKERS)


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        return None
    return int(value)


def _parse_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    value = value.strip()
    if not _FLOAT_RE.fullmatch(value):
        return None
    return float(value)


# Builder states. Each handler takes a state and returns a new one.

@dataclass(frozen=True)
class _MasterState:
    version: int = 0
    pending: Optional[Variant] = None


@dataclass(frozen=True)
class _MediaState:
    version: int = 0
    target_duration: Optional[int] = None
    media_sequence: Optional[int] = None
    running_sequence: int = 0
    pending: Optional[Segment] = None
    current_key: Optional[Key] = None
    current_map: Optional[Map] = None


_State = Union[_MasterState, _MediaState]
TagHandler = Callable[[_State, Tag], _State]
UriHandler = Callable[[_State, str], Tuple[_State, object]]


def _on_version(state, tag):
    version = _parse_int(tag.raw_value)
    if version is None:
        return state
    return replace(state, version=version)


def _on_stream_inf(state: _MasterState, tag: Tag) -> _MasterState:
    attributes = dict(tag.attributes)
    bandwidth = _parse_int(attributes.get('BANDWIDTH'))
    if bandwidth is None:
        if 'BANDWIDTH' in attributes:
            logger.debug(f"Line {tag.line_number}: unparsable BANDWIDTH {attributes['BANDWIDTH']!r}, using 0")
        bandwidth = 0
    pending = Variant(
        uri='',
        bandwidth=bandwidth,
        resolution=attributes.get('RESOLUTION'),
        codecs=attributes.get('CODECS'),
        attributes=attributes,
    )
    return replace(state, pending=pending)


def _on_master_uri(state: _MasterState, uri: str) -> Tuple[_MasterState, Optional[Variant]]:
    if state.pending is None:
        return state, None
    return replace(state, pending=None), replace(state.pending, uri=uri)


def _on_target_duration(state: _MediaState, tag: Tag) -> _MediaState:
    duration = _parse_int(tag.raw_value)
    if duration is None:
        return state
    return replace(state, target_duration=duration)


def _on_media_sequence(state: _MediaState, tag: Tag) -> _MediaState:
    sequence = _parse_int(tag.raw_value)
    if sequence is None:
        return state
    return replace(state, media_sequence=sequence, running_sequence=sequence)


def _on_extinf(state: _MediaState, tag: Tag) -> _MediaState:
    if tag.raw_value is None:
        return state
    duration_str = tag.raw_value.split(',', 1)[0]
    duration = _parse_float(duration_str)
    if duration is None:
        logger.debug(f"Line {tag.line_number}: unparsable EXTINF duration {duration_str!r}, using 0.0")
        duration = 0.0
    pending = Segment(
        uri='',
        duration=duration,
        sequence=state.running_sequence,
        key=state.current_key,
        map=state.current_map,
    )
    return replace(state, pending=pending, running_sequence=state.running_sequence + 1)


def _on_byterange(state: _MediaState, tag: Tag) -> _MediaState:
    if state.pending is None:
        return state
    return replace(state, pending=replace(state.pending, byte_range=tag.raw_value))


def _on_key(state: _MediaState, tag: Tag) -> _MediaState:
    attributes = tag.attributes
    method = attributes.get('METHOD', '')
    # METHOD=NONE turns encryption off for the segments that follow
    if method.upper() == 'NONE':
        return replace(state, current_key=None)
    key = Key(
        method=method,
        uri=attributes.get('URI'),
        iv=attributes.get('IV'),
        key_format=attributes.get('KEYFORMAT'),
    )
    return replace(state, current_key=key)


def _on_map(state: _MediaState, tag: Tag) -> _MediaState:
    init_map = Map(
        uri=tag.attributes.get('URI', ''),
        byte_range=tag.attributes.get('BYTERANGE'),
    )
    return replace(state, current_map=init_map)


def _on_media_uri(state: _MediaState, uri: str) -> Tuple[_MediaState, Optional[Segment]]:
    if state.pending is None:
        return state, None
    return replace(state, pending=None), replace(state.pending, uri=uri)


MASTER_TAG_HANDLERS: Dict[str, TagHandler] = {
    'EXT-X-VERSION': _on_version,
    'EXT-X-STREAM-INF': _on_stream_inf,
}

MEDIA_TAG_HANDLERS: Dict[str, TagHandler] = {
    'EXT-X-VERSION': _on_version,
    'EXT-X-TARGETDURATION': _on_target_duration,
    'EXT-X-MEDIA-SEQUENCE': _on_media_sequence,
    'EXTINF': _on_extinf,
    'EXT-X-BYTERANGE': _on_byterange,
    'EXT-X-KEY': _on_key,
    'EXT-X-MAP': _on_map,
}


def _fold_lines(
    lines: Tuple[ClassifiedLine, ...],
    state: _State,
    tag_handlers: Dict[str, TagHandler],
    on_uri: UriHandler,
) -> Tuple[_State, List[Tag], List[object]]:
    """Thread a builder state through the lines, collecting tags and committed entries."""
    tags = []
    committed = []

    for line in lines:
        if line.kind == LineType.TAG:
            tag = parse_tag(line.content, line.number)
            tags.append(tag)
            handler = tag_handlers.get(tag.name)
            if handler is not None:
                state = handler(state, tag)
        elif line.kind == LineType.URI:
            state, entry = on_uri(state, line.content)
            if entry is not None:
                committed.append(entry)

    return state, tags, committed


def build_master_manifest(
    lines: Tuple[ClassifiedLine, ...],
    text: str,
    source_identifier: str,
    base_ref: str,
) -> Manifest:
    """Build a master Manifest from classified lines."""
    state, tags, variants = _fold_lines(lines, _MasterState(), MASTER_TAG_HANDLERS, _on_master_uri)
    return Manifest(
        kind=ManifestType.MASTER,
        source_identifier=source_identifier,
        raw_text=text,
        base_ref=base_ref,
        lines=lines,
        variants=tuple(variants),
        tags=tuple(tags),
        version=state.version,
    )


def build_media_manifest(
    lines: Tuple[ClassifiedLine, ...],
    text: str,
    source_identifier: str,
    base_ref: str,
) -> Manifest:
    """Build a media Manifest from classified lines."""
    state, tags, segments = _fold_lines(lines, _MediaState(), MEDIA_TAG_HANDLERS, _on_media_uri)
    return Manifest(
        kind=ManifestType.MEDIA,
        source_identifier=source_identifier,
        raw_text=text,
        base_ref=base_ref,
        lines=lines,
        segments=tuple(segments),
        tags=tuple(tags),
        target_duration=state.target_duration,
        version=state.version,
        media_sequence=state.media_sequence,
    )


def parse_from_bytes(
    data: Union[bytes, str],
    source_identifier: str,
    base_ref: Optional[str] = None,
) -> Manifest:
    """
    Parse manifest content into a Manifest.

    Args:
        data: Manifest content, bytes are decoded as UTF-8
        source_identifier: URL or path the content came from
        base_ref: Base for URL resolution (default: derived from source_identifier)

    Returns:
        Manifest with either variants (master) or segments (media) populated

    Example:
        >>> manifest = parse_from_bytes(b"#EXTM3U\\n#EXTINF:4.0,\\na.ts\\n", "https://example.com/live/index.m3u8")
        >>> manifest.segments[0].uri, manifest.base_ref
        ('a.ts', 'https://example.com/live/')
    """
    if isinstance(data, bytes):
        text = data.decode('utf-8-sig', errors='replace')
    else:
        text = data
    if base_ref is None:
        base_ref = base_ref_for_source(source_identifier)

    lines = classify_lines(text)
    if is_master_manifest(text):
        manifest = build_master_manifest(lines, text, source_identifier, base_ref)
        logger.debug(f"Parsed master manifest {source_identifier}: {len(manifest.variants)} variants, {len(manifest.tags)} tags")
    else:
        manifest = build_media_manifest(lines, text, source_identifier, base_ref)
        logger.debug(f"Parsed media manifest {source_identifier}: {len(manifest.segments)} segments, {len(manifest.tags)} tags")
    return manifest


class ManifestParser:
    """
    Loads and parses HLS manifests and resolves the URIs they reference.

    A parser owns the resolver of the last source it parsed. It is not safe
    to share one parser between two sources at the same time; create a new
    parser for each manifest that gets loaded.
    """

    def __init__(self):
        """Initialize manifest parser."""
        self.resolver = URLResolver('')

    @property
    def base_ref(self) -> str:
        return self.resolver.base_ref

    def parse_from_bytes(
        self,
        data: Union[bytes, str],
        source_identifier: str,
        base_ref: Optional[str] = None,
    ) -> Manifest:
        """Parse manifest content and remember its base for resolve()."""
        if base_ref is None:
            base_ref = base_ref_for_source(source_identifier)
        self.resolver = URLResolver(base_ref)
        return parse_from_bytes(data, source_identifier, base_ref=base_ref)

    def parse_from_url(
        self,
        url: str,
        timeout: int = 30,
        verify_ssl: bool = True,
        headers: Optional[Dict[str, str]] = None,
    ) -> Manifest:
        """
        Fetch and parse a manifest over HTTP(S).

        Raises:
            NetworkError: If the request fails
            HTTPStatusError: If the server does not answer 200
        """
        content = fetch_manifest_text(url, timeout=timeout, verify_ssl=verify_ssl, headers=headers)
        return self.parse_from_bytes(content, url)

    def parse_from_file(self, path: str) -> Manifest:
        """
        Read and parse a local manifest file.

        Raises:
            ManifestIOError: If the file cannot be read
        """
        content = read_manifest_file(path)
        return self.parse_from_bytes(content, path)

    def parse_from_config(self, config: FetchConfig) -> Manifest:
        """Load a manifest described by a FetchConfig object."""
        if is_http_url(config.source):
            return self.parse_from_url(
                config.source,
                timeout=config.timeout,
                verify_ssl=config.verify_ssl,
                headers=config.headers,
            )
        return self.parse_from_file(config.source)

    def resolve(self, relative: str) -> str:
        """Resolve a URI from the last parsed manifest."""
        return self.resolver.resolve(relative)
