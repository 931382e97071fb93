"""
Shared utility functions for HLSKit.

Formatting and summary helpers used by anything that presents a parsed
manifest, plus conversion of a Manifest to plain dictionaries and JSON.
"""

import json
from dataclasses import fields, is_dataclass
from typing import Any, Dict, Mapping

from .models import Manifest, MediaSummary, Segment


def format_bandwidth(bandwidth: int) -> str:
    """
    Format a bandwidth in bits per second for display.

    Example:
        >>> format_bandwidth(7680000)
        '7.7 Mbps'
        >>> format_bandwidth(512)
        '512 bps'
    """
    if bandwidth >= 1000000:
        return f"{bandwidth / 1000000:.1f} Mbps"
    elif bandwidth >= 1000:
        return f"{bandwidth / 1000:.1f} Kbps"
    return f"{bandwidth} bps"


def format_duration(seconds: float) -> str:
    """
    Format seconds as H:MM:SS, or M:SS under an hour.

    Example:
        >>> format_duration(3725.4)
        '1:02:05'
        >>> format_duration(27.027)
        '0:27'
    """
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def is_encrypted(segment: Segment) -> bool:
    """Check if a segment carries a key with an actual encryption method."""
    return segment.key is not None and segment.key.method not in ('', 'NONE')


def summarize_media(manifest: Manifest) -> MediaSummary:
    """
    Compute aggregate figures for a media manifest.

    A master manifest has no segments, so its summary has zero counts.
    """
    return MediaSummary(
        version=manifest.version,
        target_duration=manifest.target_duration,
        media_sequence=manifest.media_sequence,
        segment_count=len(manifest.segments),
        total_duration=sum(segment.duration for segment in manifest.segments),
        encrypted_segments=sum(1 for segment in manifest.segments if is_encrypted(segment)),
        base_ref=manifest.base_ref,
    )


def _entry_to_dict(entry: Any) -> Dict[str, Any]:
    """Plain dict of a model dataclass; unset optional fields are left out."""
    data = {}
    for f in fields(entry):
        value = getattr(entry, f.name)
        if value is None:
            continue
        if is_dataclass(value):
            value = _entry_to_dict(value)
        elif isinstance(value, Mapping):
            value = dict(value)
        data[f.name] = value
    return data


def manifest_to_dict(manifest: Manifest) -> Dict[str, Any]:
    """
    Convert a Manifest to plain dictionaries and lists.

    Only the entry list matching the manifest kind is included (variants for
    master, segments for media) and unset optional fields are left out.
    """
    data = {
        'kind': manifest.kind.value,
        'source_identifier': manifest.source_identifier,
        'raw_text': manifest.raw_text,
        'lines': [
            {'number': line.number, 'content': line.content, 'kind': line.kind.value}
            for line in manifest.lines
        ],
        'tags': [_entry_to_dict(tag) for tag in manifest.tags],
        'base_ref': manifest.base_ref,
        'version': manifest.version,
    }

    if manifest.is_master:
        data['variants'] = [_entry_to_dict(variant) for variant in manifest.variants]
    else:
        data['segments'] = [_entry_to_dict(segment) for segment in manifest.segments]

    if manifest.target_duration is not None:
        data['target_duration'] = manifest.target_duration
    if manifest.media_sequence is not None:
        data['media_sequence'] = manifest.media_sequence

    return data


def manifest_to_json(manifest: Manifest, indent: int = 2) -> str:
    """Serialize a Manifest to a JSON string."""
    return json.dumps(manifest_to_dict(manifest), indent=indent, ensure_ascii=False)
