"""
Command line front end for HLSKit.

Usage:
    python -m hlskit https://example.com/master.m3u8
    python -m hlskit path/to/index.m3u8 --json
    python -m hlskit path/to/master.m3u8 --items
"""

import argparse
import logging
import sys
from typing import List, Optional

from .models import FetchConfig, Manifest
from .navigator import extract_navigable_items
from .parser import ManifestParser
from .source import ManifestSourceError
from .utils import format_bandwidth, format_duration, manifest_to_json, summarize_media

logger = logging.getLogger("hlskit")


def format_summary(manifest: Manifest, parser: ManifestParser) -> str:
    """Human-readable overview of a manifest with resolved URIs."""
    lines = [
        f"Source: {manifest.source_identifier}",
        f"Type: {manifest.kind.value}",
        f"Version: {manifest.version}",
    ]

    if manifest.is_master:
        lines.append(f"Variants: {len(manifest.variants)}")
        for variant in manifest.variants:
            resolution = variant.resolution or "-"
            lines.append(f"  {format_bandwidth(variant.bandwidth):>12}  {resolution:>10}  {parser.resolve(variant.uri)}")
        return "\n".join(lines)

    summary = summarize_media(manifest)
    lines.extend([
        f"Target Duration: {summary.target_duration} seconds",
        f"Media Sequence: {summary.media_sequence}",
        f"Total Segments: {summary.segment_count}",
        f"Total Duration: {format_duration(summary.total_duration)}",
        f"Encrypted Segments: {summary.encrypted_segments}",
        f"Base URL: {summary.base_ref}",
    ])
    return "\n".join(lines)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="hlskit", description="Inspect an HLS manifest from a URL or local file.")
    ap.add_argument("source", help="Manifest URL or file path")
    output = ap.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the parsed manifest as JSON")
    output.add_argument("--items", action="store_true", help="Print navigable line -> URI items")
    ap.add_argument("--timeout", type=int, default=30, help="Request timeout in seconds")
    ap.add_argument("--insecure", action="store_true", help="Skip SSL certificate verification")
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    config = FetchConfig(source=args.source, timeout=args.timeout, verify_ssl=not args.insecure)
    parser = ManifestParser()
    try:
        manifest = parser.parse_from_config(config)
    except ManifestSourceError as e:
        logger.error(f"Could not load {args.source}: {e}")
        return 1

    if args.json:
        print(manifest_to_json(manifest))
    elif args.items:
        for line_number, uri in extract_navigable_items(manifest.raw_text).items():
            print(f"{line_number:>5}  {parser.resolve(uri)}")
    else:
        print(format_summary(manifest, parser))
    return 0


if __name__ == "__main__":
    sys.exit(main())
