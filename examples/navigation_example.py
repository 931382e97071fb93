"""
Navigable item example.

Lists every line of a local manifest that points at another resource,
resolved against the manifest's directory.
"""

import sys

from hlskit import ManifestParser, extract_navigable_items

def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "master.m3u8"

    parser = ManifestParser()
    manifest = parser.parse_from_file(path)
    print(f"{manifest.kind.value} manifest, {len(manifest.tags)} tags")

    for line_number, uri in extract_navigable_items(manifest.raw_text).items():
        print(f"{line_number:>5}  {parser.resolve(uri)}")

if __name__ == "__main__":
    main()
