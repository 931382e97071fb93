"""
Basic HLSKit usage example.

Demonstrates loading a master playlist and following its first variant.
"""

from hlskit import ManifestParser, format_bandwidth, summarize_media, format_duration

def main():
    # Load the master playlist
    print("Loading master playlist...")
    parser = ManifestParser()
    master = parser.parse_from_url("https://example.com/live/master.m3u8")

    for variant in master.variants:
        print(f"{format_bandwidth(variant.bandwidth):>12}  {variant.resolution or '-':>10}  {variant.uri}")

    if not master.variants:
        return

    # A new parser per manifest keeps URL resolution tied to its own source
    variant_url = parser.resolve(master.variants[0].uri)
    print(f"\nLoading media playlist: {variant_url}")
    media = ManifestParser().parse_from_url(variant_url)

    summary = summarize_media(media)
    print(f"Segments: {summary.segment_count}")
    print(f"Duration: {format_duration(summary.total_duration)}")
    print(f"Encrypted segments: {summary.encrypted_segments}")

if __name__ == "__main__":
    main()
