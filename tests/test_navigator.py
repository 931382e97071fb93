from hlskit.navigator import extract_navigable_items, extract_uri_from_tag

MASTER = """#EXTM3U
#EXT-X-VERSION:6
# audio renditions
#EXT-X-MEDIA:TYPE=AUDIO,GROUP-ID="aud",NAME="English",URI="audio/en.m3u8"
#EXT-X-MEDIA:TYPE=CLOSED-CAPTIONS,GROUP-ID="cc",NAME="CC1",INSTREAM-ID="CC1"

#EXT-X-STREAM-INF:BANDWIDTH=1280000,CODECS="avc1.77.30,mp4a.40.2",AUDIO="aud"
  low/index.m3u8  
#EXT-X-I-FRAME-STREAM-INF:BANDWIDTH=86000,URI=iframe/low.m3u8,CODECS="avc1.77.30"
"""


def test_extract_navigable_items():
    items = extract_navigable_items(MASTER)
    assert items == {
        4: "audio/en.m3u8",
        8: "low/index.m3u8",
        9: "iframe/low.m3u8",
    }
    assert list(items) == [4, 8, 9]


def test_extract_navigable_items_media():
    text = "#EXTM3U\n#EXT-X-MAP:URI=\"init.mp4\"\n#EXTINF:4,\nseg0.m4s\n#EXTINF:4,\nseg1.m4s"
    assert extract_navigable_items(text) == {4: "seg0.m4s", 6: "seg1.m4s"}


def test_extract_navigable_items_empty():
    assert extract_navigable_items("") == {}


def test_extract_uri_from_tag():
    assert extract_uri_from_tag('#EXT-X-MEDIA:TYPE=SUBTITLES,URI="subs/en.m3u8"') == "subs/en.m3u8"
    assert extract_uri_from_tag('#EXT-X-I-FRAME-STREAM-INF:URI="i.m3u8"') == "i.m3u8"
    assert extract_uri_from_tag('#EXT-X-KEY:METHOD=AES-128,URI="key.bin"') == ""
    assert extract_uri_from_tag('#EXT-X-MEDIA:TYPE=AUDIO,URI="unterminated') == ""


def test_quoted_uri_containing_comma():
    line = '#EXT-X-MEDIA:TYPE=AUDIO,URI="audio/a,b.m3u8",NAME="x"'
    assert extract_navigable_items(line) == {1: "audio/a,b.m3u8"}
