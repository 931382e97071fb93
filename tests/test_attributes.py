from hlskit.attributes import extract_attribute_value, parse_attributes, split_attributes


def test_split_attributes_simple():
    assert split_attributes("A=1,B=2,C=3") == ["A=1", "B=2", "C=3"]


def test_split_attributes_keeps_quoted_commas():
    assert split_attributes('A=1,B="x,y",C=3') == ["A=1", 'B="x,y"', "C=3"]


def test_split_attributes_trims_and_drops_empty_segments():
    assert split_attributes(" A=1 ,, B=2 ,") == ["A=1", "B=2"]


def test_split_attributes_unbalanced_quote_runs_to_end():
    assert split_attributes('A=1,B="x,y,C=3') == ["A=1", 'B="x,y,C=3']


def test_parse_attributes_simple():
    attrs = parse_attributes("BANDWIDTH=1280000,RESOLUTION=720x480")
    assert attrs == {"BANDWIDTH": "1280000", "RESOLUTION": "720x480"}


def test_parse_attributes_quoted_value():
    attrs = parse_attributes('CODECS="avc1.77.30,mp4a.40.2"')
    assert attrs == {"CODECS": "avc1.77.30,mp4a.40.2"}


def test_parse_attributes_drops_segments_without_equals():
    attrs = parse_attributes("BANDWIDTH=100,GARBAGE,RESOLUTION=1x1")
    assert attrs == {"BANDWIDTH": "100", "RESOLUTION": "1x1"}


def test_parse_attributes_later_duplicate_wins():
    assert parse_attributes("A=1,A=2") == {"A": "2"}


def test_parse_attributes_strips_only_one_quote_layer():
    assert parse_attributes('A=""x""') == {"A": '"x"'}


def test_parse_attributes_splits_at_first_equals():
    attrs = parse_attributes('URI="key?token=abc=="')
    assert attrs == {"URI": "key?token=abc=="}


def test_parse_attributes_empty_input():
    assert parse_attributes("") == {}


def test_extract_attribute_value_quoted():
    assert extract_attribute_value('TYPE=AUDIO,URI="audio/en.m3u8",NAME="English"', "URI") == "audio/en.m3u8"


def test_extract_attribute_value_unquoted():
    assert extract_attribute_value("BANDWIDTH=1,URI=iframe.m3u8,CODECS=x", "URI") == "iframe.m3u8"


def test_extract_attribute_value_first_match_wins():
    assert extract_attribute_value('URI="a.m3u8",URI="b.m3u8"', "URI") == "a.m3u8"


def test_extract_attribute_value_missing_or_unterminated():
    assert extract_attribute_value("TYPE=AUDIO", "URI") is None
    assert extract_attribute_value('URI="never-closed', "URI") is None
    assert extract_attribute_value('URI=""', "URI") is None
