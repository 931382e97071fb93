from hlskit.__main__ import main

MASTER = """#EXTM3U
#EXT-X-MEDIA:TYPE=AUDIO,GROUP-ID="aud",URI="audio/en.m3u8"
#EXT-X-STREAM-INF:BANDWIDTH=2560000,RESOLUTION=1280x720
mid/index.m3u8
"""


def test_cli_summary(tmp_path, capsys):
    path = tmp_path / "master.m3u8"
    path.write_text(MASTER, encoding="utf-8")

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Type: master" in out
    assert "2.6 Mbps" in out
    assert str(tmp_path / "mid" / "index.m3u8") in out


def test_cli_items(tmp_path, capsys):
    path = tmp_path / "master.m3u8"
    path.write_text(MASTER, encoding="utf-8")

    assert main([str(path), "--items"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].split() == ["2", str(tmp_path / "audio" / "en.m3u8")]


def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.m3u8")]) == 1
