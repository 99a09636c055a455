import re
import struct

import pytest

from ordinals.media import Media, check_mp4_codec, content_type_for_path


def _box(kind: bytes, payload: bytes) -> bytes:
    return struct.pack(">I", 8 + len(payload)) + kind + payload


def _mp4(handler: bytes, codec: bytes) -> bytes:
    hdlr = _box(b"hdlr", b"\0" * 4 + b"\0" * 4 + handler + b"\0" * 12 + b"\0")
    stsd = _box(b"stsd", b"\0" * 4 + struct.pack(">I", 1) + _box(codec, b"\0" * 78))
    trak = _box(b"trak", _box(b"mdia", hdlr + _box(b"minf", _box(b"stbl", stsd))))
    return _box(b"ftyp", b"isom" + b"\0" * 4) + _box(b"moov", trak)


def test_for_extension():
    assert content_type_for_path("pepe.jpg") == "image/jpeg"
    assert content_type_for_path("pepe.jpeg") == "image/jpeg"
    assert content_type_for_path("pepe.JPG") == "image/jpeg"


def test_unsupported_extension():
    with pytest.raises(ValueError) as info:
        content_type_for_path("pepe.foo")
    assert re.fullmatch(
        r"unsupported file extension `\.foo`, supported extensions: apng .*",
        str(info.value),
    )


def test_missing_extension():
    with pytest.raises(ValueError, match="file must have extension"):
        content_type_for_path("pepe")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.txt", "text/plain;charset=utf-8"),
        ("a.html", "text/html;charset=utf-8"),
        ("a.yml", "application/yaml"),
        ("a.svg", "image/svg+xml"),
        ("a.glb", "model/gltf-binary"),
    ],
)
def test_more_extensions(name, expected):
    assert content_type_for_path(name) == expected


def test_parse_content_type():
    assert Media.parse("image/png") is Media.IMAGE
    assert Media.parse("text/html") is Media.IFRAME
    assert Media.parse("model/stl") is Media.UNKNOWN
    with pytest.raises(ValueError, match="unknown content type: foo/bar"):
        Media.parse("foo/bar")


def test_h264_in_mp4_is_allowed(tmp_path):
    path = tmp_path / "h264.mp4"
    path.write_bytes(_mp4(b"vide", b"avc1"))
    check_mp4_codec(path)
    assert content_type_for_path(path) == "video/mp4"


def test_av1_in_mp4_is_rejected(tmp_path):
    path = tmp_path / "av1.MP4"
    path.write_bytes(_mp4(b"vide", b"av01"))
    with pytest.raises(ValueError, match="only H.264 is supported in MP4: av01"):
        check_mp4_codec(path)
    with pytest.raises(ValueError, match="Unsupported video codec"):
        content_type_for_path(path)


def test_audio_track_is_not_checked(tmp_path):
    path = tmp_path / "audio.mp4"
    path.write_bytes(_mp4(b"soun", b"mp4a"))
    assert content_type_for_path(path) == "video/mp4"


def test_not_an_mp4(tmp_path):
    path = tmp_path / "bogus.mp4"
    path.write_bytes(b"not a movie at all")
    with pytest.raises(ValueError):
        check_mp4_codec(path)